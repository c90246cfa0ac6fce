from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from .clients.payouts_client import PayoutsClient
from .collection import PaginatedCollection
from .exceptions import ApiError, ClientValidationError, ValidationIssue
from .idempotency import PendingAttempts
from .models_payouts import Balance, PaymentMethod, Payout
from .payout_validation import validate_payout_request
from .ui_errors import ViewError, to_view_error
from .view_state import ViewState, resolve_view_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayoutSubmission:
    ok: bool
    issues: list[ValidationIssue] = field(default_factory=list)
    error: ViewError | None = None
    response: dict[str, Any] | None = None

    @property
    def message(self) -> str | None:
        if self.issues:
            return self.issues[0].reason
        if self.error:
            return self.error.message
        return None


class PayoutDesk:
    """Balance panel plus payout history, refreshed together after a request.

    The two panels are fetched independently: one failing leaves the other
    intact, and they are only eventually consistent with each other.
    """

    def __init__(self, client: PayoutsClient, *, page_size: int = 5) -> None:
        self.client = client
        self.payouts: PaginatedCollection[Payout] = PaginatedCollection(
            "payouts",
            client.fetch_page,
            Payout,
            page_size=page_size,
        )
        self.balance: Balance | None = None
        self.balance_error: ViewError | None = None
        self.submitting = False
        self._balance_loading = False
        self._attempts = PendingAttempts()

    @property
    def available_balance(self) -> Decimal:
        return self.balance.available if self.balance else Decimal("0")

    @property
    def balance_state(self) -> ViewState:
        return resolve_view_state(
            loading=self._balance_loading,
            has_data=self.balance is not None,
            error=self.balance_error,
        )

    def refresh_balance(self) -> bool:
        self._balance_loading = True
        try:
            balance = self.client.get_balance()
        except ApiError as exc:
            logger.warning("balance_fetch_failed", extra={"code": exc.code, "status_code": exc.status_code})
            self.balance_error = to_view_error(exc)
            return False
        finally:
            self._balance_loading = False
        self.balance = balance
        self.balance_error = None
        return True

    def refresh(self) -> tuple[bool, bool]:
        return self.refresh_balance(), self.payouts.refetch()

    def request_payout(
        self,
        amount: str | Decimal | None,
        payment_details: str | None,
        payment_method: PaymentMethod | str = PaymentMethod.BANK_TRANSFER,
    ) -> PayoutSubmission:
        if self.submitting:
            return PayoutSubmission(ok=False, issues=[ValidationIssue("form", "A payout request is already in progress")])
        result = validate_payout_request(
            amount=amount,
            available_balance=self.available_balance,
            payment_details=payment_details,
            payment_method=payment_method,
        )
        try:
            request = result.require_request()
        except ClientValidationError as exc:
            issue = exc.issues[0] if exc.issues else None
            logger.info(
                "payout_request_blocked",
                extra={"field": issue.field if issue else None, "kind": issue.kind if issue else None},
            )
            return PayoutSubmission(ok=False, issues=exc.issues, error=to_view_error(exc))

        operation = f"payout:{request.amount}:{request.payment_method.value}:{request.payment_details}"
        key = self._attempts.key_for(operation, prefix="payout")
        self.submitting = True
        try:
            response = self.client.request_payout(request, idempotency_key=key)
        except ApiError as exc:
            logger.warning("payout_request_failed", extra={"code": exc.code, "status_code": exc.status_code})
            return PayoutSubmission(ok=False, error=to_view_error(exc))
        finally:
            self.submitting = False
        self._attempts.clear(operation)
        logger.info("payout_requested", extra={"amount": str(request.amount), "method": request.payment_method.value})
        self.refresh()
        return PayoutSubmission(ok=True, response=response)
