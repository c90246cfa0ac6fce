from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .exceptions import ClientValidationError, ValidationIssue, raise_for_issues
from .metrics import parse_amount, parse_currency
from .models_payouts import PaymentMethod, PayoutRequest


@dataclass(frozen=True)
class PayoutValidationResult:
    ok: bool
    issues: list[ValidationIssue]
    request: PayoutRequest | None = None

    @property
    def first_issue(self) -> ValidationIssue | None:
        return self.issues[0] if self.issues else None

    def require_request(self) -> PayoutRequest:
        """The validated request, or the issues raised as a client-side error."""
        raise_for_issues(self.issues)
        if self.request is None:
            raise ClientValidationError([ValidationIssue(field="form", reason="Payout request is incomplete")])
        return self.request


def validate_payout_request(
    *,
    amount: str | Decimal | float | None,
    available_balance: Decimal | float | str,
    payment_details: str | None,
    payment_method: PaymentMethod | str = PaymentMethod.BANK_TRANSFER,
) -> PayoutValidationResult:
    """Pre-validate a payout request against the balance last fetched.

    Rules run in order and the first failure is the only one reported.
    """
    parsed = parse_amount(amount)
    if parsed is None:
        return _fail("amount", "Please enter a valid amount")
    if parsed <= 0:
        return _fail("amount", "Amount must be greater than 0")
    if parsed > parse_currency(available_balance):
        return _fail("amount", "Amount exceeds available balance", kind="business_rule")
    details = (payment_details or "").strip()
    if not details:
        return _fail("payment_details", "Payment details are required")
    try:
        method = PaymentMethod(payment_method)
    except ValueError:
        return _fail("payment_method", f"Unsupported payment method: {payment_method}")
    return PayoutValidationResult(
        ok=True,
        issues=[],
        request=PayoutRequest(amount=parsed, payment_method=method, payment_details=details),
    )


def _fail(field: str, reason: str, *, kind: str = "validation") -> PayoutValidationResult:
    return PayoutValidationResult(ok=False, issues=[ValidationIssue(field=field, reason=reason, kind=kind)])
