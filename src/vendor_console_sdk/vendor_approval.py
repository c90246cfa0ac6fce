from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .clients.vendors_client import VendorsClient
from .collection import PaginatedCollection
from .exceptions import ApiError, ValidationIssue
from .idempotency import PendingAttempts
from .models_vendors import PendingVendor, VendorDecision, VendorStatus
from .ui_errors import ViewError, to_view_error

logger = logging.getLogger(__name__)

REPLAY_CODES = {"IDEMPOTENT_REPLAY", "IDEMPOTENCY_REPLAY"}


@dataclass(frozen=True)
class VendorActionAvailability:
    can_approve: bool
    can_reject: bool


def normalized_vendor_status(status: str | VendorStatus | None) -> str:
    """Lower-cased status; a vendor with no status is still pending."""
    if isinstance(status, VendorStatus):
        status = status.value
    return (status or "").strip().lower() or VendorStatus.PENDING.value


def vendor_action_availability(status: str | VendorStatus | None, *, in_flight: bool = False) -> VendorActionAvailability:
    is_pending = normalized_vendor_status(status) == VendorStatus.PENDING.value
    allowed = is_pending and not in_flight
    return VendorActionAvailability(can_approve=allowed, can_reject=allowed)


@dataclass(frozen=True)
class ApprovalResult:
    ok: bool
    vendor_id: int | str
    status: VendorStatus | None = None
    already_processed: bool = False
    issues: list[ValidationIssue] = field(default_factory=list)
    error: ViewError | None = None

    @property
    def message(self) -> str | None:
        if self.issues:
            return self.issues[0].reason
        if self.error:
            return self.error.message
        return None


class ApprovalWorkflow:
    """pending -> approved | rejected, one way, with an admin note.

    A vendor resolved through this workflow is terminal: later approve or
    reject calls for it are refused locally without reaching the server.
    """

    def __init__(self, client: VendorsClient, *, page_size: int = 5) -> None:
        self.client = client
        self.pending: PaginatedCollection[PendingVendor] = PaginatedCollection(
            "vendors",
            client.fetch_pending_page,
            PendingVendor,
            page_size=page_size,
        )
        self.resolved: dict[str, VendorStatus] = {}
        self._in_flight: set[str] = set()
        self._attempts = PendingAttempts()

    def availability(self, vendor_id: int | str) -> VendorActionAvailability:
        key = str(vendor_id)
        return vendor_action_availability(self._current_status(key), in_flight=key in self._in_flight)

    def approve(self, vendor_id: int | str, notes: str = "") -> ApprovalResult:
        return self._decide(vendor_id, VendorStatus.APPROVED, notes)

    def reject(self, vendor_id: int | str, notes: str = "") -> ApprovalResult:
        return self._decide(vendor_id, VendorStatus.REJECTED, notes)

    def _decide(self, vendor_id: int | str, status: VendorStatus, notes: str) -> ApprovalResult:
        key = str(vendor_id)
        if key in self._in_flight:
            return self._refuse(vendor_id, "A decision for this vendor is already in progress")
        current = self._current_status(key)
        if current != VendorStatus.PENDING.value:
            return self._refuse(vendor_id, f"Vendor has already been {current}")

        decision = VendorDecision(status=status, admin_notes=notes.strip())
        operation = f"vendor:{key}:{status.value}"
        idempotency_key = self._attempts.key_for(operation)
        self._in_flight.add(key)
        try:
            self.client.decide_vendor(vendor_id, decision, idempotency_key=idempotency_key)
        except ApiError as exc:
            if exc.code in REPLAY_CODES:
                logger.info("vendor_decision_replayed", extra={"vendor_id": key, "status": status.value})
                return self._record(vendor_id, status, operation, already_processed=True)
            logger.warning(
                "vendor_decision_failed",
                extra={"vendor_id": key, "status": status.value, "code": exc.code, "status_code": exc.status_code},
            )
            return ApprovalResult(ok=False, vendor_id=vendor_id, error=to_view_error(exc))
        finally:
            self._in_flight.discard(key)
        logger.info("vendor_decision_recorded", extra={"vendor_id": key, "status": status.value})
        return self._record(vendor_id, status, operation)

    def _record(
        self,
        vendor_id: int | str,
        status: VendorStatus,
        operation: str,
        *,
        already_processed: bool = False,
    ) -> ApprovalResult:
        self.resolved[str(vendor_id)] = status
        self._attempts.clear(operation)
        self.pending.refetch()
        return ApprovalResult(ok=True, vendor_id=vendor_id, status=status, already_processed=already_processed)

    def _refuse(self, vendor_id: int | str, reason: str) -> ApprovalResult:
        logger.info("vendor_decision_refused", extra={"vendor_id": str(vendor_id), "reason": reason})
        return ApprovalResult(
            ok=False,
            vendor_id=vendor_id,
            issues=[ValidationIssue(field="vendor", reason=reason, kind="business_rule")],
        )

    def _current_status(self, key: str) -> str:
        return normalized_vendor_status(self.resolved.get(key) or self._listed_status(key))

    def _listed_status(self, key: str) -> str | None:
        for vendor in self.pending.items:
            if str(vendor.id) == key:
                return vendor.status
        return None
