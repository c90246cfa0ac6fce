from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApiError(Exception):
    code: str
    message: str
    details: object | None
    trace_id: str | None
    status_code: int
    raw_payload: object | None = None

    def __str__(self) -> str:
        trace = f" trace_id={self.trace_id}" if self.trace_id else ""
        return f"[{self.status_code}] {self.code}: {self.message}{trace}"


class UnauthorizedError(ApiError):
    """401: the bearer credential was missing, expired or rejected."""


class ForbiddenError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class RequestRejectedError(ApiError):
    """400/422: the server refused the payload."""


class ConflictError(ApiError):
    pass


class RateLimitError(ApiError):
    pass


class ServerError(ApiError):
    pass


class NetworkError(ApiError):
    """Transport failure before an HTTP response was returned."""


class DataFormatError(ApiError):
    """The response body did not match any shape the client understands."""


def data_format_error(message: str, payload: object | None = None, trace_id: str | None = None) -> DataFormatError:
    return DataFormatError(
        code="DATA_FORMAT_ERROR",
        message=message,
        details=None,
        trace_id=trace_id,
        status_code=0,
        raw_payload=payload,
    )


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    reason: str
    kind: str = "validation"


class ClientValidationError(ValueError):
    """Raised when a request is built from input that failed local checks."""

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = issues
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.issues:
            return "Validation failed"
        issue = self.issues[0]
        return f"{issue.field}: {issue.reason}"


class BusinessRuleError(ClientValidationError):
    """Input is well-formed but breaks a rule such as the payout balance bound."""


def raise_for_issues(issues: list[ValidationIssue]) -> None:
    if not issues:
        return
    if any(issue.kind == "business_rule" for issue in issues):
        raise BusinessRuleError(issues)
    raise ClientValidationError(issues)
