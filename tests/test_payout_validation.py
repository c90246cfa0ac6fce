from __future__ import annotations

from decimal import Decimal

import pytest

from vendor_console_sdk.exceptions import BusinessRuleError, ClientValidationError
from vendor_console_sdk.models_payouts import PaymentMethod
from vendor_console_sdk.payout_validation import validate_payout_request


def test_rejects_non_numeric_amount() -> None:
    result = validate_payout_request(amount="abc", available_balance=500, payment_details="IBAN 123")
    assert not result.ok
    assert result.first_issue.reason == "Please enter a valid amount"


def test_rejects_amount_over_balance_as_business_rule() -> None:
    result = validate_payout_request(amount="600", available_balance=500, payment_details="IBAN 123")
    assert not result.ok
    assert result.first_issue.kind == "business_rule"
    assert result.first_issue.reason == "Amount exceeds available balance"


def test_accepts_amount_within_balance() -> None:
    result = validate_payout_request(amount="499.99", available_balance=500, payment_details="IBAN 123")
    assert result.ok
    assert result.request.amount == Decimal("499.99")
    assert result.request.payment_method is PaymentMethod.BANK_TRANSFER


def test_amount_equal_to_balance_is_allowed() -> None:
    assert validate_payout_request(amount="500", available_balance=Decimal("500"), payment_details="x").ok


@pytest.mark.parametrize("amount", ["0", "-5"])
def test_rejects_non_positive_amount(amount: str) -> None:
    result = validate_payout_request(amount=amount, available_balance=500, payment_details="IBAN 123")
    assert result.first_issue.reason == "Amount must be greater than 0"


@pytest.mark.parametrize("details", [None, "", "   "])
def test_requires_payment_details(details) -> None:
    result = validate_payout_request(amount="10", available_balance=500, payment_details=details)
    assert result.first_issue.field == "payment_details"


def test_first_failure_wins() -> None:
    result = validate_payout_request(amount="9000", available_balance=500, payment_details="")
    assert len(result.issues) == 1
    assert result.first_issue.field == "amount"


def test_rejects_unknown_method() -> None:
    result = validate_payout_request(
        amount="10", available_balance=500, payment_details="acct", payment_method="crypto"
    )
    assert result.first_issue.field == "payment_method"


def test_balance_given_as_formatted_currency() -> None:
    assert validate_payout_request(amount="499.99", available_balance="$500", payment_details="x").ok
    over = validate_payout_request(amount="600", available_balance="$500", payment_details="x")
    assert over.first_issue.kind == "business_rule"


def test_require_request_raises_typed_errors() -> None:
    with pytest.raises(BusinessRuleError, match="Amount exceeds available balance"):
        validate_payout_request(amount="600", available_balance=500, payment_details="x").require_request()
    with pytest.raises(ClientValidationError) as excinfo:
        validate_payout_request(amount="abc", available_balance=500, payment_details="x").require_request()
    assert not isinstance(excinfo.value, BusinessRuleError)
    assert excinfo.value.issues[0].field == "amount"


def test_require_request_returns_valid_request() -> None:
    request = validate_payout_request(amount="25", available_balance=500, payment_details=" IBAN ").require_request()
    assert request.amount == Decimal("25")
    assert request.payment_details == "IBAN"
