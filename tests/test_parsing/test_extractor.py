"""Tests for the field extractor."""

import dataclasses

import pytest

from bill_reminders.parsing.extractor import extract
from bill_reminders.parsing.models import ParsedBill, RawEmail


def _email(body, sender="billing@chase.com", subject="Your statement is ready"):
    return RawEmail(sender_address=sender, subject=subject, body=body)


def test_extract_colon_form():
    body = "Statement Balance: $123.45\nDue Date: 2024-03-01\nMinimum Payment: $25.00"
    bill = extract(_email(body))
    assert isinstance(bill, ParsedBill)
    assert bill.bank_name == "CHASE"
    assert bill.balance == "$123.45"
    assert bill.due_date == "2024-03-01"
    assert bill.min_payment == "$25.00"


def test_extract_mixed_forms_and_line_endings():
    body = (
        "Hi Jane,\r\n\r\n"
        "New Balance\r\n$2,010.77\r\n"
        "Payment Due Date\r\nApril 5, 2024\r\n"
        "Minimum Payment Due: $40.00\r\n"
    )
    bill = extract(_email(body, sender="Citi <alerts@citi.com>"))
    assert bill == ParsedBill(
        bank_name="CITI",
        balance="$2,010.77",
        due_date="April 5, 2024",
        min_payment="$40.00",
    )


def test_missing_min_payment_returns_none():
    body = "Statement Balance: $123.45\nDue Date: 2024-03-01"
    assert extract(_email(body)) is None


def test_missing_any_field_returns_none():
    assert extract(_email("Due Date: 2024-03-01\nMinimum Payment: $25.00")) is None
    assert extract(_email("Balance: $1.00\nMinimum Payment: $25.00")) is None


@pytest.mark.parametrize("body", [None, ""])
def test_absent_body_returns_none(body):
    assert extract(_email(body)) is None


def test_due_date_passed_through_raw():
    body = "Balance: $5.00\nDue Date: sometime soon\nMinimum Payment: $5.00"
    assert extract(_email(body)).due_date == "sometime soon"


def test_unknown_sender_does_not_fail():
    body = "Balance: $5.00\nDue Date: 2024-03-01\nMinimum Payment: $5.00"
    assert extract(_email(body, sender="")).bank_name == "Unknown Bank"


def test_parsed_bill_is_frozen():
    bill = extract(_email("Balance: $5.00\nDue Date: 2024-03-01\nMinimum Payment: $5.00"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        bill.balance = "$0.00"
