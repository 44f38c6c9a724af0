"""Tests for the keyword matcher."""

from bill_reminders.parsing.matcher import (
    BALANCE_KEYWORDS,
    DUE_DATE_KEYWORDS,
    MIN_PAYMENT_KEYWORDS,
    first_value,
)


def test_same_line_value():
    assert first_value("Due Date: 2024-03-01", ["due date"]) == "2024-03-01"


def test_same_line_is_case_insensitive_and_trimmed():
    body = "  MINIMUM PAYMENT DUE :   $25.00  "
    assert first_value(body, ["minimum payment due"]) == "$25.00"


def test_splits_on_first_colon_only():
    body = "Payment Due Date: 03/01/2024 by 5:00 PM ET"
    assert first_value(body, DUE_DATE_KEYWORDS) == "03/01/2024 by 5:00 PM ET"


def test_internal_whitespace_kept():
    assert first_value("Balance:   $1,234.56  USD ", ["balance"]) == "$1,234.56  USD"


def test_isolated_line_value():
    assert first_value("Due Date\n2024-03-01", ["due date"]) == "2024-03-01"


def test_isolated_line_needs_exact_match():
    body = "Your due date is below\n2024-03-01"
    assert first_value(body, ["due date"]) is None


def test_line_without_colon_is_skipped():
    body = "Your due date is coming up\nDue Date: 2024-03-01"
    assert first_value(body, ["due date"]) == "2024-03-01"


def test_synonym_order_sets_priority():
    body = "Balance: $10.00\nStatement Balance: $99.00"
    assert first_value(body, ["statement balance", "balance"]) == "$99.00"
    assert first_value(body, ["balance", "statement balance"]) == "$10.00"


def test_colon_strategy_beats_isolated_line_for_whole_group():
    body = "Due Date\n2024-01-15\nPayment Due Date: 2024-03-01"
    # line 0 is an isolated-line match, but a colon match further down
    # is tried first and wins
    assert first_value(body, ["due date", "payment due date"]) == "2024-03-01"


def test_falls_back_to_second_synonym_isolated():
    body = "Minimum Amount Due\n$35.00"
    assert first_value(body, MIN_PAYMENT_KEYWORDS) == "$35.00"


def test_no_match_returns_none():
    assert first_value("Hello there\nNothing here", BALANCE_KEYWORDS) is None


def test_empty_body_returns_none():
    assert first_value("", BALANCE_KEYWORDS) is None
    assert first_value(None, BALANCE_KEYWORDS) is None


def test_empty_value_after_colon_falls_through():
    body = "Due Date:\nPayment Due Date: 2024-03-01"
    assert first_value(body, ["due date"]) == "2024-03-01"


def test_keyword_on_last_line_without_value():
    assert first_value("Something\nDue Date", ["due date"]) is None


def test_isolated_keyword_followed_by_blank_line_is_skipped():
    body = "Due Date\n\nPayment Due Date\n2024-03-01"
    assert first_value(body, ["due date", "payment due date"]) == "2024-03-01"
