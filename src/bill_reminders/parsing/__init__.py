"""Keyword-anchored billing field extraction (pure, no I/O)."""

from bill_reminders.parsing.bank import UNKNOWN_BANK, resolve_bank_name
from bill_reminders.parsing.extractor import extract
from bill_reminders.parsing.matcher import (
    BALANCE_KEYWORDS,
    DUE_DATE_KEYWORDS,
    MIN_PAYMENT_KEYWORDS,
    first_value,
)
from bill_reminders.parsing.models import ParsedBill, RawEmail
from bill_reminders.parsing.normalize import normalize

__all__ = [
    "extract",
    "first_value",
    "normalize",
    "resolve_bank_name",
    "ParsedBill",
    "RawEmail",
    "BALANCE_KEYWORDS",
    "DUE_DATE_KEYWORDS",
    "MIN_PAYMENT_KEYWORDS",
    "UNKNOWN_BANK",
]
