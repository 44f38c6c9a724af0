"""Turn a statement email into a ParsedBill."""

from __future__ import annotations

import logging

from bill_reminders.parsing.bank import resolve_bank_name
from bill_reminders.parsing.matcher import (
    BALANCE_KEYWORDS,
    DUE_DATE_KEYWORDS,
    MIN_PAYMENT_KEYWORDS,
    first_value,
)
from bill_reminders.parsing.models import ParsedBill, RawEmail
from bill_reminders.parsing.normalize import normalize

logger = logging.getLogger(__name__)


def extract(raw_email: RawEmail) -> ParsedBill | None:
    """Extract balance, due date and minimum payment from ``raw_email``.

    Returns None unless all three are found; a partial bill is never
    returned. The due date is passed through as matched text.
    """
    body = normalize(raw_email.body)
    if not body:
        logger.debug(f"No body in message {raw_email.message_id or raw_email.subject!r}")
        return None

    balance = first_value(body, BALANCE_KEYWORDS)
    due_date = first_value(body, DUE_DATE_KEYWORDS)
    min_payment = first_value(body, MIN_PAYMENT_KEYWORDS)

    missing = [
        name
        for name, value in (
            ("balance", balance),
            ("due date", due_date),
            ("minimum payment", min_payment),
        )
        if value is None
    ]
    if missing:
        logger.debug(
            f"Insufficient data in {raw_email.subject!r}: missing {', '.join(missing)}"
        )
        return None

    return ParsedBill(
        bank_name=resolve_bank_name(raw_email.sender_address),
        balance=balance,
        due_date=due_date,
        min_payment=min_payment,
    )
