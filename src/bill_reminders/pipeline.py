"""Glue between mail intake, extraction and the reminder store."""

from __future__ import annotations

import logging
from typing import Callable, List

from bill_reminders.config import LOOKBACK_DAYS
from bill_reminders.exceptions import ReminderError
from bill_reminders.parsing.extractor import extract
from bill_reminders.parsing.models import ParsedBill, RawEmail
from bill_reminders.reminders.writer import create_reminder

logger = logging.getLogger(__name__)

ReminderWriter = Callable[..., bool]


def process_email(
    raw_email: RawEmail,
    writer: ReminderWriter = create_reminder,
) -> ParsedBill | None:
    """Extract a bill from one message and hand it to ``writer``.

    Messages without enough data are skipped silently and return None.
    """
    bill = extract(raw_email)
    if bill is None:
        logger.debug(f"Skipping {raw_email.subject!r} from {raw_email.sender_address}")
        return None

    writer(bill, subject=raw_email.subject)
    return bill


def sync_bills(
    service,
    senders: List[str] | None = None,
    subjects: List[str] | None = None,
    days: int = LOOKBACK_DAYS,
    writer: ReminderWriter = create_reminder,
    max_results: int = 100,
) -> list[ParsedBill]:
    """Search Gmail for recent statements and create a reminder per bill.

    A reminder failure for one message is logged and the batch continues.
    """
    from bill_reminders.mail.fetcher import fetch_statements

    bills: list[ParsedBill] = []
    statements = fetch_statements(
        service, senders=senders, subjects=subjects, days=days, max_results=max_results,
    )
    for raw_email in statements:
        try:
            bill = process_email(raw_email, writer=writer)
        except ReminderError as e:
            logger.error(f"Could not create reminder for message {raw_email.message_id}: {e}")
            continue
        if bill is not None:
            bills.append(bill)

    logger.info(f"Created {len(bills)} bill reminders")
    return bills
