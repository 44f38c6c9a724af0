"""Data models for the parsing module."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawEmail:
    """One incoming message as handed over by mail intake."""

    sender_address: str
    subject: str
    body: str | None
    message_id: str = ""


@dataclass(frozen=True)
class ParsedBill:
    """Billing facts pulled from a statement email.

    ``due_date`` is the matched text as it appeared in the mail; turning it
    into a calendar date is left to the reminder store.
    """

    bank_name: str
    balance: str
    due_date: str
    min_payment: str
