"""Gmail search strings for bill statement emails."""

from __future__ import annotations

from typing import List

from bill_reminders.config import LOOKBACK_DAYS

DEFAULT_SUBJECTS = (
    "statement",
    "payment due",
    "bill is ready",
    "minimum payment",
)


def statement_query(
    senders: List[str] | None = None,
    subjects: List[str] | None = None,
    days: int = LOOKBACK_DAYS,
) -> str:
    """Build a Gmail query matching recent statement mail.

    Senders and subject phrases are each OR'd; the groups are AND'd
    together with the lookback window.

        >>> statement_query(["billing@chase.com"], ["statement"], days=3)
        'from:billing@chase.com subject:"statement" newer_than:3d'
    """
    terms = []
    if senders:
        terms.append(_or([_sender(s) for s in senders]))

    phrases = list(subjects) if subjects is not None else list(DEFAULT_SUBJECTS)
    if phrases:
        terms.append(_or([_subject(p) for p in phrases]))

    terms.append(_newer_than(days, "day"))
    return " ".join(terms)


def _or(queries: List[str]) -> str:
    if len(queries) == 1:
        return queries[0]
    return '{' + ' '.join(queries) + '}'


def _sender(sender: str) -> str:
    return f'from:{sender}'


def _subject(phrase: str) -> str:
    return f'subject:"{phrase}"'


def _newer_than(number: int, unit: str) -> str:
    return f'newer_than:{number}{unit[0]}'
