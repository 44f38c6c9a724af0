"""Keyword-anchored value lookup over line-oriented text.

Two strategies are tried, in this order, across a whole keyword group:

1. same line: ``Minimum Payment: $25.00``
2. isolated line: a line that is exactly the keyword, value on the next one::

       Payment Due Date
       March 1, 2024

Every synonym gets the same-line pass before any synonym gets the
isolated-line pass, so a colon match further down the body still beats an
isolated keyword near the top.
"""

from __future__ import annotations

from typing import Sequence

from bill_reminders.parsing.normalize import LINE_BREAK

KeywordGroup = Sequence[str]

BALANCE_KEYWORDS: tuple[str, ...] = (
    "statement balance",
    "new balance",
    "current balance",
    "balance",
)
DUE_DATE_KEYWORDS: tuple[str, ...] = (
    "payment due date",
    "due date",
)
MIN_PAYMENT_KEYWORDS: tuple[str, ...] = (
    "minimum payment due",
    "minimum payment",
    "minimum amount due",
)


def first_value(body: str | None, keywords: KeywordGroup) -> str | None:
    """Return the first value associated with any keyword in ``keywords``.

    ``body`` is expected to be normalized already. Returns None when
    neither strategy finds a non-empty value for any synonym.

    An empty value never counts as a match. ``Due Date:`` with nothing
    after the colon, or an isolated ``Due Date`` followed by a blank
    line, is skipped and the scan carries on, so the result is never
    an empty string.
    """
    if not body:
        return None
    lines = body.split(LINE_BREAK)

    for keyword in keywords:
        value = _same_line_value(lines, keyword.casefold())
        if value is not None:
            return value

    for keyword in keywords:
        value = _next_line_value(lines, keyword.casefold())
        if value is not None:
            return value

    return None


def _same_line_value(lines: list[str], keyword: str) -> str | None:
    for line in lines:
        if keyword not in line.casefold():
            continue
        _, colon, rest = line.partition(":")
        if not colon:
            continue
        value = rest.strip()
        if value:
            return value
    return None


def _next_line_value(lines: list[str], keyword: str) -> str | None:
    for line, following in zip(lines, lines[1:]):
        if line.strip().casefold() != keyword:
            continue
        value = following.strip()
        if value:
            return value
    return None
