"""Interpret the raw due-date text carried by a ParsedBill."""

from __future__ import annotations

import logging
from datetime import date

import dateutil.parser as parser

logger = logging.getLogger(__name__)


def parse_due_date(text: str | None, default: date | None = None) -> date:
    """Parse ``text`` into a date, falling back to ``default`` or today.

    Statement dates come in many shapes (``2024-03-01``, ``03/01/2024``,
    ``March 1, 2024``); anything dateutil cannot read gets the fallback.
    """
    fallback = default or date.today()
    if not text or not text.strip():
        return fallback
    try:
        return parser.parse(text, fuzzy=True).date()
    except (ValueError, OverflowError) as e:
        logger.warning(f"Unparseable due date {text!r}, using {fallback.isoformat()}: {e}")
        return fallback
