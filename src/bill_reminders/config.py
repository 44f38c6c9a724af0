"""Environment-driven defaults. Every value can also be passed explicitly."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    """Integer from ``name``, or ``default`` when unset or not a number."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default


REMINDER_LIST = os.environ.get("BILL_REMINDERS_LIST", "Bills")

# Reminders.app priorities: 1 high, 5 medium, 9 low, 0 none
REMINDER_PRIORITY = _int_env("BILL_REMINDERS_PRIORITY", 1)

DUE_HOUR = _int_env("BILL_REMINDERS_DUE_HOUR", 9)

LOOKBACK_DAYS = _int_env("BILL_REMINDERS_LOOKBACK_DAYS", 1)

MAX_BODY_LENGTH = _int_env("BILL_REMINDERS_MAX_BODY", 20000)
