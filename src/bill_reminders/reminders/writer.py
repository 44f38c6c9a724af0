"""Create bill reminders in Reminders.app via AppleScript / osascript."""

from __future__ import annotations

import logging
import subprocess
from datetime import date

from bill_reminders.config import DUE_HOUR, REMINDER_LIST, REMINDER_PRIORITY
from bill_reminders.exceptions import ReminderWriteError
from bill_reminders.parsing.models import ParsedBill
from bill_reminders.reminders.due_date import parse_due_date

logger = logging.getLogger(__name__)


def _sanitize_applescript(text: str) -> str:
    """Sanitize a string for safe inclusion in AppleScript double-quoted strings."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _run_applescript(script: str, timeout: int = 30) -> subprocess.CompletedProcess:
    """Execute an AppleScript via osascript."""
    logger.debug(f"Running AppleScript: {script[:200]}...")
    try:
        result = subprocess.run(
            ["osascript", "-e", script],
            capture_output=True,
            text=True,
            timeout=timeout,
        )
        if result.returncode != 0:
            logger.error(f"AppleScript failed: {result.stderr.strip()}")
        return result
    except subprocess.TimeoutExpired as e:
        raise ReminderWriteError(
            f"AppleScript timed out after {timeout}s"
        ) from e
    except FileNotFoundError as e:
        raise ReminderWriteError(
            "osascript not found — this feature requires macOS"
        ) from e


def reminder_title(bill: ParsedBill) -> str:
    return f"Pay {bill.bank_name} bill"


def reminder_notes(bill: ParsedBill, subject: str = "") -> str:
    """Notes text shown under the reminder."""
    lines = [
        f"Balance: {bill.balance}",
        f"Minimum Payment: {bill.min_payment}",
        f"Due Date: {bill.due_date}",
    ]
    if subject:
        lines.append(f"Email: {subject}")
    return "\n".join(lines)


def _date_script(var: str, due: date, hour: int) -> str:
    # day is reset to 1 first so changing the month cannot overflow
    return (
        f'set {var} to current date\n'
        f'set day of {var} to 1\n'
        f'set year of {var} to {due.year}\n'
        f'set month of {var} to {due.month}\n'
        f'set day of {var} to {due.day}\n'
        f'set time of {var} to {hour} * hours\n'
    )


def build_script(
    bill: ParsedBill,
    due: date,
    subject: str = "",
    list_name: str = REMINDER_LIST,
    priority: int = REMINDER_PRIORITY,
    flagged: bool = True,
    due_hour: int = DUE_HOUR,
) -> str:
    """AppleScript that ensures ``list_name`` exists and adds the reminder."""
    safe_list = _sanitize_applescript(list_name)
    safe_title = _sanitize_applescript(reminder_title(bill))
    safe_notes = _sanitize_applescript(reminder_notes(bill, subject))
    flag = "true" if flagged else "false"

    return (
        _date_script("dueDate", due, due_hour)
        + f'tell application "Reminders"\n'
        f'    if not (exists list "{safe_list}") then\n'
        f'        make new list with properties {{name:"{safe_list}"}}\n'
        f'    end if\n'
        f'    tell list "{safe_list}"\n'
        f'        make new reminder with properties {{name:"{safe_title}", '
        f'body:"{safe_notes}", due date:dueDate, priority:{priority}, flagged:{flag}}}\n'
        f'    end tell\n'
        f'end tell'
    )


def create_reminder(
    bill: ParsedBill,
    subject: str = "",
    list_name: str = REMINDER_LIST,
    priority: int = REMINDER_PRIORITY,
    flagged: bool = True,
    due_hour: int = DUE_HOUR,
) -> bool:
    """Add a reminder for ``bill`` to Reminders.app.

    The list is created when missing. An unreadable due date falls back to
    today so the reminder is still created.
    """
    due = parse_due_date(bill.due_date)
    script = build_script(
        bill,
        due,
        subject=subject,
        list_name=list_name,
        priority=priority,
        flagged=flagged,
        due_hour=due_hour,
    )

    result = _run_applescript(script)
    if result.returncode == 0:
        logger.info(f"Created reminder '{reminder_title(bill)}' due {due.isoformat()} in {list_name}")
        return True

    raise ReminderWriteError(
        f"Failed to create reminder for {bill.bank_name}: {result.stderr.strip()}"
    )
