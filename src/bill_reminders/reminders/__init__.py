"""Reminder store (Reminders.app, macOS only)."""

from bill_reminders.reminders.due_date import parse_due_date
from bill_reminders.reminders.writer import create_reminder, reminder_notes, reminder_title

__all__ = [
    "parse_due_date",
    "create_reminder",
    "reminder_notes",
    "reminder_title",
]
