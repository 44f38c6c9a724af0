"""Unified exception hierarchy for bill-reminders.

The parsing core never raises these; they belong to the mail intake and
reminder glue around it.
"""


class BillReminderError(Exception):
    """Base exception for all bill-reminders errors."""


# Mail
class MailError(BillReminderError):
    """Base exception for mail intake operations."""


class MailFetchError(MailError):
    """Failed to list or fetch statement emails."""


# Reminders
class ReminderError(BillReminderError):
    """Base exception for reminder store operations."""


class ReminderWriteError(ReminderError):
    """Failed to create a reminder in Reminders.app."""
