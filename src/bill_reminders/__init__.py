"""Bill reminders: pull billing facts out of statement emails.

The parsing core has no dependencies beyond the standard library:
    from bill_reminders.parsing import extract, RawEmail

Mail intake and the Reminders.app writer live in their own subpackages:
    from bill_reminders.mail import parse_message, fetch_statements
    from bill_reminders.reminders import create_reminder
    from bill_reminders.pipeline import sync_bills
"""

from bill_reminders.parsing import ParsedBill, RawEmail, extract

__all__ = ["ParsedBill", "RawEmail", "extract"]
