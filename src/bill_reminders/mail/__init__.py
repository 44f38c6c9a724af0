"""Mail intake: Gmail search, fetch and payload parsing.

``fetch_statements`` needs google-api-python-client and is imported lazily.
"""

from bill_reminders.mail.parser import parse_message, html_to_text
from bill_reminders.mail.query import statement_query


def __getattr__(name):
    if name == "fetch_statements":
        from bill_reminders.mail.fetcher import fetch_statements
        return fetch_statements
    raise AttributeError(f"module 'bill_reminders.mail' has no attribute {name!r}")


__all__ = [
    "parse_message",
    "html_to_text",
    "statement_query",
    "fetch_statements",
]
