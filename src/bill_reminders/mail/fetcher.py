"""Pull recent statement emails out of Gmail.

Takes an already-authorized ``service`` object, e.g. from
``googleapiclient.discovery.build("gmail", "v1", credentials=creds)``.
"""

from __future__ import annotations

import logging
from typing import Iterator, List

from googleapiclient.discovery import Resource

from bill_reminders.config import LOOKBACK_DAYS, MAX_BODY_LENGTH
from bill_reminders.exceptions import MailFetchError
from bill_reminders.mail.parser import parse_message
from bill_reminders.mail.query import statement_query
from bill_reminders.parsing.models import RawEmail

logger = logging.getLogger(__name__)

# messages.list page size
_PAGE_SIZE = 100


def fetch_statements(
    service: Resource,
    senders: List[str] | None = None,
    subjects: List[str] | None = None,
    days: int = LOOKBACK_DAYS,
    max_results: int = 100,
    max_body_length: int = MAX_BODY_LENGTH,
) -> Iterator[RawEmail]:
    """Yield a RawEmail for every recent message that looks like a statement.

    Raises MailFetchError if the search itself fails. A single message
    that cannot be retrieved is logged and skipped.
    """
    query = statement_query(senders=senders, subjects=subjects, days=days)
    logger.info(f"Searching statements: {query}")

    try:
        message_ids = _statement_ids(service, query, max_results)
    except Exception as e:
        raise MailFetchError(f"Statement search failed for {query!r}: {e}") from e

    logger.info(f"{len(message_ids)} candidate statement emails")

    messages = service.users().messages()
    for msg_id in message_ids:
        try:
            raw = messages.get(userId="me", id=msg_id, format="full").execute()
        except Exception as e:
            logger.warning(f"Skipping statement {msg_id}: {e}")
            continue
        yield parse_message(raw, max_body_length=max_body_length)


def _statement_ids(service: Resource, query: str, limit: int) -> list[str]:
    """Message IDs for ``query``, newest first, at most ``limit`` of them."""
    ids: list[str] = []
    request_args: dict = {"userId": "me", "q": query}

    while len(ids) < limit:
        request_args["maxResults"] = min(limit - len(ids), _PAGE_SIZE)
        page = service.users().messages().list(**request_args).execute()

        ids.extend(m["id"] for m in page.get("messages", []))
        next_token = page.get("nextPageToken")
        if not page.get("messages") or not next_token:
            break
        request_args["pageToken"] = next_token

    return ids[:limit]
