"""Convert Gmail API message payloads into RawEmail records."""

from __future__ import annotations

import base64
import binascii
import re
from email.utils import parseaddr
from typing import Iterator

from bs4 import BeautifulSoup

from bill_reminders.config import MAX_BODY_LENGTH
from bill_reminders.parsing.models import RawEmail

_INLINE_SPACE = re.compile(r"[ \t\xa0]+")

# Tags that start a new line in a rendered statement
_LINE_TAGS = [
    "p", "div", "br", "tr", "li", "table", "ul", "ol",
    "h1", "h2", "h3", "h4", "h5", "h6",
]
# Cells of one row stay on one line, so "Balance:" and its amount meet
_CELL_TAGS = ["td", "th"]


def parse_message(raw_message: dict, max_body_length: int = MAX_BODY_LENGTH) -> RawEmail:
    """Build a RawEmail from a Gmail API message payload (format=full).

    Pure function, no network calls. Line structure of the body is kept
    because the extractor scans it line by line.
    """
    payload = raw_message.get("payload", {})

    body = _statement_text(payload)
    if body and len(body) > max_body_length:
        body = body[:max_body_length]

    return RawEmail(
        sender_address=_sender_address(_header(payload, "From")),
        subject=_header(payload, "Subject") or "(no subject)",
        body=body or None,
        message_id=raw_message.get("id", ""),
    )


def _header(payload: dict, name: str) -> str:
    wanted = name.lower()
    for h in payload.get("headers", []):
        if h.get("name", "").lower() == wanted:
            return h.get("value", "")
    return ""


def _sender_address(from_header: str) -> str:
    _, address = parseaddr(from_header)
    return address or from_header.strip()


def _leaf_parts(payload: dict) -> Iterator[dict]:
    """Depth-first walk over the non-multipart parts of a payload."""
    parts = payload.get("parts")
    if not parts:
        yield payload
        return
    for part in parts:
        yield from _leaf_parts(part)


def _statement_text(payload: dict) -> str:
    """Plain-text body if the message has one, else its flattened HTML."""
    leaves = list(_leaf_parts(payload))

    for part in leaves:
        if part.get("mimeType") == "text/plain":
            text = _decode_part(part)
            if text:
                return text

    for part in leaves:
        if part.get("mimeType") == "text/html":
            html = _decode_part(part)
            if html:
                return html_to_text(html)

    return ""


def _decode_part(part: dict) -> str:
    data = part.get("body", {}).get("data")
    if not data:
        return ""
    try:
        raw = base64.urlsafe_b64decode(data)
    except (binascii.Error, ValueError):
        return ""
    return raw.decode("utf-8", errors="replace")


def html_to_text(html: str) -> str:
    """Flatten an HTML body to plain lines.

    Breaks go only where the markup starts a block or a table row; inline
    tags such as ``<b>Balance:</b> $10.00`` stay on one line.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "head"]):
        tag.decompose()
    for tag in soup.find_all(_LINE_TAGS):
        tag.insert_before("\n")
        tag.insert_after("\n")
    for tag in soup.find_all(_CELL_TAGS):
        tag.insert_after(" ")

    lines = (_INLINE_SPACE.sub(" ", line).strip() for line in soup.get_text().splitlines())
    return "\n".join(line for line in lines if line)
