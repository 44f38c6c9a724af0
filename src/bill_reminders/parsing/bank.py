"""Guess the issuing bank from the sender address."""

from __future__ import annotations

from email.utils import parseaddr

UNKNOWN_BANK = "Unknown Bank"


def resolve_bank_name(sender_address: str | None) -> str:
    """Upper-cased first label of the sender's domain.

    ``billing@chase.com`` and ``Chase <billing@chase.com>`` both give
    ``CHASE``. Anything without a usable domain gives ``Unknown Bank``.
    This is a string heuristic only; it is not the issuer's legal name.
    """
    if not sender_address:
        return UNKNOWN_BANK

    _, address = parseaddr(sender_address)
    address = address or sender_address
    if "@" not in address:
        return UNKNOWN_BANK

    domain = address.rpartition("@")[2].strip()
    label = domain.split(".", 1)[0].strip()
    if not label:
        return UNKNOWN_BANK
    return label.upper()
