"""Line-ending canonicalization ahead of line-based scanning."""

from __future__ import annotations

LINE_BREAK = "\n"

# CR LF is folded before a lone CR so it stays a single break
_BREAK_VARIANTS = ("\r\n", "\r", "\u2028", "\u2029")


def normalize(text: str | None) -> str | None:
    """Rewrite every line-break variant in ``text`` as ``\\n``.

    ``None`` passes through unchanged. Applying it twice gives the same
    result as applying it once.
    """
    if text is None:
        return None
    for variant in _BREAK_VARIANTS:
        text = text.replace(variant, LINE_BREAK)
    return text
