"""Text cleanup helpers for scraped fragments."""

import html
import re
from typing import Hashable, Iterable, List, Optional, TypeVar

T = TypeVar("T", bound=Hashable)

_WHITESPACE = re.compile(r"\s+")


def clean_text(text: Optional[str]) -> str:
    """Normalize a raw text fragment.

    Unescapes HTML entities, drops control and other non-printable
    characters, collapses whitespace runs (spaces, tabs, newlines,
    non-breaking spaces) to a single space and trims the result.

    Args:
        text: Raw text content

    Returns:
        Cleaned text, empty string for None
    """
    if not text:
        return ""
    text = html.unescape(text)
    text = "".join(ch for ch in text if ch.isprintable() or ch.isspace())
    return _WHITESPACE.sub(" ", text).strip()


def clean_lines(text: Optional[str]) -> List[str]:
    """Split a block into cleaned, non-empty lines."""
    if not text:
        return []
    cleaned = (clean_text(line) for line in text.splitlines())
    return [line for line in cleaned if line]


def dedupe_preserve_order(items: Iterable[T]) -> List[T]:
    """Remove repeated items, keeping the first occurrence of each.

    Args:
        items: Items in page order

    Returns:
        List without duplicates, in first-seen order
    """
    seen = set()
    unique = []

    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)

    return unique
