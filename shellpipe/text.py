"""String helpers shared by the tokenizer and the pipeline builder."""

from __future__ import annotations

BLANKS = " \t"


def trim(text: str) -> str:
    """Strip leading and trailing spaces and tabs (other whitespace is kept)."""
    return text.strip(BLANKS)


def sanitize(text: str, chars_to_remove: str) -> str:
    return "".join(ch for ch in text if ch not in chars_to_remove)


def split_words(text: str) -> list[str]:
    return text.split()


def _is_unescaped_quote(text: str, idx: int) -> bool:
    if text[idx] != '"':
        return False
    return idx == 0 or text[idx - 1] != "\\"


def has_quotes(text: str) -> bool:
    """Return True if *text* holds a double quote not preceded by a backslash."""
    return any(_is_unescaped_quote(text, idx) for idx in range(len(text)))


def first_quote_index(text: str) -> int:
    """Index of the first unescaped double quote, or 0 when there is none."""
    for idx in range(len(text)):
        if _is_unescaped_quote(text, idx):
            return idx
    return 0


def strip_quotes(text: str) -> str:
    """Drop unescaped double quotes, keeping the ones written as ``\\"``."""
    return "".join(ch for idx, ch in enumerate(text) if not _is_unescaped_quote(text, idx))


__all__ = [
    "BLANKS",
    "first_quote_index",
    "has_quotes",
    "sanitize",
    "split_words",
    "strip_quotes",
    "trim",
]
