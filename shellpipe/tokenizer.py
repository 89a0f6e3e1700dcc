"""Whitespace tokenizer that re-joins double-quoted literals."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .text import first_quote_index, has_quotes, sanitize, split_words, strip_quotes, trim

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TokenStream:
    """Normalized tokens plus whatever literal was still open at end of line."""

    tokens: list[str] = field(default_factory=list)
    unterminated: str | None = None


def _finish(literal: str) -> str:
    return sanitize(strip_quotes(trim(literal)), "\\")


def _closes_within(raw: str) -> bool:
    # A second unescaped quote after the first one closes the literal in place.
    pos = first_quote_index(raw)
    return len(raw) > 1 and pos != len(raw) - 1 and has_quotes(raw[pos + 1 :])


def scan_tokens(raw_tokens: list[str]) -> TokenStream:
    """Merge whitespace-split fragments that belong to one quoted literal.

    Quote-bearing tokens bump a running quote count; a literal is emitted once
    the count reaches exactly two. Plain tokens seen while a literal is open
    are glued onto it with a single space, which restores the whitespace the
    initial split threw away. A literal that is never closed swallows the
    rest of the line and is not emitted.
    """
    stream = TokenStream()
    quote_count = 0
    pending = ""
    is_open = False
    for raw in raw_tokens:
        if has_quotes(raw):
            if quote_count == 0:
                pending = ""
            quote_count += 1
            pending = f"{pending} {raw}"
            if _closes_within(raw):
                quote_count += 1
            if quote_count != 2:
                is_open = True
                continue
            quote_count = 0
        elif quote_count % 2 == 0:
            pending = raw
        else:
            pending = f"{pending} {raw}"
            is_open = True
            continue
        is_open = False
        stream.tokens.append(_finish(pending))
    if is_open:
        stream.unterminated = trim(pending)
        logger.debug("Unterminated quote swallowed %r", stream.unterminated)
    return stream


def normalize_tokens(raw_tokens: list[str]) -> list[str]:
    return scan_tokens(raw_tokens).tokens


def tokenize(line: str) -> list[str]:
    """Split *line* into normalized shell words."""
    return normalize_tokens(split_words(trim(line)))


__all__ = ["TokenStream", "normalize_tokens", "scan_tokens", "tokenize"]
