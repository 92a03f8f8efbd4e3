"""Text normalization used as a matching lens.

Nothing here changes the text handed back to callers: extractors always slice
the original transcript so display casing and punctuation survive, and only
compare through :func:`normalize_for_match` / :func:`text_tokens`.
"""

from __future__ import annotations

import re

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")

# Separator runs trimmed from the edges of a keyword window.
_LEADING_SEP_RE = re.compile(r"^[\s:,-]+")
_TRAILING_SEP_RE = re.compile(r"[\s:,-]+\Z")
_TRAILING_SEP_OR_PERIOD_RE = re.compile(r"[\s:,.-]+\Z")


def normalize_for_match(text: str) -> str:
    """Lowercase and collapse every non ``[a-z0-9]`` run to a single space."""

    return _NON_ALNUM_RE.sub(" ", text.lower()).strip()


def stem_token(token: str) -> str:
    """Very light plural stripping so "groceries" and "grocery" meet.

    Rules apply in order: ``-ies`` → ``-y`` (tokens longer than 4), then
    ``-es`` → ``""`` and ``-s`` → ``""`` (tokens longer than 3). Short words
    like "gas" or "bus" are left alone by the length guard.
    """

    if len(token) > 4 and token.endswith("ies"):
        return token[:-3] + "y"
    if len(token) > 3 and token.endswith("es"):
        return token[:-2]
    if len(token) > 3 and token.endswith("s"):
        return token[:-1]
    return token


def text_tokens(text: str) -> list[str]:
    return [stem_token(t) for t in normalize_for_match(text).split()]


def strip_separators(text: str, *, trailing_period: bool = False) -> str:
    """Trim whitespace, ``:``, ``,`` and ``-`` runs from both ends.

    With ``trailing_period=True`` a trailing ``.`` is trimmed as well (used for
    category windows, which usually end a spoken sentence).
    """

    s = _LEADING_SEP_RE.sub("", text)
    trailing = _TRAILING_SEP_OR_PERIOD_RE if trailing_period else _TRAILING_SEP_RE
    return trailing.sub("", s).strip()


def strip_leading_separators(text: str) -> str:
    return _LEADING_SEP_RE.sub("", text)


__all__ = [
    "normalize_for_match",
    "stem_token",
    "strip_leading_separators",
    "strip_separators",
    "text_tokens",
]
