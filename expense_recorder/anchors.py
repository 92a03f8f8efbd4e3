"""Anchor keywords and the transcript windows between them.

A transcript is expected to read roughly like::

    Charge $30.50 to Chase Unlimited. Date is December 3rd.
    Category is Gift purchase. Description is parents visiting groceries

Each field lives in a window that starts right after an anchor keyword and
stops at the next anchor (or the end of the string). Keyword lookup is
case-insensitive and uses the first occurrence only; matching and slicing run on
the original transcript so the returned text keeps its casing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .normalizers import strip_leading_separators, strip_separators

CHARGE_KEYWORD = "charge"
CATEGORY_KEYWORD = "category"
CATEGORY_IS_KEYWORD = "category is"
DESCRIPTION_KEYWORD = "description"
DESCRIPTION_IS_KEYWORD = "description is"


@dataclass(frozen=True, slots=True)
class Window:
    """A cleaned slice of the transcript.

    Attributes
    ----------
    text:
        The cleaned window text in original casing (may be empty).
    anchored:
        ``True`` when the opening keyword was found. When ``False`` the
        extractor decides on its own fallback; ``text`` is then empty.
    bounded:
        ``True`` when a closing keyword ended the window; ``False`` when the
        window runs to the end of the transcript.
    """

    text: str
    anchored: bool
    bounded: bool


_UNANCHORED = Window(text="", anchored=False, bounded=False)


_KEYWORD_PATTERNS: dict[str, re.Pattern[str]] = {
    kw: re.compile(re.escape(kw), re.IGNORECASE)
    for kw in (
        CHARGE_KEYWORD,
        CATEGORY_KEYWORD,
        CATEGORY_IS_KEYWORD,
        DESCRIPTION_KEYWORD,
        DESCRIPTION_IS_KEYWORD,
    )
}


def _search_keyword(
    transcript: str, keywords: tuple[str, ...], start: int = 0
) -> re.Match[str] | None:
    """Return the first match of the first keyword (in preference order) found.

    Offsets index the original transcript, never a lowercased copy.
    """

    for kw in keywords:
        m = _KEYWORD_PATTERNS[kw].search(transcript, start)
        if m:
            return m
    return None


def locate_charge_window(transcript: str) -> Window:
    """Window between "charge" and the earlier of "category"/"description"."""

    opening = _search_keyword(transcript, (CHARGE_KEYWORD,))
    if opening is None:
        return _UNANCHORED

    offset = opening.end()
    ends = [
        m.start()
        for m in (
            _search_keyword(transcript, (CATEGORY_KEYWORD,), offset),
            _search_keyword(transcript, (DESCRIPTION_KEYWORD,), offset),
        )
        if m is not None
    ]
    end = min(ends) if ends else len(transcript)
    return Window(
        text=strip_separators(transcript[offset:end]),
        anchored=True,
        bounded=bool(ends),
    )


def locate_category_window(transcript: str) -> Window:
    """Window between "category [is]" and the following "description [is]".

    "category is" is preferred over a bare "category" (and likewise for the
    description keyword), so "Category is Grocery" yields ``"Grocery"`` rather
    than ``"is Grocery"``. A trailing period is trimmed.
    """

    opening = _search_keyword(transcript, (CATEGORY_IS_KEYWORD, CATEGORY_KEYWORD))
    if opening is None:
        return _UNANCHORED

    closing = _search_keyword(
        transcript, (DESCRIPTION_IS_KEYWORD, DESCRIPTION_KEYWORD), opening.end()
    )
    end = closing.start() if closing is not None else None
    return Window(
        text=strip_separators(transcript[opening.end() : end], trailing_period=True),
        anchored=True,
        bounded=closing is not None,
    )


def locate_description(transcript: str) -> Window:
    """Everything after "description [is]" with only leading separators removed.

    Trailing text is kept verbatim so multi-sentence descriptions survive.
    """

    opening = _search_keyword(transcript, (DESCRIPTION_IS_KEYWORD, DESCRIPTION_KEYWORD))
    if opening is None:
        return _UNANCHORED
    return Window(
        text=strip_leading_separators(transcript[opening.end() :]),
        anchored=True,
        bounded=False,
    )


__all__ = [
    "CATEGORY_IS_KEYWORD",
    "CATEGORY_KEYWORD",
    "CHARGE_KEYWORD",
    "DESCRIPTION_IS_KEYWORD",
    "DESCRIPTION_KEYWORD",
    "Window",
    "locate_category_window",
    "locate_charge_window",
    "locate_description",
]
