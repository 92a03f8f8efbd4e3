"""Date extraction from a whole transcript.

Rules are evaluated in order against the lowercased transcript and the first
one that matches decides the date:

1. ``YYYY-M-D`` / ``YYYY/M/D`` (year starting with "20")
2. ``M-D-YYYY`` / ``M/D/YYYY`` (US order)
3. ``<month name> D[st|nd|rd|th][,] [YYYY]`` (current year when omitted)
4. "today"
5. "yesterday"

When nothing matches the current date is used, as it is when the first matching
rule yields a zero month or day. Components are not otherwise validated against
the calendar; they are only zero-padded.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta

MONTH_NAMES: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)


def to_iso_date(year: int, month: int, day: int) -> str:
    """Format ``YYYY-MM-DD``; returns ``""`` when any component is zero."""

    if not year or not month or not day:
        return ""
    return f"{year}-{month:02d}-{day:02d}"


def _iso(d: date) -> str:
    return to_iso_date(d.year, d.month, d.day)


@dataclass(frozen=True, slots=True)
class DateRule:
    """One entry of the ordered date rule table.

    ``build`` receives the match and the reference "today" and returns the
    ISO date string.
    """

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str], date], str]


def _year_first(m: re.Match[str], _today: date) -> str:
    y, mo, d = m.groups()
    return to_iso_date(int(y), int(mo), int(d))


def _us_order(m: re.Match[str], _today: date) -> str:
    mo, d, y = m.groups()
    return to_iso_date(int(y), int(mo), int(d))


def _month_name(m: re.Match[str], today: date) -> str:
    month_name, day, year = m.groups()
    return to_iso_date(
        int(year) if year else today.year,
        MONTH_NAMES.index(month_name) + 1,
        int(day),
    )


DATE_RULES: tuple[DateRule, ...] = (
    DateRule(
        "year_first",
        re.compile(r"\b(20\d{2})[-/](\d{1,2})[-/](\d{1,2})\b", re.ASCII),
        _year_first,
    ),
    DateRule(
        "us_order",
        re.compile(r"\b(\d{1,2})[-/](\d{1,2})[-/](20\d{2})\b", re.ASCII),
        _us_order,
    ),
    DateRule(
        "month_name",
        re.compile(
            rf"\b({'|'.join(MONTH_NAMES)})\s+(\d{{1,2}})(?:st|nd|rd|th)?,?\s*(20\d{{2}})?",
            re.ASCII,
        ),
        _month_name,
    ),
    DateRule("today", re.compile(r"today"), lambda _m, today: _iso(today)),
    DateRule(
        "yesterday",
        re.compile(r"yesterday"),
        lambda _m, today: _iso(today - timedelta(days=1)),
    ),
)


def extract_date(transcript: str, *, today: date | None = None) -> str:
    today = today or date.today()
    text = (transcript or "").lower()
    for rule in DATE_RULES:
        m = rule.pattern.search(text)
        if m:
            # A zero month or day ("May 0") still decides the rule, but the date
            # itself is never left empty.
            return rule.build(m, today) or _iso(today)
    return _iso(today)


__all__ = ["DATE_RULES", "MONTH_NAMES", "DateRule", "extract_date", "to_iso_date"]
