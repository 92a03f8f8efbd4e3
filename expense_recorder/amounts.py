"""Monetary amount extraction.

The amount is searched in the charge window (text between "charge" and the
next anchor keyword), lowercased. When "charge" is missing or its window is
empty the whole transcript is searched instead.

Rules are evaluated in order; a rule whose pattern matches but whose guard
rejects the match lets evaluation continue with the next rule. Order matters:

1. verbal ``325 dollars [and 39 cents]`` (before 2 so the cents are not
   captured on their own)
2. ``99 cents``
3. ``$4,000[.50]``
4. ``4,000[.50]`` / ``250[.5]`` without a dollar sign, accepted only when the
   number has a comma or is at least 10
5. ``$30[.50]``

All results are normalized to ``D.DD`` with commas removed.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from .anchors import locate_charge_window
from .logging_setup import get_logger

_logger = get_logger(__name__)

# Bare numbers below this are more likely a day of month or a count than a price.
BARE_NUMBER_MIN_VALUE = 10


def normalize_cents(fraction: str | None) -> str:
    """Decimal fraction to two digits: missing → ``"00"``, ``"5"`` → ``"50"``."""

    if not fraction:
        return "00"
    return fraction + "0" if len(fraction) == 1 else fraction


def _spoken_cents(count: str) -> str:
    """Spoken cent count to two digits: ``"5"`` → ``"05"``, ``"123"`` → ``"12"``."""

    return count.zfill(2)[:2]


def _dollars(raw: str) -> str | None:
    digits = raw.replace(",", "")
    return digits or None


def _verbal(m: re.Match[str]) -> str | None:
    dollars = _dollars(m.group(1))
    if dollars is None:
        return None
    cents = _spoken_cents(m.group(2)) if m.group(2) else "00"
    return f"{dollars}.{cents}"


def _cents_only(m: re.Match[str]) -> str | None:
    return f"0.{_spoken_cents(m.group(1))}"


def _decimal(m: re.Match[str]) -> str | None:
    dollars = _dollars(m.group(1))
    if dollars is None:
        return None
    return f"{dollars}.{normalize_cents(m.group(2))}"


def _below_minimum(digits: str) -> bool:
    # Compared by length first: int() refuses strings past the conversion digit limit.
    significant = digits.lstrip("0")
    if len(significant) > len(str(BARE_NUMBER_MIN_VALUE)):
        return False
    return int(significant or "0") < BARE_NUMBER_MIN_VALUE


def _bare_number(m: re.Match[str]) -> str | None:
    raw = m.group(1)
    dollars = _dollars(raw)
    if dollars is None:
        return None
    if "," not in raw and _below_minimum(dollars):
        return None
    return f"{dollars}.{normalize_cents(m.group(2))}"


@dataclass(frozen=True, slots=True)
class AmountRule:
    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], str | None]

    def apply(self, text: str) -> str | None:
        # First occurrence only; a rejected match does not retry further along.
        m = self.pattern.search(text)
        return self.build(m) if m else None


AMOUNT_RULES: tuple[AmountRule, ...] = (
    AmountRule(
        "verbal",
        re.compile(r"\b([\d,]+)\s+dollars?(?:\s+and\s+(\d+)\s+cents?)?", re.ASCII),
        _verbal,
    ),
    AmountRule("cents_only", re.compile(r"\b(\d+)\s+cents?\b", re.ASCII), _cents_only),
    AmountRule(
        "dollar_sign_grouped", re.compile(r"\$([\d,]+)(?:\.(\d{1,2}))?", re.ASCII), _decimal
    ),
    AmountRule("bare_number", re.compile(r"\b([\d,]+)(?:\.(\d{1,2}))?\b", re.ASCII), _bare_number),
    AmountRule("dollar_sign", re.compile(r"\$(\d+)(?:\.(\d{1,2}))?", re.ASCII), _decimal),
)


def parse_amount(text: str) -> str:
    """Apply :data:`AMOUNT_RULES` to ``text``; ``""`` when none produces a value."""

    lower = text.lower()
    for rule in AMOUNT_RULES:
        value = rule.apply(lower)
        if value is not None:
            _logger.debug("amount:matched rule=%s value=%s", rule.name, value)
            return value
    return ""


def extract_expense_amount(transcript: str) -> str:
    if not transcript:
        return ""
    window = locate_charge_window(transcript)
    if window.text:
        return parse_amount(window.text)
    _logger.debug(
        "amount:charge_window_missing; searching whole transcript anchored=%s", window.anchored
    )
    return parse_amount(transcript)


__all__ = [
    "AMOUNT_RULES",
    "BARE_NUMBER_MIN_VALUE",
    "AmountRule",
    "extract_expense_amount",
    "normalize_cents",
    "parse_amount",
]
