"""Card-name, category and description extraction.

The three extractors differ deliberately in how they treat text that does not
match the reference data:

- card names are constrained to the account list: an unmatched window yields
  ``""`` and is never echoed back;
- categories fall back to the cleaned spoken text, so a category that is not
  in the list yet passes through unchanged;
- descriptions are never matched at all and keep the speaker's wording.
"""

from __future__ import annotations

from .anchors import locate_category_window, locate_charge_window, locate_description
from .logging_setup import get_logger
from .matching import ACCOUNT_MIN_SCORE, CATEGORY_MIN_SCORE, best_match
from .models import AccountNames, ExpenseCategories

_logger = get_logger(__name__)


def extract_card_name(transcript: str, account_names: AccountNames) -> str:
    """Return the account name spoken after "charge", or ``""``.

    Without a "charge" keyword, or with nothing between it and the next
    anchor, the whole transcript is matched instead.
    """

    if not transcript:
        return ""
    window = locate_charge_window(transcript)
    if not window.text:
        _logger.debug("card:whole_transcript_fallback anchored=%s", window.anchored)
        return best_match(transcript, account_names, ACCOUNT_MIN_SCORE)
    return best_match(window.text, account_names, ACCOUNT_MIN_SCORE)


def extract_expense_category(transcript: str, expense_categories: ExpenseCategories) -> str:
    """Return the matched category, the cleaned spoken category, or ``""``.

    Matching the whole transcript (no "category" keyword, or an empty window)
    never passes raw text through; only an explicit, non-empty category
    window does.
    """

    if not transcript:
        return ""
    window = locate_category_window(transcript)
    if not window.text:
        _logger.debug("category:whole_transcript_fallback anchored=%s", window.anchored)
        return best_match(transcript, expense_categories, CATEGORY_MIN_SCORE)

    matched = best_match(window.text, expense_categories, CATEGORY_MIN_SCORE)
    if matched:
        return matched
    _logger.debug("category:passthrough text=%r bounded=%s", window.text, window.bounded)
    return window.text


def extract_description(transcript: str) -> str:
    if not transcript:
        return ""
    return locate_description(transcript).text


__all__ = ["extract_card_name", "extract_description", "extract_expense_category"]
