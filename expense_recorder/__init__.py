"""Public interface for the ``expense_recorder`` package.

This module exposes the package's API function, the extractors and the public
models as the stable import surface. There is no runtime logic here, only
symbol re-exports.
"""

from .amounts import extract_expense_amount
from .api import build_expense_record_from_transcript
from .dates import extract_date, to_iso_date
from .extractors import extract_card_name, extract_description, extract_expense_category
from .matching import ACCOUNT_MIN_SCORE, CATEGORY_MIN_SCORE, best_match
from .models import AccountNames, ExpenseCategories, ExpenseRecord, ReferenceLists
from .reference_lists import ReferenceListStore, load_reference_lists

__all__ = [
    # API
    "build_expense_record_from_transcript",
    "load_reference_lists",
    # Extractors
    "extract_card_name",
    "extract_date",
    "extract_description",
    "extract_expense_amount",
    "extract_expense_category",
    "best_match",
    "to_iso_date",
    "ACCOUNT_MIN_SCORE",
    "CATEGORY_MIN_SCORE",
    # Models / types
    "AccountNames",
    "ExpenseCategories",
    "ExpenseRecord",
    "ReferenceLists",
    "ReferenceListStore",
]
