"""Public API for ``expense_recorder``.

One entry point turns a transcript into an :class:`ExpenseRecord`. The five
extractors run independently on the same transcript; none of them consults
another's result. The function is pure apart from reading the current date
when ``today`` is not given, and it never raises for string input: fields that
are not mentioned (or cannot be parsed) come back as ``""``, and the date
falls back to today.
"""

from __future__ import annotations

from datetime import date

from .amounts import extract_expense_amount
from .dates import extract_date
from .extractors import extract_card_name, extract_description, extract_expense_category
from .logging_setup import get_logger
from .models import ExpenseRecord, ReferenceLists

_logger = get_logger(__name__)


def build_expense_record_from_transcript(
    transcript: str | None,
    lists: ReferenceLists,
    *,
    today: date | None = None,
) -> ExpenseRecord:
    """Build one expense record from a transcribed utterance.

    Parameters
    ----------
    transcript:
        The text returned by the transcription service. ``None`` is treated
        as an empty transcript.
    lists:
        Account names and expense categories to match against. Load them once
        (see :func:`expense_recorder.reference_lists.load_reference_lists`)
        and pass the same value to every call.
    today:
        Reference date for "today"/"yesterday", month names without a year,
        and the default date. Defaults to :meth:`datetime.date.today`.
    """

    text = transcript or ""
    record = ExpenseRecord(
        date=extract_date(text, today=today) or "",
        card_name=extract_card_name(text, lists.account_names) or "",
        expense_amount=extract_expense_amount(text) or "",
        expense_category=extract_expense_category(text, lists.expense_categories) or "",
        description=extract_description(text) or "",
    )
    _logger.debug(
        "record:built date=%s card=%r amount=%s category=%r",
        record.date,
        record.card_name,
        record.expense_amount,
        record.expense_category,
    )
    return record


__all__ = ["build_expense_record_from_transcript"]
