"""Data models and type aliases for ``expense_recorder``.

The extraction engine produces exactly one :class:`ExpenseRecord` per
transcript. Every field is a plain string so the record can be handed to a
spreadsheet append call (or printed as JSON) without further conversion.
Reference data is passed in explicitly as a :class:`ReferenceLists` value;
the engine keeps no module-level state.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from typing import TypeAlias

# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------

AccountNames: TypeAlias = Sequence[str]
"""Ordered, user-configurable account (card) names.

Entries may contain any punctuation (``%``, ``-``, ``/``) and are returned
verbatim when matched.
"""

ExpenseCategories: TypeAlias = Sequence[str]
"""Ordered, user-configurable expense categories."""


@dataclass(frozen=True, slots=True)
class ReferenceLists:
    """The two reference lists consulted during extraction.

    Inputs are copied into tuples so that the engine can never mutate a
    caller-owned list. Order is preserved; it decides ties in fuzzy matching.
    """

    account_names: tuple[str, ...] = field(default_factory=tuple)
    expense_categories: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "account_names", tuple(self.account_names))
        object.__setattr__(self, "expense_categories", tuple(self.expense_categories))

    @classmethod
    def empty(cls) -> ReferenceLists:
        """Return the pair of empty lists used when loading fails."""

        return cls((), ())


# ---------------------------------------------------------------------------
# Output record
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ExpenseRecord:
    """A single expense extracted from one transcript.

    Field order (exact):
        - date: ``YYYY-MM-DD``; defaults to the current date
        - card_name: verbatim entry from the account names, or ``""``
        - expense_amount: ``D.DD`` without thousands separators, or ``""``
        - expense_category: verbatim entry from the categories, the cleaned
          spoken text when no entry matched, or ``""``
        - description: free text with casing/punctuation preserved, or ``""``
    """

    date: str = ""
    card_name: str = ""
    expense_amount: str = ""
    expense_category: str = ""
    description: str = ""

    def as_dict(self) -> dict[str, str]:
        return asdict(self)

    def sheet_row(self, recorded_at: datetime | None = None) -> list[str]:
        """Return the cell values appended to the expense sheet.

        The sixth cell is the capture timestamp in UTC with millisecond
        precision (``2024-12-03T18:04:05.123Z``). Naive datetimes are taken
        as local time.
        """

        ts = (recorded_at or datetime.now(UTC)).astimezone(UTC)
        stamp = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return [
            self.date,
            self.card_name,
            self.expense_amount,
            self.expense_category,
            self.description,
            stamp,
        ]


__all__ = ["AccountNames", "ExpenseCategories", "ExpenseRecord", "ReferenceLists"]
