"""Persistent, user-editable reference lists (account names and categories).

Both lists live in one JSON file:

``<config_root>/reference_lists.json``

where ``config_root`` is ``$EXPENSE_RECORDER_CONFIG_DIR`` when set, otherwise
``./.expense_recorder`` under the current working directory. A list that has
never been saved reads as its defaults. A corrupt file also reads as defaults
(a warning is logged) so a bad edit never blocks recording expenses.

Atomicity: writes target ``.tmp`` first and then ``os.replace`` into place.
"""

from __future__ import annotations

import contextlib
import json
import os
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .logging_setup import get_logger
from .models import ReferenceLists

# Bump only when the on-disk JSON shape changes.
SCHEMA_VERSION: int = 1

CONFIG_DIR_ENV_VAR = "EXPENSE_RECORDER_CONFIG_DIR"
FILE_NAME = "reference_lists.json"

DEFAULT_ACCOUNT_NAMES: tuple[str, ...] = (
    "Chase checking",
    "BOA checking",
    "Amazon Visa",
    "Chase unlimited",
    "Chase Sapphire",
    "Chase freedom",
    "Amex blue cash preferred",
    "BOA cash reward",
    "Discover it",
    "Capital One",
    "USBank Cashplus - YF",
    "USBank Cashplus",
    "CITI COSTCO",
    "Wells Fargo 2%",
    "Wayfair",
    "IKEA",
    "Walmart OnePay",
    "Citi DoubleCash",
)

DEFAULT_EXPENSE_CATEGORIES: tuple[str, ...] = (
    "Dining out",
    "Grocery",
    "Travel-personal",
    "Travel-business",
    "Rent/Mortgage",
    "Utilities",
    "Gaming or Entertainment",
    "Household essentials",
    "Donna related",
    "Health related",
    "Clothing or shoes",
    "Gift purchase",
    "Home maintenance",
    "Home improvement",
    "Subscription or membership",
    "Misc",
    "Car related",
    "Commute",
    "Tax related",
    "Rental related",
)


_logger = get_logger(__name__)


class ReferenceListsFile(BaseModel):
    """On-disk shape of the reference list file. ``None`` means "not saved yet"."""

    model_config = ConfigDict(extra="forbid", strict=True)

    schema_version: int = SCHEMA_VERSION
    account_names: list[str] | None = None
    expense_categories: list[str] | None = None

    @field_validator("account_names", "expense_categories")
    @classmethod
    def _entries_not_blank(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return v
        if any(not s.strip() for s in v):
            raise ValueError("entries must be non-empty strings")
        return v


def _get_config_root() -> Path:
    """Return the config root directory.

    Default: ``./.expense_recorder`` under the current working directory.
    Override: ``EXPENSE_RECORDER_CONFIG_DIR`` (absolute or relative).
    """

    root = os.getenv(CONFIG_DIR_ENV_VAR)
    if root and root.strip():
        return Path(root).expanduser().resolve()
    return (Path.cwd() / ".expense_recorder").resolve()


def clean_entries(entries: Iterable[str]) -> list[str]:
    """Trim entries and reject blanks; order and duplicates are preserved."""

    cleaned: list[str] = []
    for e in entries:
        if not isinstance(e, str):
            raise ValueError(f"entries must be strings, got {type(e).__name__}")
        s = e.strip()
        if not s:
            raise ValueError("entries must be non-empty strings")
        cleaned.append(s)
    return cleaned


class ReferenceListStore:
    """Read and write the two reference lists.

    Usage
    -----
    store = ReferenceListStore()  # path from env/CWD
    names = store.get_account_names()
    store.save_account_names([*names, "New card"])
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = Path(path) if path is not None else None

    @property
    def path(self) -> Path:
        # Resolved lazily so env overrides set after construction still apply.
        return self._path if self._path is not None else _get_config_root() / FILE_NAME

    # ---- I/O -----------------------------------------------------------------

    def _load(self) -> ReferenceListsFile | None:
        """Return the stored file, an empty one when missing, ``None`` when invalid.

        ``OSError`` other than a missing file propagates to the caller.
        """

        path = self.path
        try:
            parsed = ReferenceListsFile.model_validate_json(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return ReferenceListsFile()
        except (ValidationError, UnicodeDecodeError):
            _logger.warning(
                "reference_lists:invalid_file; using defaults path=%s",
                os.fspath(path),
                exc_info=True,
            )
            return None

        if parsed.schema_version != SCHEMA_VERSION:
            _logger.warning(
                "reference_lists:schema_mismatch; using defaults path=%s found=%d expected=%d",
                os.fspath(path),
                parsed.schema_version,
                SCHEMA_VERSION,
            )
            return None
        return parsed

    def _read(self) -> ReferenceListsFile:
        loaded = self._load()
        return loaded if loaded is not None else ReferenceListsFile()

    def _write(self, data: ReferenceListsFile) -> None:
        path = self.path
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            tmp.write_text(
                json.dumps(data.model_dump(mode="json"), ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
            os.replace(tmp, path)
        except Exception:
            with contextlib.suppress(FileNotFoundError):
                tmp.unlink()
            raise

    # ---- Lists -----------------------------------------------------------------

    def get_account_names(self) -> list[str]:
        stored = self._read().account_names
        return list(DEFAULT_ACCOUNT_NAMES) if stored is None else stored

    def get_expense_categories(self) -> list[str]:
        stored = self._read().expense_categories
        return list(DEFAULT_EXPENSE_CATEGORIES) if stored is None else stored

    def save_account_names(self, names: Iterable[str]) -> None:
        current = self._read()
        self._write(current.model_copy(update={"account_names": clean_entries(names)}))
        _logger.info("reference_lists:saved list=account_names path=%s", os.fspath(self.path))

    def save_expense_categories(self, categories: Iterable[str]) -> None:
        current = self._read()
        self._write(current.model_copy(update={"expense_categories": clean_entries(categories)}))
        _logger.info("reference_lists:saved list=expense_categories path=%s", os.fspath(self.path))

    def initialize_defaults(self) -> None:
        """Persist defaults for any list that has not been saved yet.

        An invalid file is left untouched so a hand edit can still be repaired.
        """

        current = self._load()
        if current is None:
            return
        updates: dict[str, list[str]] = {}
        if current.account_names is None:
            updates["account_names"] = list(DEFAULT_ACCOUNT_NAMES)
        if current.expense_categories is None:
            updates["expense_categories"] = list(DEFAULT_EXPENSE_CATEGORIES)
        if updates:
            self._write(current.model_copy(update=updates))

    def reset_to_defaults(self) -> None:
        self._write(
            ReferenceListsFile(
                account_names=list(DEFAULT_ACCOUNT_NAMES),
                expense_categories=list(DEFAULT_EXPENSE_CATEGORIES),
            )
        )


def load_reference_lists(store: ReferenceListStore | None = None) -> ReferenceLists:
    """Load both lists for extraction; empty lists when the store is unreadable.

    Extraction tolerates empty lists (card and category matches come back
    empty), so a storage failure degrades the result instead of aborting.
    """

    store = store or ReferenceListStore()
    try:
        return ReferenceLists(store.get_account_names(), store.get_expense_categories())
    except OSError:
        _logger.error(
            "reference_lists:load_failed; continuing with empty lists path=%s",
            os.fspath(store.path),
            exc_info=True,
        )
        return ReferenceLists.empty()


__all__ = [
    "CONFIG_DIR_ENV_VAR",
    "DEFAULT_ACCOUNT_NAMES",
    "DEFAULT_EXPENSE_CATEGORIES",
    "ReferenceListStore",
    "ReferenceListsFile",
    "clean_entries",
    "load_reference_lists",
]
