"""Pytest configuration for test isolation.

The reference list store persists to ``./.expense_recorder`` by default. When
tests run in the same working tree, a list saved by one test (e.g. a CLI test
adding an account) would leak into later tests that expect the defaults.

To keep tests hermetic, we redirect the store to a unique temporary directory
for each test via an autouse fixture.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from expense_recorder.models import ReferenceLists
from expense_recorder.reference_lists import DEFAULT_ACCOUNT_NAMES, DEFAULT_EXPENSE_CATEGORIES


@pytest.fixture(autouse=True)
def _isolate_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Force a per-test config root so tests don't share on-disk state.

    The application reads ``EXPENSE_RECORDER_CONFIG_DIR`` (when set) to
    override the default ``./.expense_recorder`` location.
    """

    config_root = tmp_path / "config"
    config_root.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("EXPENSE_RECORDER_CONFIG_DIR", os.fspath(config_root))
    return config_root


@pytest.fixture
def default_lists() -> ReferenceLists:
    return ReferenceLists(DEFAULT_ACCOUNT_NAMES, DEFAULT_EXPENSE_CATEGORIES)
