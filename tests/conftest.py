# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from confusable_guard.store import DictMappingStore  # noqa: E402
from confusable_guard.tables import new_store, reset_default_engine  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_default_engine(monkeypatch):
    # Runtime mappings added through the module-level API must not leak.
    monkeypatch.delenv("CONFUSABLES_THREAD_SAFE", raising=False)
    reset_default_engine()
    yield
    reset_default_engine()


@pytest.fixture()
def store() -> DictMappingStore:
    """Private copy of the bundled baseline table."""
    return new_store()


@pytest.fixture()
def empty_store() -> DictMappingStore:
    return DictMappingStore()
