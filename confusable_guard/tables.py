"""Baseline mapping table and the process-wide default engine.

The baseline is the bundled Unicode ``confusables.txt`` followed by the
project amendments file, parsed once on first use. Amendments are applied
second, so they override upstream entries for the same source rune.
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock
from typing import Optional

from confusable_guard.config import Settings, get_settings
from confusable_guard.engine import Confusables, SynchronizedConfusables
from confusable_guard.parser import load_mappings
from confusable_guard.store import DictMappingStore, LockedMappingStore

log = logging.getLogger(__name__)

_BUILD_LOCK = Lock()
_baseline: Optional[DictMappingStore] = None
_default: Optional[Confusables] = None


def _load_file(path: Path, store: DictMappingStore) -> int:
    with path.open("rb") as fh:
        return load_mappings(fh, store, name=path.name)


def build_store(settings: Optional[Settings] = None) -> DictMappingStore:
    """Parse the configured data and amendments files into a fresh store."""
    cfg = settings or get_settings()
    store = DictMappingStore()
    upstream = _load_file(cfg.data_path, store)
    amended = _load_file(cfg.amendments_path, store)
    log.info(
        "baseline mapping table built",
        extra={"upstream_entries": upstream, "amendments": amended, "size": len(store)},
    )
    return store


def baseline_store() -> DictMappingStore:
    """The parsed baseline, built once per process. Treat as read-only."""
    global _baseline
    if _baseline is None:
        with _BUILD_LOCK:
            if _baseline is None:
                _baseline = build_store()
    return _baseline


def new_store() -> DictMappingStore:
    """A private, mutable copy of the baseline."""
    return baseline_store().copy()


def new_engine(thread_safe: bool = False) -> Confusables:
    if thread_safe:
        return SynchronizedConfusables(LockedMappingStore(new_store()))
    return Confusables(new_store())


def default_engine() -> Confusables:
    """Process-wide engine used by the module-level API.

    Synchronized when ``CONFUSABLES_THREAD_SAFE`` is set.
    """
    global _default
    if _default is None:
        base = baseline_store()
        with _BUILD_LOCK:
            if _default is None:
                if get_settings().CONFUSABLES_THREAD_SAFE:
                    _default = SynchronizedConfusables(LockedMappingStore(base.copy()))
                else:
                    _default = Confusables(base.copy())
    return _default


def reset_default_engine() -> None:
    """Drop the default engine (and its runtime mappings); mainly for tests."""
    global _default
    with _BUILD_LOCK:
        _default = None
