"""Query facade binding the algorithms to one mapping store."""

from __future__ import annotations

import functools
from typing import Any, Callable, List, Optional, Tuple, TypeVar, cast

from confusable_guard import ascii_fold, parser, skeleton
from confusable_guard.describe import resolve_description
from confusable_guard.models import Diff, MappingEntry
from confusable_guard.store import (
    DictMappingStore,
    LockedMappingStore,
    MappingStore,
    Rune,
    as_rune,
)
from confusable_guard.telemetry.metrics import inc_query

F = TypeVar("F", bound=Callable[..., Any])


class Confusables:
    """Skeleton, ASCII and number folding over a single mapping store.

    Unsynchronized: concurrent readers are fine only while nothing calls
    ``add_mapping``/``load_mappings``. Use ``SynchronizedConfusables`` for
    multi-threaded writers.
    """

    def __init__(self, store: Optional[MappingStore] = None) -> None:
        self.store: MappingStore = store if store is not None else DictMappingStore()

    # ---- queries -------------------------------------------------------------

    def is_confusable(self, a: str, b: str) -> bool:
        inc_query("is_confusable")
        return skeleton.is_confusable(a, b, self.store)

    def to_skeleton(self, text: str) -> str:
        inc_query("to_skeleton")
        return skeleton.to_skeleton(text, self.store)

    def to_skeleton_diff(self, text: str) -> List[Diff]:
        inc_query("to_skeleton_diff")
        return skeleton.to_skeleton_diff(text, self.store)

    def to_ascii(self, text: str) -> str:
        inc_query("to_ascii")
        return ascii_fold.to_ascii(text, self.store)

    def to_ascii_diff(self, text: str) -> Tuple[str, List[Diff]]:
        inc_query("to_ascii_diff")
        return ascii_fold.to_ascii_diff(text, self.store)

    def to_number(self, text: str) -> str:
        inc_query("to_number")
        return ascii_fold.to_number(text, self.store)

    def lookup(self, rune: Rune) -> Optional[str]:
        return self.store.lookup(as_rune(rune))

    def describe(self, key: str) -> Optional[str]:
        return self.store.describe(key)

    def mapping(self, rune: Rune) -> Optional[MappingEntry]:
        key = as_rune(rune)
        target = self.store.lookup(key)
        if target is None:
            return None
        return MappingEntry(key, target, resolve_description(key, target, self.store))

    # ---- mutation ------------------------------------------------------------

    def add_mapping(self, rune: Rune, confusable: str) -> None:
        """Map ``rune`` to ``confusable``, replacing any existing mapping."""
        self.store.add(rune, confusable)

    def add_mapping_with_description(
        self, rune: Rune, confusable: str, from_desc: str, to_desc: str
    ) -> None:
        self.store.add_with_description(rune, confusable, from_desc, to_desc)

    def load_mappings(self, source: parser.LineSource, *, name: str = "stream") -> int:
        return parser.load_mappings(source, self.store, name=name)


def _locked(fn: F) -> F:
    @functools.wraps(fn)
    def wrapper(self: "SynchronizedConfusables", *args: Any, **kwargs: Any) -> Any:
        with self.lock:
            return fn(self, *args, **kwargs)

    return cast(F, wrapper)


class SynchronizedConfusables(Confusables):
    """Every query and mutation runs under one re-entrant lock.

    The lock is shared with the ``LockedMappingStore`` so lookups made by an
    in-flight query never interleave with a writer. ``load_mappings`` reads
    its stream without the lock and only takes it per inserted entry.
    """

    def __init__(self, store: Optional[LockedMappingStore] = None) -> None:
        if store is None:
            store = LockedMappingStore()
        self.lock = store.lock
        super().__init__(store)

    is_confusable = _locked(Confusables.is_confusable)
    to_skeleton = _locked(Confusables.to_skeleton)
    to_skeleton_diff = _locked(Confusables.to_skeleton_diff)
    to_ascii = _locked(Confusables.to_ascii)
    to_ascii_diff = _locked(Confusables.to_ascii_diff)
    to_number = _locked(Confusables.to_number)
    lookup = _locked(Confusables.lookup)
    describe = _locked(Confusables.describe)
    mapping = _locked(Confusables.mapping)
    add_mapping = _locked(Confusables.add_mapping)
    add_mapping_with_description = _locked(Confusables.add_mapping_with_description)
