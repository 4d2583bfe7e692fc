"""Mapping store: rune -> confusable string, string -> description."""

from __future__ import annotations

from threading import RLock
from typing import Dict, Optional, Protocol, Union, runtime_checkable

Rune = Union[str, int]


def as_rune(value: Rune) -> str:
    """Coerce a code point (``int``) or one-character string to a rune."""
    if isinstance(value, int):
        return chr(value)
    if len(value) != 1:
        raise ValueError(f"expected a single code point, got {value!r}")
    return value


@runtime_checkable
class MappingStore(Protocol):
    def lookup(self, rune: str) -> Optional[str]:
        ...

    def add(self, rune: Rune, confusable: str) -> None:
        ...

    def add_with_description(
        self, rune: Rune, confusable: str, from_desc: str, to_desc: str
    ) -> None:
        ...

    def describe(self, key: str) -> Optional[str]:
        ...

    def __len__(self) -> int:
        ...


class DictMappingStore:
    """Plain dict-backed store.

    NOT safe when a writer runs concurrently with readers; use
    ``LockedMappingStore`` for that.
    """

    def __init__(self) -> None:
        self._confusables: Dict[str, str] = {}
        self._descriptions: Dict[str, str] = {}

    def lookup(self, rune: str) -> Optional[str]:
        return self._confusables.get(rune)

    def add(self, rune: Rune, confusable: str) -> None:
        key = as_rune(rune)
        if not confusable:
            raise ValueError("confusable must be a non-empty string")
        self._confusables[key] = confusable

    def add_with_description(
        self, rune: Rune, confusable: str, from_desc: str, to_desc: str
    ) -> None:
        key = as_rune(rune)
        self.add(key, confusable)
        self._descriptions[key] = from_desc
        self._descriptions[confusable] = to_desc

    def describe(self, key: str) -> Optional[str]:
        return self._descriptions.get(key)

    def __len__(self) -> int:
        return len(self._confusables)

    def copy(self) -> "DictMappingStore":
        clone = DictMappingStore()
        clone._confusables = dict(self._confusables)
        clone._descriptions = dict(self._descriptions)
        return clone


class LockedMappingStore:
    """Store whose every access is serialized behind one re-entrant lock.

    The lock may be shared with an engine so that a whole query and the
    lookups it performs run as one critical section.
    """

    def __init__(
        self, inner: Optional[DictMappingStore] = None, lock: Optional[RLock] = None
    ) -> None:
        self._inner = inner if inner is not None else DictMappingStore()
        self.lock = lock if lock is not None else RLock()

    def lookup(self, rune: str) -> Optional[str]:
        with self.lock:
            return self._inner.lookup(rune)

    def add(self, rune: Rune, confusable: str) -> None:
        with self.lock:
            self._inner.add(rune, confusable)

    def add_with_description(
        self, rune: Rune, confusable: str, from_desc: str, to_desc: str
    ) -> None:
        with self.lock:
            self._inner.add_with_description(rune, confusable, from_desc, to_desc)

    def describe(self, key: str) -> Optional[str]:
        with self.lock:
            return self._inner.describe(key)

    def __len__(self) -> int:
        with self.lock:
            return len(self._inner)
