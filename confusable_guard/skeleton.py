"""Skeletons per UTS #39 (https://www.unicode.org/reports/tr39/#def-skeleton).

Mappings are defined against decomposed forms, so the input is NFD-decomposed
before any lookup.
"""

from __future__ import annotations

from typing import List

from confusable_guard.describe import resolve_description
from confusable_guard.models import Diff
from confusable_guard.normalize import decompose
from confusable_guard.store import MappingStore


def to_skeleton(text: str, store: MappingStore) -> str:
    out: List[str] = []
    for ch in decompose(text):
        mapped = store.lookup(ch)
        out.append(ch if mapped is None else mapped)
    return "".join(out)


def is_confusable(a: str, b: str, store: MappingStore) -> bool:
    return to_skeleton(a, store) == to_skeleton(b, store)


def to_skeleton_diff(text: str, store: MappingStore) -> List[Diff]:
    """One ``Diff`` per decomposed code point; ``[]`` for empty input."""
    diffs: List[Diff] = []
    for ch in decompose(text):
        mapped = store.lookup(ch)
        if mapped is None:
            diffs.append(Diff(ch))
            continue
        diffs.append(Diff(ch, mapped, resolve_description(ch, mapped, store)))
    return diffs
