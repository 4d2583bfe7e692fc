from __future__ import annotations

from typing import List, Optional

from confusable_guard.models import Description
from confusable_guard.normalize import decompose
from confusable_guard.store import MappingStore


def describe_source(rune: str, store: MappingStore) -> Optional[str]:
    """Name of ``rune``, falling back to the names of its NFD components.

    All components must be described; a partial name is never produced.
    """
    direct = store.describe(rune)
    if direct is not None:
        return direct
    parts: List[str] = []
    for ch in decompose(rune):
        name = store.describe(ch)
        if name is None:
            return None
        parts.append(name)
    return ", ".join(parts) if parts else None


def resolve_description(
    rune: str, confusable: str, store: MappingStore
) -> Optional[Description]:
    source = describe_source(rune, store)
    if source is None:
        return None
    target = store.describe(confusable)
    if target is None:
        return None
    return Description(source, target)
