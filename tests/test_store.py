from __future__ import annotations

import pytest

from confusable_guard.store import (
    DictMappingStore,
    LockedMappingStore,
    MappingStore,
    as_rune,
)


def test_lookup_missing_is_none(empty_store: DictMappingStore) -> None:
    assert empty_store.lookup("x") is None
    assert empty_store.describe("x") is None
    assert len(empty_store) == 0


def test_add_overwrites(empty_store: DictMappingStore) -> None:
    empty_store.add("\u028d", "w")
    empty_store.add("\u028d", "m")
    assert empty_store.lookup("\u028d") == "m"
    assert len(empty_store) == 1


def test_add_accepts_code_point(empty_store: DictMappingStore) -> None:
    empty_store.add(0x028D, "m")
    assert empty_store.lookup("\u028d") == "m"


def test_add_rejects_empty_confusable(empty_store: DictMappingStore) -> None:
    with pytest.raises(ValueError):
        empty_store.add("\u028d", "")


@pytest.mark.parametrize("bad", ["", "ab"])
def test_as_rune_requires_one_code_point(bad: str) -> None:
    with pytest.raises(ValueError):
        as_rune(bad)


def test_add_with_description_names_both_sides(empty_store: DictMappingStore) -> None:
    empty_store.add_with_description(
        "\u0430", "a", "CYRILLIC SMALL LETTER A", "LATIN SMALL LETTER A"
    )
    assert empty_store.lookup("\u0430") == "a"
    assert empty_store.describe("\u0430") == "CYRILLIC SMALL LETTER A"
    assert empty_store.describe("a") == "LATIN SMALL LETTER A"


def test_copy_is_independent(empty_store: DictMappingStore) -> None:
    empty_store.add("\u028d", "m")
    clone = empty_store.copy()
    clone.add("\u028d", "w")
    clone.add("\u0251", "a")
    assert empty_store.lookup("\u028d") == "m"
    assert empty_store.lookup("\u0251") is None
    assert len(clone) == 2


def test_locked_store_delegates() -> None:
    inner = DictMappingStore()
    locked = LockedMappingStore(inner)
    locked.add_with_description("\u0251", "a", "LATIN SMALL LETTER ALPHA", "LATIN SMALL LETTER A")
    assert inner.lookup("\u0251") == "a"
    assert locked.lookup("\u0251") == "a"
    assert locked.describe("a") == "LATIN SMALL LETTER A"
    assert len(locked) == 1


def test_stores_satisfy_protocol() -> None:
    assert isinstance(DictMappingStore(), MappingStore)
    assert isinstance(LockedMappingStore(), MappingStore)
