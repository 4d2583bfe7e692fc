from __future__ import annotations

import threading

import pytest
from prometheus_client import REGISTRY

from confusable_guard.engine import Confusables, SynchronizedConfusables
from confusable_guard.errors import MalformedLine
from confusable_guard.models import Description, MappingEntry
from confusable_guard.store import DictMappingStore, LockedMappingStore
from confusable_guard.tables import new_store

ALPHA_LINE = (
    "0251 ;\t0061 ;\tMA\t# ( \u0251 → a ) LATIN SMALL LETTER ALPHA → LATIN SMALL LETTER A\t# "
)


def _sample(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_engine_queries() -> None:
    engine = Confusables(new_store())
    assert engine.to_skeleton("example") == "exarnple"
    assert engine.is_confusable("paypal", "p\u0430yp\u0430l")
    assert engine.to_ascii("newtòñ") == "newton"
    assert engine.to_number("O12") == "012"
    folded, diffs = engine.to_ascii_diff("\u03b1")
    assert folded == "a"
    assert diffs[0].confusable == "a"
    assert [d.rune for d in engine.to_skeleton_diff("am")] == ["a", "m"]


def test_engine_default_store_is_empty() -> None:
    engine = Confusables()
    assert len(engine.store) == 0
    assert engine.to_skeleton("example") == "example"


def test_lookup_and_describe() -> None:
    engine = Confusables(new_store())
    assert engine.lookup("\u03b1") == "a"
    assert engine.lookup(0x03B1) == "a"
    assert engine.lookup("b") is None
    assert engine.describe("\u03b1") == "GREEK SMALL LETTER ALPHA"


def test_mapping_entry() -> None:
    engine = Confusables(new_store())
    assert engine.mapping(0x03B1) == MappingEntry(
        "\u03b1", "a", Description("GREEK SMALL LETTER ALPHA", "LATIN SMALL LETTER A")
    )
    assert engine.mapping("b") is None


def test_add_mapping_overrides() -> None:
    engine = Confusables(new_store())
    engine.add_mapping("\u028d", "w")
    engine.add_mapping("\u028d", "m")
    assert engine.to_ascii("ex\u03b1\u028dple") == "example"
    assert engine.to_skeleton("\u028d") == "m"


def test_add_mapping_with_description() -> None:
    engine = Confusables()
    engine.add_mapping_with_description(
        "\u028d", "w", "LATIN SMALL LETTER TURNED W", "LATIN SMALL LETTER W"
    )
    _, diffs = engine.to_ascii_diff("\u028d")
    assert diffs[0].description == Description(
        "LATIN SMALL LETTER TURNED W", "LATIN SMALL LETTER W"
    )


def test_engine_load_mappings_counts_and_metrics() -> None:
    engine = Confusables()
    before_loaded = _sample("confusables_entries_loaded_total", {"source": "engine-test"})
    before_skipped = _sample("confusables_lines_skipped_total", {"source": "engine-test"})

    assert engine.load_mappings(["# header", "", ALPHA_LINE], name="engine-test") == 1

    assert engine.lookup("\u0251") == "a"
    assert _sample("confusables_entries_loaded_total", {"source": "engine-test"}) == (
        before_loaded + 1
    )
    assert _sample("confusables_lines_skipped_total", {"source": "engine-test"}) == (
        before_skipped + 2
    )


def test_engine_load_error_metric() -> None:
    engine = Confusables()
    before = _sample("confusables_load_errors_total", {"source": "engine-bad"})
    with pytest.raises(MalformedLine):
        engine.load_mappings([ALPHA_LINE, "0251 ; nope"], name="engine-bad")
    assert _sample("confusables_load_errors_total", {"source": "engine-bad"}) == before + 1
    assert engine.lookup("\u0251") == "a"


def test_queries_are_counted() -> None:
    engine = Confusables()
    before = _sample("confusables_queries_total", {"op": "to_number"})
    engine.to_number("1")
    engine.to_number("2")
    assert _sample("confusables_queries_total", {"op": "to_number"}) == before + 2


def test_synchronized_engine_shares_store_lock() -> None:
    store = LockedMappingStore(DictMappingStore())
    engine = SynchronizedConfusables(store)
    assert engine.lock is store.lock
    assert SynchronizedConfusables().lock is not None


def test_synchronized_engine_is_reentrant() -> None:
    engine = SynchronizedConfusables(LockedMappingStore(new_store()))
    with engine.lock:
        engine.add_mapping("\u028d", "m")
        assert engine.to_ascii("\u028d") == "m"


def test_synchronized_engine_concurrent_writers_and_readers() -> None:
    engine = SynchronizedConfusables(LockedMappingStore(new_store()))
    base = 0xE000  # private use area
    errors: list = []

    def writer(offset: int) -> None:
        try:
            for i in range(200):
                engine.add_mapping(base + offset * 200 + i, "x")
        except Exception as exc:  # pragma: no cover - surfaced below
            errors.append(exc)

    def reader() -> None:
        try:
            for _ in range(200):
                assert engine.to_ascii("ex\u03b1mple") == "example"
                assert engine.is_confusable("example", "ex\u0430mple")
        except Exception as exc:  # pragma: no cover - surfaced below
            errors.append(exc)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    threads += [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    for cp in range(base, base + 800):
        assert engine.lookup(cp) == "x"
