# confusable_guard/telemetry/metrics.py
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, TypeVar, cast

from prometheus_client import REGISTRY, Counter

T = TypeVar("T")


def _registry_map() -> Dict[str, Any]:
    mapping = getattr(REGISTRY, "_names_to_collectors", {})
    return mapping if isinstance(mapping, dict) else {}


def _get_or_create(name: str, factory: Callable[[], T]) -> T:
    # prometheus_client registers counters under the name minus "_total"
    existing = _registry_map().get(name) or _registry_map().get(name.removesuffix("_total"))
    if existing is not None:
        return cast(T, existing)
    return factory()


def _mk_counter(name: str, doc: str, labels: Iterable[str]) -> Counter:
    return _get_or_create(name, lambda: Counter(name, doc, list(labels)))


# ---- Collectors ---------------------------------------------------------------

entries_loaded_total: Counter = _mk_counter(
    "confusables_entries_loaded_total",
    "Mapping entries added to a store from a mapping file.",
    ["source"],
)
lines_skipped_total: Counter = _mk_counter(
    "confusables_lines_skipped_total",
    "Blank or comment lines skipped while loading a mapping file.",
    ["source"],
)
load_errors_total: Counter = _mk_counter(
    "confusables_load_errors_total",
    "Mapping file loads aborted by a malformed line.",
    ["source"],
)
queries_total: Counter = _mk_counter(
    "confusables_queries_total",
    "Skeleton, ASCII and number queries answered.",
    ["op"],
)


def inc_query(op: str) -> None:
    queries_total.labels(op).inc()
