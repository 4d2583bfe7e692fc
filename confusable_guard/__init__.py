"""Detect Unicode confusables: skeletons, ASCII folding and digit folding.

Module-level functions run against the process-wide default engine, whose
table is the bundled Unicode ``confusables.txt`` plus project amendments::

    >>> is_confusable("example", "𝐞х⍺𝓂𝕡Іꬲ")
    True
    >>> to_ascii("newtòñ")
    'newton'
"""

from __future__ import annotations

from typing import List, Tuple

from confusable_guard.engine import Confusables, SynchronizedConfusables
from confusable_guard.errors import ConfusablesError, DataFetchError, IgnoreLine, MalformedLine
from confusable_guard.models import ConfusableEntry, Description, Diff, MappingEntry
from confusable_guard.normalize import strip_marks
from confusable_guard.numeric import fold_numeric
from confusable_guard.parser import LineSource, parse_line
from confusable_guard.store import DictMappingStore, LockedMappingStore, MappingStore, Rune
from confusable_guard.tables import default_engine, new_engine

__all__ = [
    "is_confusable",
    "to_skeleton",
    "to_skeleton_diff",
    "to_ascii",
    "to_ascii_diff",
    "to_number",
    "add_mapping",
    "add_mapping_with_description",
    "load_mappings",
    "parse_line",
    "fold_numeric",
    "strip_marks",
    "default_engine",
    "new_engine",
    "Confusables",
    "SynchronizedConfusables",
    "MappingStore",
    "DictMappingStore",
    "LockedMappingStore",
    "ConfusableEntry",
    "Description",
    "Diff",
    "MappingEntry",
    "ConfusablesError",
    "DataFetchError",
    "IgnoreLine",
    "MalformedLine",
]


def is_confusable(s1: str, s2: str) -> bool:
    return default_engine().is_confusable(s1, s2)


def to_skeleton(s: str) -> str:
    return default_engine().to_skeleton(s)


def to_skeleton_diff(s: str) -> List[Diff]:
    return default_engine().to_skeleton_diff(s)


def to_ascii(s: str) -> str:
    return default_engine().to_ascii(s)


def to_ascii_diff(s: str) -> Tuple[str, List[Diff]]:
    return default_engine().to_ascii_diff(s)


def to_number(s: str) -> str:
    return default_engine().to_number(s)


def add_mapping(r: Rune, confusable: str) -> None:
    default_engine().add_mapping(r, confusable)


def add_mapping_with_description(r: Rune, confusable: str, from_desc: str, to_desc: str) -> None:
    default_engine().add_mapping_with_description(r, confusable, from_desc, to_desc)


def load_mappings(source: LineSource) -> int:
    return default_engine().load_mappings(source)
