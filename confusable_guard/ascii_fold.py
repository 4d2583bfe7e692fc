"""Folding text to its closest ASCII representation.

Per original code point the first rule that yields pure ASCII wins:

1. ASCII code points are kept.
2. Digit lookalikes fold to literal digits (``fold_numeric``). This runs
   before the mapping table, so ``𝟎`` becomes ``"0"`` rather than ``"O"``.
3. The mapping table target, with combining marks stripped.
4. The code point itself with combining marks stripped (``ò`` -> ``o``; a
   lone combining mark folds to ``""``).
5. The NFKC form of the code point (ligatures, width variants).

Rule 5 is an extension over plain table folding. The final NFKC pass would
fold ``ﬁ`` and fullwidth letters anyway; doing it per code point records
those folds in ``to_ascii_diff``.

Anything else is kept unchanged. The joined result is NFKC-normalized.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from confusable_guard.describe import resolve_description
from confusable_guard.models import Diff
from confusable_guard.normalize import compat_compose, is_ascii, strip_marks
from confusable_guard.numeric import fold_numeric
from confusable_guard.store import MappingStore

_NUMBER_FOLD = {"o": "0", "i": "1", "l": "1", "!": "1"}


def fold_rune(rune: str, store: MappingStore) -> Optional[str]:
    """ASCII substitution for a single non-ASCII code point, or ``None``."""
    numeric = fold_numeric(rune)
    if numeric is not None:
        return numeric

    mapped = store.lookup(rune)
    if mapped is not None:
        stripped = strip_marks(mapped)
        if is_ascii(stripped):
            return stripped

    stripped = strip_marks(rune)
    if is_ascii(stripped):
        return stripped

    compat = compat_compose(rune)
    if is_ascii(compat):
        return compat
    return None


def to_ascii_diff(text: str, store: MappingStore) -> Tuple[str, List[Diff]]:
    if is_ascii(text):
        return text, [Diff(ch) for ch in text]

    out: List[str] = []
    diffs: List[Diff] = []
    for ch in text:
        if ord(ch) < 0x80:
            out.append(ch)
            diffs.append(Diff(ch))
            continue
        folded = fold_rune(ch, store)
        if folded is None:
            out.append(ch)
            diffs.append(Diff(ch))
            continue
        out.append(folded)
        diffs.append(Diff(ch, folded, resolve_description(ch, folded, store)))
    return compat_compose("".join(out)), diffs


def to_ascii(text: str, store: MappingStore) -> str:
    if is_ascii(text):
        return text
    result, _ = to_ascii_diff(text, store)
    return result


def to_number(text: str, store: MappingStore) -> str:
    """ASCII-fold, then read ``o`` as 0 and ``i``/``l``/``!`` as 1."""
    folded = to_ascii(text, store)
    return "".join(
        _NUMBER_FOLD.get(ch.lower(), ch) if ord(ch) < 0x80 else ch for ch in folded
    )
