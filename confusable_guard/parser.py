"""Parser for the Unicode ``confusables.txt`` mapping format.

A data line looks like::

    0430 ;	0061 ;	MA	# ( а → a ) CYRILLIC SMALL LETTER A → LATIN SMALL LETTER A	#

i.e. source code point(s), target code point(s) and a comment whose
description part is ``<from> → <to>``, preceded by the literal glyphs in
parentheses. The project amendments file uses the same format.
"""

from __future__ import annotations

import logging
import re
from typing import IO, Iterable, List, Union

from confusable_guard.errors import IgnoreLine, MalformedLine
from confusable_guard.models import ConfusableEntry, Description
from confusable_guard.store import MappingStore
from confusable_guard.telemetry import metrics

log = logging.getLogger(__name__)

LineSource = Union[IO[str], IO[bytes], Iterable[str], Iterable[bytes]]

_ARROW = "→"
_BOM = "\ufeff"

# "( src → tgt ) " ahead of the names; glyphs may themselves be ")" so the
# section ends at the first ")" followed by whitespace and an uppercase name.
_GLYPHS_RE = re.compile(r"^\(.*?\)\s+(?=[A-Z])", re.DOTALL)

# Bidi marks upstream puts around right-to-left glyphs.
_BIDI_MARKS_RE = re.compile("[\u200e\u200f]")


def _code_points(field: str, line: str, what: str) -> List[str]:
    parts = field.split()
    if not parts:
        raise MalformedLine(line, f"missing {what} code point")
    runes: List[str] = []
    for part in parts:
        try:
            runes.append(chr(int(part, 16)))
        except ValueError:
            raise MalformedLine(line, f"invalid {what} code point {part!r}") from None
    return runes


def _description(comment: str, line: str) -> Description:
    text = _BIDI_MARKS_RE.sub("", comment).strip()
    text = _GLYPHS_RE.sub("", text, count=1)
    # the "to" side ends at the trailing "#" comment marker
    text = text.split("#", 1)[0]
    parts = text.split(_ARROW)
    if len(parts) != 2:
        raise MalformedLine(line, "description must be '<from> → <to>'")
    source, target = (p.strip() for p in parts)
    if not source or not target:
        raise MalformedLine(line, "empty description")
    return Description(source, target)


def parse_line(line: str) -> ConfusableEntry:
    """Parse one line.

    Raises ``IgnoreLine`` for blank and ``#`` comment lines, and
    ``MalformedLine`` when a data line lacks fields or has bad hex.
    """
    stripped = line.lstrip(_BOM).strip()
    if not stripped or stripped.startswith("#"):
        raise IgnoreLine(line)

    fields = stripped.split(";", 2)
    if len(fields) != 3:
        raise MalformedLine(line, "expected three ';' separated fields")
    src_field, dst_field, rest = fields

    sources = _code_points(src_field, line, "source")
    targets = _code_points(dst_field, line, "target")

    if "#" not in rest:
        raise MalformedLine(line, "missing '#' description comment")
    # some upstream entries open the comment with "#*"
    comment = rest.split("#", 1)[1].lstrip("*")

    # only single code point sources are supported; the rest are dropped
    return ConfusableEntry(
        source=sources[0],
        target="".join(targets),
        description=_description(comment, line),
    )


def _decode(raw: Union[str, bytes]) -> str:
    """One line as text. Binary streams iterate as bytes lines and land here."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            text = raw.decode("utf-8", errors="replace").rstrip("\r\n")
            raise MalformedLine(text, f"invalid UTF-8 ({exc.reason})") from None
    return raw.rstrip("\r\n")


def load_mappings(source: LineSource, store: MappingStore, *, name: str = "stream") -> int:
    """Add every entry of ``source`` to ``store`` and return how many were added.

    Later lines override earlier ones for the same source rune. A malformed
    line aborts the load; entries added before it stay in the store.
    """
    loaded = 0
    skipped = 0
    try:
        for line_no, raw in enumerate(source, start=1):
            try:
                entry = parse_line(_decode(raw))
            except IgnoreLine:
                skipped += 1
                continue
            except MalformedLine as exc:
                raise exc.at(line_no) from None
            store.add_with_description(
                entry.source,
                entry.target,
                entry.description.source,
                entry.description.target,
            )
            loaded += 1
    except MalformedLine as exc:
        metrics.load_errors_total.labels(name).inc()
        log.warning(
            "mapping load aborted",
            extra={"source": name, "loaded": loaded, "error": str(exc)},
        )
        raise
    finally:
        metrics.entries_loaded_total.labels(name).inc(loaded)
        metrics.lines_skipped_total.labels(name).inc(skipped)

    log.info("loaded %d mappings from %s", loaded, name)
    log.debug("skipped %d non-data lines from %s", skipped, name)
    return loaded
