"""Mark stripping: NFD, drop non-spacing combining marks, NFC."""

from __future__ import annotations

import unicodedata


def is_ascii(text: str) -> bool:
    """True when every code point is below 0x80 (the empty string included)."""
    return all(ord(ch) < 0x80 for ch in text)


def is_nonspacing_mark(ch: str) -> bool:
    return unicodedata.category(ch) == "Mn"


def strip_marks(text: str) -> str:
    """Remove non-spacing combining marks, e.g. ``"newtòñ"`` -> ``"newton"``.

    Applied to whole strings and to single mapping targets such as
    ``"h\\u0335"``. Idempotent.
    """
    decomposed = unicodedata.normalize("NFD", text)
    kept = "".join(ch for ch in decomposed if not is_nonspacing_mark(ch))
    return unicodedata.normalize("NFC", kept)


def decompose(text: str) -> str:
    return unicodedata.normalize("NFD", text)


def compat_compose(text: str) -> str:
    return unicodedata.normalize("NFKC", text)
