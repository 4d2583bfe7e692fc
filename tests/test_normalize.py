from __future__ import annotations

import pytest

from confusable_guard.normalize import is_ascii, is_nonspacing_mark, strip_marks


@pytest.mark.parametrize(
    "src, expected",
    [
        ("newtòñ", "newton"),
        ("café", "cafe"),
        ("é", "e"),
        ("h\u0335", "h"),
        ("\u0301", ""),
        ("日本", "日本"),
        ("", ""),
    ],
)
def test_strip_marks(src: str, expected: str) -> None:
    assert strip_marks(src) == expected


def test_strip_marks_keeps_spacing_letters() -> None:
    # the stroke in "ø" is not a decomposable mark
    assert strip_marks("ø") == "ø"


def test_strip_marks_idempotent() -> None:
    for text in ("Ångström", "ǅ", "ṩ", "plain"):
        once = strip_marks(text)
        assert strip_marks(once) == once


def test_is_ascii() -> None:
    assert is_ascii("")
    assert is_ascii("abc!\x7f")
    assert not is_ascii("naïve")


def test_is_nonspacing_mark() -> None:
    assert is_nonspacing_mark("\u0300")
    assert not is_nonspacing_mark("a")
    # spacing combining mark (Mc)
    assert not is_nonspacing_mark("\u0903")
