from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from confusable_guard.models import Diff


class TextRequest(BaseModel):
    text: str


class PairRequest(BaseModel):
    a: str
    b: str


class AsciiRequest(BaseModel):
    text: str
    diff: bool = False


class DiffItem(BaseModel):
    rune: str
    codepoint: str
    confusable: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_diff(cls, d: Diff) -> "DiffItem":
        return cls(
            rune=d.rune,
            codepoint=f"U+{ord(d.rune):04X}",
            confusable=d.confusable,
            description=None if d.description is None else str(d.description),
        )


class SkeletonResponse(BaseModel):
    text: str
    skeleton: str
    diff: List[DiffItem] = Field(default_factory=list)


class ConfusableResponse(BaseModel):
    confusable: bool
    skeleton_a: str
    skeleton_b: str


class AsciiResponse(BaseModel):
    text: str
    ascii: str
    diff: Optional[List[DiffItem]] = None


class NumberResponse(BaseModel):
    text: str
    number: str


class MappingResponse(BaseModel):
    rune: str
    codepoint: str
    confusable: str
    description: Optional[str] = None
