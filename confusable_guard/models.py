from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Description:
    """Human-readable names for both sides of a substitution."""

    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.source} → {self.target}"


@dataclass(frozen=True)
class ConfusableEntry:
    """One parsed data line of a mapping file."""

    source: str
    target: str
    description: Description


@dataclass(frozen=True)
class MappingEntry:
    source: str
    target: str
    description: Optional[Description] = None


@dataclass(frozen=True)
class Diff:
    """Per code point record of a skeleton or ASCII fold.

    ``confusable`` is ``None`` when the code point was kept; ``description`` is
    ``None`` unless both sides have a known description.
    """

    rune: str
    confusable: Optional[str] = None
    description: Optional[Description] = None

    @property
    def changed(self) -> bool:
        return self.confusable is not None

    def output(self) -> str:
        return self.rune if self.confusable is None else self.confusable
