"""Error types raised by the mapping-file parser and the build tooling."""

from __future__ import annotations

from typing import Optional


class ConfusablesError(Exception):
    """Base class for confusable-guard failures."""


class IgnoreLine(Exception):
    """Signal that a mapping-file line carries no data (blank or comment).

    Not a ``ConfusablesError``: catching the package base never hides a skip.
    """


class MalformedLine(ConfusablesError, ValueError):
    """A mapping-file data line could not be parsed."""

    def __init__(self, line: str, reason: str, line_no: Optional[int] = None) -> None:
        self.line = line
        self.reason = reason
        self.line_no = line_no
        super().__init__(self._message())

    def _message(self) -> str:
        where = f"line {self.line_no}: " if self.line_no is not None else ""
        return f"{where}{self.reason}: {self.line!r}"

    def at(self, line_no: int) -> "MalformedLine":
        """Return a copy annotated with the 1-based line number."""
        return MalformedLine(self.line, self.reason, line_no)


class DataFetchError(ConfusablesError):
    """Upstream confusables data could not be downloaded."""
