"""Offset to line/column mapping and clamped span builders."""

from __future__ import annotations

from typing import Any

from rescodegen.core.logging import get_logger
from rescodegen.parser._internal.diagnostics import Diagnostics
from rescodegen.parser.models import ErrorRecord, Position

log = get_logger("parser.positions")


class PositionIndex:
    """Maps flat offsets in one source text to (line, column).

    Lines are split on ``"\\n"`` only; each separator occupies one offset.
    Every ``loc``/``range`` produced here is clamped to the text, so nodes
    built from approximate offsets still satisfy the span bounds.
    """

    def __init__(
        self,
        source: str,
        filename: str | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self.source = source
        self.filename = filename
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.lines = source.split("\n")
        self.length = len(source)
        # Offset of the first character of each line.
        self._line_starts: list[int] = []
        offset = 0
        for line in self.lines:
            self._line_starts.append(offset)
            offset += len(line) + 1

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def locate(self, offset: int) -> Position:
        """Resolve an offset to a 1-based line and 0-based column.

        Offsets past the end resolve to the end of the last line. A negative
        offset resolves to (1, 0) and is recorded as a diagnostic.
        """
        if offset < 0:
            self.diagnostics.add(
                ErrorRecord(
                    message=f"Position lookup error: negative offset {offset}",
                    line=1,
                    column=0,
                    position=offset,
                )
            )
            return Position(1, 0)
        offset = min(offset, self.length)
        for i, line in enumerate(self.lines):
            start = self._line_starts[i]
            if start + len(line) >= offset:
                return Position(i + 1, offset - start)
        # Unreachable for offset <= length; kept as the safest default.
        return Position(self.line_count, len(self.lines[-1]))

    def report(self, message: str, position: int) -> ErrorRecord:
        """Record a diagnostic at ``position``."""
        pos = self.locate(max(position, 0))
        record = ErrorRecord(message=message, line=pos.line, column=pos.column, position=position)
        self.diagnostics.add(record)
        log.debug("diagnostic_recorded", message=message, line=pos.line, column=pos.column)
        return record

    def loc(self, start_line: int, start_col: int, end_line: int, end_col: int) -> dict[str, Any]:
        max_line = self.line_count
        return {
            "source": self.filename,
            "start": {"line": max(1, min(start_line, max_line)), "column": max(0, start_col)},
            "end": {"line": max(1, min(end_line, max_line)), "column": max(0, end_col)},
        }

    def range(self, start: int, end: int) -> list[int]:
        safe_start = max(0, min(start, self.length))
        safe_end = max(safe_start, min(end, self.length))
        return [safe_start, safe_end]

    def span(self, start: int, end: int) -> dict[str, Any]:
        """``loc`` and ``range`` for the offsets ``[start, end)``."""
        safe_start, safe_end = self.range(start, end)
        first = self.locate(safe_start)
        last = self.locate(safe_end)
        return {
            "loc": self.loc(first.line, first.column, last.line, last.column),
            "range": [safe_start, safe_end],
        }

    def synthetic_span(self) -> dict[str, Any]:
        """Span for nodes with no source text of their own (type annotations)."""
        return {"loc": self.loc(1, 0, 1, 0), "range": self.range(0, 0)}

    def program_loc(self) -> dict[str, Any]:
        return self.loc(1, 0, self.line_count, len(self.lines[-1]))
