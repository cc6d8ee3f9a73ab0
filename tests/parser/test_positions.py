"""Tests for offset to line/column mapping."""

from __future__ import annotations

import pytest

from rescodegen.parser._internal.diagnostics import Diagnostics
from rescodegen.parser._internal.positions import PositionIndex
from rescodegen.parser.models import Position

SWEEP_SOURCE = "open TurboModule\n\ntype spec = {\n\n  getValue: () => string,\n}\n\n"


class TestLocate:
    """PositionIndex.locate()"""

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [
            (0, Position(1, 0)),
            (2, Position(1, 2)),
            (3, Position(2, 0)),
            (5, Position(2, 2)),
        ],
    )
    def test_given_offset_when_locate_then_line_and_column(
        self, offset: int, expected: Position
    ) -> None:
        index = PositionIndex("ab\ncd")

        assert index.locate(offset) == expected

    @pytest.mark.parametrize("offset", range(len(SWEEP_SOURCE) + 1))
    def test_given_any_offset_when_locate_then_within_bounds(self, offset: int) -> None:
        # Given
        index = PositionIndex(SWEEP_SOURCE)
        lines = SWEEP_SOURCE.split("\n")

        # When
        position = index.locate(offset)

        # Then
        assert 1 <= position.line <= index.line_count
        assert 0 <= position.column <= len(lines[position.line - 1])
        line_start = sum(len(line) + 1 for line in lines[: position.line - 1])
        assert line_start + position.column == offset
        assert not index.diagnostics

    def test_given_end_offset_when_locate_then_last_line_end(self) -> None:
        index = PositionIndex(SWEEP_SOURCE)

        assert index.locate(len(SWEEP_SOURCE)) == Position(index.line_count, 0)

    def test_given_offset_past_end_when_locate_then_clamped_to_end(self) -> None:
        index = PositionIndex("ab\ncd")

        assert index.locate(99) == Position(2, 2)

    def test_given_negative_offset_when_locate_then_origin_and_diagnostic(self) -> None:
        # Given
        diagnostics = Diagnostics()
        index = PositionIndex("ab\ncd", diagnostics=diagnostics)

        # When
        result = index.locate(-4)

        # Then
        assert result == Position(1, 0)
        assert len(diagnostics) == 1
        record = diagnostics.records[0]
        assert record.position == -4
        assert "negative offset" in record.message

    def test_given_empty_source_when_locate_then_origin(self) -> None:
        index = PositionIndex("")

        assert index.locate(0) == Position(1, 0)
        assert index.line_count == 1

    def test_given_crlf_when_locate_then_carriage_return_is_a_column(self) -> None:
        index = PositionIndex("a\r\nb")

        assert index.locate(1) == Position(1, 1)
        assert index.locate(3) == Position(2, 0)


class TestSpans:
    """Clamped loc/range builders."""

    def test_range_clamps_to_text(self) -> None:
        index = PositionIndex("ab\ncd")

        assert index.range(-3, 99) == [0, 5]

    def test_range_end_never_before_start(self) -> None:
        index = PositionIndex("ab\ncd")

        assert index.range(4, 2) == [4, 4]

    def test_loc_clamps_lines_and_columns(self) -> None:
        index = PositionIndex("ab\ncd", "f.res")

        loc = index.loc(0, -2, 9, 3)

        assert loc == {
            "source": "f.res",
            "start": {"line": 1, "column": 0},
            "end": {"line": 2, "column": 3},
        }

    def test_span_covers_offsets(self) -> None:
        index = PositionIndex("ab\ncd")

        span = index.span(1, 4)

        assert span["range"] == [1, 4]
        assert span["loc"]["start"] == {"line": 1, "column": 1}
        assert span["loc"]["end"] == {"line": 2, "column": 1}

    def test_synthetic_span_is_origin(self) -> None:
        index = PositionIndex("ab\ncd", "f.res")

        span = index.synthetic_span()

        assert span["range"] == [0, 0]
        assert span["loc"]["source"] == "f.res"
        assert span["loc"]["start"] == span["loc"]["end"] == {"line": 1, "column": 0}

    def test_program_loc_ends_at_last_line(self) -> None:
        index = PositionIndex("ab\ncdef")

        assert index.program_loc()["end"] == {"line": 2, "column": 4}


class TestReport:
    def test_report_records_located_diagnostic(self) -> None:
        # Given
        index = PositionIndex("ab\ncd")

        # When
        record = index.report("something failed", 4)

        # Then
        assert (record.line, record.column, record.position) == (2, 1, 4)
        assert index.diagnostics.records == [record]

    def test_each_index_owns_its_diagnostics(self) -> None:
        first = PositionIndex("a")
        second = PositionIndex("b")

        first.report("only here", 0)

        assert len(first.diagnostics) == 1
        assert not second.diagnostics
