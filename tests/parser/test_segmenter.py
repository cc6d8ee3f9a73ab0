"""Tests for record body and parameter segmentation."""

from __future__ import annotations

import pytest

from rescodegen.parser._internal.positions import PositionIndex
from rescodegen.parser._internal.segmenter import SignatureSegmenter
from rescodegen.parser.models import MethodSignature, PropertySignature, SpreadMarker

MODULE_BODY = """
  ...turboModule,
  getString: (string) => string,
  multi: (
    string,
    unit
  ) => unit,
  ping: unit => unit
"""


class TestSegmentMethods:
    def test_given_module_body_when_segmented_then_methods_in_order(
        self, segmenter: SignatureSegmenter
    ) -> None:
        # When
        methods = segmenter.segment_methods(MODULE_BODY)

        # Then
        assert methods == [
            MethodSignature("getString", "(string) => string"),
            MethodSignature("multi", "( string, unit ) => unit"),
            MethodSignature("ping", "unit => unit"),
        ]

    def test_given_spread_lines_when_segmented_then_skipped(
        self, segmenter: SignatureSegmenter
    ) -> None:
        methods = segmenter.segment_methods("\n  ...TurboModule.turboModule,\n")

        assert methods == []

    def test_given_strip_disabled_when_single_line_then_comma_kept(
        self, index: PositionIndex
    ) -> None:
        # Given
        segmenter = SignatureSegmenter(index, strip_trailing_commas=False)

        # When
        methods = segmenter.segment_methods("  getString: (string) => string,\n")

        # Then
        assert methods == [MethodSignature("getString", "(string) => string,")]

    def test_given_unclosed_group_when_segmented_then_partial_signature_kept(
        self, segmenter: SignatureSegmenter
    ) -> None:
        methods = segmenter.segment_methods("  broken: (\n    string,\n")

        assert methods == [MethodSignature("broken", "( string")]

    def test_given_name_without_signature_when_segmented_then_dropped(
        self, segmenter: SignatureSegmenter
    ) -> None:
        assert segmenter.segment_methods("  empty:\n") == []


class TestSegmentProperties:
    def test_given_props_body_when_segmented_then_spread_and_properties(
        self, segmenter: SignatureSegmenter
    ) -> None:
        # Given
        body = """
  ...View.viewProps,
  title: string,
  subtitle?: option<string>,
  onPress: unit => unit
"""

        # When
        entries = segmenter.segment_properties(body)

        # Then
        assert entries == [
            SpreadMarker("View", "viewProps"),
            PropertySignature("title", "string"),
            PropertySignature("subtitle", "option<string>", optional=True),
            PropertySignature("onPress", "unit => unit"),
        ]

    def test_given_unrecognized_lines_when_segmented_then_ignored(
        self, segmenter: SignatureSegmenter
    ) -> None:
        entries = segmenter.segment_properties("  // comment\n  size: string\n")

        assert entries == [PropertySignature("size", "string")]


class TestSplitParameters:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("string, unit", ["string", "unit"]),
            ("string, (a, b) => unit", ["string", "(a, b) => unit"]),
            (
                "Js.Dict.t<string>, option<array<string>>",
                ["Js.Dict.t<string>", "option<array<string>>"],
            ),
            ("string => unit, string", ["string => unit", "string"]),
            ("string,", ["string"]),
            ("", []),
            ("  ", []),
        ],
    )
    def test_splits_on_top_level_commas(
        self, segmenter: SignatureSegmenter, text: str, expected: list[str]
    ) -> None:
        assert segmenter.split_parameters(text) == expected
