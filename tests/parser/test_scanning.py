"""Tests for balanced-delimiter scanning."""

from __future__ import annotations

import pytest

from rescodegen.parser._internal.scanning import (
    balance,
    find_matching,
    find_top_level_arrow,
    split_function_signature,
)


class TestFindMatching:
    @pytest.mark.parametrize(
        ("text", "open_index", "expected"),
        [
            ("(a(b)c)", 0, 6),
            ("(a(b)c)", 2, 4),
            ("(a", 0, None),
            ("x", 0, None),
            ("", 0, None),
        ],
    )
    def test_matching_paren(self, text: str, open_index: int, expected: int | None) -> None:
        assert find_matching(text, open_index) == expected

    def test_angle_brackets(self) -> None:
        assert find_matching("<a<b>>", 0, "<", ">") == 5


class TestBalance:
    def test_counts_openers_minus_closers(self) -> None:
        assert balance("((a)") == 1
        assert balance(") => unit") == -1


class TestFindTopLevelArrow:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("unit => string", 5),
            ("(a => b) => c", 9),
            ("(a => b)", None),
            ("array<a => b>", None),
            ("string", None),
        ],
    )
    def test_first_arrow_outside_groups(self, text: str, expected: int | None) -> None:
        assert find_top_level_arrow(text) == expected


class TestSplitFunctionSignature:
    def test_splits_params_and_return(self) -> None:
        assert split_function_signature("(string, unit) => unit") == ("string, unit", "unit")

    def test_nested_parens_in_params(self) -> None:
        result = split_function_signature("((string) => unit) => option<string>")

        assert result == ("(string) => unit", "option<string>")

    def test_empty_params(self) -> None:
        assert split_function_signature("() => string") == ("", "string")

    @pytest.mark.parametrize("text", ["(string)", "string => unit", "(string", "(a) b"])
    def test_not_a_parenthesized_function(self, text: str) -> None:
        assert split_function_signature(text) is None
