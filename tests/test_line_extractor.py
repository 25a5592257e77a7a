"""Unit tests for colextract.line_extractor."""

import re

import pytest

from colextract.column_spec import Range, Single
from colextract.exceptions import DelimiterError
from colextract.line_extractor import (
    build_request,
    compile_delimiter,
    extract_fields,
    extract_line,
    resolve_index,
    split_columns,
)

WHITESPACE = re.compile(r"\s+")


def fields(line, *specs, delimiter=r"\s+"):
    return extract_fields(line, build_request(specs, delimiter))


# ---------------------------------------------------------------------------
# split_columns
# ---------------------------------------------------------------------------


class TestSplitColumns:
    def test_trims_leading_and_trailing_empty_columns(self):
        assert split_columns("  a b  ", WHITESPACE) == ["a", "b"]

    def test_keeps_interior_empty_columns(self):
        assert split_columns(":a::b:", re.compile(":")) == ["a", "", "b"]

    def test_trims_runs_of_empty_columns(self):
        assert split_columns("::a:b::", re.compile(":")) == ["a", "b"]

    def test_empty_line(self):
        assert split_columns("", WHITESPACE) == []
        assert split_columns("   ", WHITESPACE) == []


class TestResolveIndex:
    def test_positive_is_one_based(self):
        assert resolve_index(1, 3) == 0
        assert resolve_index(3, 3) == 2

    def test_negative_counts_from_end(self):
        assert resolve_index(-1, 3) == 2
        assert resolve_index(-3, 3) == 0
        assert resolve_index(-4, 3) == -1

    def test_zero_is_never_a_position(self):
        assert resolve_index(0, 3) == -1


# ---------------------------------------------------------------------------
# Single columns
# ---------------------------------------------------------------------------


class TestSingleColumns:
    def test_positive(self):
        assert fields("a b c", Single(1), Single(3)) == ["a", "c"]

    def test_negative(self):
        assert fields("a b c", Single(-1), Single(-2)) == ["c", "b"]

    def test_negative_matches_positive(self):
        line = "one two three four"
        for k in range(1, 5):
            assert fields(line, Single(-k)) == fields(line, Single(4 - k + 1))

    def test_column_zero_is_raw_line(self):
        line = "  a   b  "
        assert fields(line, Single(0)) == [line]

    def test_column_zero_on_empty_line(self):
        assert fields("", Single(0)) == [""]

    def test_out_of_bounds_is_silent(self):
        assert fields("a b c", Single(4)) == []
        assert fields("a b c", Single(-4)) == []
        assert fields("", Single(1), Single(-1)) == []

    def test_duplicates_and_order(self):
        assert fields("a b c", Single(3), Single(1), Single(3)) == ["c", "a", "c"]

    def test_index_after_trimming(self):
        assert fields("   a b", Single(1)) == ["a"]

    def test_interior_empty_column_is_counted(self):
        assert fields("a::c", Single(2), Single(3), delimiter=":") == ["", "c"]

    def test_huge_indices(self):
        assert fields("a b", Single(2**63 - 1), Single(-(2**63))) == []


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------


class TestRanges:
    def test_ascending(self):
        assert fields("a b c d e", Range(2, 4)) == ["b", "c", "d"]

    def test_end_clamped(self):
        assert fields("a b c d e", Range(3, 1000)) == ["c", "d", "e"]
        assert fields("a b c d e", Range(3, 1000)) == fields("a b c d e", Range(3, 5))

    def test_start_out_of_bounds_skips_range(self):
        assert fields("a b c", Range(5, 2)) == []
        assert fields("a b c", Range(4, 10)) == []
        assert fields("a b c", Range(-10, 2)) == []

    def test_descending_negative(self):
        assert fields("a b c d e", Range(-1, -3)) == ["e", "d", "c"]

    def test_mixed_signs(self):
        assert fields("a b c d e", Range(-3, 1)) == ["c", "b", "a"]
        assert fields("a b c d e", Range(2, -2)) == ["b", "c", "d"]

    def test_descending_end_clamped_to_first_column(self):
        assert fields("a b c", Range(2, -10)) == ["b", "a"]

    def test_zero_endpoints_use_split_columns(self):
        assert fields("a b c", Range(0, 2)) == []
        assert fields("a b c", Range(2, 0)) == ["b", "a"]

    def test_single_position_range(self):
        assert fields("a b c", Range(2, 2)) == ["b"]

    def test_empty_line(self):
        assert fields("", Range(1, 1000)) == []


# ---------------------------------------------------------------------------
# extract_line and request building
# ---------------------------------------------------------------------------


class TestExtractLine:
    def test_passwd_example(self):
        request = build_request([Single(1), Single(5)], ":", "!!!")
        line = "root:x:0:0:System Administrator:/root:/bin/bash"
        assert extract_line(line, request) == "root!!!System Administrator"

    def test_default_whitespace(self):
        assert extract_line("a b c", build_request([Single(-1), Single(-2)])) == "c b"

    def test_range_example(self):
        assert extract_line("a b c d e", build_request([Range(3, 1000)])) == "c d e"

    def test_whole_line_identity(self):
        assert extract_line("hello world", build_request([Single(0)])) == "hello world"

    def test_mixed_whole_line_and_columns(self):
        assert extract_line("a b", build_request([Single(2), Single(0)], separator="|")) == "b|a b"

    def test_nothing_selected_gives_empty_line(self):
        assert extract_line("a b", build_request([Single(9)])) == ""

    def test_regex_delimiter(self):
        request = build_request([Single(2), Single(1)], r"[,;]\s*", ",")
        assert extract_line("x, y;z", request) == "y,x"

    def test_request_is_reusable_across_lines(self):
        request = build_request([Single(-1)])
        assert extract_line("a b c", request) == "c"
        assert extract_line("a", request) == "a"
        assert extract_line("a b c d", request) == "d"


class TestCompileDelimiter:
    def test_invalid_regex(self):
        with pytest.raises(DelimiterError, match="invalid delimiter regex"):
            compile_delimiter("(")

    def test_valid_regex(self):
        assert compile_delimiter(":").pattern == ":"
