"""Unit tests for search query parser."""

from __future__ import annotations

import pytest

from material_inspector.search.ast_nodes import AND_MODE, OR_MODE, ComparisonTerm
from material_inspector.search.parser import (
    MAX_COMPARISON_VALUE,
    parse_comparison,
    parse_query,
    parse_term,
    split_terms,
)

# ---------------------------------------------------------------------------
# Comparison terms
# ---------------------------------------------------------------------------


class TestPrefixComparison:
    @pytest.mark.parametrize(
        ("token", "operator", "value"),
        [
            (">2048", ">", 2048),
            ("<1024", "<", 1024),
            (">=512", ">=", 512),
            ("<=4096", "<=", 4096),
            ("=1024", "=", 1024),
            (">0", ">", 0),
        ],
    )
    def test_operators(self, token: str, operator: str, value: int) -> None:
        assert parse_comparison(token) == ComparisonTerm(operator=operator, value=value)

    def test_leading_zeros(self) -> None:
        assert parse_comparison("=0512") == ComparisonTerm("=", 512)


class TestPostfixComparison:
    def test_trailing_less_than_is_reversed(self) -> None:
        assert parse_comparison("2048<") == ComparisonTerm(">", 2048)

    def test_trailing_greater_than_is_reversed(self) -> None:
        assert parse_comparison("2048>") == ComparisonTerm("<", 2048)

    @pytest.mark.parametrize("token", ["2048>=", "2048<=", "2048="])
    def test_only_strict_postfix_operators(self, token: str) -> None:
        assert parse_comparison(token) is None


class TestNotAComparison:
    @pytest.mark.parametrize(
        "token",
        [
            "abc",
            "",
            "2048",
            ">",
            ">=",
            "> 2048",
            " >2048",
            ">2048 ",
            ">2048\n",
            "2048 <",
            ">>2048",
            "=>2048",
            "<2048>",
            ">20x48",
            ">-5",
            ">1.5",
            "1024x1024",
            ">٢٠",
        ],
    )
    def test_rejected(self, token: str) -> None:
        assert parse_comparison(token) is None

    def test_overflow_is_text(self) -> None:
        assert parse_comparison(f">{MAX_COMPARISON_VALUE}") == ComparisonTerm(
            ">", MAX_COMPARISON_VALUE
        )
        assert parse_comparison(f">{MAX_COMPARISON_VALUE + 1}") is None
        assert parse_comparison("99999999999999999999<") is None


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------


class TestParseTerm:
    def test_plain_text(self) -> None:
        term = parse_term("albedo")
        assert term.text == "albedo"
        assert term.negated is False
        assert term.comparison is None

    def test_negated_text(self) -> None:
        term = parse_term("!crunched")
        assert term.text == "crunched"
        assert term.negated is True
        assert term.comparison is None

    def test_negated_comparison(self) -> None:
        term = parse_term("!>=2048")
        assert term.negated is True
        assert term.comparison == ComparisonTerm(">=", 2048)

    def test_only_one_marker_is_stripped(self) -> None:
        term = parse_term("!!linear")
        assert term.negated is True
        assert term.text == "!linear"

    def test_lone_marker(self) -> None:
        term = parse_term("!")
        assert term.negated is True
        assert term.text == ""
        assert term.comparison is None


# ---------------------------------------------------------------------------
# Query splitting
# ---------------------------------------------------------------------------


class TestSplitTerms:
    def test_comma_is_and(self) -> None:
        assert split_terms("a, b ,c") == (AND_MODE, ["a", "b", "c"])

    def test_pipe_is_or(self) -> None:
        assert split_terms("a | b|c") == (OR_MODE, ["a", "b", "c"])

    def test_pipe_overrides_comma(self) -> None:
        assert split_terms("a,b|c") == (OR_MODE, ["a,b", "c"])

    def test_empty_pieces_dropped(self) -> None:
        assert split_terms("a,, ,b,") == (AND_MODE, ["a", "b"])
        assert split_terms("|a||") == (OR_MODE, ["a"])

    def test_inner_spaces_kept(self) -> None:
        assert split_terms("high quality, base map") == (
            AND_MODE,
            ["high quality", "base map"],
        )


class TestParseQuery:
    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_blank_query(self, query: str) -> None:
        assert parse_query(query) is None

    def test_single_term_is_and(self) -> None:
        q = parse_query("normal")
        assert q is not None
        assert q.mode == AND_MODE
        assert [t.text for t in q.terms] == ["normal"]

    def test_or_query(self) -> None:
        q = parse_query(">=2048|<512")
        assert q is not None
        assert q.mode == OR_MODE
        assert [t.comparison for t in q.terms] == [
            ComparisonTerm(">=", 2048),
            ComparisonTerm("<", 512),
        ]

    @pytest.mark.parametrize("query", ["|", ",", " | | ", " , "])
    def test_separators_only(self, query: str) -> None:
        q = parse_query(query)
        assert q is not None
        assert q.terms == []
