"""Texture search: query grammar, text matching and structured filters."""

from material_inspector.search.ast_nodes import ComparisonTerm, SearchTerm, TextQuery
from material_inspector.search.filters import (
    ColorSpaceFilter,
    StructuredFilterConfig,
    apply_filters,
    filter_structured,
    matches_structured,
)
from material_inspector.search.parser import parse_comparison, parse_query, parse_term
from material_inspector.search.query import filter_by_text, match_search_term, match_term

__all__ = [
    "ColorSpaceFilter",
    "ComparisonTerm",
    "SearchTerm",
    "StructuredFilterConfig",
    "TextQuery",
    "apply_filters",
    "filter_by_text",
    "filter_structured",
    "match_search_term",
    "match_term",
    "matches_structured",
    "parse_comparison",
    "parse_query",
    "parse_term",
]
