"""Parse texture search queries.

Grammar summary:
    - ``a|b|c``: keep textures matching any term (pipe wins over comma)
    - ``a,b,c``: keep textures matching every term
    - ``!term``: negate a term
    - ``>2048``, ``<1024``, ``>=512``, ``<=4096``, ``=1024``: compare the
      larger texture dimension against a number
    - ``2048<`` (smaller than the texture), ``2048>`` (bigger than the texture)
    - anything else: case-insensitive substring search
"""

from __future__ import annotations

import logging
from importlib import resources
from typing import Any

from lark import Lark, Token, Transformer, UnexpectedInput

from material_inspector.search.ast_nodes import (
    AND_MODE,
    OR_MODE,
    ComparisonTerm,
    SearchTerm,
    TextQuery,
)

logger = logging.getLogger(__name__)

NEGATE_MARKER = "!"
OR_SEPARATOR = "|"
AND_SEPARATOR = ","

# Largest value a comparison accepts; longer digit runs are searched as text.
MAX_COMPARISON_VALUE = 2**31 - 1

# Postfix "N<" reads "N is smaller than the texture", i.e. measure > N.
_POSTFIX_REVERSED: dict[str, str] = {
    "<": ">",
    ">": "<",
}


def _load_grammar() -> str:
    """Load the Lark grammar from the package resources."""
    return resources.files("material_inspector.search").joinpath("grammar.lark").read_text()


_GRAMMAR_TEXT = _load_grammar()

_parser = Lark(_GRAMMAR_TEXT, parser="lalr")


class _ComparisonTransformer(Transformer):
    """Transform a comparison parse tree into a ComparisonTerm."""

    def start(self, items: list[Any]) -> ComparisonTerm:
        return items[0]

    def prefix_comparison(self, items: list[Any]) -> ComparisonTerm:
        op, number = items
        return ComparisonTerm(operator=op, value=int(number))

    def postfix_comparison(self, items: list[Any]) -> ComparisonTerm:
        number, op = items
        return ComparisonTerm(operator=_POSTFIX_REVERSED[op], value=int(number))

    def prefix_op(self, items: list[Any]) -> str:
        return str(items[0])

    def postfix_op(self, items: list[Any]) -> str:
        return str(items[0])

    def NUMBER(self, token: Token) -> str:
        return str(token)


_transformer = _ComparisonTransformer()


def parse_comparison(token: str) -> ComparisonTerm | None:
    """Parse a resolution comparison term.

    Args:
        token: A trimmed term with any ``!`` marker already removed.

    Returns:
        The ComparisonTerm, or None when the token is not a comparison
        (the caller then falls back to substring search). Never raises.
    """
    if not token:
        return None

    try:
        tree = _parser.parse(token)
    except UnexpectedInput:
        return None

    comparison = _transformer.transform(tree)
    if comparison.value > MAX_COMPARISON_VALUE:
        logger.debug("Comparison value out of range, searching as text: %s", token)
        return None
    return comparison


def parse_term(term: str) -> SearchTerm:
    """Parse one raw term: strip a leading ``!`` and detect comparisons."""
    negated = term.startswith(NEGATE_MARKER)
    actual = term[len(NEGATE_MARKER) :] if negated else term
    return SearchTerm(text=actual, negated=negated, comparison=parse_comparison(actual))


def split_terms(query_string: str) -> tuple[str, list[str]]:
    """Split a query into its mode and trimmed, non-empty raw terms."""
    if OR_SEPARATOR in query_string:
        mode, separator = OR_MODE, OR_SEPARATOR
    else:
        mode, separator = AND_MODE, AND_SEPARATOR
    pieces = (piece.strip() for piece in query_string.split(separator))
    return mode, [piece for piece in pieces if piece]


def parse_query(query_string: str) -> TextQuery | None:
    """Parse a search query string.

    Args:
        query_string: The raw search text.

    Returns:
        The parsed TextQuery, or None for an empty/blank query. A query
        made only of separators parses to a TextQuery with no terms.
    """
    if not query_string or not query_string.strip():
        return None

    mode, raw_terms = split_terms(query_string)
    return TextQuery(mode=mode, terms=[parse_term(t) for t in raw_terms])
