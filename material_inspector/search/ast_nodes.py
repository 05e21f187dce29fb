"""Data classes for parsed texture search queries."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field

OR_MODE = "or"
AND_MODE = "and"

_OPERATORS = {
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
    "=": operator.eq,
}


@dataclass(frozen=True)
class ComparisonTerm:
    """A resolution comparison such as ``>2048`` or ``1024<``.

    Always applied as ``measure <operator> value``; postfix forms are
    stored with their operator already reversed.
    """

    operator: str
    value: int

    def evaluate(self, measure: int) -> bool:
        compare = _OPERATORS.get(self.operator)
        if compare is None:
            return False
        return compare(measure, self.value)


@dataclass
class SearchTerm:
    """One term of a query, after the ``!`` marker has been stripped.

    ``comparison`` is set when the term is a resolution comparison;
    otherwise ``text`` is matched as a substring.
    """

    text: str
    negated: bool = False
    comparison: ComparisonTerm | None = None


@dataclass
class TextQuery:
    """Top-level query: either all terms OR-ed or all terms AND-ed."""

    mode: str = AND_MODE
    terms: list[SearchTerm] = field(default_factory=list)
