"""Evaluate parsed search queries against texture records."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from operator import attrgetter

from material_inspector.search.ast_nodes import OR_MODE, SearchTerm
from material_inspector.search.parser import parse_query, parse_term
from material_inspector.textures.models import TextureRecord


def _color_space_text(record: TextureRecord) -> str:
    return "linear" if record.import_info.is_linear else "srgb"


def _crunched_text(record: TextureRecord) -> str:
    return "crunched" if record.import_info.is_crunched else ""


def _normal_map_text(record: TextureRecord) -> str:
    return "normal" if record.import_info.is_normal_map else ""


# Text fields searched by plain (non-comparison) terms, in match order.
SEARCH_FIELDS: tuple[Callable[[TextureRecord], str], ...] = (
    attrgetter("texture_name"),
    attrgetter("asset_path"),
    attrgetter("display_name"),
    attrgetter("property_name"),
    attrgetter("pixel_format"),
    attrgetter("size_label"),
    lambda record: str(record.width),
    lambda record: str(record.height),
    _color_space_text,
    _crunched_text,
    _normal_map_text,
    lambda record: record.import_info.compression_quality,
)


def _matches_text(record: TextureRecord, text: str) -> bool:
    needle = text.lower()
    return any(needle in (extract(record) or "").lower() for extract in SEARCH_FIELDS)


def match_search_term(record: TextureRecord, term: SearchTerm) -> bool:
    """Return whether a parsed term matches a record."""
    if term.comparison is not None:
        matches = term.comparison.evaluate(record.max_dimension)
    else:
        matches = _matches_text(record, term.text)
    return matches != term.negated


def match_term(record: TextureRecord, term: str) -> bool:
    """Return whether one raw term (``!`` marker included) matches a record."""
    return match_search_term(record, parse_term(term))


def filter_by_text(records: Iterable[TextureRecord], query: str) -> list[TextureRecord]:
    """Filter records with a search query, preserving their order.

    Args:
        records: Texture records in display order.
        query: Raw search text. ``|`` separates OR terms; otherwise ``,``
            separates AND terms.

    Returns:
        The matching records. A blank query, or one that contains only
        separators, returns every record.
    """
    records = list(records)
    parsed = parse_query(query)
    # A bare "|" keeps everything too, not the empty result of an OR over no terms.
    if parsed is None or not parsed.terms:
        return records

    terms = parsed.terms
    if parsed.mode == OR_MODE:
        return [r for r in records if any(match_search_term(r, t) for t in terms)]
    return [r for r in records if all(match_search_term(r, t) for t in terms)]
