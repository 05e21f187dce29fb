"""Structured (non-text) texture filters applied after the text query."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, replace

from material_inspector.search.query import filter_by_text
from material_inspector.textures.models import TextureRecord

DEFAULT_MIN_RESOLUTION = 0
DEFAULT_MAX_RESOLUTION = 8192


class ColorSpaceFilter(enum.Enum):
    """Which color-space class of textures to keep."""

    ALL = "all"
    SRGB = "srgb"
    LINEAR = "linear"
    NORMAL_MAPS = "normal-maps"


@dataclass
class StructuredFilterConfig:
    """Toggle-gated filters for one search session.

    Attributes:
        filter_by_resolution: Keep only textures whose larger dimension is
            within ``[min_resolution, max_resolution]``.
        min_resolution: Lower bound, clamped to >= 0 when applied.
        max_resolution: Upper bound, clamped to >= the lower bound.
        filter_by_crunch: Filter on the crunch flag.
        show_only_crunched: With ``filter_by_crunch``, True keeps crunched
            textures and False keeps non-crunched ones.
        filter_by_color_space: Filter on ``color_space``.
        color_space: Color-space class to keep.
        filter_by_format: Filter on ``format_filter``.
        format_filter: Case-insensitive pixel-format substring; ignored
            when blank.
    """

    filter_by_resolution: bool = True
    min_resolution: int = DEFAULT_MIN_RESOLUTION
    max_resolution: int = DEFAULT_MAX_RESOLUTION
    filter_by_crunch: bool = False
    show_only_crunched: bool = True
    filter_by_color_space: bool = False
    color_space: ColorSpaceFilter = ColorSpaceFilter.ALL
    filter_by_format: bool = False
    format_filter: str = ""

    def resolution_bounds(self) -> tuple[int, int]:
        """Return the clamped ``(min, max)`` resolution bounds."""
        low = max(0, self.min_resolution)
        high = max(low, self.max_resolution)
        return low, high

    def reset_resolution(self) -> None:
        self.min_resolution = DEFAULT_MIN_RESOLUTION
        self.max_resolution = DEFAULT_MAX_RESOLUTION

    def copy(self) -> StructuredFilterConfig:
        return replace(self)


def _matches_color_space(record: TextureRecord, color_space: ColorSpaceFilter) -> bool:
    info = record.import_info
    if color_space is ColorSpaceFilter.SRGB:
        return not info.is_linear and not info.is_normal_map
    if color_space is ColorSpaceFilter.LINEAR:
        return info.is_linear and not info.is_normal_map
    if color_space is ColorSpaceFilter.NORMAL_MAPS:
        return info.is_normal_map
    return True


def matches_structured(record: TextureRecord, config: StructuredFilterConfig) -> bool:
    """Return whether a record passes every enabled structured filter."""
    if config.filter_by_resolution:
        low, high = config.resolution_bounds()
        if not low <= record.max_dimension <= high:
            return False

    if config.filter_by_crunch and record.import_info.is_crunched != config.show_only_crunched:
        return False

    if config.filter_by_color_space and not _matches_color_space(record, config.color_space):
        return False

    if config.filter_by_format and config.format_filter.strip():
        if config.format_filter.lower() not in record.pixel_format.lower():
            return False

    return True


def filter_structured(
    records: Iterable[TextureRecord], config: StructuredFilterConfig
) -> list[TextureRecord]:
    """Apply the structured filters, preserving record order."""
    return [r for r in records if matches_structured(r, config)]


def apply_filters(
    records: Iterable[TextureRecord],
    query: str,
    config: StructuredFilterConfig,
) -> list[TextureRecord]:
    """Run the text query, then the structured filters."""
    return filter_structured(filter_by_text(records, query), config)
