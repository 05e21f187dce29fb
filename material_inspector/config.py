"""Configuration management for material-inspector."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from material_inspector.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)
from material_inspector.search.filters import (
    DEFAULT_MAX_RESOLUTION,
    DEFAULT_MIN_RESOLUTION,
    ColorSpaceFilter,
    StructuredFilterConfig,
)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "material-inspector" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        colored_output: Whether to use colored terminal output.
        min_resolution: Default lower bound of the resolution filter.
        max_resolution: Default upper bound of the resolution filter.
        color_space: Default color-space class. Anything other than
            ``all`` turns the color-space filter on.
        format_filter: Default pixel-format substring. Non-empty turns the
            format filter on.
        config_path: Path where config was loaded from (None if defaults).
    """

    colored_output: bool = True
    min_resolution: int = DEFAULT_MIN_RESOLUTION
    max_resolution: int = DEFAULT_MAX_RESOLUTION
    color_space: ColorSpaceFilter = ColorSpaceFilter.ALL
    format_filter: str = ""
    config_path: Path | None = None

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.
        """
        warnings: list[str] = []

        if self.min_resolution < 0:
            warnings.append(
                f"filters.min_resolution={self.min_resolution} is negative, using 0"
            )
        if self.max_resolution < max(0, self.min_resolution):
            warnings.append(
                f"filters.max_resolution={self.max_resolution} is below "
                f"min_resolution={self.min_resolution}, using min_resolution"
            )

        return warnings

    def filter_config(self) -> StructuredFilterConfig:
        """Build the default structured filter configuration."""
        return StructuredFilterConfig(
            min_resolution=self.min_resolution,
            max_resolution=self.max_resolution,
            filter_by_color_space=self.color_space is not ColorSpaceFilter.ALL,
            color_space=self.color_space,
            filter_by_format=bool(self.format_filter.strip()),
            format_filter=self.format_filter,
        )


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        # Use defaults
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: material-inspector init-config"
        )
        return config, warnings + config.validate()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    return config, warnings + config.validate()


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    # Parse [filters] section
    filters = data.get("filters", {})
    for key in ("min_resolution", "max_resolution"):
        if key in filters:
            value = filters[key]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigValidationError(f"filters.{key}", value, "must be an integer")
            setattr(config, key, value)

    if "color_space" in filters:
        value = filters["color_space"]
        try:
            config.color_space = ColorSpaceFilter(value)
        except ValueError as e:
            choices = ", ".join(c.value for c in ColorSpaceFilter)
            raise ConfigValidationError(
                "filters.color_space", value, f"must be one of: {choices}"
            ) from e

    if "format_filter" in filters:
        value = filters["format_filter"]
        if not isinstance(value, str):
            raise ConfigValidationError("filters.format_filter", value, "must be a string")
        config.format_filter = value

    return config


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {
        "display": {
            "colored_output": config.colored_output,
        },
        "filters": {
            "min_resolution": config.min_resolution,
            "max_resolution": config.max_resolution,
            "color_space": config.color_space.value,
        },
    }

    if config.format_filter:
        data["filters"]["format_filter"] = config.format_filter

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
