"""Unit tests for configuration."""

from pathlib import Path

import pytest

from material_inspector.config import Config, load_config, save_config
from material_inspector.exceptions import ConfigParseError, ConfigValidationError
from material_inspector.search.filters import ColorSpaceFilter


def test_default_config() -> None:
    """Test that default config has sensible values."""
    config = Config()
    assert config.colored_output is True
    assert config.min_resolution == 0
    assert config.max_resolution == 8192
    assert config.color_space is ColorSpaceFilter.ALL
    assert config.validate() == []


def test_load_missing_config(temp_dir: Path) -> None:
    """Test loading when config file doesn't exist."""
    config, warnings = load_config(temp_dir / "nonexistent.toml")

    assert config.config_path is None
    assert any("init-config" in w for w in warnings)


def test_load_valid_config(sample_config: Path) -> None:
    """Test loading a valid config file."""
    config, warnings = load_config(sample_config)

    assert warnings == []
    assert config.colored_output is False
    assert config.min_resolution == 256
    assert config.max_resolution == 4096
    assert config.color_space is ColorSpaceFilter.LINEAR
    assert config.format_filter == "dxt"
    assert config.config_path == sample_config.resolve()


def test_load_invalid_toml(temp_dir: Path) -> None:
    """Test loading invalid TOML raises error."""
    config_path = temp_dir / "invalid.toml"
    config_path.write_text("this is not valid [ toml")

    with pytest.raises(ConfigParseError):
        load_config(config_path)


@pytest.mark.parametrize(
    ("content", "key"),
    [
        ('[display]\ncolored_output = "yes"\n', "display.colored_output"),
        ('[filters]\nmin_resolution = "big"\n', "filters.min_resolution"),
        ("[filters]\nmax_resolution = true\n", "filters.max_resolution"),
        ('[filters]\ncolor_space = "cmyk"\n', "filters.color_space"),
        ("[filters]\nformat_filter = 5\n", "filters.format_filter"),
    ],
)
def test_config_validation_invalid_type(temp_dir: Path, content: str, key: str) -> None:
    """Test that invalid types raise validation error."""
    config_path = temp_dir / "bad_types.toml"
    config_path.write_text(content)

    with pytest.raises(ConfigValidationError) as exc_info:
        load_config(config_path)
    assert exc_info.value.key == key


def test_out_of_order_bounds_warn() -> None:
    config = Config(min_resolution=-5, max_resolution=-10)
    warnings = config.validate()
    assert len(warnings) == 2


def test_filter_config_from_defaults() -> None:
    filters = Config().filter_config()
    assert filters.resolution_bounds() == (0, 8192)
    assert filters.filter_by_color_space is False
    assert filters.filter_by_format is False


def test_filter_config_enables_configured_filters(sample_config: Path) -> None:
    config, _ = load_config(sample_config)
    filters = config.filter_config()
    assert filters.resolution_bounds() == (256, 4096)
    assert filters.filter_by_color_space is True
    assert filters.color_space is ColorSpaceFilter.LINEAR
    assert filters.filter_by_format is True
    assert filters.format_filter == "dxt"


def test_save_and_reload(temp_dir: Path) -> None:
    config = Config(
        colored_output=False,
        min_resolution=128,
        max_resolution=2048,
        color_space=ColorSpaceFilter.NORMAL_MAPS,
        format_filter="bc5",
    )
    path = temp_dir / "nested" / "config.toml"
    save_config(config, path)

    loaded, warnings = load_config(path)
    assert warnings == []
    assert loaded.colored_output is False
    assert loaded.min_resolution == 128
    assert loaded.max_resolution == 2048
    assert loaded.color_space is ColorSpaceFilter.NORMAL_MAPS
    assert loaded.format_filter == "bc5"
