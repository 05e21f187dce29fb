"""Shared pytest fixtures."""

from __future__ import annotations

import json
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from material_inspector.textures.models import ImportInfo, TextureRecord

if TYPE_CHECKING:
    from collections.abc import Generator


def make_record(
    name: str,
    width: int = 1024,
    height: int | None = None,
    *,
    display_name: str = "Texture",
    property_name: str = "_MainTex",
    asset_path: str | None = None,
    pixel_format: str = "RGBA_DXT5_SRGB",
    is_crunched: bool = False,
    is_normal_map: bool = False,
    is_linear: bool = False,
    crunch_quality: int = 0,
    compression_quality: str = "",
) -> TextureRecord:
    """Build a TextureRecord with sensible defaults."""
    if asset_path is None:
        asset_path = f"Assets/Textures/{name}.png"
    return TextureRecord(
        texture_id=asset_path or name,
        display_name=display_name,
        property_name=property_name,
        texture_name=name,
        asset_path=asset_path,
        width=width,
        height=width if height is None else height,
        pixel_format=pixel_format,
        import_info=ImportInfo(
            is_crunched=is_crunched,
            is_normal_map=is_normal_map,
            is_linear=is_linear,
            crunch_quality=crunch_quality,
            compression_quality=compression_quality,
        ),
    )


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def albedo() -> TextureRecord:
    return make_record(
        "Albedo_01",
        1024,
        display_name="Base Map",
        property_name="_BaseMap",
        is_crunched=True,
        crunch_quality=50,
        compression_quality="Normal Quality",
    )


@pytest.fixture
def normal() -> TextureRecord:
    return make_record(
        "Normal_01",
        2048,
        display_name="Normal Map",
        property_name="_BumpMap",
        pixel_format="RGBA_DXT5_UNorm",
        is_linear=True,
        is_normal_map=True,
        compression_quality="High Quality",
    )


@pytest.fixture
def two_records(albedo: TextureRecord, normal: TextureRecord) -> list[TextureRecord]:
    return [albedo, normal]


@pytest.fixture
def manifest_data() -> dict[str, Any]:
    """A material with an albedo, a normal map, a mask and an empty slot."""
    return {
        "material": "Rock_Mat",
        "path": "Assets/Materials/Rock_Mat.mat",
        "textures": [
            {
                "property": "_BaseMap",
                "display_name": "Base Map",
                "texture": {
                    "name": "Rock_Albedo",
                    "path": "Assets/Textures/Rock_Albedo.png",
                    "width": 2048,
                    "height": 1024,
                    "format": "RGBA_DXT5_SRGB",
                    "importer": {
                        "texture_type": "default",
                        "srgb": True,
                        "crunched": True,
                        "compression_quality": 75,
                        "compression": "compressed",
                    },
                },
            },
            {
                "property": "_BumpMap",
                "display_name": "Normal Map",
                "texture": {
                    "name": "Rock_N",
                    "path": "Assets/Textures/Rock_N.png",
                    "width": 1024,
                    "height": 1024,
                    "format": "RGBA_DXT5_UNorm",
                    "importer": {
                        "texture_type": "default",
                        "srgb": True,
                        "compression": "compressed_hq",
                    },
                },
            },
            {
                "property": "_DetailMask",
                "display_name": "Detail Mask",
                "texture": None,
            },
            {
                "property": "_MaskMap",
                "display_name": "Mask Map",
                "texture": {
                    "name": "Rock_Mask",
                    "path": "Assets/Textures/Rock_Mask.tga",
                    "width": 512,
                    "height": 256,
                    "format": "R8G8B8A8_UNorm",
                    "importer": {
                        "texture_type": "default",
                        "srgb": False,
                        "compression": "uncompressed",
                    },
                },
            },
        ],
    }


@pytest.fixture
def manifest_path(temp_dir: Path, manifest_data: dict[str, Any]) -> Path:
    """Write the sample manifest to disk."""
    path = temp_dir / "rock.json"
    path.write_text(json.dumps(manifest_data))
    return path


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[display]
colored_output = false

[filters]
min_resolution = 256
max_resolution = 4096
color_space = "linear"
format_filter = "dxt"
""")
    return config_path


@pytest.fixture
def make_texture():
    """Factory fixture for TextureRecord values (see ``make_record``)."""
    return make_record
