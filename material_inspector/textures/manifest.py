"""Load the texture slots of a material from a JSON manifest.

A manifest describes one material and its texture properties::

    {
      "material": "Rock_Mat",
      "path": "Assets/Materials/Rock_Mat.mat",
      "textures": [
        {
          "property": "_MainTex",
          "display_name": "Albedo",
          "texture": {
            "name": "Rock_Albedo",
            "path": "Assets/Textures/Rock_Albedo.png",
            "width": 2048,
            "height": 2048,
            "format": "RGBA_DXT5_SRGB",
            "importer": {"texture_type": "default", "srgb": true,
                         "crunched": true, "compression_quality": 50,
                         "compression": "compressed"}
          }
        },
        {"property": "_DetailMap", "display_name": "Detail", "texture": null}
      ]
    }

Slots whose texture is ``null`` are skipped.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from material_inspector.exceptions import (
    ManifestNotFoundError,
    ManifestParseError,
    ManifestReadError,
    ManifestValidationError,
)
from material_inspector.textures.import_info import derive_import_info
from material_inspector.textures.models import (
    ImporterSettings,
    Material,
    TextureCompression,
    TextureRecord,
)

logger = logging.getLogger(__name__)


def load_manifest(path: Path) -> Material:
    """Load a material manifest from a JSON file.

    Args:
        path: Path to the manifest file.

    Returns:
        The Material with its texture records in slot order.

    Raises:
        ManifestNotFoundError: If the file does not exist.
        ManifestReadError: If the path cannot be opened as a file.
        ManifestParseError: If the file is not UTF-8 encoded JSON.
        ManifestValidationError: If the content has the wrong shape.
    """
    path = path.expanduser()
    if not path.exists():
        raise ManifestNotFoundError(path)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestParseError(str(path), str(e)) from e
    except OSError as e:
        raise ManifestReadError(path, e.strerror or str(e)) from e

    return parse_manifest(data, source=str(path))


def parse_manifest(data: Any, source: str = "<manifest>") -> Material:
    """Build a Material from decoded manifest data."""
    if not isinstance(data, dict):
        raise ManifestValidationError("", data, "manifest must be a JSON object")

    name = _require_str(data, "material", "material")
    material_path = _optional_str(data, "path", "path")

    slots = data.get("textures", [])
    if not isinstance(slots, list):
        raise ManifestValidationError("textures", slots, "must be a list")

    records: list[TextureRecord] = []
    for i, slot in enumerate(slots):
        record = _parse_slot(slot, f"textures[{i}]")
        if record is not None:
            records.append(record)

    logger.debug("Loaded %d textures from %s", len(records), source)
    return Material(name=name, path=material_path, textures=records)


def _parse_slot(slot: Any, where: str) -> TextureRecord | None:
    if not isinstance(slot, dict):
        raise ManifestValidationError(where, slot, "must be an object")

    property_name = _require_str(slot, "property", f"{where}.property")
    display_name = _optional_str(slot, "display_name", f"{where}.display_name") or property_name

    texture = slot.get("texture")
    if texture is None:
        logger.debug("Skipping %s: no texture assigned", property_name)
        return None
    if not isinstance(texture, dict):
        raise ManifestValidationError(f"{where}.texture", texture, "must be an object or null")

    where = f"{where}.texture"
    texture_name = _require_str(texture, "name", f"{where}.name")
    asset_path = _optional_str(texture, "path", f"{where}.path")
    width = _require_size(texture, "width", f"{where}.width")
    height = _require_size(texture, "height", f"{where}.height")
    pixel_format = _optional_str(texture, "format", f"{where}.format")
    texture_id = _optional_str(texture, "id", f"{where}.id") or asset_path or texture_name

    importer = None
    if texture.get("importer") is not None:
        importer = _parse_importer(texture["importer"], f"{where}.importer")

    return TextureRecord(
        texture_id=texture_id,
        display_name=display_name,
        property_name=property_name,
        texture_name=texture_name,
        asset_path=asset_path,
        width=width,
        height=height,
        pixel_format=pixel_format,
        import_info=derive_import_info(texture_name, asset_path, importer),
    )


def _parse_importer(data: Any, where: str) -> ImporterSettings:
    if not isinstance(data, dict):
        raise ManifestValidationError(where, data, "must be an object")

    settings = ImporterSettings()
    texture_type = data.get("texture_type", settings.texture_type)
    if not isinstance(texture_type, str):
        raise ManifestValidationError(f"{where}.texture_type", texture_type, "must be a string")

    srgb = data.get("srgb", settings.srgb)
    if not isinstance(srgb, bool):
        raise ManifestValidationError(f"{where}.srgb", srgb, "must be a boolean")

    crunched = data.get("crunched", settings.crunched)
    if not isinstance(crunched, bool):
        raise ManifestValidationError(f"{where}.crunched", crunched, "must be a boolean")

    quality = data.get("compression_quality", settings.compression_quality)
    if isinstance(quality, bool) or not isinstance(quality, int) or not 0 <= quality <= 100:
        raise ManifestValidationError(
            f"{where}.compression_quality", quality, "must be an integer 0-100"
        )

    compression = None
    raw_compression = data.get("compression")
    if raw_compression is not None:
        try:
            compression = TextureCompression(raw_compression)
        except ValueError as e:
            choices = ", ".join(c.value for c in TextureCompression)
            raise ManifestValidationError(
                f"{where}.compression", raw_compression, f"must be one of: {choices}"
            ) from e

    return ImporterSettings(
        texture_type=texture_type,
        srgb=srgb,
        crunched=crunched,
        compression_quality=quality,
        compression=compression,
    )


def _require_str(data: dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ManifestValidationError(where, value, "must be a string")
    return value


def _optional_str(data: dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ManifestValidationError(where, value, "must be a string or null")
    return value


def _require_size(data: dict[str, Any], key: str, where: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ManifestValidationError(where, value, "must be a non-negative integer")
    return value
