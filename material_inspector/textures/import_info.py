"""Derive ImportInfo from importer settings and texture naming conventions."""

from __future__ import annotations

import logging

from material_inspector.textures.models import ImporterSettings, ImportInfo, TextureCompression

logger = logging.getLogger(__name__)

NORMAL_MAP_TEXTURE_TYPE = "normal_map"

_COMPRESSION_LABELS: dict[TextureCompression, str] = {
    TextureCompression.UNCOMPRESSED: "None",
    TextureCompression.COMPRESSED_LQ: "Low Quality",
    TextureCompression.COMPRESSED: "Normal Quality",
    TextureCompression.COMPRESSED_HQ: "High Quality",
}

COMPRESSION_LABELS: tuple[str, ...] = tuple(_COMPRESSION_LABELS.values())


def compression_label(compression: TextureCompression | None) -> str:
    """Return the display label for a compression setting ("" if unknown)."""
    if compression is None:
        return ""
    return _COMPRESSION_LABELS.get(compression, "")


def looks_like_normal_map(texture_name: str, asset_path: str) -> bool:
    """Guess whether a texture is a normal map from its name and path."""
    lower_path = asset_path.lower()
    lower_name = texture_name.lower()
    return (
        "normal" in lower_path
        or "_n." in lower_path
        or "normal" in lower_name
        or "bump" in lower_name
        or lower_name.endswith("_n")
    )


def derive_import_info(
    texture_name: str,
    asset_path: str,
    importer: ImporterSettings | None = None,
) -> ImportInfo:
    """Build the ImportInfo for one texture.

    Importer settings are authoritative for the normal-map flag when they
    mark the texture as one. Otherwise the name/path heuristic runs, and a
    heuristic hit forces linear color space.

    Args:
        texture_name: Texture asset name.
        asset_path: Asset path; empty for textures that are not assets.
        importer: Importer settings, or None when no importer is available.

    Returns:
        The derived ImportInfo.
    """
    if not asset_path:
        return ImportInfo()

    is_crunched = False
    is_normal_map = False
    is_linear = False
    crunch_quality = 0
    quality_label = ""

    if importer is not None:
        is_normal_map = importer.texture_type == NORMAL_MAP_TEXTURE_TYPE
        is_linear = not importer.srgb
        is_crunched = importer.crunched
        crunch_quality = importer.compression_quality
        quality_label = compression_label(importer.compression)

    if not is_normal_map and looks_like_normal_map(texture_name, asset_path):
        logger.debug("Treating %s as a normal map by name", asset_path)
        is_normal_map = True
        is_linear = True

    return ImportInfo(
        is_crunched=is_crunched,
        is_normal_map=is_normal_map,
        is_linear=is_linear,
        crunch_quality=crunch_quality,
        compression_quality=quality_label,
    )
