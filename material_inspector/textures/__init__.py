"""Texture records and the manifest/import layer that builds them."""

from material_inspector.textures.import_info import derive_import_info
from material_inspector.textures.manifest import load_manifest, parse_manifest
from material_inspector.textures.models import (
    ImporterSettings,
    ImportInfo,
    Material,
    TextureCompression,
    TextureRecord,
)

__all__ = [
    "ImportInfo",
    "ImporterSettings",
    "Material",
    "TextureCompression",
    "TextureRecord",
    "derive_import_info",
    "load_manifest",
    "parse_manifest",
]
