"""Data classes for the textures referenced by a material."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class TextureCompression(enum.Enum):
    """Importer compression setting for a texture asset."""

    UNCOMPRESSED = "uncompressed"
    COMPRESSED_LQ = "compressed_lq"
    COMPRESSED = "compressed"
    COMPRESSED_HQ = "compressed_hq"


@dataclass(frozen=True)
class ImporterSettings:
    """The importer fields needed to classify a texture asset.

    Attributes:
        texture_type: Importer texture type, e.g. ``default`` or ``normal_map``.
        srgb: Whether the asset is sampled in sRGB (gamma) space.
        crunched: Whether crunch compression is enabled.
        compression_quality: Crunch/compression quality, 0-100.
        compression: Compression setting, or None when unknown.
    """

    texture_type: str = "default"
    srgb: bool = True
    crunched: bool = False
    compression_quality: int = 50
    compression: TextureCompression | None = None


@dataclass(frozen=True)
class ImportInfo:
    """How a texture asset is imported.

    ``is_linear`` is True for linear color space, False for gamma/sRGB.
    ``compression_quality`` is one of ``"None"``, ``"Low Quality"``,
    ``"Normal Quality"``, ``"High Quality"`` or empty when unknown.
    """

    is_crunched: bool = False
    is_normal_map: bool = False
    is_linear: bool = False
    crunch_quality: int = 0
    compression_quality: str = ""


@dataclass(frozen=True)
class TextureRecord:
    """One texture reference found on a material."""

    texture_id: str
    display_name: str
    property_name: str
    texture_name: str
    asset_path: str
    width: int
    height: int
    pixel_format: str
    import_info: ImportInfo = field(default_factory=ImportInfo)

    @property
    def max_dimension(self) -> int:
        """The larger of width and height, used for resolution comparisons."""
        return max(self.width, self.height)

    @property
    def size_label(self) -> str:
        return f"{self.width}x{self.height}"

    @property
    def color_space_label(self) -> str:
        if self.import_info.is_normal_map:
            return "Normal"
        return "Linear" if self.import_info.is_linear else "sRGB"


@dataclass
class Material:
    """A material and the non-null textures it references, in slot order."""

    name: str
    path: str = ""
    textures: list[TextureRecord] = field(default_factory=list)
