"""material-inspector: browse and filter the textures referenced by a material."""

__version__ = "0.1.0"
