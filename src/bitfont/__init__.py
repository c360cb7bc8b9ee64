"""BitFont - Trace bitmap font textures into TrueType outlines.

BitFont reads resource-pack style font definitions (JSON providers plus PNG
texture sheets), cuts every character cell into a binary bitmap, traces the
filled pixels into closed polygons and assembles the result into a font.

Example:
    $ bitfont --charset vi --type bold

This will create MinecraftFont_VI_Bold.ttf in the output directory.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
