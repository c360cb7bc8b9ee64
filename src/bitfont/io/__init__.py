"""I/O layer for bitfont.

This module handles reading font definitions and texture sheets and writing
the finished font with fonttools. It keeps the tracing core free of file
access.

Key responsibilities:
- Decode PNG texture sheets into pixel buffers
- Walk provider definitions and extract character bitmaps
- Assemble traced outlines into a TrueType font

Key classes:
- FontLoader: Load characters from providers
- FontWriter: Build and save the font
"""

from bitfont.io.loader import FontLoader, LoadContext
from bitfont.io.texture import read_texture
from bitfont.io.writer import FontWriter

__all__ = [
    "FontLoader",
    "FontWriter",
    "LoadContext",
    "read_texture",
]
