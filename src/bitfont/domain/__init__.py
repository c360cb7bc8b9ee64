"""Domain models for bitfont.

This module contains the core domain models representing bitmaps, traced
outlines and glyphs. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of fonttools implementation details

Key classes:
- Bitmap: A binary pixel grid
- Edge: A directed unit boundary segment
- Contour: A closed polygon
- CharData: A character as loaded from a provider
- GlyphOutline: A traced glyph in font units
"""

from bitfont.domain.bitmap import Bitmap
from bitfont.domain.glyph import CharData, GlyphKind, GlyphOutline
from bitfont.domain.outline import (
    Contour,
    Edge,
    LatticePoint,
    WindingDirection,
    signed_area,
)

__all__: list[str] = [
    # Enums
    "GlyphKind",
    "WindingDirection",
    # Core types
    "Bitmap",
    "CharData",
    "Contour",
    "Edge",
    "GlyphOutline",
    "LatticePoint",
    "signed_area",
]
