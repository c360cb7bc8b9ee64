"""Character input records and traced glyph output.

CharData is what the provider loader hands to the generator; GlyphOutline is
what the generator hands to the font writer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from bitfont.domain.bitmap import Bitmap
from bitfont.domain.outline import Contour


class GlyphKind(str, Enum):
    """Where a character's shape comes from."""

    BITMAP = "bitmap"
    SPACE = "space"


@dataclass
class CharData:
    """A single character as loaded from a provider.

    Attributes:
        code_point: Unicode code point of the character
        kind: Bitmap glyph or advance-only space
        bitmap: Cropped bitmap (empty for spaces)
        width: Visual width in pixels (bitmap width or space advance)
        height: Provider cell height in pixels
        ascent: Provider ascent in pixels (None to derive from height)
        x_offset: Left crop column relative to the provider cell
    """

    code_point: int
    kind: GlyphKind
    bitmap: Bitmap = field(default_factory=Bitmap.empty)
    width: int = 0
    height: int | None = None
    ascent: int | None = None
    x_offset: int = 0

    @property
    def char(self) -> str:
        return chr(self.code_point)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "code_point": self.code_point,
            "kind": self.kind.value,
            "bitmap": self.bitmap.to_dict(),
            "width": self.width,
            "height": self.height,
            "ascent": self.ascent,
            "x_offset": self.x_offset,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CharData":
        """Deserialize from dictionary."""
        return cls(
            code_point=data["code_point"],
            kind=GlyphKind(data["kind"]),
            bitmap=Bitmap.from_dict(data["bitmap"]),
            width=data["width"],
            height=data["height"],
            ascent=data["ascent"],
            x_offset=data["x_offset"],
        )


@dataclass
class GlyphOutline:
    """A traced glyph in font units.

    Attributes:
        code_point: Unicode code point the glyph represents
        contours: Closed polygons with integer vertices; outer boundaries
            wind clockwise and holes counter-clockwise
        advance_width: Horizontal advance in font units
    """

    code_point: int
    contours: list[Contour]
    advance_width: int

    @property
    def glyph_name(self) -> str:
        """Glyph name in the ``uniXXXX`` form."""
        return f"uni{self.code_point:04X}"

    def is_empty(self) -> bool:
        """True for glyphs without outlines, such as spaces."""
        return len(self.contours) == 0

    def to_svg_path(self) -> str:
        """Render the contours as SVG path data (``M x y L x y ... Z``)."""
        parts = []
        for contour in self.contours:
            first, *rest = contour.points
            segments = " ".join(f"L{x} {y}" for x, y in rest)
            parts.append(f"M{first[0]} {first[1]} {segments}Z")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "code_point": self.code_point,
            "contours": [c.to_dict() for c in self.contours],
            "advance_width": self.advance_width,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphOutline":
        """Deserialize from dictionary."""
        return cls(
            code_point=data["code_point"],
            contours=[Contour.from_dict(c) for c in data["contours"]],
            advance_width=data["advance_width"],
        )
