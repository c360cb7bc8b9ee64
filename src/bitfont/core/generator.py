"""Glyph generation: one loaded character to one outline in font units.

Applies the per-provider scale, the optional bold variant and the advance
width rule on top of the tracing pipeline.
"""

from dataclasses import dataclass

from bitfont.config import FontConfig
from bitfont.core.bold import embolden
from bitfont.core.mapper import map_loop, round_half_up
from bitfont.core.vectorizer import BitmapVectorizer
from bitfont.domain import CharData, Contour, GlyphKind, GlyphOutline, WindingDirection

# Blank column appended after every bitmap glyph
LETTER_SPACING_PX = 1


@dataclass
class GenerationResult:
    """Outline for one character plus tracing diagnostics.

    Attributes:
        outline: Glyph in font units (no contours for spaces)
        abandoned_loops: Loops the tracer could not close
    """

    outline: GlyphOutline
    abandoned_loops: int = 0


class GlyphGenerator:
    """Turns CharData into GlyphOutline.

    Unifont tiles are twice as tall as regular provider cells, so they are
    drawn at half scale to share the em.

    Example:
        generator = GlyphGenerator(FontConfig())
        outline = generator.generate(char, bold=True).outline
    """

    def __init__(
        self,
        config: FontConfig,
        vectorizer: BitmapVectorizer | None = None,
    ) -> None:
        self.config = config
        self.vectorizer = vectorizer or BitmapVectorizer()

    def effective_scale(self, char: CharData) -> float:
        """Font units per pixel for this character's provider."""
        height = char.height or self.config.font_height
        height_scale = 0.5 if height == self.config.unifont_height else 1.0
        return self.config.scale * height_scale

    def generate(self, char: CharData, bold: bool = False) -> GenerationResult:
        """Trace one character.

        Args:
            char: Loaded character
            bold: Apply the one-pixel bold widening (once)

        Returns:
            GenerationResult with the outline in font units
        """
        scale = self.effective_scale(char)

        if char.kind == GlyphKind.SPACE:
            width = char.width + 1 if bold else char.width
            return GenerationResult(
                outline=GlyphOutline(
                    code_point=char.code_point,
                    contours=[],
                    advance_width=round_half_up(width * scale),
                )
            )

        bitmap = embolden(char.bitmap) if bold else char.bitmap
        visual_width = bitmap.width if bold else char.width
        advance = round_half_up(
            (char.x_offset + visual_width + LETTER_SPACING_PX) * scale
        )

        if bitmap.is_empty():
            return GenerationResult(
                outline=GlyphOutline(char.code_point, [], advance)
            )

        if char.ascent is not None:
            ascent = char.ascent
        else:
            ascent = (char.height or bitmap.height) - 1
        traced = self.vectorizer.vectorize(bitmap)

        contours = []
        for loop in traced.loops:
            contour = Contour(points=map_loop(loop, scale, ascent, char.x_offset))
            contour.direction = contour.winding()
            contours.append(contour)

        return GenerationResult(
            outline=GlyphOutline(
                code_point=char.code_point,
                contours=contours,
                advance_width=advance,
            ),
            abandoned_loops=traced.abandoned_loops,
        )


def count_holes(outline: GlyphOutline) -> int:
    """Number of counter-clockwise (hole) contours in an outline."""
    return sum(
        1 for c in outline.contours if c.direction == WindingDirection.COUNTER_CLOCKWISE
    )
