"""Font writer for assembling traced glyphs into a TrueType file.

This module provides the FontWriter class, which takes GlyphOutline records
(already sorted by code point) and builds the font tables with fonttools'
FontBuilder.
"""

from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont, TTLibError

from bitfont.config import Charset, FontConfig
from bitfont.core.mapper import round_half_up
from bitfont.domain import GlyphOutline
from bitfont.exceptions import FontSaveError

NOTDEF = ".notdef"
FILE_STEM = "MinecraftFont"
# .notdef advance, in regular-height pixels
NOTDEF_ADVANCE_PX = 8


def draw_outline(outline: GlyphOutline) -> object:
    """Draw an outline's contours into a TrueType glyph."""
    pen = TTGlyphPen(None)
    for contour in outline.contours:
        first, *rest = contour.points
        pen.moveTo(first)
        for point in rest:
            pen.lineTo(point)
        pen.closePath()
    return pen.glyph()


class FontWriter:
    """Builds a TrueType font from traced outlines.

    Outlines are written in mapped order: outer contours arrive clockwise
    and holes counter-clockwise, which is what TrueType expects.

    Example:
        writer = FontWriter(FontConfig(), bold=False)
        writer.write(outlines, Path("dist/MinecraftFont.ttf"))
    """

    def __init__(self, config: FontConfig, bold: bool = False) -> None:
        """Initialize the font writer.

        Args:
            config: Font geometry and naming settings
            bold: Whether the outlines are the bold variant
        """
        self.config = config
        self.bold = bold

    @property
    def style_name(self) -> str:
        return "Bold" if self.bold else "Regular"

    def build(self, outlines: list[GlyphOutline]) -> TTFont:
        """Assemble the font tables in memory.

        Duplicate code points keep their first outline.

        Args:
            outlines: Glyphs sorted by code point

        Returns:
            Populated TTFont
        """
        upm = self.config.units_per_em
        seen: set[int] = set()
        unique: list[GlyphOutline] = []
        for outline in outlines:
            if outline.code_point not in seen:
                seen.add(outline.code_point)
                unique.append(outline)

        glyph_order = [NOTDEF] + [o.glyph_name for o in unique]
        fb = FontBuilder(upm, isTTF=True)
        fb.setupGlyphOrder(glyph_order)
        fb.setupCharacterMap({o.code_point: o.glyph_name for o in unique})

        notdef_advance = round_half_up(NOTDEF_ADVANCE_PX * self.config.scale)
        glyphs = {NOTDEF: TTGlyphPen(None).glyph()}
        metrics = {NOTDEF: (notdef_advance, 0)}
        for outline in unique:
            glyph = draw_outline(outline)
            glyphs[outline.glyph_name] = glyph
            metrics[outline.glyph_name] = (outline.advance_width, 0)

        fb.setupGlyf(glyphs)
        # Left side bearings come from the glyf bounding boxes
        glyf = fb.font["glyf"]
        for name, (advance, _) in metrics.items():
            metrics[name] = (advance, getattr(glyf[name], "xMin", 0))
        fb.setupHorizontalMetrics(metrics)

        fb.setupHorizontalHeader(ascent=upm, descent=0)
        fb.setupNameTable(
            {
                "familyName": self.config.family_name,
                "styleName": self.style_name,
                "fullName": f"{self.config.family_name} {self.style_name}",
                "psName": (
                    f"{self.config.family_name.replace(' ', '')}-{self.style_name}"
                ),
                "version": "Version 1.0",
            }
        )
        fb.setupOS2(
            sTypoAscender=upm,
            sTypoDescender=0,
            usWinAscent=upm,
            usWinDescent=0,
            usWeightClass=700 if self.bold else 400,
            fsSelection=0x20 if self.bold else 0x40,
        )
        fb.setupPost()
        return fb.font

    def write(self, outlines: list[GlyphOutline], output_path: Path) -> None:
        """Build the font and save it.

        Raises:
            FontSaveError: If the tables cannot be compiled or the file
                cannot be written
        """
        font = self.build(outlines)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            font.save(str(output_path))
        except (OSError, TTLibError) as e:
            raise FontSaveError(str(output_path), str(e)) from e

    @staticmethod
    def output_filename(charset: Charset, bold: bool) -> str:
        """Output file name for a build variant.

        ``MinecraftFont.ttf``, ``MinecraftFont_VI.ttf``, ``MinecraftFont_Bold.ttf``
        or ``MinecraftFont_VI_Bold.ttf``.
        """
        name = FILE_STEM
        if charset != Charset.FULL:
            name += f"_{charset.value.upper()}"
        if bold:
            name += "_Bold"
        return f"{name}.ttf"
