"""End-to-end tests that build a font from a resource pack and inspect it."""

from pathlib import Path

import pytest
from fontTools.ttLib import TTFont

from bitfont.config import BitFontSettings
from bitfont.core.processor import FontProcessor


def contour_areas(font: TTFont, glyph_name: str) -> list[float]:
    """Signed shoelace area of each contour of a glyph, in font units."""
    glyph = font["glyf"][glyph_name]
    coords = list(glyph.coordinates)
    areas = []
    start = 0
    for end in glyph.endPtsOfContours:
        contour = coords[start : end + 1]
        area = 0.0
        n = len(contour)
        for i in range(n):
            j = (i + 1) % n
            area += contour[i][0] * contour[j][1]
            area -= contour[j][0] * contour[i][1]
        areas.append(area / 2.0)
        start = end + 1
    return areas


class TestEndToEndOutput:
    """Fonts built from the sample pack."""

    def test_ring_winding(self, settings: BitFontSettings, tmp_path: Path):
        """Outer contour is clockwise (negative area) and the hole counter-clockwise."""
        output = tmp_path / "ring.ttf"
        FontProcessor(settings).build(output_path=output)

        font = TTFont(output)
        areas = contour_areas(font, "uni0041")
        assert len(areas) == 2
        assert areas[0] == -9 * 128 * 128
        assert areas[1] == 128 * 128

    def test_metrics(self, settings: BitFontSettings, tmp_path: Path):
        output = tmp_path / "metrics.ttf"
        FontProcessor(settings).build(output_path=output)

        font = TTFont(output)
        # Ring: x_offset 1, width 3, plus one column of spacing
        assert tuple(font["hmtx"]["uni0041"]) == (5 * 128, 128)
        # Bar: x_offset 2, width 1
        assert tuple(font["hmtx"]["uni0049"]) == (4 * 128, 256)
        assert font["hmtx"]["uni0020"][0] == 4 * 128

        bar = font["glyf"]["uni0049"]
        assert (bar.xMin, bar.yMin, bar.xMax, bar.yMax) == (256, 384, 384, 768)

    def test_bold_variant(self, settings: BitFontSettings, tmp_path: Path):
        settings.processing.bold = True
        output = tmp_path / "bold.ttf"
        FontProcessor(settings).build(output_path=output)

        font = TTFont(output)
        assert font["hmtx"]["uni0041"][0] == 6 * 128
        assert font["hmtx"]["uni0020"][0] == 5 * 128
        assert font["name"].getDebugName(2) == "Bold"

    @pytest.mark.parametrize("workers", [2])
    def test_process_pool_matches_inline(
        self, settings: BitFontSettings, tmp_path: Path, workers: int
    ):
        processor = FontProcessor(settings)
        chars = processor.load()

        inline, _ = processor.generate(chars, max_workers=1)
        pooled, stats = FontProcessor(settings).generate(chars, max_workers=workers)

        assert stats.error_count == 0
        assert [o.to_dict() for o in pooled] == [o.to_dict() for o in inline]
