"""Tests for texture decoding, provider loading and font writing."""

from pathlib import Path

import pytest
from fontTools.ttLib import TTFont

from bitfont.config import BitFontSettings, Charset, FontConfig, PathsConfig
from bitfont.domain import CharData, Contour, GlyphKind, GlyphOutline
from bitfont.exceptions import (
    FontSaveError,
    ProviderFormatError,
    ProviderNotFoundError,
    TextureLoadError,
)
from bitfont.io import FontLoader, FontWriter, LoadContext, read_texture
from bitfont.io.loader import add_char, filter_charset
from conftest import write_definition, write_sheet


def loader_for(font_dir: Path, texture_dir: Path) -> FontLoader:
    return FontLoader(BitFontSettings(paths=PathsConfig(font_dir=font_dir, texture_dir=texture_dir)))


class TestReadTexture:
    """Tests for read_texture."""

    def test_reads_rgba(self, tmp_path: Path) -> None:
        path = write_sheet(tmp_path / "sheet.png", (3, 2), [(2, 1)])
        buffer = read_texture(path)

        assert buffer is not None
        assert (buffer.width, buffer.height) == (3, 2)
        assert buffer.pixel(2, 1) == (255, 255, 255, 255)
        assert buffer.pixel(0, 0)[3] == 0

    def test_missing_file(self, tmp_path: Path) -> None:
        assert read_texture(tmp_path / "missing.png") is None

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.png"
        path.write_bytes(b"not a png")
        with pytest.raises(TextureLoadError):
            read_texture(path)


class TestLoadContext:
    """Tests for add_char and filter_charset."""

    def test_first_definition_wins(self) -> None:
        context = LoadContext()
        first = CharData(code_point=0x20, kind=GlyphKind.SPACE, width=4)
        second = CharData(code_point=0x20, kind=GlyphKind.SPACE, width=9)

        assert add_char(context, first)
        assert not add_char(context, second)
        assert context.chars == [first]
        assert context.processed == {0x20}

    def test_rejects_null_and_blank(self) -> None:
        context = LoadContext()
        assert not add_char(context, CharData(code_point=0, kind=GlyphKind.SPACE, width=4))
        assert not add_char(context, CharData(code_point=0x41, kind=GlyphKind.BITMAP))
        assert context.chars == []

    def test_filter_charset(self) -> None:
        chars = [
            CharData(code_point=ord(c), kind=GlyphKind.SPACE, width=1) for c in "Aạ€"
        ]
        assert filter_charset(chars, Charset.FULL) == chars
        kept = [c.char for c in filter_charset(chars, Charset.VI)]
        assert kept == ["A", "ạ"]


class TestFontLoader:
    """Tests for FontLoader."""

    def test_loads_bitmap_and_space(self, asset_dirs: tuple[Path, Path]) -> None:
        chars = loader_for(*asset_dirs).load_all()

        assert [c.char for c in chars] == [" ", "A", "I"]
        space, ring, bar = chars
        assert space.kind == GlyphKind.SPACE
        assert space.width == 4

        assert ring.bitmap.to_strings() == [
            "...",
            "###",
            "#.#",
            "###",
            "...",
            "...",
            "...",
            "...",
        ]
        assert ring.x_offset == 1
        assert ring.width == 3
        assert (ring.height, ring.ascent) == (8, 7)

        assert bar.x_offset == 2
        assert bar.width == 1

    def test_first_provider_wins(self, asset_dirs: tuple[Path, Path]) -> None:
        font_dir, texture_dir = asset_dirs
        write_sheet(texture_dir / "other.png", (8, 8), [(0, 0)])
        write_definition(
            font_dir / "default.json",
            [
                {"type": "space", "advances": {"A": 2}},
                {"type": "bitmap", "file": "minecraft:font/other.png", "chars": ["A"]},
            ],
        )
        chars = loader_for(font_dir, texture_dir).load_all()
        assert len(chars) == 1
        assert chars[0].kind == GlyphKind.SPACE

    def test_processed_set_is_respected(self, asset_dirs: tuple[Path, Path]) -> None:
        processed = {ord("A")}
        chars = loader_for(*asset_dirs).load_all(processed=processed)

        assert [c.char for c in chars] == [" ", "I"]
        assert processed == {ord(" "), ord("A"), ord("I")}

    def test_reference_provider(self, asset_dirs: tuple[Path, Path]) -> None:
        font_dir, texture_dir = asset_dirs
        (font_dir / "default.json").rename(font_dir / "ascii.json")
        write_definition(
            font_dir / "default.json",
            [
                {"type": "reference", "id": "minecraft:ascii"},
                {"type": "reference", "id": "minecraft:missing"},
                {"type": "reference", "id": "minecraft:ascii"},
            ],
        )
        chars = loader_for(font_dir, texture_dir).load_all()
        assert [c.char for c in chars] == [" ", "A", "I"]

    def test_unifont_fills_gaps(self, asset_dirs: tuple[Path, Path]) -> None:
        font_dir, texture_dir = asset_dirs
        write_definition(
            font_dir / "default.json",
            [
                {"type": "space", "advances": {"C": 3}},
                {"type": "bitmap", "file": "minecraft:font/ascii.png", "chars": ["AI"]},
                {"type": "reference", "id": "minecraft:include/unifont"},
            ],
        )
        # Tiles: U+0000 (always rejected), U+0041 (already defined), U+0042, U+0043
        write_sheet(
            texture_dir / "unicode_page_00.png",
            (256, 256),
            [(3, 3), (1 * 16 + 4, 4 * 16 + 4), (2 * 16 + 5, 4 * 16 + 2), (3 * 16, 4 * 16)],
        )

        chars = {c.code_point: c for c in loader_for(font_dir, texture_dir).load_all()}

        assert 0 not in chars
        assert chars[0x41].height == 8
        assert chars[0x43].kind == GlyphKind.SPACE
        b = chars[0x42]
        assert (b.height, b.ascent) == (16, 15)
        assert b.x_offset == 5
        assert b.bitmap.height == 16
        assert b.bitmap.is_filled(0, 2)

    def test_charset_filter(self, asset_dirs: tuple[Path, Path]) -> None:
        font_dir, texture_dir = asset_dirs
        write_sheet(texture_dir / "euro.png", (8, 8), [(0, 0)])
        write_definition(
            font_dir / "default.json",
            [
                {"type": "bitmap", "file": "minecraft:font/ascii.png", "chars": ["AI"]},
                {"type": "bitmap", "file": "minecraft:font/euro.png", "chars": ["€"]},
            ],
        )
        loader = loader_for(font_dir, texture_dir)
        assert [c.char for c in loader.load_all(charset=Charset.VI)] == ["A", "I"]
        assert len(loader.load_all(charset=Charset.FULL)) == 3

    def test_missing_texture_skipped(self, asset_dirs: tuple[Path, Path]) -> None:
        font_dir, texture_dir = asset_dirs
        (texture_dir / "ascii.png").unlink()
        chars = loader_for(font_dir, texture_dir).load_all()
        assert [c.char for c in chars] == [" "]

    def test_null_cells_skipped(self, asset_dirs: tuple[Path, Path]) -> None:
        font_dir, texture_dir = asset_dirs
        write_definition(
            font_dir / "default.json",
            [{"type": "bitmap", "file": "minecraft:font/ascii.png", "chars": ["\u0000I"]}],
        )
        chars = loader_for(font_dir, texture_dir).load_all()
        assert [c.char for c in chars] == ["I"]

    def test_negative_space_advance_clamped(self, asset_dirs: tuple[Path, Path]) -> None:
        font_dir, texture_dir = asset_dirs
        write_definition(
            font_dir / "default.json",
            [{"type": "space", "advances": {"\u200c": -1, " ": 4}}],
        )
        chars = {c.code_point: c for c in loader_for(font_dir, texture_dir).load_all()}
        assert chars[0x200C].width == 0
        assert chars[0x20].width == 4

    def test_empty_chars_row(self, asset_dirs: tuple[Path, Path]) -> None:
        font_dir, texture_dir = asset_dirs
        write_definition(
            font_dir / "default.json",
            [{"type": "bitmap", "file": "minecraft:font/ascii.png", "chars": [""]}],
        )
        with pytest.raises(ProviderFormatError):
            loader_for(font_dir, texture_dir).load_all()

    def test_missing_root_definition(self, tmp_path: Path) -> None:
        with pytest.raises(ProviderNotFoundError):
            loader_for(tmp_path / "font", tmp_path / "texture").load_all()

    def test_malformed_json(self, tmp_path: Path) -> None:
        font_dir = tmp_path / "font"
        font_dir.mkdir()
        (font_dir / "default.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ProviderFormatError):
            loader_for(font_dir, tmp_path / "texture").load_all()

    def test_bitmap_provider_without_chars(self, asset_dirs: tuple[Path, Path]) -> None:
        font_dir, texture_dir = asset_dirs
        write_definition(
            font_dir / "default.json",
            [{"type": "bitmap", "file": "minecraft:font/ascii.png"}],
        )
        with pytest.raises(ProviderFormatError):
            loader_for(font_dir, texture_dir).load_all()

    def test_paths(self, tmp_path: Path) -> None:
        loader = loader_for(tmp_path / "font", tmp_path / "texture")
        assert loader.definition_path("minecraft:default") == tmp_path / "font" / "default.json"
        assert loader.texture_path("minecraft:font/ascii.png") == tmp_path / "texture" / "ascii.png"


def square(x: int, y: int, size: int) -> Contour:
    """Clockwise square in y-up font units."""
    return Contour(points=[(x, y + size), (x + size, y + size), (x + size, y), (x, y)])


class TestFontWriter:
    """Tests for FontWriter."""

    @pytest.fixture
    def outlines(self) -> list[GlyphOutline]:
        return [
            GlyphOutline(0x20, [], 512),
            GlyphOutline(0x41, [square(128, 0, 384), square(256, 128, 128)], 640),
        ]

    def test_build_tables(self, outlines: list[GlyphOutline]) -> None:
        font = FontWriter(FontConfig()).build(outlines)

        assert font.getGlyphOrder() == [".notdef", "uni0020", "uni0041"]
        assert font.getBestCmap() == {0x20: "uni0020", 0x41: "uni0041"}
        assert tuple(font["hmtx"]["uni0041"]) == (640, 128)
        assert font["hmtx"]["uni0020"][0] == 512
        assert font["hmtx"][".notdef"][0] == 1024
        assert font["hhea"].ascent == 1024
        assert font["hhea"].descent == 0
        assert font["OS/2"].usWeightClass == 400

    def test_bold_naming(self, outlines: list[GlyphOutline]) -> None:
        font = FontWriter(FontConfig(family_name="Test Pixel"), bold=True).build(outlines)
        name = font["name"]
        assert name.getDebugName(1) == "Test Pixel"
        assert name.getDebugName(2) == "Bold"
        assert name.getDebugName(6) == "TestPixel-Bold"
        assert font["OS/2"].usWeightClass == 700

    def test_duplicate_code_points(self) -> None:
        outlines = [GlyphOutline(0x41, [], 100), GlyphOutline(0x41, [], 200)]
        font = FontWriter(FontConfig()).build(outlines)
        assert font.getGlyphOrder() == [".notdef", "uni0041"]
        assert font["hmtx"]["uni0041"][0] == 100

    def test_write_and_reload(self, tmp_path: Path, outlines: list[GlyphOutline]) -> None:
        path = tmp_path / "out" / "MinecraftFont.ttf"
        FontWriter(FontConfig()).write(outlines, path)

        font = TTFont(path)
        glyph = font["glyf"]["uni0041"]
        assert glyph.numberOfContours == 2
        assert font["glyf"]["uni0020"].numberOfContours == 0
        assert font.getBestCmap()[0x41] == "uni0041"

    def test_write_failure(self, tmp_path: Path, outlines: list[GlyphOutline]) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(FontSaveError):
            FontWriter(FontConfig()).write(outlines, blocker / "font.ttf")

    def test_negative_advance_raises_save_error(self, tmp_path: Path) -> None:
        outlines = [GlyphOutline(0x20, [], -128)]
        with pytest.raises(FontSaveError):
            FontWriter(FontConfig()).write(outlines, tmp_path / "font.ttf")

    @pytest.mark.parametrize(
        ("charset", "bold", "expected"),
        [
            (Charset.FULL, False, "MinecraftFont.ttf"),
            (Charset.VI, False, "MinecraftFont_VI.ttf"),
            (Charset.FULL, True, "MinecraftFont_Bold.ttf"),
            (Charset.VI, True, "MinecraftFont_VI_Bold.ttf"),
        ],
    )
    def test_output_filename(self, charset: Charset, bold: bool, expected: str) -> None:
        assert FontWriter.output_filename(charset, bold) == expected
