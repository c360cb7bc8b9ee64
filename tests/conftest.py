"""Shared fixtures: a tiny resource pack written to a temporary directory."""

import json
from pathlib import Path

import pytest
from PIL import Image

from bitfont.config import BitFontSettings, LoggingConfig, PathsConfig, ProcessingConfig

WHITE = (255, 255, 255, 255)


def write_sheet(path: Path, size: tuple[int, int], pixels: list[tuple[int, int]]) -> Path:
    """Write a transparent RGBA PNG with the given pixels set to white."""
    img = Image.new("RGBA", size, (0, 0, 0, 0))
    for xy in pixels:
        img.putpixel(xy, WHITE)
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path)
    return path


def write_definition(path: Path, providers: list[dict]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"providers": providers}), encoding="utf-8")
    return path


# "A" is a 3x3 ring in the first 8x8 cell, "I" a 1x3 bar at column 2 of the second
RING_PIXELS = [(1, 1), (2, 1), (3, 1), (1, 2), (3, 2), (1, 3), (2, 3), (3, 3)]
BAR_PIXELS = [(8 + 2, 1), (8 + 2, 2), (8 + 2, 3)]


@pytest.fixture
def asset_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """Write default.json and ascii.png; return (font_dir, texture_dir)."""
    font_dir = tmp_path / "font"
    texture_dir = tmp_path / "texture"

    write_sheet(texture_dir / "ascii.png", (16, 8), RING_PIXELS + BAR_PIXELS)
    write_definition(
        font_dir / "default.json",
        [
            {
                "type": "bitmap",
                "file": "minecraft:font/ascii.png",
                "height": 8,
                "ascent": 7,
                "chars": ["AI"],
            },
            {"type": "space", "advances": {" ": 4}},
        ],
    )
    return font_dir, texture_dir


@pytest.fixture
def settings(tmp_path: Path, asset_dirs: tuple[Path, Path]) -> BitFontSettings:
    """Settings pointing at the temporary pack, logging under tmp_path."""
    font_dir, texture_dir = asset_dirs
    return BitFontSettings(
        paths=PathsConfig(
            font_dir=font_dir,
            texture_dir=texture_dir,
            output_dir=tmp_path / "dist",
        ),
        processing=ProcessingConfig(max_workers=1),
        logging=LoggingConfig(log_file=tmp_path / "bitfont.log"),
    )
