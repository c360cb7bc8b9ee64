"""Bitmap extraction from decoded texture sheets.

A texture sheet is a grid of character cells. For one cell this module finds
the columns that hold content, crops the cell horizontally to them and
returns the binary bitmap together with the crop's left offset.
"""

from dataclasses import dataclass
from typing import Any

from bitfont.domain import Bitmap

# Alpha must exceed this (0-255) for a pixel to count as content
CONTENT_ALPHA_THRESHOLD = 10


@dataclass(frozen=True)
class PixelBuffer:
    """Decoded RGBA pixels of a texture sheet.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        data: Indexable channel data, four 0-255 values per pixel at offset
            ``(y * width + x) * 4``
    """

    width: int
    height: int
    data: Any

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return ``(r, g, b, a)`` at ``(x, y)``."""
        idx = (y * self.width + x) * 4
        return (self.data[idx], self.data[idx + 1], self.data[idx + 2], self.data[idx + 3])


@dataclass(frozen=True)
class ExtractedBitmap:
    """Result of extracting one cell.

    Attributes:
        bitmap: Cropped binary bitmap (zero width when empty)
        x_offset: Left column of the crop relative to the cell origin
        is_empty: True when the cell holds no content; the caller skips it
    """

    bitmap: Bitmap
    x_offset: int
    is_empty: bool

    @property
    def width(self) -> int:
        return self.bitmap.width


EMPTY = ExtractedBitmap(bitmap=Bitmap.empty(), x_offset=0, is_empty=True)


def is_content_pixel(r: int, g: int, b: int, a: int) -> bool:
    """Visible and not pure black; opaque black is background on these sheets."""
    return a > CONTENT_ALPHA_THRESHOLD and not (r == 0 and g == 0 and b == 0)


def extract_bitmap(
    image: PixelBuffer,
    x: int,
    y: int,
    width: int,
    height: int,
) -> ExtractedBitmap:
    """Crop a cell to the horizontal extent of its content.

    Only columns are trimmed; every row of the cell is kept so glyphs from
    the same sheet share a baseline. Pixels past the image edge read as empty.

    Args:
        image: Decoded texture sheet
        x: Cell origin column in the sheet
        y: Cell origin row in the sheet
        width: Cell width
        height: Cell height

    Returns:
        ExtractedBitmap, ``EMPTY`` when the cell has no content pixel
    """
    mask = [
        [_content_at(image, x + px, y + py) for px in range(width)]
        for py in range(height)
    ]

    columns = [px for px in range(width) if any(row[px] for row in mask)]
    if not columns:
        return EMPTY

    min_x, max_x = columns[0], columns[-1]
    bitmap = Bitmap.from_rows(row[min_x : max_x + 1] for row in mask)
    return ExtractedBitmap(bitmap=bitmap, x_offset=min_x, is_empty=False)


def _content_at(image: PixelBuffer, x: int, y: int) -> bool:
    if x >= image.width or y >= image.height:
        return False
    return is_content_pixel(*image.pixel(x, y))
