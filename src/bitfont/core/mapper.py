"""Pixel space to font unit coordinate mapping.

Raster rows grow downward while font coordinates grow upward from the
baseline, so y is flipped around the glyph's ascent.
"""

import math

from bitfont.domain import LatticePoint


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def map_point(
    point: LatticePoint,
    scale: float,
    ascent: float,
    x_offset: float,
) -> tuple[int, int]:
    """Map one pixel-space vertex into font units.

    Example:
        >>> map_point((2, 3), scale=128, ascent=7, x_offset=1)
        (384, 512)
    """
    x, y = point
    return (
        round_half_up((x + x_offset) * scale),
        round_half_up((ascent - y) * scale),
    )


def map_loop(
    points: list[LatticePoint],
    scale: float,
    ascent: float,
    x_offset: float,
) -> list[tuple[int, int]]:
    """Map every vertex of a loop into font units."""
    return [map_point(p, scale, ascent, x_offset) for p in points]
