"""Synthetic bold by one-pixel horizontal dilation."""

from bitfont.domain import Bitmap


def embolden(bitmap: Bitmap) -> Bitmap:
    """Smear every filled pixel one column to the right.

    The result is one column wider: ``out(r, c) = in(r, c) or in(r, c - 1)``.
    Applying it twice widens twice, so callers apply it once per glyph.

    Example:
        >>> embolden(Bitmap.from_strings(["#.#"])).to_strings()
        ['####']
    """
    if bitmap.is_empty():
        return bitmap

    width = bitmap.width
    return Bitmap.from_rows(
        [
            bitmap.is_filled(col, row) or bitmap.is_filled(col - 1, row)
            for col in range(width + 1)
        ]
        for row in range(bitmap.height)
    )
