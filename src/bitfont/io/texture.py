"""Texture sheet decoding.

Decodes PNG texture sheets into the flat RGBA PixelBuffer the extractor
reads from.
"""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from bitfont.core.extractor import PixelBuffer
from bitfont.exceptions import TextureLoadError


def read_texture(path: Path) -> PixelBuffer | None:
    """Decode a texture sheet into RGBA pixels.

    Args:
        path: Path to the PNG file

    Returns:
        PixelBuffer, or None if the file does not exist

    Raises:
        TextureLoadError: If the file exists but cannot be decoded
    """
    if not path.exists():
        return None

    try:
        with Image.open(path) as img:
            rgba = img.convert("RGBA")
            return PixelBuffer(width=rgba.width, height=rgba.height, data=rgba.tobytes())
    except (OSError, UnidentifiedImageError) as e:
        raise TextureLoadError(str(path), str(e)) from e
