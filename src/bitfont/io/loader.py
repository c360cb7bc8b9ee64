"""Provider loader for resource-pack style font definitions.

A font definition is a JSON document with a ``providers`` list. Each
provider is one of:

- ``bitmap``: a texture sheet plus a ``chars`` grid naming each cell
- ``space``: advance-only characters, ``{"advances": {" ": 4}}``
- ``reference``: another definition, by id (``minecraft:include/unifont``
  pulls in the 256 Unifont page textures)

Code points are deduplicated across providers with a ``processed`` set that
is owned by one load and passed explicitly through every step; the first
definition of a code point wins.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog

from bitfont.config import CHARSETS, BitFontSettings, Charset
from bitfont.core.extractor import extract_bitmap
from bitfont.domain import CharData, GlyphKind
from bitfont.exceptions import (
    ProviderFormatError,
    ProviderNotFoundError,
    TextureLoadError,
)
from bitfont.io.texture import read_texture

logger = structlog.get_logger(__name__)

DEFAULT_REFERENCE = "minecraft:default"
UNIFONT_REFERENCE = "minecraft:include/unifont"
UNIFONT_PAGES = 256
UNIFONT_TILE = 16
NULL_CHAR = "\u0000"


@dataclass
class LoadContext:
    """Mutable state of a single load call.

    Attributes:
        chars: Accepted characters in discovery order
        processed: Code points already accepted
        references: Reference ids already visited (guards against cycles)
    """

    chars: list[CharData] = field(default_factory=list)
    processed: set[int] = field(default_factory=set)
    references: set[str] = field(default_factory=set)


def add_char(context: LoadContext, char: CharData) -> bool:
    """Accept a character unless it is invalid or already defined.

    Returns:
        True if the character was added
    """
    if char.code_point == 0:
        return False

    if char.kind == GlyphKind.BITMAP and not char.bitmap.has_content():
        return False

    if char.code_point in context.processed:
        return False

    context.processed.add(char.code_point)
    context.chars.append(char)
    return True


def filter_charset(chars: list[CharData], charset: Charset) -> list[CharData]:
    """Keep only the characters that belong to a charset."""
    allowed = CHARSETS[charset]
    if allowed is None:
        return list(chars)
    return [c for c in chars if c.char in allowed]


class FontLoader:
    """Loads characters from provider definitions and texture sheets.

    Example:
        loader = FontLoader(settings)
        chars = loader.load_all(charset=Charset.VI)
    """

    def __init__(self, settings: BitFontSettings) -> None:
        self.font = settings.font
        self.font_dir = settings.paths.font_dir
        self.texture_dir = settings.paths.texture_dir

    def load_all(
        self,
        charset: Charset = Charset.FULL,
        processed: set[int] | None = None,
        reference: str = DEFAULT_REFERENCE,
    ) -> list[CharData]:
        """Load every character reachable from a root reference.

        Args:
            charset: Subset to keep
            processed: Code points to treat as already defined; updated in place
            reference: Root definition id

        Returns:
            Characters sorted by code point

        Raises:
            ProviderNotFoundError: If the root definition does not exist
            ProviderFormatError: If a definition file is malformed
        """
        logger.info("Loading font definitions", reference=reference)
        if reference != UNIFONT_REFERENCE:
            root = self.definition_path(reference)
            if not root.exists():
                raise ProviderNotFoundError(reference, str(root))
        context = LoadContext(processed=processed if processed is not None else set())

        self.process_reference(reference, context)

        chars = sorted(filter_charset(context.chars, charset), key=lambda c: c.code_point)
        logger.info(
            "Loaded characters",
            loaded=len(context.chars),
            kept=len(chars),
            charset=charset.value,
        )
        return chars

    def process_reference(self, reference: str, context: LoadContext) -> None:
        """Resolve a reference id to a definition and process it."""
        if reference in context.references:
            logger.debug("Reference already processed", reference=reference)
            return
        context.references.add(reference)

        if reference == UNIFONT_REFERENCE:
            self.process_unifont(context)
            return

        path = self.definition_path(reference)
        if not path.exists():
            logger.warning("Definition not found", path=str(path), reference=reference)
            return

        self.process_file(path, context)

    def definition_path(self, reference: str) -> Path:
        """Map ``namespace:name`` to ``font_dir/name.json``."""
        name = reference.split(":", 1)[-1]
        return self.font_dir / f"{name}.json"

    def texture_path(self, file_id: str) -> Path:
        """Map ``namespace:font/name.png`` to ``texture_dir/name.png``."""
        name = file_id.split(":", 1)[-1]
        name = name.removeprefix("font/")
        return self.texture_dir / name

    def process_file(self, path: Path, context: LoadContext) -> None:
        """Process every provider of one definition file."""
        try:
            content = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ProviderFormatError(str(path), str(e)) from e

        for provider in content.get("providers", []):
            self.process_provider(provider, context, source=path)

    def process_provider(
        self,
        provider: dict[str, Any],
        context: LoadContext,
        source: Path | None = None,
    ) -> None:
        """Dispatch a single provider by type."""
        kind = provider.get("type")
        if kind == "bitmap":
            self.process_bitmap_provider(provider, context, source)
        elif kind == "space":
            self.process_space_provider(provider, context)
        elif kind == "reference":
            self.process_reference(provider["id"], context)
        else:
            logger.debug("Skipping unsupported provider", type=kind)

    def process_bitmap_provider(
        self,
        provider: dict[str, Any],
        context: LoadContext,
        source: Path | None = None,
    ) -> None:
        """Cut a texture sheet into cells and extract each named character."""
        chars = provider.get("chars")
        if "file" not in provider or not chars:
            raise ProviderFormatError(
                str(source), "bitmap provider needs 'file' and 'chars'"
            )
        if not all(chars):
            raise ProviderFormatError(str(source), "bitmap provider has an empty 'chars' row")

        image_path = self.texture_path(provider["file"])
        try:
            image = read_texture(image_path)
        except TextureLoadError as e:
            logger.error("Texture could not be decoded", path=str(image_path), error=e.reason)
            return
        if image is None:
            logger.warning("Texture not found", path=str(image_path))
            return

        rows = len(chars)
        cols = len(chars[0])
        cell_width = image.width // cols
        cell_height = image.height // rows
        height = provider.get("height", self.font.font_height)
        ascent = provider.get("ascent", self.font.default_ascent)

        for y, row_chars in enumerate(chars):
            for x, char in enumerate(row_chars[:cols]):
                if char == NULL_CHAR:
                    continue

                extracted = extract_bitmap(
                    image, x * cell_width, y * cell_height, cell_width, cell_height
                )
                if extracted.is_empty:
                    continue

                add_char(
                    context,
                    CharData(
                        code_point=ord(char),
                        kind=GlyphKind.BITMAP,
                        bitmap=extracted.bitmap,
                        width=extracted.width,
                        height=height,
                        ascent=ascent,
                        x_offset=extracted.x_offset,
                    ),
                )

    def process_space_provider(self, provider: dict[str, Any], context: LoadContext) -> None:
        """Add advance-only characters."""
        for char, advance in provider.get("advances", {}).items():
            if len(char) != 1:
                logger.warning("Skipping multi-character space entry", entry=char)
                continue
            if advance < 0:
                # TrueType has no negative advance widths
                logger.warning("Clamping negative space advance", char=char, advance=advance)
                advance = 0
            add_char(
                context,
                CharData(code_point=ord(char), kind=GlyphKind.SPACE, width=advance),
            )

    def process_unifont(self, context: LoadContext) -> None:
        """Load the Unifont page textures, filling only undefined code points."""
        pages_found = 0
        for page in range(UNIFONT_PAGES):
            image_path = self.texture_dir / f"unicode_page_{page:02x}.png"
            try:
                image = read_texture(image_path)
            except TextureLoadError as e:
                logger.error("Texture could not be decoded", path=str(image_path), error=e.reason)
                continue
            if image is None:
                continue
            pages_found += 1

            for cy in range(UNIFONT_TILE):
                for cx in range(UNIFONT_TILE):
                    code_point = page * 256 + cy * UNIFONT_TILE + cx
                    if code_point in context.processed or 0xD800 <= code_point <= 0xDFFF:
                        continue

                    extracted = extract_bitmap(
                        image,
                        cx * UNIFONT_TILE,
                        cy * UNIFONT_TILE,
                        UNIFONT_TILE,
                        UNIFONT_TILE,
                    )
                    if extracted.is_empty:
                        continue

                    add_char(
                        context,
                        CharData(
                            code_point=code_point,
                            kind=GlyphKind.BITMAP,
                            bitmap=extracted.bitmap,
                            width=extracted.width,
                            height=self.font.unifont_height,
                            ascent=self.font.unifont_ascent,
                            x_offset=extracted.x_offset,
                        ),
                    )

        logger.info("Unifont pages loaded", pages=pages_found)
