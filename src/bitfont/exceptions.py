"""Exception hierarchy for BitFont.

The tracing core never raises: empty cells, abandoned loops and degenerate
loops are reported through result objects. These exceptions belong to the
layers around it (loading, decoding, writing).
"""


class BitFontError(Exception):
    """Base exception for all BitFont errors."""

    pass


class ProviderError(BitFontError):
    """Errors related to font provider definitions."""

    pass


class ProviderNotFoundError(ProviderError):
    """A referenced provider definition file does not exist."""

    def __init__(self, reference: str, path: str) -> None:
        self.reference = reference
        self.path = path
        super().__init__(f"Provider '{reference}' not found at '{path}'")


class ProviderFormatError(ProviderError):
    """A provider definition is malformed."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid provider definition '{path}': {details}")


class TextureLoadError(BitFontError):
    """Error decoding a texture sheet."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load texture '{path}': {reason}")


class GlyphProcessingError(BitFontError):
    """Error processing a specific glyph."""

    def __init__(self, code_point: int, reason: str) -> None:
        self.code_point = code_point
        self.reason = reason
        super().__init__(f"Error processing glyph U+{code_point:04X}: {reason}")


class FontBuildError(BitFontError):
    """Errors related to assembling the output font."""

    pass


class NoGlyphsError(FontBuildError):
    """Nothing was loaded, so there is no font to build."""

    def __init__(self) -> None:
        super().__init__("No character data loaded")


class FontSaveError(FontBuildError):
    """Error saving a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")
