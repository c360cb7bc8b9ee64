"""Configuration settings for BitFont."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

VIETNAMESE_CHARSET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    "ÀÁÂÃĂẠẢẤẦẨẪẬẮẰẲẴẶÈÉÊẸẺẼẾỀỂỄỆÌÍỊỈĨÒÓÔÕƠỌỎỐỒỔỖỘỚỜỞỠỢÙÚƯỤỦỨỪỬỮỰỲÝỴỶỸ"
    "àáâãăạảấầẩẫậắằẳẵặèéêẹẻẽếềểễệìíịỉĩòóôõơọỏốồổỗộớờởỡợùúưụủứừửữựỳýỵỷỹ"
    "Đđ«»“”‚‛„‟‗•…№–—·™®©"
    "\u0300\u0301\u0303\u0309\u0323!@#$%^&*()_+-=[]{}|;:'\",.<>/?\\ "
)


class Charset(str, Enum):
    """Character set to include in the built font."""

    FULL = "full"
    VI = "vi"


CHARSETS: dict[Charset, str | None] = {
    Charset.FULL: None,
    Charset.VI: VIETNAMESE_CHARSET,
}


class FontConfig(BaseModel):
    """Font geometry settings.

    Pixel units are scaled by ``units_per_em / pixel_size`` so an 8 pixel tall
    cell fills exactly one em.
    """

    units_per_em: int = Field(
        default=1024,
        ge=16,
        le=16384,
        description="Font units per em",
    )
    pixel_size: int = Field(
        default=8,
        ge=1,
        description="Pixels per em for regular-height providers",
    )
    family_name: str = Field(
        default="Minecraft Custom",
        description="Font family name written to the name table",
    )
    font_height: int = Field(
        default=8,
        ge=1,
        description="Default provider cell height in pixels",
    )
    unifont_height: int = Field(
        default=16,
        ge=1,
        description="Unifont tile height in pixels (drawn at half scale)",
    )
    unifont_ascent: int = Field(
        default=15,
        description="Unifont ascent in pixels",
    )
    default_ascent: int = Field(
        default=7,
        description="Ascent used by bitmap providers that do not declare one",
    )

    @property
    def scale(self) -> float:
        """Font units per pixel at regular height."""
        return self.units_per_em / self.pixel_size


class PathsConfig(BaseModel):
    """Locations of the font assets and build output."""

    font_dir: Path = Field(
        default=Path("assets/font"),
        description="Directory holding provider JSON files",
    )
    texture_dir: Path = Field(
        default=Path("assets/texture"),
        description="Directory holding PNG texture sheets",
    )
    output_dir: Path = Field(
        default=Path("dist"),
        description="Directory for built fonts",
    )


class ProcessingConfig(BaseModel):
    """Configuration for glyph processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto, 1 = run inline)",
    )
    charset: Charset = Field(
        default=Charset.FULL,
        description="Character subset to keep after loading",
    )
    bold: bool = Field(
        default=False,
        description="Build the synthetic bold variant",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BitFontSettings(BaseModel):
    """Main application settings."""

    font: FontConfig = Field(default_factory=FontConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
