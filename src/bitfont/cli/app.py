"""CLI application entry point for bitfont.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from bitfont import __version__
from bitfont.cli.output import (
    console,
    create_progress,
    print_build_info,
    print_cancellation_notice,
    print_cancellation_summary,
    print_error,
    print_glyph_table,
    print_header,
    print_processing_info,
    print_step,
    print_success,
)
from bitfont.config import (
    BitFontSettings,
    Charset,
    LoggingConfig,
    PathsConfig,
    ProcessingConfig,
)
from bitfont.core import GlyphGenerator
from bitfont.core.generator import count_holes
from bitfont.core.processor import FontProcessor
from bitfont.domain import CharData
from bitfont.exceptions import BitFontError, FontSaveError, ProviderError
from bitfont.io import FontWriter

FONT_TYPES = ("normal", "bold")

app = typer.Typer(
    name="bitfont",
    help="Trace Minecraft-style bitmap font textures into a TrueType font.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]BitFont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def build(
    charset: Annotated[
        str,
        typer.Option(
            "--charset",
            "-c",
            help="Character subset to include (full|vi)",
        ),
    ] = "full",
    font_type: Annotated[
        str,
        typer.Option(
            "--type",
            "-t",
            help="Font variant (normal|bold)",
        ),
    ] = "normal",
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: dist/MinecraftFont[_VI][_Bold].ttf)",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto, 1 = no pool)",
            min=1,
        ),
    ] = None,
    font_dir: Annotated[
        Path,
        typer.Option(
            "--font-dir",
            help="Directory with provider JSON definitions",
        ),
    ] = Path("assets/font"),
    texture_dir: Annotated[
        Path,
        typer.Option(
            "--texture-dir",
            help="Directory with PNG texture sheets",
        ),
    ] = Path("assets/texture"),
    list_glyphs: Annotated[
        bool,
        typer.Option(
            "--list-glyphs",
            help="List loaded characters with their traced contours and exit",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Build a TrueType font from bitmap font providers.

    Reads the provider definitions under --font-dir starting from
    minecraft:default, slices the referenced texture sheets, traces every
    character to polygons and writes the font.

    Example:
        bitfont --charset vi --type bold

    This will create dist/MinecraftFont_VI_Bold.ttf.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        charset_value = Charset(charset.lower())
    except ValueError:
        print_error(
            f"Invalid charset: {charset}",
            details="Valid values: " + ", ".join(c.value for c in Charset),
        )
        raise typer.Exit(code=1)

    if font_type.lower() not in FONT_TYPES:
        print_error(
            f"Invalid font type: {font_type}",
            details="Valid values: " + ", ".join(FONT_TYPES),
        )
        raise typer.Exit(code=1)
    bold = font_type.lower() == "bold"

    if not font_dir.is_dir():
        print_error(
            f"Font directory not found: {font_dir}",
            details="Pass --font-dir with the folder holding default.json.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = BitFontSettings(
        paths=PathsConfig(font_dir=font_dir, texture_dir=texture_dir),
        processing=ProcessingConfig(
            max_workers=workers,
            charset=charset_value,
            bold=bold,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="ERROR" if quiet else ("INFO" if verbose else log_level),
        ),
    )
    style = "Bold" if bold else "Regular"

    try:
        processor = FontProcessor(settings)

        if not quiet:
            print_step("Loading providers")
        chars = processor.load()

        if not quiet:
            print_build_info(
                font_dir=str(font_dir),
                texture_dir=str(texture_dir),
                charset=charset_value.value,
                style=style,
                glyph_count=len(chars),
            )

        if list_glyphs:
            _handle_list_glyphs(chars, settings, bold)
            raise typer.Exit(code=0)

        if output is None:
            output = settings.paths.output_dir / FontWriter.output_filename(
                charset_value, bold
            )

        if not quiet:
            actual_workers = workers if workers else os.cpu_count() or 1
            print_step("Tracing glyphs")
            print_processing_info(actual_workers, is_auto=(workers is None))

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(
                        f"Tracing {len(chars)} glyphs",
                        total=len(chars),
                    )

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    stats = processor.build(
                        output_path=output,
                        chars=chars,
                        max_workers=workers,
                        progress_callback=update_progress,
                    )
            else:
                stats = processor.build(
                    output_path=output,
                    chars=chars,
                    max_workers=workers,
                )
        except KeyboardInterrupt:
            if not quiet:
                partial = processor.processing_logger.stats
                print_cancellation_notice()
                print_cancellation_summary(
                    processed=partial.processed_count,
                    cancelled=partial.cancelled_count,
                )
            raise typer.Exit(code=130) from None

        if not quiet:
            print_success(
                output_path=str(output),
                file_size=_format_file_size(output),
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                contours=stats.contour_count,
                abandoned=stats.abandoned_loops,
                skipped=stats.skipped_count,
                errors=stats.error_count,
                avg_time_ms=stats.avg_glyph_time_ms,
                min_time_ms=stats.min_glyph_time_ms,
                max_time_ms=stats.max_glyph_time_ms,
            )

    except ProviderError as e:
        print_error(f"Could not load providers: {e}")
        raise typer.Exit(code=1)
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1)
    except BitFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_list_glyphs(chars: list[CharData], settings: BitFontSettings, bold: bool) -> None:
    """Handle --list-glyphs mode.

    Traces each character in-process and prints a summary row for it.

    Args:
        chars: Loaded characters
        settings: Build settings
        bold: Trace the bold variant
    """
    generator = GlyphGenerator(settings.font)
    rows = []
    for char in chars:
        outline = generator.generate(char, bold=bold).outline
        shown = char.char if char.char.isprintable() else ""
        rows.append(
            (
                f"U+{char.code_point:04X}",
                shown,
                char.kind.value,
                outline.advance_width,
                len(outline.contours),
                count_holes(outline),
            )
        )
    print_glyph_table(rows)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
