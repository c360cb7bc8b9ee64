"""Parallel processing orchestration for the font build pipeline.

This module coordinates the full build with parallel tracing of individual
glyphs using ProcessPoolExecutor.

Key components:
- process_glyph: Top-level picklable function for parallel execution
- FontProcessor: Main orchestrator class for a font build
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from bitfont.config import BitFontSettings, FontConfig
from bitfont.core.generator import GlyphGenerator
from bitfont.domain import CharData, GlyphKind, GlyphOutline
from bitfont.exceptions import GlyphProcessingError, NoGlyphsError
from bitfont.io.loader import FontLoader
from bitfont.io.writer import FontWriter
from bitfont.utils import ProcessingLogger, ProcessingStats, configure_logging

ProgressCallback = Callable[[int, int, int, bool], None]


def process_glyph(
    char_dict: dict[str, Any],
    font_config_dict: dict[str, Any],
    bold: bool = False,
) -> dict[str, Any]:
    """Trace a single character.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        char_dict: Serialized character (from CharData.to_dict())
        font_config_dict: Serialized font configuration
        bold: Build the bold variant

    Returns:
        Dictionary containing either:
        - Success: {"outline": outline_dict, "abandoned": int, "duration_ms": float}
        - Skipped: {"skipped": str, "duration_ms": float} for bitmaps that trace
          to nothing
        - Error: {"error": str, "code_point": int, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        char = CharData.from_dict(char_dict)
        generator = GlyphGenerator(FontConfig(**font_config_dict))
        result = generator.generate(char, bold=bold)

        duration_ms = (time.time() - start_time) * 1000
        if char.kind == GlyphKind.BITMAP and result.outline.is_empty():
            return {"skipped": "no contours", "duration_ms": duration_ms}

        return {
            "outline": result.outline.to_dict(),
            "abandoned": result.abandoned_loops,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "code_point": char_dict.get("code_point", 0),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class FontProcessor:
    """Orchestrates a font build.

    Manages the complete workflow:
    1. Load provider definitions and textures
    2. Trace glyphs in parallel using worker processes
    3. Collect results, sorted by code point, and update statistics
    4. Write the font file

    Example:
        settings = BitFontSettings()
        processor = FontProcessor(settings)
        stats = processor.build(output_path=Path("dist/MinecraftFont.ttf"))
    """

    def __init__(self, config: BitFontSettings) -> None:
        """Initialize font processor with configuration.

        Args:
            config: BitFont settings
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def load(self) -> list[CharData]:
        """Load and filter characters according to the settings."""
        loader = FontLoader(self.config)
        return loader.load_all(charset=self.config.processing.charset)

    def build(
        self,
        output_path: Path | None = None,
        chars: list[CharData] | None = None,
        max_workers: int | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> ProcessingStats:
        """Load, trace and write a font.

        Args:
            output_path: Path for the output font (derived from settings if None)
            chars: Preloaded characters (loaded from the asset paths if None)
            max_workers: Maximum worker processes (None = from settings)
            progress_callback: Optional callback(completed, total, code_point, success)

        Returns:
            ProcessingStats with counts, timing, and error details

        Raises:
            NoGlyphsError: If no character data could be loaded
            FontSaveError: If the font cannot be written
        """
        bold = self.config.processing.bold
        if output_path is None:
            output_path = self.config.paths.output_dir / FontWriter.output_filename(
                self.config.processing.charset, bold
            )

        self.logger.info(
            "Starting font build",
            output=str(output_path),
            charset=self.config.processing.charset.value,
            bold=bold,
        )

        if chars is None:
            chars = self.load()
        if not chars:
            raise NoGlyphsError()

        outlines, stats = self.generate(
            chars,
            bold=bold,
            max_workers=max_workers,
            progress_callback=progress_callback,
        )

        writer = FontWriter(self.config.font, bold=bold)
        writer.write(outlines, output_path)

        self.logger.info(
            "Build complete",
            output=str(output_path),
            glyphs=len(outlines),
            errors=stats.error_count,
            abandoned_loops=stats.abandoned_loops,
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return stats

    def generate(
        self,
        chars: list[CharData],
        bold: bool = False,
        max_workers: int | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> tuple[list[GlyphOutline], ProcessingStats]:
        """Trace characters in parallel.

        Args:
            chars: Characters to trace
            bold: Build the bold variant
            max_workers: Maximum worker processes; 1 runs inline
            progress_callback: Optional callback(completed, total, code_point, success)

        Returns:
            Outlines sorted by code point, and the run statistics
        """
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        font_config_dict = self.config.font.model_dump()
        tasks: dict[int, dict[str, Any]] = {}
        for char in chars:
            # First definition of a code point wins, as in the loader
            tasks.setdefault(char.code_point, char.to_dict())
        outlines: dict[int, GlyphOutline] = {}

        self.logger.info(
            "Starting glyph tracing",
            glyph_count=len(tasks),
            max_workers=max_workers,
        )

        total = len(tasks)
        completed = 0

        def collect(code_point: int, result: dict[str, Any]) -> None:
            nonlocal completed
            success = self._handle_result(code_point, result, outlines)
            completed += 1
            if progress_callback is not None:
                progress_callback(completed, total, code_point, success)

        if max_workers == 1:
            for code_point, char_dict in tasks.items():
                collect(code_point, process_glyph(char_dict, font_config_dict, bold))
        else:
            self._run_pool(tasks, font_config_dict, bold, max_workers, stats, collect)

        stats.end_time = time.time()

        self.logger.info(
            "Tracing complete",
            processed=stats.processed_count,
            errors=stats.error_count,
            abandoned_loops=stats.abandoned_loops,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return [outlines[cp] for cp in sorted(outlines)], stats

    def _run_pool(
        self,
        tasks: dict[int, dict[str, Any]],
        font_config_dict: dict[str, Any],
        bold: bool,
        max_workers: int | None,
        stats: ProcessingStats,
        collect: Callable[[int, dict[str, Any]], None],
    ) -> None:
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for code_point, char_dict in tasks.items():
                future = executor.submit(process_glyph, char_dict, font_config_dict, bold)
                pending_futures[future] = code_point

            try:
                for future in as_completed(list(pending_futures)):
                    code_point = pending_futures.pop(future)
                    try:
                        result = future.result()
                    except Exception as e:
                        # Executor-level error (worker died, pickling)
                        result = {
                            "error": str(e),
                            "code_point": code_point,
                            "traceback": traceback.format_exc(),
                        }

                    collect(code_point, result)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise

    def _handle_result(
        self,
        code_point: int,
        result: dict[str, Any],
        outlines: dict[int, GlyphOutline],
    ) -> bool:
        """Record one worker result; return True on success."""
        if "error" in result:
            self.processing_logger.log_glyph_error(
                code_point=code_point,
                error=GlyphProcessingError(code_point, result["error"]),
                traceback=result.get("traceback"),
            )
            return False

        if "skipped" in result:
            self.processing_logger.log_glyph_skipped(code_point, result["skipped"])
            return True

        outline = GlyphOutline.from_dict(result["outline"])
        if result["abandoned"]:
            self.processing_logger.log_abandoned_loops(code_point, result["abandoned"])

        outlines[code_point] = outline
        self.processing_logger.log_glyph_complete(
            code_point=code_point,
            contours=len(outline.contours),
            duration_ms=result.get("duration_ms", 0.0),
        )
        return True
