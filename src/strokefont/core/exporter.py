"""Export orchestration: snapshot in, TrueType bytes out.

This module sequences one complete font export:
1. Collect the character set to export
2. Build the outline of every character (GlyphAssembler)
3. Compile the glyph set into a font (FontBuilder)
4. Serialize it and hand the bytes to a delivery callable

Key components:
- ExportPhase: Progress phases reported to callers
- CancellationToken: Cooperative cancellation checked between characters
- ExportResult: Outcome of one export
- FontExporter: Main orchestrator
"""

import re
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

import structlog

from strokefont.config import StrokeFontSettings
from strokefont.core.assembler import GlyphAssembler
from strokefont.domain import FontSnapshot
from strokefont.exceptions import (
    ConcurrentExportError,
    DeliveryError,
    ExportCancelledError,
    ExportError,
)
from strokefont.io.builder import FontBuilder
from strokefont.utils import ExportLogger, ExportStats

ProgressCallback = Callable[[int, int, "ExportPhase"], None]
Delivery = Callable[[bytes, str], None]


class ExportPhase(str, Enum):
    """Stages of an export, in order."""

    COLLECTING = "collecting"
    OUTLINES = "outlines"
    COMPILING = "compiling"
    ENCODING = "encoding"


class CancellationToken:
    """Thread-safe flag a caller sets to stop a running export."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


@dataclass
class ExportResult:
    """Outcome of one export.

    Attributes:
        success: Whether a font was produced and delivered
        error: Error message when success is False
        font_data: The TrueType bytes on success
        glyph_count: Glyphs in the font, .notdef and space included
        file_size: Size of font_data in bytes
        stats: Per-export statistics
    """

    success: bool
    error: str | None = None
    font_data: bytes | None = None
    glyph_count: int = 0
    file_size: int = 0
    stats: ExportStats = field(default_factory=ExportStats)
    cancelled: bool = False


def font_filename(family_name: str) -> str:
    """Filename suggested to the delivery target."""
    name = re.sub(r"[^\w\s-]", "", family_name).strip()
    return f"{name or 'strokefont'}.ttf"


def resolve_characters(snapshot: FontSnapshot, characters: Iterable[str] | None) -> list[str]:
    """Ordered, deduplicated list of characters to export.

    Args:
        snapshot: Export input
        characters: Explicit characters, or None for the whole snapshot

    Raises:
        ValueError: If an entry is not a single character
    """
    if characters is None:
        return snapshot.character_list()

    result: list[str] = []
    seen: set[str] = set()
    for character in characters:
        if len(character) != 1:
            raise ValueError(f"Expected single characters, got {character!r}")
        if character not in seen:
            seen.add(character)
            result.append(character)
    return result


class FontExporter:
    """Runs font exports, one at a time.

    Exports are synchronous and run on the caller's thread. A second
    export started while one is running is rejected immediately instead
    of waiting.

    Example:
        exporter = FontExporter(get_default_settings())
        result = exporter.export(
            snapshot,
            progress_callback=lambda done, total, phase: ...,
            delivery=FontFileWriter(Path("out.ttf")),
        )
    """

    def __init__(
        self,
        settings: StrokeFontSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the exporter.

        Args:
            settings: Geometry and font settings
            logger: Logger to use (defaults to the 'strokefont' logger)
        """
        self.settings = settings or StrokeFontSettings()
        self.logger = logger or structlog.get_logger("strokefont")
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._lock.locked()

    def export(
        self,
        snapshot: FontSnapshot,
        characters: Iterable[str] | None = None,
        progress_callback: ProgressCallback | None = None,
        cancel_token: CancellationToken | None = None,
        delivery: Delivery | None = None,
    ) -> ExportResult:
        """Export a snapshot as a TrueType font.

        Args:
            snapshot: Resolved strokes and global style
            characters: Characters to include (default: all in the snapshot)
            progress_callback: Optional callback(completed, total, phase)
            cancel_token: Optional token checked between characters
            delivery: Optional callable(data, filename) receiving the font

        Returns:
            ExportResult; failures are reported in it, never raised
        """
        if not self._lock.acquire(blocking=False):
            error = ConcurrentExportError()
            self.logger.warning("Export rejected", reason=str(error))
            return ExportResult(success=False, error=str(error))

        export_logger = ExportLogger(self.logger)
        try:
            return self._run(snapshot, characters, progress_callback, cancel_token, delivery, export_logger)
        except ExportCancelledError as e:
            self.logger.info(
                "Export cancelled",
                completed=e.completed_count,
                pending=e.pending_count,
            )
            return ExportResult(success=False, error=str(e), stats=export_logger.stats, cancelled=True)
        except (ExportError, ValueError) as e:
            export_logger.log_export_failed(e)
            return ExportResult(success=False, error=str(e), stats=export_logger.stats)
        except Exception as e:
            export_logger.log_export_failed(e)
            return ExportResult(
                success=False,
                error=f"Unexpected error: {type(e).__name__}: {e}",
                stats=export_logger.stats,
            )
        finally:
            export_logger.stats.end_time = time.time()
            self._lock.release()

    def _run(
        self,
        snapshot: FontSnapshot,
        characters: Iterable[str] | None,
        progress_callback: ProgressCallback | None,
        cancel_token: CancellationToken | None,
        delivery: Delivery | None,
        export_logger: ExportLogger,
    ) -> ExportResult:
        def report(completed: int, total: int, phase: ExportPhase) -> None:
            if progress_callback is not None:
                progress_callback(completed, total, phase)

        stats = export_logger.stats
        stats.start_time = time.time()
        style = snapshot.style
        font_config = self.settings.font

        # Phase 1: collect
        report(0, 1, ExportPhase.COLLECTING)
        selected = resolve_characters(snapshot, characters)
        report(1, 1, ExportPhase.COLLECTING)
        if not selected:
            raise ValueError("No characters to export")

        export_logger.log_export_start(len(selected))

        # Phase 2: outlines
        assembler = GlyphAssembler(self.settings.geometry, font_config, self.logger)
        builder = FontBuilder(font_config, advance_width=assembler.advance_width(style))
        total = len(selected)
        report(0, total, ExportPhase.OUTLINES)

        for completed, character in enumerate(selected):
            if cancel_token is not None and cancel_token.cancelled:
                raise ExportCancelledError(completed, total - completed)

            composed = snapshot.get(character)
            placements = composed.placements if composed is not None else ()
            glyph = assembler.assemble(character, placements, style)

            for skipped in assembler.skipped:
                export_logger.log_stroke_skipped(character, skipped.stroke_id, skipped.reason)
            if glyph.is_empty():
                export_logger.log_glyph_empty(character)
            else:
                export_logger.log_glyph_complete(character, len(glyph.contours), glyph.point_count())

            builder.add_glyph(glyph)
            report(completed + 1, total, ExportPhase.OUTLINES)

        if cancel_token is not None and cancel_token.cancelled:
            raise ExportCancelledError(total, 0)

        # Phase 3: compile
        report(0, 1, ExportPhase.COMPILING)
        font = builder.build()
        report(1, 1, ExportPhase.COMPILING)

        # Phase 4: encode and deliver
        report(0, 1, ExportPhase.ENCODING)
        data = FontBuilder.serialize(font)

        if delivery is not None:
            filename = font_filename(font_config.family_name)
            try:
                delivery(data, filename)
            except DeliveryError:
                raise
            except Exception as e:
                raise DeliveryError(filename, str(e)) from e
        report(1, 1, ExportPhase.ENCODING)

        stats.end_time = time.time()
        export_logger.log_export_complete(len(data))

        return ExportResult(
            success=True,
            font_data=data,
            glyph_count=len(builder.glyph_order()),
            file_size=len(data),
            stats=stats,
        )
