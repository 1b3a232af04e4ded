"""Logging utilities for StrokeFont."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ExportStats:
    """Statistics from an export run."""

    glyph_count: int = 0
    empty_glyph_count: int = 0
    skipped_stroke_count: int = 0
    contour_count: int = 0
    point_count: int = 0
    skipped_strokes: list[tuple[str, str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate export duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    def to_dict(self) -> dict[str, float | int]:
        return {
            "glyph_count": self.glyph_count,
            "empty_glyph_count": self.empty_glyph_count,
            "skipped_stroke_count": self.skipped_stroke_count,
            "contour_count": self.contour_count,
            "point_count": self.point_count,
            "duration_seconds": round(self.duration_seconds, 3),
        }


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers installed by an earlier call
    for handler in list(root_logger.handlers):
        if getattr(handler, "_strokefont", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._strokefont = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._strokefont = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("strokefont")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file is not None else None,
        level=console_level,
    )

    return logger


class ExportLogger:
    """Logger for tracking export progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ExportStats()

    def log_export_start(self, character_count: int) -> None:
        self._logger.info("Export started", characters=character_count)

    def log_glyph_complete(self, character: str, contours: int, points: int) -> None:
        """Log a finished glyph outline."""
        self._logger.debug(
            "Glyph outlined",
            character=character,
            codepoint=f"U+{ord(character):04X}",
            contours=contours,
            points=points,
        )
        self._stats.glyph_count += 1
        self._stats.contour_count += contours
        self._stats.point_count += points

    def log_glyph_empty(self, character: str) -> None:
        """Log a glyph that produced no outlines."""
        self._logger.info(
            "Empty glyph",
            character=character,
            codepoint=f"U+{ord(character):04X}",
        )
        self._stats.glyph_count += 1
        self._stats.empty_glyph_count += 1

    def log_stroke_skipped(self, character: str, stroke_id: str, reason: str) -> None:
        """Record a stroke that produced no geometry."""
        self._stats.skipped_stroke_count += 1
        self._stats.skipped_strokes.append((character, stroke_id, reason))

    def log_export_complete(self, file_size: int) -> None:
        self._logger.info(
            "Export complete",
            glyphs=self._stats.glyph_count,
            empty=self._stats.empty_glyph_count,
            skipped_strokes=self._stats.skipped_stroke_count,
            bytes=file_size,
            duration_s=round(self._stats.duration_seconds, 3),
        )

    def log_export_failed(self, error: Exception) -> None:
        self._logger.error(
            "Export failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> ExportStats:
        """Get current export statistics."""
        return self._stats
