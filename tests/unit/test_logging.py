"""Tests for logging utilities."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import structlog

from strokefont.utils import ExportLogger, ExportStats, configure_logging


@pytest.fixture
def restore_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_strokefont", False):
            root.removeHandler(handler)
            handler.close()
    structlog.reset_defaults()


class TestExportStats:
    def test_duration(self) -> None:
        stats = ExportStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == 2.5

    def test_duration_unfinished(self) -> None:
        assert ExportStats(start_time=10.0).duration_seconds == 0.0

    def test_to_dict(self) -> None:
        stats = ExportStats(glyph_count=3, empty_glyph_count=1, start_time=1.0, end_time=1.25)
        data = stats.to_dict()
        assert data["glyph_count"] == 3
        assert data["empty_glyph_count"] == 1
        assert data["duration_seconds"] == 0.25


class TestExportLogger:
    def test_counts(self) -> None:
        logger = MagicMock()
        export_logger = ExportLogger(logger)

        export_logger.log_glyph_complete("가", contours=3, points=40)
        export_logger.log_glyph_complete("나", contours=2, points=20)
        export_logger.log_glyph_empty("ㅇ")
        export_logger.log_stroke_skipped("가", "dot", "zero-length stroke with butt cap")

        stats = export_logger.stats
        assert stats.glyph_count == 3
        assert stats.empty_glyph_count == 1
        assert stats.contour_count == 5
        assert stats.point_count == 60
        assert stats.skipped_strokes == [("가", "dot", "zero-length stroke with butt cap")]

    def test_codepoint_logged(self) -> None:
        logger = MagicMock()
        ExportLogger(logger).log_glyph_complete("가", contours=1, points=4)
        assert logger.debug.call_args.kwargs["codepoint"] == "U+AC00"

    def test_failure_logged_as_error(self) -> None:
        logger = MagicMock()
        ExportLogger(logger).log_export_failed(ValueError("boom"))
        logger.error.assert_called_once_with("Export failed", error="boom", error_type="ValueError")


@pytest.mark.usefixtures("restore_logging")
class TestConfigureLogging:
    def test_console_handler_only(self) -> None:
        configure_logging()
        ours = [h for h in logging.getLogger().handlers if getattr(h, "_strokefont", False)]
        assert len(ours) == 1
        assert ours[0].level == logging.WARNING

    def test_quiet_raises_console_level(self) -> None:
        configure_logging(quiet=True)
        ours = [h for h in logging.getLogger().handlers if getattr(h, "_strokefont", False)]
        assert ours[0].level == logging.ERROR

    def test_reconfigure_replaces_handlers(self, tmp_path: Path) -> None:
        configure_logging(log_file=tmp_path / "a.log")
        configure_logging(log_file=tmp_path / "b.log")
        ours = [h for h in logging.getLogger().handlers if getattr(h, "_strokefont", False)]
        assert len(ours) == 2

    def test_file_receives_json(self, tmp_path: Path) -> None:
        log_file = tmp_path / "export.log"
        logger = configure_logging(log_file=log_file)

        logger.info("Glyph outlined", character="가")

        content = log_file.read_text(encoding="utf-8")
        assert '"event": "Glyph outlined"' in content
        assert '"character": "가"' in content
