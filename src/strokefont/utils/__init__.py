"""Utility modules for StrokeFont."""

from strokefont.utils.logging import ExportLogger, ExportStats, configure_logging

__all__ = ["ExportLogger", "ExportStats", "configure_logging"]
