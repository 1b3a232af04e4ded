"""Configuration settings for StrokeFont."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class ClosedStrokeMode(str, Enum):
    """How closed strokes are turned into outlines."""

    FILL = "fill"
    RING = "ring"


class GeometryConfig(BaseModel):
    """Configuration for outline generation with scale-relative tolerances.

    Tolerance values are specified in font units at a reference UPM of 1000.
    Outlines are generated in em space (0-1), so every tolerance is converted
    with to_em() before use.
    """

    reference_upm: int = Field(
        default=1000,
        description="Reference UPM for tolerance values",
    )
    flatten_tolerance: float = Field(
        default=0.25,
        ge=0.01,
        le=10.0,
        description="Maximum chord-to-curve deviation when flattening Bezier segments",
    )
    simplify_epsilon: float = Field(
        default=0.5,
        ge=0.0,
        le=10.0,
        description="Douglas-Peucker distance bound for simplified outlines",
    )
    dedup_tolerance: float = Field(
        default=0.01,
        ge=0.0,
        le=5.0,
        description="Distance under which consecutive points are considered equal",
    )
    max_flatten_depth: int = Field(
        default=16,
        ge=1,
        le=32,
        description="Maximum recursive subdivision depth per Bezier segment",
    )
    round_cap_segments: int = Field(
        default=8,
        ge=2,
        le=64,
        description="Number of straight pieces approximating a round cap semicircle",
    )
    miter_limit: float = Field(
        default=2.0,
        ge=1.0,
        le=10.0,
        description="Maximum interior join offset as a multiple of half the thickness",
    )
    closed_stroke_mode: ClosedStrokeMode = Field(
        default=ClosedStrokeMode.FILL,
        description="Fill closed strokes directly, or outline them as rings",
    )

    def to_em(self, base_value: float) -> float:
        """Convert a tolerance from reference font units to em units.

        Args:
            base_value: The tolerance value at reference UPM

        Returns:
            Tolerance as a fraction of the em
        """
        return base_value / self.reference_upm

    def get_flatten_tolerance(self) -> float:
        """Get Bezier flattening tolerance in em units."""
        return self.to_em(self.flatten_tolerance)

    def get_simplify_epsilon(self) -> float:
        """Get Douglas-Peucker epsilon in em units."""
        return self.to_em(self.simplify_epsilon)

    def get_dedup_tolerance(self) -> float:
        """Get point deduplication tolerance in em units."""
        return self.to_em(self.dedup_tolerance)


class FontConfig(BaseModel):
    """Font-wide constants and naming."""

    units_per_em: int = Field(
        default=1000,
        ge=16,
        le=16384,
        description="Design units per em",
    )
    ascender: int = Field(
        default=880,
        description="Ascender in font units",
    )
    descender: int = Field(
        default=-120,
        le=0,
        description="Descender in font units (negative)",
    )
    advance_width: int = Field(
        default=1000,
        ge=0,
        description="Uniform advance width before letter spacing",
    )
    family_name: str = Field(
        default="StrokeFont",
        min_length=1,
        description="Family name written to the name table",
    )
    style_name: str = Field(
        default="Regular",
        min_length=1,
        description="Style name written to the name table",
    )
    version: str = Field(
        default="1.0",
        description="Font version string",
    )
    include_space: bool = Field(
        default=True,
        description="Add an empty space glyph when it is not requested explicitly",
    )

    @model_validator(mode="after")
    def _check_vertical_metrics(self) -> "FontConfig":
        if self.ascender <= self.descender:
            raise ValueError("ascender must be greater than descender")
        return self

    @property
    def full_name(self) -> str:
        return f"{self.family_name} {self.style_name}"

    @property
    def postscript_name(self) -> str:
        return f"{self.family_name}-{self.style_name}".replace(" ", "")


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


class StrokeFontSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    font: FontConfig = Field(default_factory=FontConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> StrokeFontSettings:
    """Get default application settings."""
    return StrokeFontSettings()
