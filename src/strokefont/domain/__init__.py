"""Domain models for strokefont.

This module contains the domain models for the stroke-to-font pipeline:
the resolved stroke snapshot that comes in, and the glyph outlines that go
out. All models are designed to be:

- Immutable where they are inputs (frozen dataclasses)
- Serializable to plain dictionaries (JSON snapshots)
- Independent of fonttools implementation details

Key classes:
- Point: A 2D point
- Contour: A closed polygon boundary
- AnchorPoint, Stroke, ContainerBox, PlacedStroke: Stroke input
- GlobalStyle: Weight, slant and default linecap
- CharacterSnapshot, FontSnapshot: Per-export input snapshot
- GlyphData, FontMetrics, FontAssembly: Outline output
"""

from strokefont.domain.charset import hangul_characters, is_hangul
from strokefont.domain.contour import Contour, Point
from strokefont.domain.glyph import FontAssembly, FontMetrics, GlyphData, glyph_name_for
from strokefont.domain.snapshot import CharacterSnapshot, FontSnapshot
from strokefont.domain.stroke import (
    UNIT_BOX,
    AnchorPoint,
    ContainerBox,
    GlobalStyle,
    Linecap,
    PlacedStroke,
    Stroke,
)

__all__: list[str] = [
    # Enums
    "Linecap",
    # Geometry
    "Point",
    "Contour",
    # Input
    "AnchorPoint",
    "Stroke",
    "ContainerBox",
    "UNIT_BOX",
    "PlacedStroke",
    "GlobalStyle",
    "CharacterSnapshot",
    "FontSnapshot",
    # Output
    "GlyphData",
    "FontMetrics",
    "FontAssembly",
    "glyph_name_for",
    # Character sets
    "hangul_characters",
    "is_hangul",
]
