"""Core outline algorithms and export orchestration for strokefont.

This module contains the core algorithms for:

- Geometry operations (signed area, Bezier flattening, simplification)
- Open stroke outlining (offset ribbons with caps and joins)
- Closed stroke outlining (fills and optional rings)
- Glyph assembly (box mapping, Y flip, font units, slant)
- Export orchestration (progress, cancellation, delivery)

Key functions:
- bezier_flatten: Convert Bezier curves to line segments
- flatten_anchor_path: Flatten a path of anchors into a polyline
- douglas_peucker: Simplify a polyline
- build_ribbon: Outline an open centerline
- flatten_closed_stroke: Outline a closed stroke as a fill

Key classes:
- GlyphAssembler: Builds one character's outline
- FontExporter: Runs a full font export
"""

from strokefont.core.assembler import GlyphAssembler, apply_slant, map_anchor, to_font_units
from strokefont.core.closed import build_ring, flatten_closed_stroke
from strokefont.core.exporter import (
    CancellationToken,
    ExportPhase,
    ExportResult,
    FontExporter,
    font_filename,
    resolve_characters,
)
from strokefont.core.geometry import (
    bezier_flatten,
    dedupe_points,
    douglas_peucker,
    flatten_anchor_path,
    perpendicular_distance,
    signed_area,
    simplify_closed,
)
from strokefont.core.offset import build_dot, build_ribbon, offset_polyline, outline_open_stroke

__all__ = [
    # Exporter
    "CancellationToken",
    "ExportPhase",
    "ExportResult",
    "FontExporter",
    # Assembler
    "GlyphAssembler",
    "apply_slant",
    # Geometry functions
    "bezier_flatten",
    # Outlining
    "build_dot",
    "build_ribbon",
    "build_ring",
    "dedupe_points",
    "douglas_peucker",
    "flatten_anchor_path",
    "flatten_closed_stroke",
    "font_filename",
    "map_anchor",
    "offset_polyline",
    "outline_open_stroke",
    "perpendicular_distance",
    "resolve_characters",
    "signed_area",
    "simplify_closed",
    "to_font_units",
]
