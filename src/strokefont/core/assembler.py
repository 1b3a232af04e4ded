"""Glyph assembly: placed strokes to font-unit outlines.

For each stroke of a character the assembler:
1. Maps anchors and handles from box space into em space (no clamping)
2. Builds the outline in em space (ribbon for open strokes, fill or ring for
   closed ones), so stroke thickness stays isotropic inside non-square boxes
3. Converts the contours to font units with the Y axis flipped

Finally the character's contours are sheared once for the global slant.
Strokes that cannot produce geometry are logged and skipped; they never
fail the character.
"""

import math

import structlog

from strokefont.config import ClosedStrokeMode, FontConfig, GeometryConfig
from strokefont.core.closed import build_ring, flatten_closed_stroke
from strokefont.core.offset import outline_open_stroke
from strokefont.domain import (
    AnchorPoint,
    ContainerBox,
    Contour,
    GlobalStyle,
    GlyphData,
    PlacedStroke,
    Point,
)
from strokefont.exceptions import DegenerateStrokeError


def map_anchor(anchor: AnchorPoint, box: ContainerBox) -> AnchorPoint:
    """Map an anchor and its handles from box space to em space."""
    return AnchorPoint(
        x=box.x + anchor.x * box.width,
        y=box.y + anchor.y * box.height,
        handle_in=box.to_absolute(anchor.handle_in) if anchor.handle_in is not None else None,
        handle_out=box.to_absolute(anchor.handle_out) if anchor.handle_out is not None else None,
    )


def to_font_units(contour: Contour, units_per_em: int) -> Contour:
    """Scale an em-space contour to font units, flipping the Y axis."""
    upm = units_per_em
    return Contour(points=[Point(p.x * upm, upm - p.y * upm) for p in contour.points])


def apply_slant(contours: list[Contour], slant_degrees: float, units_per_em: int) -> list[Contour]:
    """Shear contours around the vertical center of the em.

    Positive angles lean the tops of glyphs to the right. A zero angle
    returns the input unchanged.
    """
    if slant_degrees == 0:
        return contours

    factor = math.tan(math.radians(slant_degrees))
    center = units_per_em / 2
    return [
        Contour(points=[Point(p.x + factor * (p.y - center), p.y) for p in contour.points])
        for contour in contours
    ]


class GlyphAssembler:
    """Turns the placed strokes of one character into a GlyphData."""

    def __init__(
        self,
        geometry: GeometryConfig | None = None,
        font: FontConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.geometry = geometry or GeometryConfig()
        self.font = font or FontConfig()
        self.logger = logger or structlog.get_logger("strokefont")
        self.skipped: list[DegenerateStrokeError] = []

    def advance_width(self, style: GlobalStyle) -> int:
        """Uniform advance width including letter spacing."""
        return max(0, round(self.font.advance_width * (1 + style.letter_spacing)))

    def outline_stroke(self, placed: PlacedStroke, style: GlobalStyle) -> list[Contour]:
        """Build the em-space contours of one placed stroke.

        Args:
            placed: Stroke and the box it is drawn in
            style: Global style (weight multiplier and default linecap)

        Returns:
            One contour, or two for a ring with a hole

        Raises:
            DegenerateStrokeError: If the stroke yields no geometry
        """
        stroke = placed.stroke
        geometry = self.geometry

        if len(stroke.points) < 2:
            raise DegenerateStrokeError(stroke.id, f"{len(stroke.points)} anchor(s)")

        anchors = [map_anchor(anchor, placed.box) for anchor in stroke.points]
        half_width = stroke.thickness * style.weight_multiplier / 2
        tolerance = geometry.get_flatten_tolerance()
        epsilon = geometry.get_simplify_epsilon()
        dedup = geometry.get_dedup_tolerance()

        if stroke.closed and geometry.closed_stroke_mode == ClosedStrokeMode.FILL:
            contour = flatten_closed_stroke(
                anchors,
                tolerance,
                epsilon,
                dedup_tolerance=dedup,
                max_depth=geometry.max_flatten_depth,
            )
            if contour is None:
                raise DegenerateStrokeError(stroke.id, "closed path has fewer than 3 distinct points")
            return [contour]

        if not stroke.has_usable_thickness():
            raise DegenerateStrokeError(stroke.id, f"non-positive thickness {stroke.thickness}")
        if not (math.isfinite(half_width) and half_width > 0):
            raise DegenerateStrokeError(stroke.id, f"unusable weight multiplier {style.weight_multiplier}")

        if stroke.closed:
            contours = build_ring(
                anchors,
                half_width,
                tolerance,
                epsilon,
                dedup_tolerance=dedup,
                miter_limit=geometry.miter_limit,
                max_depth=geometry.max_flatten_depth,
            )
            if not contours:
                raise DegenerateStrokeError(stroke.id, "closed path has fewer than 3 distinct points")
            return contours

        ribbon = outline_open_stroke(
            anchors,
            half_width,
            style.resolve_linecap(stroke),
            tolerance,
            simplify_epsilon=epsilon,
            dedup_tolerance=dedup,
            round_cap_segments=geometry.round_cap_segments,
            miter_limit=geometry.miter_limit,
            max_depth=geometry.max_flatten_depth,
        )
        if ribbon is None:
            raise DegenerateStrokeError(stroke.id, "zero-length stroke with butt cap")
        return [ribbon]

    def assemble(
        self,
        character: str,
        placements: tuple[PlacedStroke, ...] | list[PlacedStroke],
        style: GlobalStyle,
    ) -> GlyphData:
        """Assemble the outline of one character in font units.

        Degenerate strokes are skipped; the list of skipped strokes for the
        latest call is available as self.skipped.

        Args:
            character: The character being built
            placements: Its strokes with their boxes
            style: Global style snapshot

        Returns:
            GlyphData with contours in font units (possibly none)
        """
        upm = self.font.units_per_em
        self.skipped = []
        contours: list[Contour] = []

        for placed in placements:
            try:
                em_contours = self.outline_stroke(placed, style)
            except DegenerateStrokeError as e:
                self.logger.debug(
                    "Stroke skipped",
                    character=character,
                    stroke=e.stroke_id,
                    reason=e.reason,
                )
                self.skipped.append(e)
                continue
            contours.extend(to_font_units(c, upm) for c in em_contours)

        return GlyphData(
            character=character,
            contours=apply_slant(contours, style.slant_degrees, upm),
            advance_width=self.advance_width(style),
        )
