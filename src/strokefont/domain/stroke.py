"""Stroke input types.

Strokes arrive already resolved by the editor: every stroke is placed in
exactly one container box and carries its own optional linecap override.
All types here are frozen; the outline pipeline never mutates its input.

Coordinates of anchors and handles are box-relative (0-1, Y-down). Values
outside 0-1 are legal (overshooting handles) and are never clamped.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from strokefont.domain.contour import Point


class Linecap(str, Enum):
    """Shape applied at the open ends of a centerline stroke."""

    ROUND = "round"
    BUTT = "butt"
    SQUARE = "square"


def _pick(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key, accepting snake_case and camelCase."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _point_or_none(value: Any) -> Point | None:
    if value is None:
        return None
    return Point.from_dict(value)


@dataclass(frozen=True, slots=True)
class AnchorPoint:
    """An on-path point with optional Bezier handles.

    Attributes:
        x: Box-relative X coordinate
        y: Box-relative Y coordinate
        handle_in: Control point of the segment arriving at this anchor
        handle_out: Control point of the segment leaving this anchor
    """

    x: float
    y: float
    handle_in: Point | None = None
    handle_out: Point | None = None

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"x": self.x, "y": self.y}
        if self.handle_in is not None:
            data["handle_in"] = self.handle_in.to_dict()
        if self.handle_out is not None:
            data["handle_out"] = self.handle_out.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnchorPoint":
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            handle_in=_point_or_none(_pick(data, "handle_in", "handleIn")),
            handle_out=_point_or_none(_pick(data, "handle_out", "handleOut")),
        )


@dataclass(frozen=True, slots=True)
class Stroke:
    """A single authored stroke.

    Open strokes are centerlines that get thickness/2 on each side. Closed
    strokes are filled directly and their thickness is ignored (unless the
    ring mode is enabled in the geometry configuration).

    Attributes:
        id: Stable identifier, used in logs
        points: Anchors along the path
        closed: Whether the last anchor connects back to the first
        thickness: Stroke width as a fraction of the em
        linecap: Per-stroke cap override (None = use the global default)
        label: Optional human-readable name
    """

    id: str
    points: tuple[AnchorPoint, ...]
    closed: bool = False
    thickness: float = 0.0
    linecap: Linecap | None = None
    label: str | None = None

    def has_usable_thickness(self) -> bool:
        """True if the thickness can produce an open-stroke ribbon."""
        return math.isfinite(self.thickness) and self.thickness > 0

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "points": [p.to_dict() for p in self.points],
            "closed": self.closed,
            "thickness": self.thickness,
        }
        if self.linecap is not None:
            data["linecap"] = self.linecap.value
        if self.label is not None:
            data["label"] = self.label
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stroke":
        linecap = data.get("linecap")
        return cls(
            id=str(data["id"]),
            points=tuple(AnchorPoint.from_dict(p) for p in data["points"]),
            closed=bool(data.get("closed", False)),
            thickness=float(data.get("thickness", 0.0)),
            linecap=Linecap(linecap) if linecap is not None else None,
            label=data.get("label"),
        )


@dataclass(frozen=True, slots=True)
class ContainerBox:
    """Placement rectangle in normalized character space (0-1, Y-down).

    Attributes:
        x: Left edge
        y: Top edge
        width: Box width
        height: Box height
    """

    x: float
    y: float
    width: float
    height: float

    def to_absolute(self, point: Point) -> Point:
        """Map a box-relative point to character space without clamping."""
        return Point(self.x + point.x * self.width, self.y + point.y * self.height)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContainerBox":
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )


UNIT_BOX = ContainerBox(0.0, 0.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class PlacedStroke:
    """A stroke together with the one box it is drawn in."""

    stroke: Stroke
    box: ContainerBox

    def to_dict(self) -> dict[str, Any]:
        return {"stroke": self.stroke.to_dict(), "box": self.box.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlacedStroke":
        return cls(
            stroke=Stroke.from_dict(data["stroke"]),
            box=ContainerBox.from_dict(data["box"]),
        )


@dataclass(frozen=True, slots=True)
class GlobalStyle:
    """Font-wide style snapshot.

    Attributes:
        weight_multiplier: Already-resolved factor applied to every thickness
        slant_degrees: Shear angle; positive values lean glyph tops right
        default_linecap: Cap used by strokes without their own override
        letter_spacing: Extra advance as a fraction of the base advance
    """

    weight_multiplier: float = 1.0
    slant_degrees: float = 0.0
    default_linecap: Linecap | None = Linecap.ROUND
    letter_spacing: float = 0.0

    def resolve_linecap(self, stroke: Stroke) -> Linecap:
        """Resolve the effective cap: stroke override, global default, round."""
        if stroke.linecap is not None:
            return stroke.linecap
        if self.default_linecap is not None:
            return self.default_linecap
        return Linecap.ROUND

    def to_dict(self) -> dict[str, Any]:
        return {
            "weight_multiplier": self.weight_multiplier,
            "slant_degrees": self.slant_degrees,
            "default_linecap": (
                self.default_linecap.value if self.default_linecap is not None else None
            ),
            "letter_spacing": self.letter_spacing,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlobalStyle":
        linecap = _pick(data, "default_linecap", "defaultLinecap", "linecap")
        return cls(
            weight_multiplier=float(
                _pick(data, "weight_multiplier", "weightMultiplier", default=1.0)
            ),
            slant_degrees=float(
                _pick(data, "slant_degrees", "slantDegrees", "slant", default=0.0)
            ),
            default_linecap=Linecap(linecap) if linecap is not None else Linecap.ROUND,
            letter_spacing=float(
                _pick(data, "letter_spacing", "letterSpacing", default=0.0)
            ),
        )
