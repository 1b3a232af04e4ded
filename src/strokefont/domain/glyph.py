"""Glyph outline data and font-level assembly.

This module defines the output side of the pipeline: the outline of one
character in font design units, and the ordered glyph set that the font
builder serializes.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from strokefont.domain.contour import Contour


def glyph_name_for(codepoint: int) -> str:
    """Return the production glyph name for a codepoint.

    Args:
        codepoint: Unicode code point

    Returns:
        'uniXXXX' inside the BMP, 'uXXXXX' above it
    """
    if codepoint <= 0xFFFF:
        return f"uni{codepoint:04X}"
    return f"u{codepoint:05X}"


@dataclass
class GlyphData:
    """Outline of a single character in font units.

    Attributes:
        character: The character this glyph renders (one code point)
        contours: Closed contours; empty for a blank glyph
        advance_width: Horizontal advance in font units
    """

    character: str
    contours: list[Contour]
    advance_width: int

    @property
    def codepoint(self) -> int:
        return ord(self.character)

    @property
    def name(self) -> str:
        """Get the glyph name used in the font.

        Returns:
            Glyph name
        """
        return glyph_name_for(self.codepoint)

    def is_empty(self) -> bool:
        """Check if glyph has no outlines.

        Returns:
            True if glyph has no contours, False otherwise
        """
        return len(self.contours) == 0

    def point_count(self) -> int:
        return sum(len(c.points) for c in self.contours)

    def to_dict(self) -> dict[str, Any]:
        return {
            "character": self.character,
            "contours": [c.to_dict() for c in self.contours],
            "advance_width": self.advance_width,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphData":
        return cls(
            character=data["character"],
            contours=[Contour.from_dict(c) for c in data["contours"]],
            advance_width=int(data["advance_width"]),
        )


@dataclass(frozen=True)
class FontMetrics:
    """Vertical metrics shared by every glyph.

    Attributes:
        units_per_em: Design units per em
        ascender: Ascender in font units
        descender: Descender in font units (negative)
    """

    units_per_em: int
    ascender: int
    descender: int


@dataclass
class FontAssembly:
    """Ordered glyph set plus the metrics it is laid out in.

    Glyphs keep the order they were added in; each character appears once.
    """

    metrics: FontMetrics
    glyphs: list[GlyphData] = field(default_factory=list)
    _index: dict[str, GlyphData] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._index = {g.character: g for g in self.glyphs}

    def add(self, glyph: GlyphData) -> None:
        """Append a glyph.

        Raises:
            ValueError: If a glyph for the same character was already added
        """
        if glyph.character in self._index:
            raise ValueError(f"Glyph '{glyph.name}' already added")
        self._index[glyph.character] = glyph
        self.glyphs.append(glyph)

    def __contains__(self, character: object) -> bool:
        return character in self._index

    def characters(self) -> list[str]:
        return [g.character for g in self.glyphs]

    def __iter__(self) -> Iterator[GlyphData]:
        return iter(self.glyphs)

    def __len__(self) -> int:
        return len(self.glyphs)
