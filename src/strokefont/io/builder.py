"""TrueType font builder.

This module turns assembled glyph outlines into a binary TrueType font
using fontTools' FontBuilder. Every contour is drawn as one closed polygon
through a TTGlyphPen; no winding is changed on the way.

The builder always emits '.notdef' as glyph 0, and by default an empty
'space' glyph of half the advance.
"""

import math
from io import BytesIO

from fontTools.fontBuilder import FontBuilder as FTFontBuilder
from fontTools.misc.roundTools import otRound
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont
from fontTools.ttLib.tables._g_l_y_f import Glyph

from strokefont.config import FontConfig
from strokefont.domain import Contour, FontAssembly, FontMetrics, GlyphData
from strokefont.exceptions import SerializationError

NOTDEF = ".notdef"
SPACE = "space"

# TrueType glyf coordinates are signed 16-bit
INT16_MIN = -32768
INT16_MAX = 32767


def _font_revision(version: str) -> float:
    try:
        return float(version)
    except ValueError:
        return 1.0


class FontBuilder:
    """Collects glyphs and compiles them into a TrueType font.

    Example:
        builder = FontBuilder(FontConfig())
        builder.add_glyph(glyph)
        data = builder.encode()
    """

    def __init__(self, config: FontConfig | None = None, advance_width: int | None = None) -> None:
        """Initialize the builder.

        Args:
            config: Font constants and naming
            advance_width: Uniform advance for .notdef and space
                (defaults to the configured advance width)
        """
        self.config = config or FontConfig()
        self.advance_width = self.config.advance_width if advance_width is None else advance_width
        self.assembly = FontAssembly(
            FontMetrics(
                units_per_em=self.config.units_per_em,
                ascender=self.config.ascender,
                descender=self.config.descender,
            )
        )

    @property
    def metrics(self) -> FontMetrics:
        return self.assembly.metrics

    def add_glyph(self, glyph: GlyphData) -> None:
        """Add a glyph; glyphs keep the order they are added in.

        Raises:
            ValueError: If a glyph for the same character was already added
        """
        self.assembly.add(glyph)

    def __len__(self) -> int:
        return len(self.assembly)

    def _needs_space(self) -> bool:
        return self.config.include_space and " " not in self.assembly

    def glyph_order(self) -> list[str]:
        """Final glyph order, '.notdef' first."""
        order = [NOTDEF]
        if self._needs_space():
            order.append(SPACE)
        order.extend(g.name for g in self.assembly)
        return order

    def _draw_notdef(self) -> Glyph:
        """Outlined box: outer clockwise, inner counter-clockwise."""
        adv = self.advance_width
        margin = otRound(adv * 0.05)
        inset = otRound(adv * 0.04)
        width = adv - 2 * margin
        height = otRound(self.metrics.units_per_em * 0.8)

        pen = TTGlyphPen(None)
        if width <= 2 * inset or height <= 2 * inset:
            return pen.glyph()

        left, right = margin, margin + width
        pen.moveTo((left, 0))
        pen.lineTo((left, height))
        pen.lineTo((right, height))
        pen.lineTo((right, 0))
        pen.closePath()

        pen.moveTo((left + inset, inset))
        pen.lineTo((right - inset, inset))
        pen.lineTo((right - inset, height - inset))
        pen.lineTo((left + inset, height - inset))
        pen.closePath()
        return pen.glyph()

    @staticmethod
    def _round_contour(contour: Contour, glyph_name: str) -> list[tuple[int, int]]:
        points = []
        for p in contour.points:
            if not (math.isfinite(p.x) and math.isfinite(p.y)):
                raise SerializationError(f"non-finite coordinate ({p.x}, {p.y})", glyph_name)
            x, y = otRound(p.x), otRound(p.y)
            if not (INT16_MIN <= x <= INT16_MAX and INT16_MIN <= y <= INT16_MAX):
                raise SerializationError(f"coordinate ({x}, {y}) out of range", glyph_name)
            points.append((x, y))
        return points

    def _draw_glyph(self, glyph: GlyphData) -> Glyph:
        pen = TTGlyphPen(None)
        for contour in glyph.contours:
            points = self._round_contour(contour, glyph.name)
            if len(points) < 3:
                continue
            pen.moveTo(points[0])
            for point in points[1:]:
                pen.lineTo(point)
            pen.closePath()
        return pen.glyph()

    def build(self) -> TTFont:
        """Compile all tables into a TTFont.

        Returns:
            The in-memory font

        Raises:
            SerializationError: If an outline cannot be encoded
        """
        config = self.config
        metrics = self.metrics
        order = self.glyph_order()

        cmap: dict[int, str] = {g.codepoint: g.name for g in self.assembly}
        glyphs = {NOTDEF: self._draw_notdef()}
        advances = {NOTDEF: self.advance_width}
        if SPACE in order:
            cmap[ord(" ")] = SPACE
            glyphs[SPACE] = TTGlyphPen(None).glyph()
            advances[SPACE] = self.advance_width // 2

        for glyph in self.assembly:
            glyphs[glyph.name] = self._draw_glyph(glyph)
            advances[glyph.name] = glyph.advance_width

        try:
            fb = FTFontBuilder(metrics.units_per_em, isTTF=True)
            fb.setupGlyphOrder(order)
            fb.setupCharacterMap(cmap)
            fb.setupGlyf(glyphs)

            glyf = fb.font["glyf"]
            fb.setupHorizontalMetrics(
                {name: (advances[name], getattr(glyf[name], "xMin", 0)) for name in order}
            )
            fb.setupHead(unitsPerEm=metrics.units_per_em, fontRevision=_font_revision(config.version))
            fb.setupHorizontalHeader(ascent=metrics.ascender, descent=metrics.descender)
            fb.setupNameTable(
                {
                    "familyName": config.family_name,
                    "styleName": config.style_name,
                    "uniqueFontIdentifier": f"{config.postscript_name};{config.version}",
                    "fullName": config.full_name,
                    "version": f"Version {config.version}",
                    "psName": config.postscript_name,
                }
            )
            fb.setupOS2(
                sTypoAscender=metrics.ascender,
                sTypoDescender=metrics.descender,
                sTypoLineGap=0,
                usWinAscent=metrics.ascender,
                usWinDescent=abs(metrics.descender),
            )
            fb.setupPost()
            fb.setupMaxp()
        except Exception as e:
            raise SerializationError(str(e)) from e

        return fb.font

    @staticmethod
    def serialize(font: TTFont) -> bytes:
        """Serialize a compiled font to TrueType bytes in memory.

        Raises:
            SerializationError: If fontTools rejects the font data
        """
        buffer = BytesIO()
        try:
            font.save(buffer)
        except Exception as e:
            raise SerializationError(str(e)) from e
        return buffer.getvalue()

    def encode(self) -> bytes:
        """Build the font and serialize it to TrueType bytes."""
        return self.serialize(self.build())
