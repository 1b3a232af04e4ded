"""Unit tests for the TrueType font builder."""

from io import BytesIO

import pytest
from fontTools.ttLib import TTFont

from strokefont.config import FontConfig
from strokefont.domain import Contour, FontMetrics, GlyphData, Point
from strokefont.exceptions import SerializationError
from strokefont.io.builder import NOTDEF, SPACE, FontBuilder


def _box_glyph(character: str, x0: float = 100, y0: float = 0, x1: float = 400, y1: float = 700) -> GlyphData:
    """Glyph with one clockwise rectangle."""
    contour = Contour(points=[Point(x0, y0), Point(x0, y1), Point(x1, y1), Point(x1, y0)])
    return GlyphData(character=character, contours=[contour], advance_width=1000)


@pytest.fixture
def builder() -> FontBuilder:
    return FontBuilder(FontConfig(family_name="Test Font", style_name="Bold"))


class TestGlyphOrder:
    """Tests for glyph ordering."""

    def test_notdef_first_then_space(self, builder: FontBuilder) -> None:
        builder.add_glyph(_box_glyph("나"))
        builder.add_glyph(_box_glyph("가"))
        assert builder.glyph_order() == [NOTDEF, SPACE, "uniB098", "uniAC00"]

    def test_space_disabled(self) -> None:
        builder = FontBuilder(FontConfig(include_space=False))
        builder.add_glyph(_box_glyph("가"))
        assert builder.glyph_order() == [NOTDEF, "uniAC00"]

    def test_explicit_space_replaces_default(self, builder: FontBuilder) -> None:
        builder.add_glyph(GlyphData(character=" ", contours=[], advance_width=500))
        assert builder.glyph_order() == [NOTDEF, "uni0020"]

    def test_duplicate_rejected(self, builder: FontBuilder) -> None:
        builder.add_glyph(_box_glyph("가"))
        with pytest.raises(ValueError, match="already added"):
            builder.add_glyph(_box_glyph("가"))

    def test_assembly_tracks_metrics_and_order(self, builder: FontBuilder) -> None:
        builder.add_glyph(_box_glyph("나"))
        builder.add_glyph(_box_glyph("가"))

        assert builder.metrics == FontMetrics(1000, 880, -120)
        assert builder.assembly.characters() == ["나", "가"]
        assert len(builder) == 2


class TestBuild:
    """Tests for table construction."""

    def test_cmap_and_metrics(self, builder: FontBuilder) -> None:
        builder.add_glyph(_box_glyph("가", x0=120))
        font = builder.build()

        cmap = font.getBestCmap()
        assert cmap[0xAC00] == "uniAC00"
        assert cmap[0x20] == SPACE
        assert font["hmtx"]["uniAC00"] == (1000, 120)
        assert font["hmtx"][SPACE] == (500, 0)
        assert font["head"].unitsPerEm == 1000
        assert font["hhea"].ascent == 880
        assert font["hhea"].descent == -120

    def test_notdef_is_outlined_box(self, builder: FontBuilder) -> None:
        font = builder.build()
        notdef = font["glyf"][NOTDEF]

        assert font.getGlyphOrder()[0] == NOTDEF
        assert notdef.numberOfContours == 2
        assert (notdef.xMin, notdef.yMin, notdef.xMax, notdef.yMax) == (50, 0, 950, 800)

    def test_empty_glyph_is_blank(self, builder: FontBuilder) -> None:
        builder.add_glyph(GlyphData(character="ㅇ", contours=[], advance_width=1000))
        font = builder.build()
        assert font["glyf"]["uni3147"].numberOfContours == 0

    def test_contour_points_rounded(self, builder: FontBuilder) -> None:
        builder.add_glyph(_box_glyph("가", x0=100.4, x1=399.6))
        font = builder.build()
        coordinates = list(font["glyf"]["uniAC00"].coordinates)
        assert coordinates == [(100, 0), (100, 700), (400, 700), (400, 0)]

    def test_names(self, builder: FontBuilder) -> None:
        font = builder.build()
        assert font["name"].getDebugName(1) == "Test Font"
        assert font["name"].getDebugName(2) == "Bold"
        assert font["name"].getDebugName(6) == "TestFont-Bold"


class TestEncode:
    """Tests for binary serialization."""

    def test_round_trip_through_fonttools(self, builder: FontBuilder) -> None:
        builder.add_glyph(_box_glyph("가"))
        data = builder.encode()

        assert data[:4] == b"\x00\x01\x00\x00"
        font = TTFont(BytesIO(data))
        assert font.getGlyphOrder() == [NOTDEF, SPACE, "uniAC00"]
        assert font["glyf"]["uniAC00"].numberOfContours == 1

    def test_nan_coordinate_fails(self, builder: FontBuilder) -> None:
        builder.add_glyph(_box_glyph("가", x0=float("nan")))
        with pytest.raises(SerializationError) as excinfo:
            builder.encode()
        assert excinfo.value.glyph_name == "uniAC00"

    def test_out_of_range_coordinate_fails(self, builder: FontBuilder) -> None:
        builder.add_glyph(_box_glyph("가", x1=40000))
        with pytest.raises(SerializationError, match="out of range"):
            builder.encode()
