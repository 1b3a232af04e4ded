"""Shared fixtures: small synthetic stroke snapshots."""

import pytest

from strokefont.domain import (
    UNIT_BOX,
    AnchorPoint,
    CharacterSnapshot,
    ContainerBox,
    FontSnapshot,
    GlobalStyle,
    Linecap,
    PlacedStroke,
    Stroke,
)


def open_stroke(stroke_id: str, *points: tuple[float, float], thickness: float = 0.08, **kwargs) -> Stroke:
    """Straight-segment open stroke through the given points."""
    return Stroke(
        id=stroke_id,
        points=tuple(AnchorPoint(x, y) for x, y in points),
        thickness=thickness,
        **kwargs,
    )


@pytest.fixture
def ga_snapshot() -> FontSnapshot:
    """'가': giyeok in a left box, a with its short bar in a right box."""
    left = ContainerBox(0.05, 0.1, 0.5, 0.8)
    right = ContainerBox(0.6, 0.05, 0.35, 0.9)

    giyeok = open_stroke("giyeok", (0.1, 0.2), (0.9, 0.2), (0.9, 0.9))
    a_stem = open_stroke("a-stem", (0.4, 0.0), (0.4, 1.0))
    a_bar = open_stroke("a-bar", (0.4, 0.5), (0.9, 0.5), linecap=Linecap.BUTT)

    return FontSnapshot(
        style=GlobalStyle(),
        characters=(
            CharacterSnapshot(
                character="가",
                placements=(
                    PlacedStroke(giyeok, left),
                    PlacedStroke(a_stem, right),
                    PlacedStroke(a_bar, right),
                ),
            ),
        ),
    )


@pytest.fixture
def mixed_snapshot() -> FontSnapshot:
    """Three characters: a stroked one, a closed fill and an empty one."""
    square = Stroke(
        id="square",
        points=(
            AnchorPoint(0.2, 0.2),
            AnchorPoint(0.8, 0.2),
            AnchorPoint(0.8, 0.8),
            AnchorPoint(0.2, 0.8),
        ),
        closed=True,
        thickness=0.0,
    )
    return FontSnapshot(
        style=GlobalStyle(weight_multiplier=1.2),
        characters=(
            CharacterSnapshot(
                character="ㅡ",
                placements=(PlacedStroke(open_stroke("bar", (0.1, 0.5), (0.9, 0.5)), UNIT_BOX),),
            ),
            CharacterSnapshot(character="ㅁ", placements=(PlacedStroke(square, UNIT_BOX),)),
            CharacterSnapshot(character="ㅇ", placements=()),
        ),
    )
