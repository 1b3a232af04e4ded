"""Read-only input snapshot for one export.

The editor resolves layout boxes, conditional overrides and compound
elements before export, and hands over a FontSnapshot: for every character,
the strokes it consists of, each already placed in its box.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from strokefont.domain.stroke import GlobalStyle, PlacedStroke


@dataclass(frozen=True)
class CharacterSnapshot:
    """All placed strokes of one character.

    Attributes:
        character: The character (exactly one code point)
        placements: Strokes with their boxes, in drawing order
    """

    character: str
    placements: tuple[PlacedStroke, ...] = ()

    def __post_init__(self) -> None:
        if len(self.character) != 1:
            raise ValueError(
                f"Character must be a single code point, got {self.character!r}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "character": self.character,
            "placements": [p.to_dict() for p in self.placements],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CharacterSnapshot":
        return cls(
            character=data["character"],
            placements=tuple(PlacedStroke.from_dict(p) for p in data.get("placements", [])),
        )


@dataclass(frozen=True)
class FontSnapshot:
    """Immutable export input: global style plus per-character compositions."""

    style: GlobalStyle = field(default_factory=GlobalStyle)
    characters: tuple[CharacterSnapshot, ...] = ()

    def __post_init__(self) -> None:
        # Read-only lookup table; object.__setattr__ because the dataclass is frozen
        object.__setattr__(
            self, "_index", {c.character: c for c in self.characters}
        )

    def get(self, character: str) -> CharacterSnapshot | None:
        return self._index.get(character)  # type: ignore[attr-defined]

    def __contains__(self, character: object) -> bool:
        return character in self._index  # type: ignore[attr-defined]

    def __iter__(self) -> Iterator[CharacterSnapshot]:
        return iter(self.characters)

    def __len__(self) -> int:
        return len(self.characters)

    def character_list(self) -> list[str]:
        """Characters in snapshot order."""
        return [c.character for c in self.characters]

    def with_style(self, style: GlobalStyle) -> "FontSnapshot":
        """Return a copy of this snapshot using a different global style."""
        return FontSnapshot(style=style, characters=self.characters)

    def to_dict(self) -> dict[str, Any]:
        return {
            "style": self.style.to_dict(),
            "characters": [c.to_dict() for c in self.characters],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontSnapshot":
        return cls(
            style=GlobalStyle.from_dict(data.get("style", {})),
            characters=tuple(
                CharacterSnapshot.from_dict(c) for c in data.get("characters", [])
            ),
        )
