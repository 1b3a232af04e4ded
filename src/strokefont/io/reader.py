"""Snapshot reader for loading exported stroke data.

This module provides the SnapshotReader class for loading a JSON stroke
snapshot (as saved by the editor) into domain models.
"""

import json
from pathlib import Path

from strokefont.domain import FontSnapshot
from strokefont.exceptions import SnapshotFormatError, SnapshotLoadError


class SnapshotReader:
    """Loads a JSON snapshot file into a FontSnapshot.

    Example:
        reader = SnapshotReader(Path("strokes.json"))
        reader.load()
        for character in reader.snapshot:
            print(character.character)
    """

    def __init__(self, snapshot_path: Path) -> None:
        """Initialize the snapshot reader.

        Args:
            snapshot_path: Path to the JSON snapshot file
        """
        self._snapshot_path = snapshot_path
        self._snapshot: FontSnapshot | None = None

    def load(self) -> FontSnapshot:
        """Load and parse the snapshot file.

        Returns:
            The loaded snapshot

        Raises:
            FileNotFoundError: If snapshot file does not exist
            SnapshotLoadError: If the file cannot be read or is not JSON
            SnapshotFormatError: If the JSON does not describe a snapshot
        """
        if not self._snapshot_path.exists():
            raise FileNotFoundError(f"Snapshot file not found: {self._snapshot_path}")

        try:
            raw = json.loads(self._snapshot_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise SnapshotLoadError(str(self._snapshot_path), str(e)) from e

        self._snapshot = self.parse(raw)
        return self._snapshot

    @staticmethod
    def parse(raw: object) -> FontSnapshot:
        """Build a FontSnapshot from decoded JSON.

        Raises:
            SnapshotFormatError: If the data does not describe a snapshot
        """
        if not isinstance(raw, dict):
            raise SnapshotFormatError(f"expected a JSON object, got {type(raw).__name__}")
        if not isinstance(raw.get("characters", []), list):
            raise SnapshotFormatError("'characters' must be a list")

        try:
            return FontSnapshot.from_dict(raw)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise SnapshotFormatError(f"{type(e).__name__}: {e}") from e

    @property
    def snapshot(self) -> FontSnapshot:
        """Return the loaded snapshot.

        Raises:
            RuntimeError: If the snapshot has not been loaded yet
        """
        if self._snapshot is None:
            raise RuntimeError("Snapshot not loaded. Call load() first.")
        return self._snapshot
