"""Font file delivery.

The exporter hands finished font bytes to a delivery callable. This module
provides the file-system one used by the CLI.
"""

from pathlib import Path

from strokefont.exceptions import DeliveryError


class FontFileWriter:
    """Delivery target that writes font bytes to a file.

    Called with (data, filename). When constructed with a directory, the
    suggested filename is used inside it; otherwise the fixed output path
    wins.

    Example:
        writer = FontFileWriter(Path("out/MyFont.ttf"))
        exporter.export(snapshot, delivery=writer)
    """

    def __init__(self, output_path: Path) -> None:
        self._output_path = output_path
        self.written_path: Path | None = None

    def resolve(self, filename: str) -> Path:
        """Final path for a suggested filename."""
        if self._output_path.is_dir():
            return self._output_path / filename
        return self._output_path

    def __call__(self, data: bytes, filename: str) -> None:
        """Write the font.

        Raises:
            DeliveryError: If the file cannot be written
        """
        path = self.resolve(filename)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise DeliveryError(str(path), str(e)) from e
        self.written_path = path

    @staticmethod
    def get_output_path(snapshot_path: Path, family_name: str, style_name: str) -> Path:
        """Default output path next to the snapshot.

        Converts: strokes.json, "My Font", "Regular" -> MyFont-Regular.ttf
        in the snapshot's directory.
        """
        filename = f"{family_name}-{style_name}.ttf".replace(" ", "")
        return snapshot_path.parent / filename
