"""Exception hierarchy for StrokeFont."""


class StrokeFontError(Exception):
    """Base exception for all StrokeFont errors."""

    pass


class SnapshotError(StrokeFontError):
    """Errors related to loading or parsing a stroke snapshot."""

    pass


class SnapshotLoadError(SnapshotError):
    """Error loading a snapshot file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load snapshot '{path}': {reason}")


class SnapshotFormatError(SnapshotError):
    """Snapshot data does not have the expected structure."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid snapshot: {details}")


class GeometryError(StrokeFontError):
    """Errors in geometric calculations."""

    pass


class DegenerateStrokeError(GeometryError):
    """Stroke cannot produce any outline geometry."""

    def __init__(self, stroke_id: str, reason: str) -> None:
        self.stroke_id = stroke_id
        self.reason = reason
        super().__init__(f"Degenerate stroke '{stroke_id}': {reason}")


class ExportError(StrokeFontError):
    """Errors that abort a whole font export."""

    pass


class SerializationError(ExportError):
    """The font compiler rejected the assembled outline data."""

    def __init__(self, reason: str, glyph_name: str | None = None) -> None:
        self.reason = reason
        self.glyph_name = glyph_name
        if glyph_name is not None:
            message = f"Font serialization failed at glyph '{glyph_name}': {reason}"
        else:
            message = f"Font serialization failed: {reason}"
        super().__init__(message)


class ConcurrentExportError(ExportError):
    """An export was requested while another one is still running."""

    def __init__(self) -> None:
        super().__init__("Another font export is already in progress")


class ExportCancelledError(ExportError):
    """Export was cancelled by the caller."""

    def __init__(self, completed_count: int, pending_count: int) -> None:
        self.completed_count = completed_count
        self.pending_count = pending_count
        super().__init__(
            f"Export cancelled: {completed_count} completed, {pending_count} pending"
        )


class DeliveryError(ExportError):
    """The finished font could not be handed to its destination."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Failed to deliver font to '{target}': {reason}")
