"""Font and snapshot I/O for strokefont.

This module handles the byte-level edges of the pipeline. Font
construction goes through fonttools; snapshot and file access are only
used by the CLI, never by the export core.

Key responsibilities:
- Compile glyph outlines into TrueType bytes
- Load JSON stroke snapshots into domain models
- Deliver finished fonts to disk

Key classes:
- FontBuilder: Build and serialize a TrueType font
- SnapshotReader: Load snapshots
- FontFileWriter: File delivery target
"""

from strokefont.io.builder import FontBuilder
from strokefont.io.reader import SnapshotReader
from strokefont.io.writer import FontFileWriter

__all__ = [
    "FontBuilder",
    "FontFileWriter",
    "SnapshotReader",
]
