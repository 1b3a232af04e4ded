"""StrokeFont - Build TrueType fonts from hand-authored vector strokes.

StrokeFont converts centerline strokes (a path plus a thickness) and closed
filled shapes, placed inside per-character container boxes, into filled glyph
outlines and assembles them into a single binary font.

Example:
    $ strokefont hangul.json -o MyFont.ttf

This will read the stroke snapshot, outline every character it describes and
write MyFont.ttf with one glyph per character plus .notdef.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
