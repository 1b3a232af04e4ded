"""Character set helpers for Hangul fonts."""

from collections.abc import Iterator

# Hangul Compatibility Jamo: consonants then vowels
JAMO_FIRST = 0x3131
JAMO_LAST = 0x3163

# Precomposed Hangul syllables
SYLLABLE_FIRST = 0xAC00
SYLLABLE_LAST = 0xD7A3


def hangul_characters(include_jamo: bool = True) -> Iterator[str]:
    """Yield the full modern Hangul repertoire in font order.

    Standalone jamo (U+3131-U+3163) come first, followed by the 11,172
    precomposed syllables (U+AC00-U+D7A3).

    Args:
        include_jamo: Also yield the compatibility jamo

    Yields:
        Single-character strings
    """
    if include_jamo:
        for code in range(JAMO_FIRST, JAMO_LAST + 1):
            yield chr(code)
    for code in range(SYLLABLE_FIRST, SYLLABLE_LAST + 1):
        yield chr(code)


def is_hangul(character: str) -> bool:
    """Check whether a character is a Hangul syllable or compatibility jamo."""
    if len(character) != 1:
        return False
    code = ord(character)
    return JAMO_FIRST <= code <= JAMO_LAST or SYLLABLE_FIRST <= code <= SYLLABLE_LAST
