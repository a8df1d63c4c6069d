"""
Unicode classification for text measurement.

Characters are sorted into four buckets that drive width estimation:
combining marks (zero width), fullwidth CJK/Hangul forms, emoji, and
everything else. Classification works on a single decoded codepoint;
grapheme clusters are not merged.
"""

from enum import Enum
from functools import lru_cache

import regex

# Combining diacritical mark blocks (inclusive ranges)
COMBINING_RANGES = (
    (0x0300, 0x036F),
    (0x1AB0, 0x1AFF),
    (0x1DC0, 0x1DFF),
    (0x20D0, 0x20FF),
    (0xFE20, 0xFE2F),
)

# CJK, Hangul, kana, ideographic and fullwidth form blocks (inclusive ranges)
FULLWIDTH_RANGES = (
    (0x1100, 0x115F),
    (0x2E80, 0x2EFF),
    (0x2F00, 0x2FDF),
    (0x3000, 0x303F),
    (0x3040, 0x309F),
    (0x30A0, 0x30FF),
    (0x3100, 0x312F),
    (0x3130, 0x318F),
    (0x3190, 0x31FF),
    (0x3200, 0x33FF),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xAC00, 0xD7AF),
    (0xF900, 0xFAFF),
    (0xFF00, 0xFF60),
    (0xFFE0, 0xFFE6),
)

# Every codepoint from the Supplementary Ideographic Plane upward
SUPPLEMENTARY_FULLWIDTH_START = 0x20000


class Classification(Enum):
    """Width category of a single character."""

    COMBINING = "combining"
    FULLWIDTH = "fullwidth"
    EMOJI = "emoji"
    PLAIN = "plain"


@lru_cache(maxsize=None)
def emoji_pattern() -> "regex.Pattern":
    """Compiled emoji property matcher, built once on first use."""
    return regex.compile(r"\p{Emoji_Presentation}|\p{Extended_Pictographic}")


def _in_ranges(code: int, ranges) -> bool:
    for start, end in ranges:
        if start <= code <= end:
            return True
    return False


def is_combining_mark(code: int) -> bool:
    """Check if a codepoint is a combining diacritical mark."""
    return _in_ranges(code, COMBINING_RANGES)


def is_fullwidth(code: int) -> bool:
    """
    Check if a codepoint is rendered at roughly twice the width of a
    Latin letter.
    """
    return code >= SUPPLEMENTARY_FULLWIDTH_START or _in_ranges(
        code, FULLWIDTH_RANGES
    )


def is_emoji(char: str) -> bool:
    """Check if a character carries an emoji presentation property."""
    return emoji_pattern().search(char) is not None


def classify_char(char: str) -> Classification:
    """
    Classify the first codepoint of ``char``.

    Precedence is combining, fullwidth, emoji, plain. An empty string is
    classified as plain.
    """
    if not char:
        return Classification.PLAIN

    code = ord(char[0])
    if is_combining_mark(code):
        return Classification.COMBINING
    if is_fullwidth(code):
        return Classification.FULLWIDTH
    if is_emoji(char):
        return Classification.EMOJI
    return Classification.PLAIN
