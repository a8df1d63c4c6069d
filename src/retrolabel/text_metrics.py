"""
Text metrics module for label layout.

Estimates text widths without loading any font. Each character is put in
a width bucket relative to an average lowercase letter (1.0), and the
bucket sum is scaled by font size and a weight-dependent ratio:

    width = sum(char_widths) * font_size * base_ratio + font_size * 0.15

The numbers are a calibrated heuristic for proportional sans-serif fonts,
not real glyph metrics.
"""

from dataclasses import dataclass, field
from typing import List

from .markup import strip_formatting_tags
from .unicode import Classification, classify_char

# Line height as a multiple of font size
LINE_HEIGHT_RATIO = 1.3

# Fixed padding added to every measured line, as a multiple of font size
MIN_PADDING_RATIO = 0.15

# Narrow glyphs. '1' is narrow in proportional fonts unlike other digits.
NARROW_CHARS = frozenset(
    ["i", "l", "t", "f", "j", "I", "1", "!", "|", ".", ",", ":", ";", "'"]
)

WIDE_CHARS = frozenset(["W", "M", "w", "m", "@", "%"])

# Checked before WIDE_CHARS, so W and M never reach the wide bucket
VERY_WIDE_CHARS = frozenset(["W", "M"])

SEMI_NARROW_PUNCT = frozenset(
    ["(", ")", "[", "]", "{", "}", "/", "\\", "-", '"', "`"]
)


@dataclass(frozen=True)
class MultilineMetrics:
    """
    Measured size of a block of text.

    Attributes:
        width: Widest line, in the same units as the font size.
        height: Line count times line height.
        lines: Lines after splitting on line feeds (tags not stripped).
        line_height: Font size times LINE_HEIGHT_RATIO.
    """

    width: float
    height: float
    lines: List[str] = field(default_factory=list)
    line_height: float = 0.0


def base_ratio(font_weight: float) -> float:
    """Width ratio for a font weight (bolder fonts run wider)."""
    if font_weight >= 600:
        return 0.60
    if font_weight >= 500:
        return 0.57
    return 0.54


def get_char_width(char: str) -> float:
    """
    Get the relative width of a single character.

    The first matching rule wins: combining marks are zero width,
    fullwidth and emoji count double, then the fixed character buckets
    apply. An empty string has no width.
    """
    if not char:
        return 0.0

    classification = classify_char(char)
    if classification is Classification.COMBINING:
        return 0.0
    if classification is not Classification.PLAIN:
        return 2.0
    if char == " ":
        return 0.3
    if char in VERY_WIDE_CHARS:
        return 1.5
    if char in WIDE_CHARS:
        return 1.2
    if char in NARROW_CHARS:
        return 0.4
    if char in SEMI_NARROW_PUNCT:
        return 0.5
    if char == "r":
        return 0.8
    if "A" <= char <= "Z":
        return 1.2
    # Digits and everything else
    return 1.0


def measure_text_width(text: str, font_size: float, font_weight: float) -> float:
    """
    Estimate the rendered width of a single line of text.

    Args:
        text: Plain text (formatting tags are measured literally here).
        font_size: Font size in output units.
        font_weight: Numeric CSS font weight (400, 500, 600, ...).

    Returns:
        Estimated width in the same units as ``font_size``.
    """
    total = 0.0
    for char in text:
        total += get_char_width(char)

    return total * font_size * base_ratio(font_weight) + font_size * MIN_PADDING_RATIO


def measure_multiline_text(
    text: str, font_size: float, font_weight: float
) -> MultilineMetrics:
    """
    Measure text that may span several lines.

    Lines are split on line feed only and are not trimmed. Formatting
    tags are stripped before each line is measured.
    """
    lines = text.split("\n")
    line_height = font_size * LINE_HEIGHT_RATIO

    max_width = 0.0
    for line in lines:
        width = measure_text_width(strip_formatting_tags(line), font_size, font_weight)
        if width > max_width:
            max_width = width

    return MultilineMetrics(
        width=max_width,
        height=len(lines) * line_height,
        lines=lines,
        line_height=line_height,
    )
