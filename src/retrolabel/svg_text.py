"""
SVG text rendering for multi-line labels.

Renders normalized label text as a <text> element with one <tspan> per
line, vertically centered on an anchor point. Inline formatting tags
(<b>/<strong>, <i>/<em>, <u>, <s>/<del>) become tspan presentation
attributes; everything else is XML-escaped.
"""

import math
from dataclasses import dataclass
from typing import List

from .markup import FORMATTING_TAGS, escape_xml, parse_simple_tag
from .text_metrics import LINE_HEIGHT_RATIO

# Fraction of the font size used to shift text from its anchor to the baseline
DEFAULT_BASELINE_SHIFT = 0.35

# FORMATTING_TAGS index -> style flag toggled by that tag
TAG_STYLES = ("bold", "bold", "italic", "italic", "underline", "strikethrough", "strikethrough")


@dataclass(frozen=True)
class StyleState:
    """Active inline formatting at a point in a line."""

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False

    @property
    def is_plain(self) -> bool:
        return not (self.bold or self.italic or self.underline or self.strikethrough)

    def with_flag(self, name: str, value: bool) -> "StyleState":
        """Return a copy with one flag set."""
        flags = {
            "bold": self.bold,
            "italic": self.italic,
            "underline": self.underline,
            "strikethrough": self.strikethrough,
        }
        flags[name] = value
        return StyleState(**flags)

    def svg_attributes(self) -> str:
        """Presentation attributes for a tspan carrying this style."""
        attrs = []
        if self.bold:
            attrs.append('font-weight="bold"')
        if self.italic:
            attrs.append('font-style="italic"')

        decorations = []
        if self.underline:
            decorations.append("underline")
        if self.strikethrough:
            decorations.append("line-through")
        if decorations:
            attrs.append(f'text-decoration="{" ".join(decorations)}"')

        return " ".join(attrs)


@dataclass(frozen=True)
class StyledSegment:
    """A run of plain text under one style."""

    text: str
    style: StyleState


def format_number(value: float) -> str:
    """
    Format a coordinate for an SVG attribute.

    Integral values drop the fractional part (``100.0`` -> ``100``);
    other values use the shortest round-trip representation.
    """
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


def contains_formatting_tag(line: str) -> bool:
    """Check if a line has at least one recognized formatting tag."""
    index = line.find("<")
    while index != -1:
        if parse_simple_tag(line, index, FORMATTING_TAGS) is not None:
            return True
        index = line.find("<", index + 1)
    return False


def parse_inline_formatting(line: str) -> List[StyledSegment]:
    """
    Split a line into styled runs at formatting tag boundaries.

    Open tags set a flag and close tags clear it; the four flags are
    independent. Concatenating the run texts gives the tag-stripped line.
    """
    segments: List[StyledSegment] = []
    style = StyleState()
    last_index = 0
    index = 0
    length = len(line)

    while index < length:
        if line[index] == "<":
            match = parse_simple_tag(line, index, FORMATTING_TAGS)
            if match is not None:
                end, tag_index, is_closing = match
                if index > last_index:
                    segments.append(StyledSegment(line[last_index:index], style))
                style = style.with_flag(TAG_STYLES[tag_index], not is_closing)
                last_index = end
                index = end
                continue
        index += 1

    if last_index < length:
        segments.append(StyledSegment(line[last_index:], style))

    return segments


def render_line_content(line: str) -> str:
    """Render one line of text as escaped SVG content with styled tspans."""
    if not contains_formatting_tag(line):
        return escape_xml(line)

    segments = parse_inline_formatting(line)
    if all(segment.style.is_plain for segment in segments):
        return "".join(escape_xml(segment.text) for segment in segments)

    parts = []
    for segment in segments:
        escaped = escape_xml(segment.text)
        if segment.style.is_plain:
            parts.append(escaped)
        else:
            parts.append(f"<tspan {segment.style.svg_attributes()}>{escaped}</tspan>")
    return "".join(parts)


def render_multiline_text(
    text: str,
    cx: float,
    cy: float,
    font_size: float,
    attrs: str,
    baseline_shift: float = DEFAULT_BASELINE_SHIFT,
) -> str:
    """
    Render text as an SVG <text> element centered on (cx, cy).

    A single line gets a ``dy`` baseline shift. Multiple lines become
    tspans: the first one is offset up by half the block height, each
    following one advances by one line height.

    Args:
        text: Normalized label text, lines separated by line feeds.
        cx: Horizontal anchor, applied to every line.
        cy: Vertical center of the text block.
        font_size: Font size in output units.
        attrs: Extra attribute string inserted verbatim.
        baseline_shift: Baseline offset as a fraction of font size.

    Returns:
        The <text> element markup.
    """
    lines = text.split("\n")
    x = format_number(cx)
    y = format_number(cy)

    if len(lines) == 1:
        dy = format_number(font_size * baseline_shift)
        return (
            f'<text x="{x}" y="{y}" {attrs} dy="{dy}">'
            f"{render_line_content(text)}</text>"
        )

    line_height = font_size * LINE_HEIGHT_RATIO
    first_dy = -((len(lines) - 1) / 2) * line_height + font_size * baseline_shift

    tspans = []
    for i, line in enumerate(lines):
        dy = format_number(first_dy if i == 0 else line_height)
        tspans.append(f'<tspan x="{x}" dy="{dy}">{render_line_content(line)}</tspan>')

    return f'<text x="{x}" y="{y}" {attrs}>{"".join(tspans)}</text>'


def render_multiline_text_with_background(
    text: str,
    cx: float,
    cy: float,
    text_width: float,
    text_height: float,
    font_size: float,
    padding: float,
    text_attrs: str,
    bg_attrs: str,
) -> str:
    """
    Render text with a background rectangle drawn underneath it.

    The rectangle is the text box grown by ``padding`` on every side and
    centered on (cx, cy). It is emitted first, followed by a line feed
    and the text element.
    """
    bg_width = text_width + padding * 2
    bg_height = text_height + padding * 2

    rect = (
        f'<rect x="{format_number(cx - bg_width / 2)}" '
        f'y="{format_number(cy - bg_height / 2)}" '
        f'width="{format_number(bg_width)}" height="{format_number(bg_height)}" '
        f"{bg_attrs} />"
    )
    text_element = render_multiline_text(
        text, cx, cy, font_size, text_attrs, DEFAULT_BASELINE_SHIFT
    )
    return f"{rect}\n{text_element}"
