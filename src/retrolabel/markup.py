"""
Label markup normalization.

Rewrites raw diagram labels into a canonical form: surrounding quotes are
dropped, <br> tags and literal "\\n" escapes become line feeds, presentation
tags like <sub> are removed, and markdown emphasis is turned into inline
formatting tags (<b>, <i>, <s>) understood by the SVG text renderer.

All scanning works on decoded characters, one index at a time, and only a
small fixed tag vocabulary is recognized. Anything else is left as text.
"""

import string
from functools import lru_cache
from typing import Dict, Optional, Sequence, Tuple

# Tags removed by normalization, content kept
STRIP_TAGS = ("sub", "sup", "small", "mark")

# Inline formatting tags, in the order the renderer maps them to styles
FORMATTING_TAGS = ("b", "strong", "i", "em", "u", "s", "del")

# Whitespace allowed inside a tag before '/' or '>'
TAG_WHITESPACE = frozenset(" \t\n\r\x0c")

LINE_TERMINATORS = frozenset("\n\r\u2028\u2029")

TAG_NAME_CHARS = frozenset(string.ascii_letters)

XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


@lru_cache(maxsize=None)
def _tag_lookup(tags: Tuple[str, ...]) -> Dict[str, int]:
    return {name.lower(): index for index, name in enumerate(tags)}


def parse_simple_tag(
    text: str, start: int, tags: Sequence[str]
) -> Optional[Tuple[int, int, bool]]:
    """
    Match ``<[/]name[whitespace]>`` at ``start`` against an allow-list.

    Args:
        text: Text to scan.
        start: Index of the candidate '<'.
        tags: Allowed tag names, matched case-insensitively.

    Returns:
        ``(end, tag_index, is_closing)`` where ``end`` is the index just
        past '>', or None if the text at ``start`` is not such a tag.
    """
    length = len(text)
    if start >= length or text[start] != "<":
        return None

    index = start + 1
    is_closing = False
    if index < length and text[index] == "/":
        is_closing = True
        index += 1

    name_start = index
    while index < length and text[index] in TAG_NAME_CHARS:
        index += 1
    if index == name_start:
        return None

    tag_index = _tag_lookup(tuple(tags)).get(text[name_start:index].lower())
    if tag_index is None:
        return None

    while index < length and text[index] in TAG_WHITESPACE:
        index += 1
    if index >= length or text[index] != ">":
        return None

    return index + 1, tag_index, is_closing


def parse_br_tag(text: str, start: int) -> Optional[int]:
    """
    Match a line-break tag (``<br>``, ``<br/>``, ``<br />``) at ``start``.

    Whitespace may only come before the optional '/'; ``<br/ >`` is not a
    line break. Returns the index just past '>', or None.
    """
    length = len(text)
    if (
        start + 2 >= length
        or text[start] != "<"
        or text[start + 1] not in "bB"
        or text[start + 2] not in "rR"
    ):
        return None

    index = start + 3
    while index < length and text[index] in TAG_WHITESPACE:
        index += 1
    if index < length and text[index] == "/":
        index += 1
    if index >= length or text[index] != ">":
        return None
    return index + 1


def remove_simple_tags(text: str, tags: Sequence[str]) -> str:
    """Delete every open or close tag from ``tags``, keeping enclosed text."""
    output = []
    index = 0
    length = len(text)

    while index < length:
        if text[index] == "<":
            match = parse_simple_tag(text, index, tags)
            if match is not None:
                index = match[0]
                continue
        output.append(text[index])
        index += 1

    return "".join(output)


def strip_surrounding_quotes(label: str) -> str:
    """Drop one layer of double quotes wrapping the whole label."""
    if label.startswith('"') and label.endswith('"'):
        return label[1:-1]
    return label


def replace_br_tags(text: str) -> str:
    """Replace every line-break tag with a line feed."""
    output = []
    index = 0
    length = len(text)

    while index < length:
        if text[index] == "<":
            end = parse_br_tag(text, index)
            if end is not None:
                output.append("\n")
                index = end
                continue
        output.append(text[index])
        index += 1

    return "".join(output)


def _find_line_terminator(text: str, start: int) -> int:
    for index in range(start, len(text)):
        if text[index] in LINE_TERMINATORS:
            return index
    return -1


def replace_marker_pairs(text: str, marker: str, open_tag: str, close_tag: str) -> str:
    """
    Wrap text between pairs of ``marker`` in ``open_tag``/``close_tag``.

    The content between markers is at least one character and never spans
    a line terminator. An opening marker without a partner is kept as
    text and scanning resumes one character later.
    """
    output = []
    cursor = 0
    length = len(text)
    marker_len = len(marker)

    while cursor < length:
        start = text.find(marker, cursor)
        if start == -1:
            output.append(text[cursor:])
            break

        content_start = start + marker_len
        if content_start >= length:
            output.append(text[cursor:])
            break

        search_from = content_start + 1
        search_limit = _find_line_terminator(text, content_start)
        if search_limit == -1:
            search_limit = length

        end = -1
        if search_from <= search_limit:
            end = text.find(marker, search_from, search_limit)

        if end == -1:
            output.append(text[cursor : start + 1])
            cursor = start + 1
            continue

        output.append(text[cursor:start])
        output.append(open_tag)
        output.append(text[content_start:end])
        output.append(close_tag)
        cursor = end + marker_len

    return "".join(output)


def _is_valid_italic_inner(inner: str) -> bool:
    if not inner or "*" in inner:
        return False
    return not (inner[0].isspace() or inner[-1].isspace())


def replace_markdown_italic(text: str) -> str:
    """Turn ``*text*`` spans (single asterisks only) into ``<i>`` tags."""
    output = []
    cursor = 0
    index = 0
    length = len(text)

    while index < length:
        if text[index] != "*":
            index += 1
            continue

        # Part of a ** run
        if index > 0 and text[index - 1] == "*":
            index += 1
            continue
        if index + 1 >= length or text[index + 1] == "*":
            index += 1
            continue

        end = text.find("*", index + 1)
        if end == -1:
            break
        if end + 1 < length and text[end + 1] == "*":
            index += 1
            continue

        inner = text[index + 1 : end]
        if not _is_valid_italic_inner(inner):
            index += 1
            continue

        output.append(text[cursor:index])
        output.append("<i>")
        output.append(inner)
        output.append("</i>")
        cursor = end + 1
        index = end + 1

    output.append(text[cursor:])
    return "".join(output)


def normalize_br_tags(label: str) -> str:
    """
    Normalize a raw label into canonical inline markup.

    Stages, in order:
        1. strip surrounding double quotes
        2. <br>, <br/>, <br /> -> line feed
        3. literal backslash-n -> line feed
        4. remove <sub>, <sup>, <small>, <mark> (content kept)
        5. **bold** -> <b>bold</b>
        6. *italic* -> <i>italic</i>
        7. ~~strike~~ -> <s>strike</s>

    Example:
        >>> normalize_br_tags('"**Hi**<br>there"')
        '<b>Hi</b>\\nthere'
    """
    text = strip_surrounding_quotes(label)
    text = replace_br_tags(text)
    text = text.replace("\\n", "\n")
    text = remove_simple_tags(text, STRIP_TAGS)
    text = replace_marker_pairs(text, "**", "<b>", "</b>")
    text = replace_markdown_italic(text)
    return replace_marker_pairs(text, "~~", "<s>", "</s>")


def strip_formatting_tags(text: str) -> str:
    """Remove inline formatting tags, keeping only the plain text."""
    return remove_simple_tags(text, FORMATTING_TAGS)


def escape_xml(text: str) -> str:
    """Escape the five XML special characters."""
    for char, entity in XML_ESCAPES:
        text = text.replace(char, entity)
    return text
