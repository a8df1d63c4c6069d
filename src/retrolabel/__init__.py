"""
RetroLabel - Label layout for ASCII and SVG diagrams

Measures label text, converts lightweight markup to SVG text, and
rasterizes labeled shapes onto character canvases.

Example:
    >>> from retrolabel import LabelRenderer
    >>> renderer = LabelRenderer(use_ascii=True)
    >>> result = renderer.render("Hello<br>World")
    >>> print(result.to_ascii())
    >>> print(result.svg)
"""

from .export import CanvasExporter
from .generator import LabelRenderer, RenderedLabel
from .markup import escape_xml, normalize_br_tags, strip_formatting_tags
from .models import (
    Direction,
    DrawingCoord,
    LabelArea,
    ShapeDimensions,
    ShapeRenderOptions,
)
from .renderer import Canvas
from .shapes import (
    RectangleShape,
    StadiumShape,
    UnknownShapeError,
    available_shapes,
    get_box_attachment_point,
    get_shape,
)
from .svg_text import (
    StyledSegment,
    StyleState,
    parse_inline_formatting,
    render_line_content,
    render_multiline_text,
    render_multiline_text_with_background,
)
from .text_metrics import (
    LINE_HEIGHT_RATIO,
    MultilineMetrics,
    get_char_width,
    measure_multiline_text,
    measure_text_width,
)
from .unicode import Classification, classify_char

__version__ = "0.1.0"

__all__ = [
    # Main API
    "LabelRenderer",
    "RenderedLabel",
    # Text measurement
    "Classification",
    "classify_char",
    "get_char_width",
    "measure_text_width",
    "measure_multiline_text",
    "MultilineMetrics",
    "LINE_HEIGHT_RATIO",
    # Markup
    "normalize_br_tags",
    "strip_formatting_tags",
    "escape_xml",
    # SVG text
    "StyleState",
    "StyledSegment",
    "parse_inline_formatting",
    "render_line_content",
    "render_multiline_text",
    "render_multiline_text_with_background",
    # Shapes
    "Canvas",
    "Direction",
    "DrawingCoord",
    "LabelArea",
    "ShapeDimensions",
    "ShapeRenderOptions",
    "StadiumShape",
    "RectangleShape",
    "UnknownShapeError",
    "available_shapes",
    "get_box_attachment_point",
    "get_shape",
    # Export
    "CanvasExporter",
]
