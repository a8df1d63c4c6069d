"""
Main label rendering module.

Combines markup normalization, text measurement, SVG text rendering and
shape rasterization into a single call per label.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .markup import normalize_br_tags, strip_formatting_tags
from .models import Direction, DrawingCoord, ShapeDimensions, ShapeRenderOptions
from .renderer import Canvas
from .shapes import Shape, get_shape
from .svg_text import render_multiline_text, render_multiline_text_with_background
from .text_metrics import MultilineMetrics, measure_multiline_text

logger = logging.getLogger(__name__)


@dataclass
class RenderedLabel:
    """
    Everything produced for one label.

    Attributes:
        label: Raw label as given.
        text: Normalized label with canonical formatting tags.
        plain_text: Normalized label with formatting tags removed.
        metrics: Estimated size of the text for vector output.
        svg: <text> markup (preceded by a <rect> when a background is set).
        dimensions: Shape layout in canvas cells.
        canvas: Rasterized shape with the plain text centered inside.
        shape: The shape kind that produced the canvas.
    """

    label: str
    text: str
    plain_text: str
    metrics: MultilineMetrics
    svg: str
    dimensions: ShapeDimensions
    canvas: Canvas
    shape: Shape

    def attachment_point(
        self,
        direction: Union[Direction, str],
        base_coord: Optional[DrawingCoord] = None,
    ) -> DrawingCoord:
        """Attachment point for an edge, with the shape placed at ``base_coord``."""
        if base_coord is None:
            base_coord = DrawingCoord(0, 0)
        return self.shape.get_attachment_point(direction, self.dimensions, base_coord)

    def to_ascii(self) -> str:
        """Canvas rows as text."""
        return self.canvas.render()


class LabelRenderer:
    """
    Render diagram labels for terminal and SVG output.

    Example:
        >>> renderer = LabelRenderer(use_ascii=True)
        >>> result = renderer.render("**Start**")
        >>> result.canvas.rows()[1]
        '( Start )'
    """

    def __init__(
        self,
        font_size: float = 16,
        font_weight: float = 400,
        use_ascii: bool = False,
        padding: int = 0,
        shape: str = "stadium",
        text_attrs: str = 'text-anchor="middle"',
        bg_attrs: str = "",
        bg_padding: float = 0,
    ):
        """
        Initialize the label renderer.

        Args:
            font_size: Font size for SVG text and measurement.
            font_weight: Numeric font weight used for measurement.
            use_ascii: Draw shape borders with ASCII instead of box-drawing glyphs.
            padding: Blank cells between label and border in the canvas.
            shape: Shape kind name ("stadium", "rectangle").
            text_attrs: Attribute string added verbatim to the <text> element.
            bg_attrs: Attribute string for a background <rect>; no background
                is drawn when empty.
            bg_padding: Space between the text box and the background edge.

        Raises:
            ValueError: If a numeric option is out of range or the shape
                kind is unknown.
        """
        if font_size <= 0:
            raise ValueError(f"font_size must be positive, got {font_size}")
        if font_weight <= 0:
            raise ValueError(f"font_weight must be positive, got {font_weight}")
        if bg_padding < 0:
            raise ValueError(f"bg_padding must be non-negative, got {bg_padding}")

        self.font_size = font_size
        self.font_weight = font_weight
        self.text_attrs = text_attrs
        self.bg_attrs = bg_attrs
        self.bg_padding = bg_padding
        self.options = ShapeRenderOptions(use_ascii=use_ascii, padding=padding)
        self.shape = get_shape(shape)

    def render(self, label: str, cx: float = 0, cy: float = 0) -> RenderedLabel:
        """
        Render a raw label.

        Args:
            label: Label as written in the diagram source.
            cx: Horizontal center for the SVG text.
            cy: Vertical center for the SVG text.

        Returns:
            RenderedLabel with metrics, SVG markup, dimensions and canvas.
        """
        text = normalize_br_tags(label)
        plain_text = strip_formatting_tags(text)
        metrics = measure_multiline_text(text, self.font_size, self.font_weight)

        if self.bg_attrs:
            svg = render_multiline_text_with_background(
                text,
                cx,
                cy,
                metrics.width,
                metrics.height,
                self.font_size,
                self.bg_padding,
                self.text_attrs,
                self.bg_attrs,
            )
        else:
            svg = render_multiline_text(text, cx, cy, self.font_size, self.text_attrs)

        dimensions = self.shape.get_dimensions(plain_text, self.options)
        canvas = self.shape.render(plain_text, dimensions, self.options)
        logger.debug(
            "Rendered %s label %r as %dx%d",
            self.shape.name,
            plain_text,
            dimensions.width,
            dimensions.height,
        )

        return RenderedLabel(
            label=label,
            text=text,
            plain_text=plain_text,
            metrics=metrics,
            svg=svg,
            dimensions=dimensions,
            canvas=canvas,
            shape=self.shape,
        )
