"""
Stadium (pill) shape.

The label sits two columns in from each side so the rounded ends have
room. A one-line label with no padding collapses to bare end caps:

    ( Label )

Taller stadiums get a full border, rounded in Unicode mode:

    ╭───────╮        (-------)
    │ Line1 │        ( Line1 )
    │ Line2 │        ( Line2 )
    ╰───────╯        (-------)
"""

from typing import Union

from ..models import (
    Direction,
    DrawingCoord,
    LabelArea,
    ShapeDimensions,
    ShapeRenderOptions,
)
from ..renderer import BOX_CHARS_ASCII, CAP_CHARS, ROUNDED_CHARS, Canvas
from .base import draw_label, max_line_width, split_lines
from .rectangle import get_box_attachment_point

# Smallest stadium: one label row between empty top and bottom rows
MIN_HEIGHT = 3


class StadiumShape:
    """Pill-shaped box with capsule ends."""

    name = "stadium"

    def get_dimensions(
        self, label: str, options: ShapeRenderOptions
    ) -> ShapeDimensions:
        """
        Compute the stadium layout for a label.

        Widths count codepoints, so "测试" is two cells wide here even
        though it renders wider in most terminals.
        """
        lines = split_lines(label)
        label_width = max_line_width(lines)

        inner_width = 2 * options.padding + label_width
        inner_height = len(lines) + 2 * options.padding

        return ShapeDimensions(
            width=inner_width + 4,
            height=max(inner_height + 2, MIN_HEIGHT),
            label_area=LabelArea(
                x=2 + options.padding,
                y=1 + options.padding,
                width=label_width,
                height=len(lines),
            ),
            grid_columns=(2, inner_width, 2),
            grid_rows=(1, inner_height, 1),
        )

    def render(
        self, label: str, dimensions: ShapeDimensions, options: ShapeRenderOptions
    ) -> Canvas:
        """Rasterize the stadium border and centered label."""
        w = dimensions.width
        h = dimensions.height
        canvas = Canvas(w, h)

        if h == MIN_HEIGHT:
            center_y = h // 2
            canvas.set(0, center_y, CAP_CHARS["left"])
            canvas.set(w - 1, center_y, CAP_CHARS["right"])
        elif not options.use_ascii:
            self._draw_rounded_border(canvas, w, h)
        else:
            self._draw_ascii_border(canvas, w, h)

        draw_label(canvas, label, dimensions)
        return canvas

    def _draw_rounded_border(self, canvas: Canvas, w: int, h: int) -> None:
        canvas.set(0, 0, ROUNDED_CHARS["top_left"])
        canvas.set(w - 1, 0, ROUNDED_CHARS["top_right"])
        canvas.set(0, h - 1, ROUNDED_CHARS["bottom_left"])
        canvas.set(w - 1, h - 1, ROUNDED_CHARS["bottom_right"])

        for x in range(1, w - 1):
            canvas.set(x, 0, ROUNDED_CHARS["horizontal"])
            canvas.set(x, h - 1, ROUNDED_CHARS["horizontal"])
        for y in range(1, h - 1):
            canvas.set(0, y, ROUNDED_CHARS["vertical"])
            canvas.set(w - 1, y, ROUNDED_CHARS["vertical"])

    def _draw_ascii_border(self, canvas: Canvas, w: int, h: int) -> None:
        # End caps run the full height, corners included
        for y in range(h):
            canvas.set(0, y, CAP_CHARS["left"])
            canvas.set(w - 1, y, CAP_CHARS["right"])
        for x in range(1, w - 1):
            canvas.set(x, 0, BOX_CHARS_ASCII["horizontal"])
            canvas.set(x, h - 1, BOX_CHARS_ASCII["horizontal"])

    def get_attachment_point(
        self,
        direction: Union[Direction, str],
        dimensions: ShapeDimensions,
        base_coord: DrawingCoord,
    ) -> DrawingCoord:
        return get_box_attachment_point(direction, dimensions, base_coord)
