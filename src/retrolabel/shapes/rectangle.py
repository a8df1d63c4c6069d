"""
Rectangle shape and the rectangular attachment rule shared by all shapes.

    ┌─────┐
    │ Box │
    └─────┘
"""

from typing import Union

from ..models import (
    Direction,
    DrawingCoord,
    LabelArea,
    ShapeDimensions,
    ShapeRenderOptions,
)
from ..renderer import BOX_CHARS, BOX_CHARS_ASCII, Canvas
from .base import draw_label, max_line_width, split_lines


def get_box_attachment_point(
    direction: Union[Direction, str],
    dimensions: ShapeDimensions,
    base_coord: DrawingCoord,
) -> DrawingCoord:
    """
    Attachment point on a shape's bounding box.

    Corners map to the exact box corners. Edge midpoints and the center
    use floored half width/height, so on even sizes the midpoint sits
    right of (or below) the geometric center.

    Args:
        direction: Which edge, corner or center to attach to.
        dimensions: Layout of the shape.
        base_coord: Canvas position of the shape's top-left cell.

    Returns:
        The attachment point in canvas coordinates.
    """
    direction = Direction.coerce(direction)
    left = base_coord.x
    top = base_coord.y
    right = left + dimensions.width - 1
    bottom = top + dimensions.height - 1
    center_x = left + dimensions.width // 2
    center_y = top + dimensions.height // 2

    points = {
        Direction.UP: (center_x, top),
        Direction.DOWN: (center_x, bottom),
        Direction.LEFT: (left, center_y),
        Direction.RIGHT: (right, center_y),
        Direction.UPPER_LEFT: (left, top),
        Direction.UPPER_RIGHT: (right, top),
        Direction.LOWER_LEFT: (left, bottom),
        Direction.LOWER_RIGHT: (right, bottom),
        Direction.MIDDLE: (center_x, center_y),
    }
    x, y = points[direction]
    return DrawingCoord(x, y)


class RectangleShape:
    """Plain box with square corners and a one-cell border."""

    name = "rectangle"

    def get_dimensions(
        self, label: str, options: ShapeRenderOptions
    ) -> ShapeDimensions:
        lines = split_lines(label)
        label_width = max_line_width(lines)

        inner_width = 2 * options.padding + label_width
        inner_height = len(lines) + 2 * options.padding

        return ShapeDimensions(
            width=inner_width + 2,
            height=inner_height + 2,
            label_area=LabelArea(
                x=1 + options.padding,
                y=1 + options.padding,
                width=label_width,
                height=len(lines),
            ),
            grid_columns=(1, inner_width, 1),
            grid_rows=(1, inner_height, 1),
        )

    def render(
        self, label: str, dimensions: ShapeDimensions, options: ShapeRenderOptions
    ) -> Canvas:
        w = dimensions.width
        h = dimensions.height
        chars = BOX_CHARS_ASCII if options.use_ascii else BOX_CHARS
        canvas = Canvas(w, h)

        canvas.set(0, 0, chars["top_left"])
        canvas.set(w - 1, 0, chars["top_right"])
        canvas.set(0, h - 1, chars["bottom_left"])
        canvas.set(w - 1, h - 1, chars["bottom_right"])
        for x in range(1, w - 1):
            canvas.set(x, 0, chars["horizontal"])
            canvas.set(x, h - 1, chars["horizontal"])
        for y in range(1, h - 1):
            canvas.set(0, y, chars["vertical"])
            canvas.set(w - 1, y, chars["vertical"])

        draw_label(canvas, label, dimensions)
        return canvas

    def get_attachment_point(
        self,
        direction: Union[Direction, str],
        dimensions: ShapeDimensions,
        base_coord: DrawingCoord,
    ) -> DrawingCoord:
        return get_box_attachment_point(direction, dimensions, base_coord)
