"""
Shared helpers for shape kinds.

Labels are measured in codepoints: every decoded character takes exactly
one canvas cell, whatever its display width.
"""

from typing import List, Protocol, Union

from ..models import Direction, DrawingCoord, ShapeDimensions, ShapeRenderOptions
from ..renderer import Canvas


class Shape(Protocol):
    """Interface implemented by every shape kind."""

    name: str

    def get_dimensions(
        self, label: str, options: ShapeRenderOptions
    ) -> ShapeDimensions:
        """Compute the layout of the shape around ``label``."""
        ...

    def render(
        self, label: str, dimensions: ShapeDimensions, options: ShapeRenderOptions
    ) -> Canvas:
        """Rasterize the shape and its label onto a fresh canvas."""
        ...

    def get_attachment_point(
        self,
        direction: Union[Direction, str],
        dimensions: ShapeDimensions,
        base_coord: DrawingCoord,
    ) -> DrawingCoord:
        """Where an edge arriving from ``direction`` meets the shape."""
        ...


def split_lines(label: str) -> List[str]:
    """Split a label on line feeds; an empty label is one empty line."""
    return label.split("\n")


def max_line_width(lines: List[str]) -> int:
    """Widest line in codepoints."""
    return max((len(line) for line in lines), default=0)


def draw_label(
    canvas: Canvas, label: str, dimensions: ShapeDimensions
) -> None:
    """
    Draw label lines centered in the interior cell of the grid.

    Lines are centered with floor division, so odd leftovers go to the
    right. Cells on the left/right border columns or below the canvas
    are skipped.
    """
    lines = split_lines(label)
    left = dimensions.grid_columns[0]
    top = dimensions.grid_rows[0]
    start_y = top + (dimensions.inner_height - len(lines)) // 2

    for i, line in enumerate(lines):
        text_x = left + (dimensions.inner_width - len(line)) // 2
        y = start_y + i
        for j, char in enumerate(line):
            x = text_x + j
            if 0 < x < dimensions.width - 1 and y < dimensions.height:
                canvas.set(x, y, char)
