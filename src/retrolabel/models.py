"""
Data models for shape geometry.

This module contains the value types shared by every shape kind: the
measured layout of a shape around its label, the options controlling
that layout, integer canvas coordinates, and the compass directions used
to pick edge attachment points.

Classes:
    LabelArea: Placement rectangle of the label inside a shape.
    ShapeDimensions: Outer size, label area and 3x3 grid split of a shape.
    ShapeRenderOptions: Border style and padding for layout and rendering.
    DrawingCoord: Integer point in canvas space.
    Direction: One of the four edges, four corners, or the center.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


@dataclass(frozen=True)
class LabelArea:
    """
    Rectangle occupied by the label text inside a shape.

    Attributes:
        x: Left column of the label (border and padding excluded).
        y: Top row of the label.
        width: Widest label line, in codepoints.
        height: Number of label lines.
    """

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class ShapeDimensions:
    """
    Geometric layout of a shape computed from its label.

    The shape is split into a 3x3 grid: border columns/rows around an
    interior cell that holds the padded label.

    Attributes:
        width: Total width in canvas cells.
        height: Total height in canvas cells (never below 3).
        label_area: Where the label lines are placed.
        grid_columns: Widths of the left border, interior and right border.
        grid_rows: Heights of the top border, interior and bottom border.
    """

    width: int
    height: int
    label_area: LabelArea
    grid_columns: Tuple[int, int, int]
    grid_rows: Tuple[int, int, int]

    @property
    def inner_width(self) -> int:
        return self.grid_columns[1]

    @property
    def inner_height(self) -> int:
        return self.grid_rows[1]


@dataclass(frozen=True)
class ShapeRenderOptions:
    """
    Options shared by shape layout and rendering.

    Attributes:
        use_ascii: Draw borders with plain ASCII instead of box-drawing glyphs.
        padding: Blank cells between the label and the border, on every side.
    """

    use_ascii: bool = False
    padding: int = 0

    def __post_init__(self):
        if self.padding < 0:
            raise ValueError(f"padding must be non-negative, got {self.padding}")


@dataclass(frozen=True)
class DrawingCoord:
    """Integer point in canvas space."""

    x: int
    y: int


class Direction(Enum):
    """Where on a shape's bounding box an edge attaches."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UPPER_LEFT = "upper_left"
    UPPER_RIGHT = "upper_right"
    LOWER_LEFT = "lower_left"
    LOWER_RIGHT = "lower_right"
    MIDDLE = "middle"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def coerce(cls, value: Union["Direction", str]) -> "Direction":
        """
        Accept a Direction or its name ("up", "Lower_Left", ...).

        Raises:
            ValueError: If the name is not a known direction.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unknown direction {value!r}; expected one of: {valid}"
            ) from None


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UPPER_LEFT: Direction.LOWER_RIGHT,
    Direction.LOWER_RIGHT: Direction.UPPER_LEFT,
    Direction.UPPER_RIGHT: Direction.LOWER_LEFT,
    Direction.LOWER_LEFT: Direction.UPPER_RIGHT,
    Direction.MIDDLE: Direction.MIDDLE,
}

# Corner directions resolve to exact bounding-box corners
CORNER_DIRECTIONS = frozenset(
    [
        Direction.UPPER_LEFT,
        Direction.UPPER_RIGHT,
        Direction.LOWER_LEFT,
        Direction.LOWER_RIGHT,
    ]
)
