"""
Character canvas and border glyphs for text-mode shape rendering.

Shapes are rasterized onto a Canvas, a fixed-size grid of single
characters addressed by (x, y) with the origin at the top-left corner.
"""

from typing import List

# Rounded box-drawing glyphs (stadium shape, Unicode mode)
ROUNDED_CHARS = {
    "top_left": "╭",
    "top_right": "╮",
    "bottom_left": "╰",
    "bottom_right": "╯",
    "horizontal": "─",
    "vertical": "│",
}

# Square box-drawing glyphs (rectangle shape, Unicode mode)
BOX_CHARS = {
    "top_left": "┌",
    "top_right": "┐",
    "bottom_left": "└",
    "bottom_right": "┘",
    "horizontal": "─",
    "vertical": "│",
}

# Plain ASCII borders
BOX_CHARS_ASCII = {
    "top_left": "+",
    "top_right": "+",
    "bottom_left": "+",
    "bottom_right": "+",
    "horizontal": "-",
    "vertical": "|",
}

# Pill end caps
CAP_CHARS = {
    "left": "(",
    "right": ")",
}


class Canvas:
    """
    A 2D character canvas for drawing ASCII art.

    Writes outside ``[0, width) x [0, height)`` are ignored and reads
    outside it return a space.
    """

    def __init__(self, width: int, height: int, fill_char: str = " "):
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.grid: List[List[str]] = [
            [fill_char for _ in range(self.width)] for _ in range(self.height)
        ]

    @property
    def max_x(self) -> int:
        """Largest addressable column index."""
        return self.width - 1

    @property
    def max_y(self) -> int:
        """Largest addressable row index."""
        return self.height - 1

    def set(self, x: int, y: int, char: str) -> None:
        """Set a character at position (x, y)."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.grid[y][x] = char

    def get(self, x: int, y: int) -> str:
        """Get character at position (x, y)."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.grid[y][x]
        return " "

    def draw_text(self, x: int, y: int, text: str) -> None:
        """Draw text starting at position (x, y), one cell per codepoint."""
        for i, char in enumerate(text):
            self.set(x + i, y, char)

    def rows(self) -> List[str]:
        """Return every row as a full-width string."""
        return ["".join(row) for row in self.grid]

    def render(self) -> str:
        """Render the canvas to a string."""
        lines = [line.rstrip() for line in self.rows()]

        # Remove trailing empty lines
        while lines and not lines[-1]:
            lines.pop()

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
