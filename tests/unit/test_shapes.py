"""Unit tests for the shapes package."""

import pytest

from retrolabel.models import (
    CORNER_DIRECTIONS,
    Direction,
    DrawingCoord,
    LabelArea,
    ShapeRenderOptions,
)
from retrolabel.shapes import (
    RectangleShape,
    StadiumShape,
    UnknownShapeError,
    available_shapes,
    get_box_attachment_point,
    get_shape,
)


class TestStadiumDimensions:
    """Tests for StadiumShape.get_dimensions."""

    def test_single_character(self, stadium, ascii_options):
        """One character with no padding gives the minimum pill."""
        dims = stadium.get_dimensions("A", ascii_options)
        assert dims.width == 5
        assert dims.height == 3
        assert dims.grid_columns == (2, 1, 2)
        assert dims.grid_rows == (1, 1, 1)
        assert dims.label_area == LabelArea(x=2, y=1, width=1, height=1)

    def test_width_counts_codepoints(self, stadium, unicode_options):
        """CJK characters count one cell each."""
        dims = stadium.get_dimensions("测试", unicode_options)
        assert dims.width == 6
        assert dims.height == 3

    def test_emoji_counts_one_codepoint(self, stadium, ascii_options):
        """A non-BMP emoji is a single codepoint."""
        assert stadium.get_dimensions("😀", ascii_options).width == 5

    def test_multi_line(self, stadium, ascii_options):
        """Height grows with the line count."""
        dims = stadium.get_dimensions("A\nB", ascii_options)
        assert dims.width == 5
        assert dims.height == 4
        assert dims.grid_rows == (1, 2, 1)

    def test_padding(self, stadium):
        """Padding grows the interior on every side."""
        dims = stadium.get_dimensions("AB", ShapeRenderOptions(padding=2))
        assert dims.grid_columns == (2, 6, 2)
        assert dims.grid_rows == (1, 5, 1)
        assert dims.width == 10
        assert dims.height == 7
        assert dims.label_area == LabelArea(x=4, y=3, width=2, height=1)

    def test_empty_label(self, stadium, ascii_options):
        """An empty label is one empty line."""
        dims = stadium.get_dimensions("", ascii_options)
        assert dims.width == 4
        assert dims.height == 3

    def test_width_uses_longest_line(self, stadium, ascii_options):
        """The widest line sets the interior width."""
        dims = stadium.get_dimensions("a\nabcd\nab", ascii_options)
        assert dims.inner_width == 4
        assert dims.inner_height == 3


class TestStadiumRender:
    """Tests for StadiumShape.render."""

    def test_degenerate_pill(self, stadium, ascii_options):
        """Height 3 draws only the end caps."""
        dims = stadium.get_dimensions("A", ascii_options)
        canvas = stadium.render("A", dims, ascii_options)
        assert canvas.rows() == ["     ", "( A )", "     "]

    def test_degenerate_pill_unicode(self, stadium, unicode_options):
        """Unicode mode also uses parentheses for a one-row pill."""
        dims = stadium.get_dimensions("测试", unicode_options)
        canvas = stadium.render("测试", dims, unicode_options)
        assert canvas.rows() == ["      ", "( 测试 )", "      "]

    def test_ascii_box(self, stadium, ascii_options):
        """ASCII mode runs parentheses down the full height."""
        dims = stadium.get_dimensions("A\nB", ascii_options)
        canvas = stadium.render("A\nB", dims, ascii_options)
        assert canvas.rows() == ["(---)", "( A )", "( B )", "(---)"]

    def test_rounded_box(self, stadium, unicode_options):
        """Unicode mode uses rounded corners."""
        dims = stadium.get_dimensions("A\nB", unicode_options)
        canvas = stadium.render("A\nB", dims, unicode_options)
        assert canvas.rows() == ["╭───╮", "│ A │", "│ B │", "╰───╯"]

    def test_rounded_box_with_padding(self, stadium):
        """Padding centers the label inside a larger box."""
        options = ShapeRenderOptions(padding=1)
        dims = stadium.get_dimensions("A", options)
        canvas = stadium.render("A", dims, options)
        assert canvas.rows() == [
            "╭─────╮",
            "│     │",
            "│  A  │",
            "│     │",
            "╰─────╯",
        ]

    def test_empty_label(self, stadium, ascii_options):
        """An empty label renders the border only."""
        dims = stadium.get_dimensions("", ascii_options)
        canvas = stadium.render("", dims, ascii_options)
        assert canvas.rows() == ["    ", "(  )", "    "]

    def test_even_and_odd_centering(self, stadium, ascii_options):
        """Labels filling the interior sit flush after the caps."""
        dims_even = stadium.get_dimensions("AB", ascii_options)
        assert stadium.render("AB", dims_even, ascii_options).rows()[1] == "( AB )"

        dims_odd = stadium.get_dimensions("ABC", ascii_options)
        assert stadium.render("ABC", dims_odd, ascii_options).rows()[1] == "( ABC )"

    def test_short_line_is_left_biased(self, stadium, ascii_options):
        """Odd leftover space goes to the right of a short line."""
        dims = stadium.get_dimensions("AB\nC", ascii_options)
        canvas = stadium.render("AB\nC", dims, ascii_options)
        assert canvas.rows() == ["(----)", "( AB )", "( C  )", "(----)"]

    def test_emoji_label(self, stadium, ascii_options):
        """An emoji takes one cell."""
        dims = stadium.get_dimensions("😀", ascii_options)
        assert stadium.render("😀", dims, ascii_options).rows()[1] == "( 😀 )"

    def test_overlong_label_is_clipped(self, stadium, ascii_options):
        """Characters outside the interior columns are dropped."""
        dims = stadium.get_dimensions("A", ascii_options)
        canvas = stadium.render("ABCDEF", dims, ascii_options)
        assert canvas.rows()[1] == "(CDE)"

    def test_extra_lines_are_clipped(self, stadium, ascii_options):
        """Lines below the canvas are dropped."""
        dims = stadium.get_dimensions("A", ascii_options)
        canvas = stadium.render("A\nB\nC\nD", dims, ascii_options)
        assert canvas.height == 3

    @pytest.mark.parametrize("label", ["", "A", "hello\nworld", "测试\n😀😀😀", "a\n\n\nb"])
    @pytest.mark.parametrize("padding", [0, 1, 3])
    @pytest.mark.parametrize("use_ascii", [True, False])
    def test_canvas_matches_dimensions(self, stadium, label, padding, use_ascii):
        """Canvas size is exactly the computed dimensions."""
        options = ShapeRenderOptions(use_ascii=use_ascii, padding=padding)
        dims = stadium.get_dimensions(label, options)
        canvas = stadium.render(label, dims, options)
        assert dims.height >= 3
        assert (canvas.max_x, canvas.max_y) == (dims.width - 1, dims.height - 1)
        assert all(len(row) == dims.width for row in canvas.rows())
        area = dims.label_area
        assert dims.grid_columns[0] <= area.x
        assert area.x + area.width <= dims.grid_columns[0] + dims.inner_width
        assert dims.grid_rows[0] <= area.y
        assert area.y + area.height <= dims.grid_rows[0] + dims.inner_height


class TestRectangle:
    """Tests for RectangleShape."""

    def test_dimensions(self, rectangle, unicode_options):
        """A one-cell border surrounds the label."""
        dims = rectangle.get_dimensions("Box", unicode_options)
        assert dims.width == 5
        assert dims.height == 3
        assert dims.grid_columns == (1, 3, 1)
        assert dims.grid_rows == (1, 1, 1)
        assert dims.label_area == LabelArea(x=1, y=1, width=3, height=1)

    def test_render_unicode(self, rectangle, unicode_options):
        """Unicode mode uses square box-drawing corners."""
        dims = rectangle.get_dimensions("Box", unicode_options)
        canvas = rectangle.render("Box", dims, unicode_options)
        assert canvas.rows() == ["┌───┐", "│Box│", "└───┘"]

    def test_render_ascii_with_padding(self, rectangle):
        """ASCII mode uses + - | borders."""
        options = ShapeRenderOptions(use_ascii=True, padding=1)
        dims = rectangle.get_dimensions("A", options)
        canvas = rectangle.render("A", dims, options)
        assert canvas.rows() == ["+---+", "|   |", "| A |", "|   |", "+---+"]

    def test_attachment_matches_box_rule(self, rectangle, ascii_options):
        """Rectangles share the box attachment rule."""
        dims = rectangle.get_dimensions("Box", ascii_options)
        base = DrawingCoord(3, 4)
        for direction in Direction:
            assert rectangle.get_attachment_point(
                direction, dims, base
            ) == get_box_attachment_point(direction, dims, base)


class TestAttachmentPoint:
    """Tests for the rectangular attachment rule."""

    @pytest.fixture
    def dims(self, stadium, ascii_options):
        return stadium.get_dimensions("AB", ascii_options)

    @pytest.mark.parametrize(
        "direction,expected",
        [
            (Direction.UP, DrawingCoord(13, 20)),
            (Direction.DOWN, DrawingCoord(13, 22)),
            (Direction.LEFT, DrawingCoord(10, 21)),
            (Direction.RIGHT, DrawingCoord(15, 21)),
            (Direction.UPPER_LEFT, DrawingCoord(10, 20)),
            (Direction.UPPER_RIGHT, DrawingCoord(15, 20)),
            (Direction.LOWER_LEFT, DrawingCoord(10, 22)),
            (Direction.LOWER_RIGHT, DrawingCoord(15, 22)),
            (Direction.MIDDLE, DrawingCoord(13, 21)),
        ],
    )
    def test_directions(self, stadium, dims, direction, expected):
        """Each direction maps to its point on a 6x3 box at (10, 20)."""
        assert dims.width == 6
        assert dims.height == 3
        assert stadium.get_attachment_point(direction, dims, DrawingCoord(10, 20)) == expected

    def test_direction_names(self, stadium, dims):
        """Directions can be given by name."""
        base = DrawingCoord(10, 20)
        assert stadium.get_attachment_point("up", dims, base) == DrawingCoord(13, 20)
        assert stadium.get_attachment_point("Lower_Right", dims, base) == DrawingCoord(15, 22)

    def test_unknown_direction(self, stadium, dims):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown direction"):
            stadium.get_attachment_point("north", dims, DrawingCoord(0, 0))

    @pytest.mark.parametrize("label", ["A", "AB\nCD", "hello\nworld\n!", ""])
    def test_opposites_differ_along_one_axis(self, stadium, ascii_options, label):
        """Up/Down share x, Left/Right share y."""
        dims = stadium.get_dimensions(label, ascii_options)
        base = DrawingCoord(7, -3)
        up = stadium.get_attachment_point(Direction.UP, dims, base)
        down = stadium.get_attachment_point(Direction.DOWN, dims, base)
        left = stadium.get_attachment_point(Direction.LEFT, dims, base)
        right = stadium.get_attachment_point(Direction.RIGHT, dims, base)
        assert up.x == down.x and up.y < down.y
        assert left.y == right.y and left.x < right.x

    @pytest.mark.parametrize("label", ["A", "AB\nCD", "wide label"])
    def test_corners_are_box_corners(self, stadium, ascii_options, label):
        """Corner directions land on the four box corners."""
        dims = stadium.get_dimensions(label, ascii_options)
        base = DrawingCoord(2, 5)
        corners = {
            DrawingCoord(2, 5),
            DrawingCoord(2 + dims.width - 1, 5),
            DrawingCoord(2, 5 + dims.height - 1),
            DrawingCoord(2 + dims.width - 1, 5 + dims.height - 1),
        }
        results = {
            stadium.get_attachment_point(direction, dims, base)
            for direction in CORNER_DIRECTIONS
        }
        assert results == corners

    def test_opposite_property(self):
        """Opposite directions pair up."""
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.UPPER_LEFT.opposite is Direction.LOWER_RIGHT
        assert Direction.MIDDLE.opposite is Direction.MIDDLE


class TestShapeRegistry:
    """Tests for shape lookup."""

    def test_available_shapes(self):
        """Both built-in shapes are registered."""
        assert available_shapes() == ["rectangle", "stadium"]

    def test_lookup_is_case_insensitive(self):
        """Shape names ignore case and surrounding space."""
        assert isinstance(get_shape("Stadium"), StadiumShape)
        assert isinstance(get_shape(" rectangle "), RectangleShape)

    def test_unknown_shape(self):
        """Unknown shapes raise UnknownShapeError, a ValueError."""
        with pytest.raises(UnknownShapeError, match="hexagon"):
            get_shape("hexagon")
        assert issubclass(UnknownShapeError, ValueError)


class TestShapeRenderOptions:
    """Tests for option validation."""

    def test_defaults(self):
        """Unicode borders and no padding by default."""
        options = ShapeRenderOptions()
        assert options.use_ascii is False
        assert options.padding == 0

    def test_negative_padding(self):
        """Negative padding is rejected."""
        with pytest.raises(ValueError, match="padding"):
            ShapeRenderOptions(padding=-1)
