"""Integration tests for end-to-end label rendering."""

import pytest

from retrolabel import (
    CanvasExporter,
    Direction,
    DrawingCoord,
    LabelRenderer,
    ShapeRenderOptions,
    get_shape,
    measure_multiline_text,
    normalize_br_tags,
    render_multiline_text,
    strip_formatting_tags,
)


class TestVectorPipeline:
    """Raw label -> normalizer -> measurer / SVG renderer."""

    def test_quoted_label_with_escaped_newlines(self):
        """Quotes and escaped newlines normalize before measuring."""
        text = normalize_br_tags('"first\\nsecond\\nthird"')
        metrics = measure_multiline_text(text, 16, 400)
        assert metrics.lines == ["first", "second", "third"]
        assert metrics.height == pytest.approx(3 * 16 * 1.3)

        svg = render_multiline_text(text, 100, 80, 16, 'text-anchor="middle"')
        assert svg.count('dy="20.8"') == 2
        assert "<tspan" in svg and ">second</tspan>" in svg

    def test_mixed_markup(self):
        """Markdown and HTML tags end up as styled tspans."""
        text = normalize_br_tags("**Bold** and <u>under</u><br>~~gone~~ *it*")
        assert text == "<b>Bold</b> and <u>under</u>\n<s>gone</s> <i>it</i>"

        svg = render_multiline_text(text, 0, 0, 14, "")
        assert '<tspan font-weight="bold">Bold</tspan>' in svg
        assert '<tspan text-decoration="underline">under</tspan>' in svg
        assert '<tspan text-decoration="line-through">gone</tspan>' in svg
        assert '<tspan font-style="italic">it</tspan>' in svg

    def test_unsafe_text_is_escaped(self):
        """Characters that are not tags are escaped in the output."""
        text = normalize_br_tags("a < b & <b>c</b> > d")
        svg = render_multiline_text(text, 0, 0, 14, "")
        assert "a &lt; b &amp; " in svg
        assert "&gt; d" in svg

    def test_cjk_measures_wider_than_latin(self):
        """Fullwidth text measures at double width."""
        cjk = measure_multiline_text("测试", 16, 400)
        latin = measure_multiline_text("ab", 16, 400)
        assert cjk.width > latin.width


class TestCanvasPipeline:
    """Raw label -> shape geometry -> canvas -> export."""

    @pytest.mark.parametrize("kind", ["stadium", "rectangle"])
    def test_shapes_place_label_in_label_area(self, kind):
        """The first label character lands at the label area origin."""
        shape = get_shape(kind)
        options = ShapeRenderOptions(use_ascii=True, padding=1)
        dims = shape.get_dimensions("XYZ\nQ", options)
        canvas = shape.render("XYZ\nQ", dims, options)
        area = dims.label_area
        assert canvas.get(area.x, area.y) == "X"
        assert canvas.get(area.x + 2, area.y) == "Z"

    def test_render_and_export(self, tmp_path):
        """A rendered label can be saved as text and PNG."""
        result = LabelRenderer(use_ascii=True, padding=1).render("Deploy<br>*prod*")
        exporter = CanvasExporter()

        txt = exporter.save_txt(result.canvas, str(tmp_path / "deploy.txt"))
        png = exporter.save_png(result.canvas, str(tmp_path / "deploy.png"))

        assert "Deploy" in txt.read_text(encoding="utf-8")
        assert "prod" in txt.read_text(encoding="utf-8")
        assert png.stat().st_size > 0

    def test_edges_attach_between_shapes(self):
        """Attachment points of two stacked shapes face each other."""
        renderer = LabelRenderer(use_ascii=True)
        top = renderer.render("Start")
        bottom = renderer.render("End")

        top_base = DrawingCoord(0, 0)
        bottom_base = DrawingCoord(0, top.dimensions.height + 2)

        exit_point = top.attachment_point(Direction.DOWN, top_base)
        entry_point = bottom.attachment_point(Direction.UP, bottom_base)
        assert exit_point.y < entry_point.y
        assert entry_point.y - exit_point.y == 3

    def test_canvas_label_matches_stripped_markup(self):
        """The canvas shows the tag-free normalized label."""
        result = LabelRenderer(use_ascii=True).render("<b>Go</b>")
        assert result.plain_text == strip_formatting_tags(result.text) == "Go"
        assert result.canvas.rows() == ["      ", "( Go )", "      "]
