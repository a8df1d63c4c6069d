"""
File export for rasterized shapes.

This module writes a rendered Canvas to disk:
- Text files (.txt) - the canvas rows as plain text
- PNG images - the same characters drawn with a monospace font

PNG output keeps one character per grid cell, so box-drawing borders
line up exactly as they do in a terminal.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image, ImageDraw, ImageFont

from .renderer import Canvas

logger = logging.getLogger(__name__)

# Monospace fonts tried after the caller's choice, in order
FALLBACK_FONTS = (
    # Linux
    "DejaVuSansMono",
    "DejaVu Sans Mono",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    # macOS
    "Menlo",
    "/System/Library/Fonts/Menlo.ttc",
    # Windows
    "Consolas",
    "C:/Windows/Fonts/consola.ttf",
)


def _canvas_text(canvas: Union[Canvas, str]) -> str:
    if isinstance(canvas, Canvas):
        return canvas.render()
    return canvas


class CanvasExporter:
    """
    Exports rendered canvases to text and PNG files.

    Attributes:
        default_font: Font name or path tried first for PNG export.
    """

    def __init__(self, default_font: Optional[str] = None):
        self.default_font = default_font

    def save_txt(self, canvas: Union[Canvas, str], filename: str) -> Path:
        """
        Save a canvas to a text file.

        Args:
            canvas: Canvas to save, or text already rendered from one.
            filename: Output filename.

        Returns:
            Path of the written file.
        """
        output_path = Path(filename)
        output_path.write_text(_canvas_text(canvas), encoding="utf-8")
        logger.debug("Wrote text canvas to %s", output_path)
        return output_path

    def save_png(
        self,
        canvas: Union[Canvas, str],
        filename: str,
        font_size: int = 16,
        bg_color: str = "#FFFFFF",
        fg_color: str = "#000000",
        padding: int = 20,
        font: Optional[str] = None,
        scale: int = 2,
    ) -> Path:
        """
        Save a canvas as a PNG image.

        Args:
            canvas: Canvas to draw, or text already rendered from one.
            filename: Output filename (should end in .png).
            font_size: Font size in points before scaling.
            bg_color: Background color as hex string.
            fg_color: Text color as hex string.
            padding: Margin around the text in unscaled pixels.
            font: Font name or path (overrides default_font).
            scale: Resolution multiplier.

        Returns:
            Path of the written file.

        Example:
            >>> exporter = CanvasExporter()
            >>> exporter.save_png(canvas, "label.png", font_size=24)
        """
        lines = _canvas_text(canvas).split("\n")

        loaded_font = self._load_monospace_font(font_size * scale, font or self.default_font)

        # Cell size from a reference glyph
        bbox = loaded_font.getbbox("M")
        char_width = max(bbox[2] - bbox[0], 1)
        char_height = max(bbox[3] - bbox[1], 1)
        line_height = int(char_height * 1.2)

        scaled_padding = padding * scale
        max_line_len = max(len(line) for line in lines)
        img_width = max(char_width * max_line_len + scaled_padding * 2, 1)
        img_height = max(line_height * len(lines) + scaled_padding * 2, 1)

        img = Image.new("RGB", (img_width, img_height), bg_color)
        draw = ImageDraw.Draw(img)

        y = scaled_padding
        for line in lines:
            draw.text((scaled_padding, y), line, font=loaded_font, fill=fg_color)
            y += line_height

        output_path = Path(filename)
        img.save(output_path, "PNG")
        logger.debug(
            "Wrote %dx%d PNG canvas to %s", img_width, img_height, output_path
        )
        return output_path

    def _load_monospace_font(
        self, font_size: int, font_name: Optional[str] = None
    ) -> ImageFont.ImageFont:
        """
        Load a monospace font, falling back to Pillow's built-in font.

        Args:
            font_size: Font size in points.
            font_name: Optional font name or path tried first.
        """
        fonts_to_try = []
        if font_name:
            fonts_to_try.append(font_name)
        fonts_to_try.extend(FALLBACK_FONTS)

        for candidate in fonts_to_try:
            try:
                return ImageFont.truetype(candidate, font_size)
            except OSError:
                continue

        logger.debug("No monospace font found; using Pillow default font")
        try:
            return ImageFont.load_default(size=font_size)
        except TypeError:
            # Older Pillow versions don't support size parameter
            return ImageFont.load_default()
