"""
Shape kinds for text-mode rendering.

Each shape computes its dimensions from a label, rasterizes itself onto
a Canvas, and reports edge attachment points. Attachment points use the
same rectangular rule for every shape.
"""

import logging
from typing import Dict, List

from .base import Shape
from .rectangle import RectangleShape, get_box_attachment_point
from .stadium import StadiumShape

logger = logging.getLogger(__name__)

SHAPES: Dict[str, Shape] = {
    StadiumShape.name: StadiumShape(),
    RectangleShape.name: RectangleShape(),
}


class UnknownShapeError(ValueError):
    """Raised when a shape kind is not registered."""

    pass


def available_shapes() -> List[str]:
    """Names of all registered shape kinds."""
    return sorted(SHAPES)


def get_shape(kind: str) -> Shape:
    """
    Look up a shape kind by name (case-insensitive).

    Raises:
        UnknownShapeError: If no shape is registered under ``kind``.
    """
    key = kind.strip().lower()
    shape = SHAPES.get(key)
    if shape is None:
        raise UnknownShapeError(
            f"Unknown shape {kind!r}; available: {', '.join(available_shapes())}"
        )
    logger.debug("Resolved shape %r", key)
    return shape


__all__ = [
    "SHAPES",
    "Shape",
    "RectangleShape",
    "StadiumShape",
    "UnknownShapeError",
    "available_shapes",
    "get_box_attachment_point",
    "get_shape",
]
