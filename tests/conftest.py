"""Pytest configuration and shared fixtures for RetroLabel tests."""

import pytest

from retrolabel import (
    Canvas,
    LabelRenderer,
    RectangleShape,
    ShapeRenderOptions,
    StadiumShape,
)


@pytest.fixture
def canvas():
    """Empty 20x10 canvas."""
    return Canvas(20, 10)


@pytest.fixture
def ascii_options():
    """ASCII borders, no padding."""
    return ShapeRenderOptions(use_ascii=True, padding=0)


@pytest.fixture
def unicode_options():
    """Box-drawing borders, no padding."""
    return ShapeRenderOptions(use_ascii=False, padding=0)


@pytest.fixture
def stadium():
    """Stadium shape instance."""
    return StadiumShape()


@pytest.fixture
def rectangle():
    """Rectangle shape instance."""
    return RectangleShape()


@pytest.fixture
def renderer():
    """Default LabelRenderer with ASCII borders."""
    return LabelRenderer(use_ascii=True)
