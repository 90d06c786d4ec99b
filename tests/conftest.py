"""Pytest configuration and fixtures."""

import os

import pytest

# Qt widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from imodelexplainer.config import LayoutConfig
from imodelexplainer.model.geometry_primitives import Point, Viewport
from imodelexplainer.model.interaction import InteractionMachine
from imodelexplainer.model.layout import rest_positions


# Wide enough that the unlock scenario (10x lock radius) is not clamped
VIEWPORT_SIZE = (1200.0, 700.0)


@pytest.fixture
def config() -> LayoutConfig:
    """Stock layout constants."""
    return LayoutConfig()


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(*VIEWPORT_SIZE)


@pytest.fixture
def machine(config: LayoutConfig, viewport: Viewport) -> InteractionMachine:
    """Idle state machine sized to the test viewport."""
    return InteractionMachine(config, viewport)


@pytest.fixture
def anchor(viewport: Viewport, config: LayoutConfig) -> Point:
    return Point(config.lock_anchor_x, viewport.height / 2.0)


@pytest.fixture
def rest(viewport: Viewport, config: LayoutConfig):
    return rest_positions(viewport, config)


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication for all Qt tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
