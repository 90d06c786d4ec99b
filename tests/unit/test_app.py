"""Tests for the Qt presentation adapter (offscreen)."""

import pytest
from PySide6.QtCore import QSettings

from imodelexplainer.app.application import load_layout_config
from imodelexplainer.app.state import ExplainerStore
from imodelexplainer.app.ui.canvas import ExplorerCanvas
from imodelexplainer.app.ui.detail_panel import HINT_IDLE, DetailPanel
from imodelexplainer.config import DEFAULT_CONFIG
from imodelexplainer.model.content import ContentLookup
from imodelexplainer.model.geometry_primitives import Point
from imodelexplainer.model.interaction import Transition
from imodelexplainer.model.nodes import NodeId, RevealZoneId


@pytest.fixture
def store(qapp, viewport) -> ExplainerStore:
    s = ExplainerStore()
    s.set_viewport(viewport.width, viewport.height)
    return s


def _record(signal) -> list:
    received = []
    signal.connect(lambda value: received.append(value))
    return received


class TestExplainerStore:
    def test_lock_signal_fires_once(self, store, anchor) -> None:
        locks = _record(store.lock_changed)
        frames = _record(store.session_changed)
        rest = store.positions()

        store.pointer_down(NodeId.INQUIRY, rest[NodeId.INQUIRY])
        store.pointer_move(anchor)
        assert store.pointer_up() is Transition.LOCKED

        assert locks == [NodeId.INQUIRY]
        assert len(frames) == 3

    def test_reveal_and_reset_signals(self, store, anchor) -> None:
        rest = store.positions()
        store.pointer_down(NodeId.INTEGRITY, rest[NodeId.INTEGRITY])
        store.pointer_up(anchor)

        reveals = _record(store.reveal_changed)
        locks = _record(store.lock_changed)
        store.pointer_down(NodeId.INTEGRITY, anchor)
        store.pointer_move(Point(330, 350))
        store.reset()

        assert reveals == [RevealZoneId.FAR, None]
        assert locks == [None]

    def test_positions_and_apply_pass_through(self, store, anchor) -> None:
        assert store.positions() == store.machine.positions()

        rest = store.positions()
        assert store.pointer_down(NodeId.INTUITION, rest[NodeId.INTUITION]) is True
        store.pointer_move(anchor)
        assert store.positions()[NodeId.INTUITION] == anchor
        assert store.positions() == store.machine.positions()

    def test_move_without_drag_emits_nothing(self, store) -> None:
        frames = _record(store.session_changed)
        store.pointer_move(Point(10, 10))
        assert frames == []


class TestLoadLayoutConfig:
    def _settings(self, tmp_path, values: dict) -> QSettings:
        settings = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
        for key, value in values.items():
            settings.setValue(f"layout/{key}", value)
        settings.sync()
        return settings

    def test_no_overrides_returns_base(self, qapp, tmp_path) -> None:
        assert load_layout_config(self._settings(tmp_path, {})) is DEFAULT_CONFIG

    def test_overrides_are_applied(self, qapp, tmp_path) -> None:
        settings = self._settings(tmp_path, {"lock_radius": 50.0, "allow_non_lead_drag_while_locked": "true"})
        config = load_layout_config(settings)

        assert config.lock_radius == pytest.approx(50.0)
        assert config.allow_non_lead_drag_while_locked is True

    def test_invalid_ordering_falls_back(self, qapp, tmp_path) -> None:
        settings = self._settings(tmp_path, {"commit_multiplier": 9.0})
        assert load_layout_config(settings) is DEFAULT_CONFIG

    def test_unparseable_value_is_skipped(self, qapp, tmp_path) -> None:
        settings = self._settings(tmp_path, {"web_radius": "wide", "web_offset_right": 300})
        config = load_layout_config(settings)

        assert config.web_radius == DEFAULT_CONFIG.web_radius
        assert config.web_offset_right == pytest.approx(300.0)


class TestWidgets:
    def test_canvas_hit_test(self, store) -> None:
        canvas = ExplorerCanvas(store)
        rest = store.positions()

        assert canvas.node_at(rest[NodeId.INTUITION]) is NodeId.INTUITION
        assert canvas.node_at(Point(rest[NodeId.INTUITION].x + 5, rest[NodeId.INTUITION].y)) is NodeId.INTUITION
        assert canvas.node_at(Point(10, 10)) is None

    def test_detail_panel_follows_lock_and_reveal(self, store, anchor) -> None:
        content = ContentLookup()
        panel = DetailPanel(store, content)
        assert panel.hint_label.text() == HINT_IDLE

        rest = store.positions()
        store.pointer_down(NodeId.INTEGRITY, rest[NodeId.INTEGRITY])
        store.pointer_up(anchor)
        assert panel.main_label.text() == content.content(NodeId.INTEGRITY)
        assert panel.support_node() is None

        store.pointer_down(NodeId.INTEGRITY, anchor)
        store.pointer_move(Point(270, 305))
        upper = content.zone_node(NodeId.INTEGRITY, RevealZoneId.UPPER)
        assert panel.support_node() is upper
        assert content.content(NodeId.INTEGRITY, RevealZoneId.UPPER) in panel.relation_label.text()
