from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from PySide6.QtCore import QObject, Signal

from imodelexplainer.config import DEFAULT_CONFIG, LayoutConfig
from imodelexplainer.model.geometry_primitives import Point, Viewport
from imodelexplainer.model.interaction import InteractionMachine, Transition
from imodelexplainer.model.layout import Positions
from imodelexplainer.model.nodes import NodeId, RevealZoneId

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExplainerStore(QObject):
    """Central state store with signals for canvas/panel sync."""
    session_changed = Signal(object)
    lock_changed = Signal(object)
    reveal_changed = Signal(object)
    hover_changed = Signal(object)

    def __init__(self, config: LayoutConfig = DEFAULT_CONFIG, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.machine = InteractionMachine(config)

    @property
    def config(self) -> LayoutConfig:
        return self.machine.config

    @property
    def viewport(self) -> Viewport:
        return self.machine.viewport

    # ---- events ----

    def pointer_down(self, node: NodeId, point: Point) -> bool:
        return self._apply(lambda: self.machine.on_pointer_down(node, point))

    def pointer_move(self, point: Point) -> None:
        if self.machine.dragging_node() is None:
            return
        self._apply(lambda: self.machine.on_pointer_move(point))

    def pointer_up(self, point: Optional[Point] = None) -> Transition:
        return self._apply(lambda: self.machine.on_pointer_up(point))

    def pointer_cancel(self) -> None:
        self._apply(self.machine.on_pointer_cancel)

    def hover(self, node: Optional[NodeId]) -> None:
        self._apply(lambda: self.machine.on_hover(node))

    def set_viewport(self, width: float, height: float) -> None:
        logger.debug("Viewport resized to %.0fx%.0f.", width, height)
        self._apply(lambda: self.machine.on_viewport_change(width, height))

    def reset(self) -> None:
        self._apply(self.machine.reset)

    # ---- queries ----

    def locked_node(self) -> Optional[NodeId]:
        return self.machine.locked_node()

    def dragging_node(self) -> Optional[NodeId]:
        return self.machine.dragging_node()

    def active_reveal_zone(self) -> Optional[RevealZoneId]:
        return self.machine.active_reveal_zone()

    def hovered_node(self) -> Optional[NodeId]:
        return self.machine.hovered_node()

    def near_feedback(self) -> bool:
        return self.machine.near_feedback()

    def positions(self) -> Positions:
        return self.machine.positions()

    # ---- internal ----

    def _apply(self, action: Callable[[], T]) -> T:
        """Run a machine operation and emit signals for what actually changed."""
        before = self.machine.state
        result = action()
        after = self.machine.state

        if after.locked != before.locked:
            self.lock_changed.emit(after.locked)
        if after.active_reveal != before.active_reveal:
            self.reveal_changed.emit(after.active_reveal)
        if after.hovered != before.hovered:
            self.hover_changed.emit(after.hovered)
        self.session_changed.emit(after)
        return result
