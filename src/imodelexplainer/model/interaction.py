"""
Interaction State Machine
=========================
Owns one SessionState and applies the pointer-event transitions to it.

States (derived, not stored):
    IDLE          no lock, no drag
    DRAGGING      a node is captured; unlocked, or locked on another node
    LOCKED        a lead is set, no drag
    DRAGGING_LEAD the lead itself is captured; reveal zones are evaluated

Handlers run to completion one after the other (single GUI thread), so no
locking is needed. Pointer capture is tracked here so the presentation layer
can mirror it; every path that clears the drag also releases capture.
"""
from __future__ import annotations

from enum import Enum, auto
import logging
from typing import Optional

from imodelexplainer.config import DEFAULT_CONFIG, LayoutConfig
from imodelexplainer.model import layout
from imodelexplainer.model.geometry_primitives import Point, Viewport
from imodelexplainer.model.nodes import NodeId, RevealZoneId
from imodelexplainer.model.proximity import ProximityClassifier
from imodelexplainer.model.state import SessionState

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = auto()
    DRAGGING = auto()
    LOCKED = auto()
    DRAGGING_LEAD = auto()


class Transition(Enum):
    """Outcome of a pointer-up."""
    NONE = auto()          # no drag was in progress
    LOCKED = auto()        # dragged node became the lead
    UNLOCKED = auto()      # lead pulled out, back to idle
    SNAPPED_BACK = auto()  # lead released near its anchor, still locked
    REVERTED = auto()      # drag released outside any commit condition


class InteractionMachine:
    def __init__(
        self,
        config: LayoutConfig = DEFAULT_CONFIG,
        viewport: Optional[Viewport] = None,
    ) -> None:
        self.config = config
        self.viewport = viewport if viewport is not None else Viewport()
        self.classifier = ProximityClassifier(config)
        self._session = SessionState()
        self._captured = False

    # ------------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        """A snapshot; mutating it does not affect the machine."""
        return self._session.copy()

    @property
    def phase(self) -> Phase:
        s = self._session
        if s.locked is None:
            return Phase.IDLE if s.dragging is None else Phase.DRAGGING
        if s.dragging is None:
            return Phase.LOCKED
        return Phase.DRAGGING_LEAD if s.dragging == s.locked else Phase.DRAGGING

    def positions(self) -> layout.Positions:
        return layout.positions(self._session, self.viewport, self.config)

    def locked_node(self) -> Optional[NodeId]:
        return self._session.locked

    def dragging_node(self) -> Optional[NodeId]:
        return self._session.dragging

    def active_reveal_zone(self) -> Optional[RevealZoneId]:
        return self._session.active_reveal

    def near_feedback(self) -> bool:
        return self._session.near_lock

    def hovered_node(self) -> Optional[NodeId]:
        return self._session.hovered

    def has_capture(self) -> bool:
        return self._captured

    def glow_intensity(self) -> float:
        s = self._session
        return self.classifier.glow_intensity(s.drag_position, self.viewport, locked=s.locked is not None)

    def lock_anchor(self) -> Point:
        return self.classifier.lock_anchor(self.viewport)

    def reveal_anchors(self) -> dict[RevealZoneId, Point]:
        return self.classifier.reveal_anchors(self.viewport)

    # ------------------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------------------

    def on_pointer_down(self, node: NodeId, point: Point) -> bool:
        """
        Start dragging `node`.

        Returns:
            True if the press was accepted and capture is now held.

        Raises:
            TypeError: `node` is not a NodeId.
        """
        if not isinstance(node, NodeId):
            raise TypeError(f"Expected a NodeId, got {node!r}.")

        s = self._session
        if s.locked is not None and node != s.locked and not self.config.allow_non_lead_drag_while_locked:
            logger.debug("Ignored press on %s while %s is locked.", node.label, s.locked.label)
            # Capture stays with a lead drag already in progress
            if s.dragging is None:
                self._release_capture()
            return False

        s.dragging = node
        s.drag_position = self._clamp(point)
        s.hovered = None
        # Reveal zones only apply while the lead itself is dragged
        if node != s.locked:
            s.active_reveal = None
        self._captured = True
        self._update_feedback()
        logger.debug("Drag started on %s at (%.1f, %.1f).", node.label, s.drag_position.x, s.drag_position.y)
        return True

    def on_pointer_move(self, point: Point) -> None:
        s = self._session
        if s.dragging is None:
            return
        s.drag_position = self._clamp(point)
        self._update_feedback()

    def on_pointer_up(self, point: Optional[Point] = None) -> Transition:
        """
        Finish the drag and decide lock / unlock / snap back.

        `point`, when given, is treated as a final move before release.
        """
        s = self._session
        self._release_capture()
        if s.dragging is None:
            s.clear_drag()
            return Transition.NONE

        if point is not None:
            s.drag_position = self._clamp(point)

        dragged = s.dragging
        pos = s.drag_position
        if s.locked is None:
            if self.classifier.is_commit(pos, self.viewport):
                s.locked = dragged
                outcome = Transition.LOCKED
                logger.info("Locked %s as lead.", dragged.label)
            else:
                outcome = Transition.REVERTED
        elif dragged == s.locked:
            s.active_reveal = None
            if self.classifier.is_unlock(pos, self.viewport):
                s.locked = None
                s.hovered = None
                outcome = Transition.UNLOCKED
                logger.info("Unlocked %s.", dragged.label)
            else:
                outcome = Transition.SNAPPED_BACK
        else:
            # Exploratory drag of a support node never touches the lock
            s.active_reveal = None
            outcome = Transition.REVERTED

        s.clear_drag()
        return outcome

    def on_pointer_cancel(self) -> None:
        """Abandon the drag without committing anything."""
        s = self._session
        self._release_capture()
        s.active_reveal = None
        s.clear_drag()

    def on_viewport_change(self, width: float, height: float) -> None:
        self.viewport = Viewport(width, height)
        s = self._session
        if s.drag_position is not None:
            s.drag_position = self._clamp(s.drag_position)
            self._update_feedback()

    def on_hover(self, node: Optional[NodeId]) -> None:
        """Track the support node under the mouse; only meaningful while locked and idle."""
        s = self._session
        if node is None or s.locked is None or node == s.locked or s.dragging is not None:
            s.hovered = None
        else:
            s.hovered = node

    def reset(self) -> None:
        """Clear lock, drag, reveal and feedback flags at once."""
        self._release_capture()
        self._session.reset()
        logger.info("Explainer reset.")

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _clamp(self, point: Point) -> Point:
        return self.viewport.clamp(point, self.config.drag_margin)

    def _release_capture(self) -> None:
        self._captured = False

    def _update_feedback(self) -> None:
        s = self._session
        pos = s.drag_position
        s.near_lock = self.classifier.is_near(pos, self.viewport, locked=s.locked is not None)
        if s.is_dragging_lead:
            s.active_reveal = self.classifier.next_reveal(pos, self.viewport, s.active_reveal)
