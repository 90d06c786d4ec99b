"""
Session State (Data Model)
==========================
This module defines the only mutable state of the explainer core.

Why is this file needed?
------------------------
1. State Management: It holds the drag, lock, reveal and hover flags of one
   widget instance in one place. Each mounted widget owns its own instance.
2. Decoupling: The geometry engine reads from this object; the interaction
   machine is the only writer.

Classes:
    SessionState: The container class.
    SessionInvariantError: Raised when the container is in an impossible state.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Optional

from imodelexplainer.model.geometry_primitives import Point
from imodelexplainer.model.nodes import NodeId, RevealZoneId

logger = logging.getLogger(__name__)


class SessionInvariantError(RuntimeError):
    """A programming defect left the session in an impossible state."""


@dataclass
class SessionState:
    dragging: Optional[NodeId] = None
    drag_position: Optional[Point] = None
    locked: Optional[NodeId] = None
    active_reveal: Optional[RevealZoneId] = None

    # Cosmetic flags
    near_lock: bool = False
    hovered: Optional[NodeId] = None

    @property
    def is_dragging_lead(self) -> bool:
        return self.locked is not None and self.dragging == self.locked

    def copy(self) -> SessionState:
        return replace(self)

    def check_invariants(self) -> None:
        """Raise SessionInvariantError if any invariant is broken."""
        if (self.dragging is None) != (self.drag_position is None):
            raise SessionInvariantError(
                f"drag_position must be set iff dragging is set "
                f"(dragging={self.dragging}, drag_position={self.drag_position})."
            )
        if self.active_reveal is not None and self.locked is None:
            raise SessionInvariantError(f"active_reveal={self.active_reveal} without a locked node.")
        if self.near_lock and self.dragging is None:
            raise SessionInvariantError("near_lock is set without a drag in progress.")
        if self.hovered is not None and (self.locked is None or self.hovered == self.locked):
            raise SessionInvariantError(
                f"hovered={self.hovered} must be a support node of a locked layout (locked={self.locked})."
            )

    def clear_drag(self) -> None:
        self.dragging = None
        self.drag_position = None
        self.near_lock = False

    def reset(self) -> None:
        """Clear every field in one step."""
        self.clear_drag()
        self.locked = None
        self.active_reveal = None
        self.hovered = None
        logger.debug("Session state has been reset.")
