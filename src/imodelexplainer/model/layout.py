"""
Geometry Engine
===============
Pure functions mapping the session state to node positions.

Nothing here is cached: the input space is four points, so every frame
recomputes the complete layout from (session, viewport, config).

Layouts:
    rest:    the four nodes evenly spaced on a circle near the right edge,
             starting at 12 o'clock, clockwise in NodeId order.
    locked:  the lead sits on the lock anchor, the opposite node far to the
             right, the two neighbours above and below in between.
    preview: while an unlocked node is dragged inside the capture radius,
             the other nodes are blended from rest towards the locked layout
             the dragged node would produce.
"""
from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Dict, TYPE_CHECKING

import numpy as np

from imodelexplainer.config import DEFAULT_CONFIG, LayoutConfig
from imodelexplainer.model.geometry_primitives import ORIGIN, Point, Viewport
from imodelexplainer.model.nodes import NodeId

if TYPE_CHECKING:
    import numpy.typing as npt
    from imodelexplainer.model.state import SessionState

Positions = Dict[NodeId, Point]

_N_NODES = len(NodeId)
_START_ANGLE = -np.pi / 2.0


@dataclass(frozen=True)
class SlotAssignment:
    """Which node occupies each slot of the locked layout."""
    lead: NodeId
    opposite: NodeId
    upper: NodeId
    lower: NodeId


def rest_angles() -> npt.NDArray[np.float64]:
    """Angles (radians, y-down screen convention) of the rest circle, in NodeId order."""
    return _START_ANGLE + np.arange(_N_NODES) * (2.0 * np.pi / _N_NODES)


def web_center(viewport: Viewport, config: LayoutConfig = DEFAULT_CONFIG) -> Point:
    """Center of the idle circle, a fixed offset from the right edge."""
    return Point(viewport.width - config.web_offset_right, viewport.center_y)


def lock_anchor(viewport: Viewport, config: LayoutConfig = DEFAULT_CONFIG) -> Point:
    """Center of the explore (lock) zone."""
    return Point(config.lock_anchor_x, viewport.center_y)


def _collapsed() -> Positions:
    return {node: ORIGIN for node in NodeId}


def rest_positions(viewport: Viewport, config: LayoutConfig = DEFAULT_CONFIG) -> Positions:
    """
    Place the four nodes on the rest circle.

    Args:
        viewport: Current size of the interactive surface.
        config: Layout constants.

    Returns:
        Mapping NodeId -> Point, all at distance `web_radius` from the web center.
    """
    if viewport.is_degenerate:
        return _collapsed()

    center = web_center(viewport, config)
    angles = rest_angles()
    xs = center.x + np.cos(angles) * config.web_radius
    ys = center.y + np.sin(angles) * config.web_radius
    return {node: Point(float(xs[i]), float(ys[i])) for i, node in enumerate(NodeId)}


def slot_assignment(lead: NodeId) -> SlotAssignment:
    """
    Resolve the opposite node and the two neighbours of a lead.

    Neighbours are ordered by their height on the rest circle so that the
    upper one goes to the upper slot. This keeps the six connection lines
    from crossing. Nodes at equal height (the 3 and 9 o'clock pair) keep
    circular order.
    """
    if not isinstance(lead, NodeId):
        raise TypeError(f"Expected a NodeId, got {lead!r}.")

    lead_index = lead.index
    opposite_index = (lead_index + 2) % _N_NODES
    neighbor_indices = [i for i in range(_N_NODES) if i not in (lead_index, opposite_index)]

    # round() absorbs the sin(pi) ~ 1e-16 noise so ties are real ties
    heights = np.round(np.sin(rest_angles()), 9)
    neighbor_indices.sort(key=lambda i: (heights[i], i))

    return SlotAssignment(
        lead=lead,
        opposite=NodeId.from_index(opposite_index),
        upper=NodeId.from_index(neighbor_indices[0]),
        lower=NodeId.from_index(neighbor_indices[1]),
    )


def locked_slots(viewport: Viewport, config: LayoutConfig = DEFAULT_CONFIG) -> dict[str, Point]:
    """Slot name -> position of the locked layout."""
    anchor = lock_anchor(viewport, config)
    return {
        "lead": anchor,
        "opposite": Point(anchor.x + config.locked_far_dx, anchor.y),
        "upper": Point(anchor.x + config.locked_neighbor_dx, anchor.y - config.locked_neighbor_dy),
        "lower": Point(anchor.x + config.locked_neighbor_dx, anchor.y + config.locked_neighbor_dy),
    }


def locked_positions(lead: NodeId, viewport: Viewport, config: LayoutConfig = DEFAULT_CONFIG) -> Positions:
    """Layout used when `lead` is (or would be) the locked node."""
    slots = slot_assignment(lead)
    if viewport.is_degenerate:
        return _collapsed()

    where = locked_slots(viewport, config)
    return {
        slots.lead: where["lead"],
        slots.opposite: where["opposite"],
        slots.upper: where["upper"],
        slots.lower: where["lower"],
    }


def blend_factor(dist: float, capture_radius: float) -> float:
    """Magnetic preview factor: 1 at the anchor, 0 at or beyond the capture radius."""
    if capture_radius <= 0.0:
        return 0.0
    return max(0.0, 1.0 - dist / capture_radius)


def blend_positions(start: Positions, end: Positions, t: float) -> Positions:
    """Interpolate every node present in both layouts."""
    nodes = [node for node in NodeId if node in start and node in end]
    a = np.array([start[n].to_array() for n in nodes])
    b = np.array([end[n].to_array() for n in nodes])
    mixed = a + (b - a) * t
    return {node: Point.from_array(mixed[i]) for i, node in enumerate(nodes)}


def positions(session: SessionState, viewport: Viewport, config: LayoutConfig = DEFAULT_CONFIG) -> Positions:
    """
    Resolve the node positions for the current frame.

    1. Locked: locked layout; the lead follows the pointer while it is dragged.
    2. Dragging without a lock: rest layout with the dragged node under the
       pointer, the others blended towards the prospective locked layout.
    3. Idle: rest layout.

    Dragging a non-lead node while locked (only possible when the config
    allows it) moves that node alone; the lock is untouched.
    """
    if viewport.is_degenerate:
        return _collapsed()

    dragging = session.dragging
    drag_pos = session.drag_position

    if session.locked is not None:
        result = locked_positions(session.locked, viewport, config)
        if dragging is not None and drag_pos is not None:
            result[dragging] = drag_pos
        return result

    rest = rest_positions(viewport, config)
    if dragging is None or drag_pos is None:
        return rest

    dist = drag_pos.distance_to(lock_anchor(viewport, config))
    t = blend_factor(dist, config.capture_radius)
    if t > 0.0:
        result = blend_positions(rest, locked_positions(dragging, viewport, config), t)
    else:
        result = dict(rest)
    result[dragging] = drag_pos
    return result


def connections() -> list[tuple[NodeId, NodeId]]:
    """All six node pairs, in NodeId order."""
    return list(combinations(NodeId, 2))
