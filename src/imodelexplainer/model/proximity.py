"""
Proximity Classifier
====================
Turns a pointer position into zone decisions.

All thresholds derive from a single base lock radius L (see LayoutConfig):

    commit        <= 1.5 L   pointer-up from idle locks the node
    near-feedback <  1.8 L   (2.0 L while locked) glow only, no transition
    capture       <  3.5 L   magnetic preview of the locked layout
    unlock        >  4.0 L   pointer-up while dragging the lead unlocks,
                             as does pulling it left past 2.0 L

Reveal zones use their own detection radius to enter and a larger
(hysteresis) radius to leave.
"""
from __future__ import annotations

import math
from typing import Dict, Optional

from imodelexplainer.config import DEFAULT_CONFIG, LayoutConfig
from imodelexplainer.model import layout
from imodelexplainer.model.geometry_primitives import Point, Viewport
from imodelexplainer.model.nodes import RevealZoneId


def distance(a: Point, b: Point) -> float:
    """Euclidean distance."""
    return math.hypot(a.x - b.x, a.y - b.y)


_ZONE_SLOTS = {
    RevealZoneId.UPPER: "upper",
    RevealZoneId.FAR: "opposite",
    RevealZoneId.LOWER: "lower",
}


class ProximityClassifier:
    """Stateless threshold checks against the lock zone and the reveal zones."""

    def __init__(self, config: LayoutConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def lock_anchor(self, viewport: Viewport) -> Point:
        return layout.lock_anchor(viewport, self.config)

    def distance_to_anchor(self, point: Point, viewport: Viewport) -> float:
        return distance(point, self.lock_anchor(viewport))

    @property
    def capture_radius(self) -> float:
        return self.config.capture_radius

    # ---- lock zone ----

    def is_commit(self, point: Point, viewport: Viewport) -> bool:
        """Pointer-up at or inside the commit radius locks the dragged node."""
        return self.distance_to_anchor(point, viewport) <= self.config.commit_radius

    def is_unlock(self, point: Point, viewport: Viewport) -> bool:
        """Pointer-up beyond the release radius, or pulled out to the left, unlocks the lead."""
        anchor = self.lock_anchor(viewport)
        if distance(point, anchor) > self.config.unlock_radius:
            return True
        return anchor.x - point.x > self.config.unlock_escape_dx

    def is_near(self, point: Point, viewport: Viewport, locked: bool) -> bool:
        return self.distance_to_anchor(point, viewport) < self.config.near_radius(locked)

    def glow_intensity(self, point: Optional[Point], viewport: Viewport, locked: bool = False) -> float:
        """Cosmetic 0..1 ramp, 1 on the anchor and 0 at the near-feedback radius."""
        if point is None:
            return 0.0
        radius = self.config.near_radius(locked)
        return max(0.0, 1.0 - self.distance_to_anchor(point, viewport) / radius)

    # ---- reveal zones ----

    def reveal_anchors(self, viewport: Viewport) -> Dict[RevealZoneId, Point]:
        """Zone centers, part-way from the lock anchor towards each support slot."""
        slots = layout.locked_slots(viewport, self.config)
        anchor = slots["lead"]
        f = self.config.reveal_anchor_fraction
        return {zone: anchor.lerp(slots[slot], f) for zone, slot in _ZONE_SLOTS.items()}

    def reveal_zone_at(self, point: Point, viewport: Viewport) -> Optional[RevealZoneId]:
        """First zone (in enumeration order) whose detection radius contains the point."""
        anchors = self.reveal_anchors(viewport)
        for zone in RevealZoneId:
            if distance(point, anchors[zone]) < self.config.reveal_radius:
                return zone
        return None

    def next_reveal(
        self,
        point: Point,
        viewport: Viewport,
        previous: Optional[RevealZoneId],
    ) -> Optional[RevealZoneId]:
        """
        Reveal zone after a move to `point`.

        Entering uses the detection radius. Once inside, the previous zone is
        kept until the pointer leaves its larger hysteresis radius.
        """
        entered = self.reveal_zone_at(point, viewport)
        if entered is not None:
            return entered
        if previous is None:
            return None
        anchor = self.reveal_anchors(viewport)[previous]
        if distance(point, anchor) > self.config.reveal_leave_radius:
            return None
        return previous
