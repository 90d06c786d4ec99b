"""
Configuration & Tuning Constants
================================
This module serves as the central registry for the layout and interaction
constants of the explainer widget.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (radii, offsets, thresholds)
   scattered throughout the geometry and interaction code.
2. Tuning: The values are product/UX choices. Only their relative ordering
   (commit < near-feedback < capture preview < unlock release) matters to the
   interaction logic, so it is validated here once.

Exports:
    LayoutConfig: Frozen dataclass with every tuning constant.
    DEFAULT_CONFIG: The stock configuration.
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class LayoutConfig:
    # Idle web on the right side of the viewport
    web_radius: float = 90.0
    web_offset_right: float = 250.0

    # Explore (lock) zone on the left side, vertically centered
    lock_anchor_x: float = 200.0
    lock_radius: float = 60.0

    # Threshold multipliers, relative to lock_radius
    commit_multiplier: float = 1.5
    near_multiplier_unlocked: float = 1.8
    near_multiplier_locked: float = 2.0
    capture_multiplier: float = 3.5
    unlock_multiplier: float = 4.0
    unlock_escape_multiplier: float = 2.0

    # Nodes cannot be dragged closer than this to the viewport edge
    drag_margin: float = 45.0

    # Locked layout offsets from the lock anchor
    locked_far_dx: float = 260.0
    locked_neighbor_dx: float = 140.0
    locked_neighbor_dy: float = 90.0

    # Reveal zones
    reveal_radius: float = 32.0
    reveal_hysteresis: float = 1.5
    reveal_anchor_fraction: float = 0.5

    node_hit_radius: float = 28.0
    allow_non_lead_drag_while_locked: bool = False

    def __post_init__(self) -> None:
        for name in ("web_radius", "lock_radius", "reveal_radius", "node_hit_radius"):
            if getattr(self, name) <= 0.0:
                raise ValueError(f"'{name}' must be positive, got {getattr(self, name)}.")
        if self.drag_margin < 0.0:
            raise ValueError(f"'drag_margin' must not be negative, got {self.drag_margin}.")

        ordered = [
            ("commit_multiplier", self.commit_multiplier),
            ("near_multiplier_unlocked", self.near_multiplier_unlocked),
            ("capture_multiplier", self.capture_multiplier),
            ("unlock_multiplier", self.unlock_multiplier),
        ]
        for (lo_name, lo), (hi_name, hi) in zip(ordered[:-1], ordered[1:]):
            if not lo < hi:
                raise ValueError(f"'{lo_name}' ({lo}) must be smaller than '{hi_name}' ({hi}).")
        if not self.commit_multiplier < self.near_multiplier_locked < self.capture_multiplier:
            raise ValueError("'near_multiplier_locked' must lie between the commit and capture multipliers.")

        if self.reveal_hysteresis < 1.0:
            raise ValueError("'reveal_hysteresis' must be at least 1.0 (leave radius >= enter radius).")
        if not 0.0 < self.reveal_anchor_fraction < 1.0:
            raise ValueError("'reveal_anchor_fraction' must lie in the open interval (0, 1).")

    # Absolute thresholds
    @property
    def commit_radius(self) -> float:
        return self.lock_radius * self.commit_multiplier

    @property
    def capture_radius(self) -> float:
        return self.lock_radius * self.capture_multiplier

    @property
    def unlock_radius(self) -> float:
        return self.lock_radius * self.unlock_multiplier

    @property
    def unlock_escape_dx(self) -> float:
        return self.lock_radius * self.unlock_escape_multiplier

    def near_radius(self, locked: bool) -> float:
        multiplier = self.near_multiplier_locked if locked else self.near_multiplier_unlocked
        return self.lock_radius * multiplier

    @property
    def reveal_leave_radius(self) -> float:
        return self.reveal_radius * self.reveal_hysteresis

    def with_overrides(self, overrides: Mapping[str, Any]) -> LayoutConfig:
        """
        Return a copy with the given fields replaced.

        Unknown keys raise ValueError; the copy is validated again.
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown layout setting(s): {', '.join(sorted(unknown))}")
        return replace(self, **overrides)


DEFAULT_CONFIG = LayoutConfig()
