"""
Node and reveal-zone identities.

Both enumerations are closed: the widget always shows exactly four nodes and
at most three reveal zones. Declaration order is significant (circular order
for nodes, match order for reveal zones).
"""
from __future__ import annotations

from enum import Enum


class NodeId(Enum):
    """The four 'I' nodes in fixed clockwise order, starting at 12 o'clock."""
    INTEGRITY = "Integrity"
    INTUITION = "Intuition"
    INQUIRY = "Inquiry"
    INTENTIONALITY = "Intentionality"

    @property
    def index(self) -> int:
        """Rest-angle index (0..3)."""
        return _NODE_ORDER.index(self)

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_index(cls, index: int) -> NodeId:
        return _NODE_ORDER[index % len(_NODE_ORDER)]


_NODE_ORDER: tuple[NodeId, ...] = tuple(NodeId)


class RevealZoneId(Enum):
    """
    Reveal zones shown while the lead node is dragged.

    Each zone lies between the lock anchor and one support slot of the locked
    layout and selects the relation text between the lead and that slot's node.
    """
    UPPER = "upper"
    FAR = "far"
    LOWER = "lower"


DEFAULT_CONTENT_KEY = "default"
