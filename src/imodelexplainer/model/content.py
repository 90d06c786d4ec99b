"""
Explanatory content for the detail panel.

The core never reads these texts; the presentation layer asks the lookup for
the text matching the lead node and the active reveal zone (or hovered node).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Union

from imodelexplainer.model.layout import slot_assignment
from imodelexplainer.model.nodes import DEFAULT_CONTENT_KEY, NodeId, RevealZoneId

ContentKey = Union[RevealZoneId, str]


@dataclass(frozen=True)
class Explanation:
    main: str
    others: Mapping[NodeId, str] = field(default_factory=dict)


EXPLANATIONS: Dict[NodeId, Explanation] = {
    NodeId.INTEGRITY: Explanation(
        main=(
            "Integrity grounds your AI use in ethics and authenticity. It asks: Is this an appropriate "
            "use of AI? Am I being honest about how I'm using it? Does this align with my values and "
            "responsibilities?"
        ),
        others={
            NodeId.INTENTIONALITY: "Ensures your purpose aligns with your ethical responsibilities.",
            NodeId.INQUIRY: "Helps you question whether outputs meet your standards of honesty and quality.",
            NodeId.INTUITION: "Alerts you when something feels ethically off or inauthentic.",
        },
    ),
    NodeId.INTUITION: Explanation(
        main=(
            "Intuition is your internal compass when working with AI. It's the feeling that something "
            "isn't quite right, or the sense that AI might help here. Learning to trust and investigate "
            "these signals makes you a better collaborator."
        ),
        others={
            NodeId.INTEGRITY: "Helps you examine what your gut feeling is actually telling you.",
            NodeId.INTENTIONALITY: "Connects your instincts to your deeper purpose.",
            NodeId.INQUIRY: "Turns vague feelings into specific questions you can investigate.",
        },
    ),
    NodeId.INQUIRY: Explanation(
        main=(
            "Inquiry is the questioning stance you bring to AI collaboration. It shapes how you prompt, "
            "how you evaluate outputs, and how you refine results. Good inquiry means staying curious and "
            "critical throughout."
        ),
        others={
            NodeId.INTENTIONALITY: "Focuses your questions on what actually matters.",
            NodeId.INTEGRITY: "Ensures your investigation serves honest, ethical ends.",
            NodeId.INTUITION: "Prompts you to dig deeper when something feels incomplete.",
        },
    ),
    NodeId.INTENTIONALITY: Explanation(
        main=(
            "Intentionality means being clear about why you're using AI and what you want to achieve. "
            "It's the foundation that shapes everything else. Without clear purpose, AI collaboration "
            "drifts."
        ),
        others={
            NodeId.INTEGRITY: "Checks whether your intentions align with your values.",
            NodeId.INQUIRY: "Translates your purpose into effective prompts and evaluation.",
            NodeId.INTUITION: "Helps you sense when you've lost sight of your original goal.",
        },
    ),
}


class ContentLookup:
    """Text lookup keyed by node identity and reveal zone (or 'default')."""

    def __init__(self, explanations: Mapping[NodeId, Explanation] = EXPLANATIONS) -> None:
        missing = [node.label for node in NodeId if node not in explanations]
        if missing:
            raise ValueError(f"No explanation for: {', '.join(missing)}")
        self._explanations = explanations

    def title(self, node: NodeId) -> str:
        return node.label

    def relation(self, lead: NodeId, other: NodeId) -> str:
        """How `other` supports `lead`; empty for the lead itself."""
        return self._explanations[lead].others.get(other, "")

    def zone_node(self, lead: NodeId, zone: RevealZoneId) -> NodeId:
        """Node sitting in the support slot a reveal zone points to."""
        slots = slot_assignment(lead)
        if zone is RevealZoneId.UPPER:
            return slots.upper
        if zone is RevealZoneId.LOWER:
            return slots.lower
        return slots.opposite

    def content(self, node: NodeId, key: ContentKey = DEFAULT_CONTENT_KEY) -> str:
        if isinstance(key, RevealZoneId):
            return self.relation(node, self.zone_node(node, key))
        if key != DEFAULT_CONTENT_KEY:
            raise ValueError(f"Unknown content key {key!r}.")
        return self._explanations[node].main
