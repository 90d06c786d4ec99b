"""Unit tests for session state invariants."""

import pytest

from imodelexplainer.model.geometry_primitives import Point
from imodelexplainer.model.nodes import NodeId, RevealZoneId
from imodelexplainer.model.state import SessionInvariantError, SessionState


class TestInvariants:
    def test_fresh_state_is_valid(self) -> None:
        SessionState().check_invariants()

    def test_position_without_drag(self) -> None:
        with pytest.raises(SessionInvariantError):
            SessionState(drag_position=Point(1, 1)).check_invariants()

    def test_drag_without_position(self) -> None:
        with pytest.raises(SessionInvariantError):
            SessionState(dragging=NodeId.INQUIRY).check_invariants()

    def test_reveal_without_lock(self) -> None:
        with pytest.raises(SessionInvariantError):
            SessionState(active_reveal=RevealZoneId.FAR).check_invariants()

    def test_near_without_drag(self) -> None:
        with pytest.raises(SessionInvariantError):
            SessionState(near_lock=True).check_invariants()

    def test_hover_on_lead(self) -> None:
        with pytest.raises(SessionInvariantError):
            SessionState(locked=NodeId.INTEGRITY, hovered=NodeId.INTEGRITY).check_invariants()

    def test_same_node_dragged_and_locked_is_valid(self) -> None:
        state = SessionState(
            dragging=NodeId.INTEGRITY,
            drag_position=Point(10, 10),
            locked=NodeId.INTEGRITY,
            active_reveal=RevealZoneId.UPPER,
        )
        state.check_invariants()
        assert state.is_dragging_lead


def test_reset_and_copy_are_independent() -> None:
    state = SessionState(dragging=NodeId.INQUIRY, drag_position=Point(3, 4), locked=NodeId.INTUITION)
    snapshot = state.copy()

    state.reset()

    assert state == SessionState()
    assert snapshot.locked is NodeId.INTUITION
