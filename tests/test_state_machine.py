# Area: Engine Tests
"""Tests for the match state machine."""

import pytest

from rumble_engine._engine.enums import Division, MatchEvent, MatchState
from rumble_engine._engine.state_machine import MatchStateMachine, TRANSITIONS
from rumble_engine.errors import InvalidTransition, MatchAlreadyComplete


class TestMatchStateMachineBase:
    """Tests for basic state machine functionality."""

    def test_initial_state_is_not_started(self):
        """Test that state machine starts in NOT_STARTED."""
        sm = MatchStateMachine(Division.MENS)
        assert sm.current_state == MatchState.NOT_STARTED

    def test_can_transition_returns_true_for_valid(self):
        """Test can_transition returns True for valid transitions."""
        sm = MatchStateMachine(Division.MENS)
        assert sm.can_transition(MatchEvent.FIRST_ENTRY) is True

    def test_can_transition_returns_false_for_invalid(self):
        """Test can_transition returns False for invalid transitions."""
        sm = MatchStateMachine(Division.MENS)
        assert sm.can_transition(MatchEvent.ELIMINATION) is False
        assert sm.can_transition(MatchEvent.WINNER_DECLARED) is False

    def test_transition_raises_on_invalid(self):
        """Test that invalid transition raises InvalidTransition."""
        sm = MatchStateMachine(Division.MENS)
        with pytest.raises(InvalidTransition) as exc:
            sm.transition(MatchEvent.ELIMINATION)
        assert exc.value.context["state"] == "NOT_STARTED"

    def test_every_state_has_a_row(self):
        """Test the transition table covers every state."""
        assert set(TRANSITIONS) == set(MatchState)


class TestMatchStateMachineTransitions:
    """Tests for specific state transitions."""

    def test_full_happy_path(self):
        """Test complete happy path through states."""
        sm = MatchStateMachine(Division.WOMENS)

        sm.transition(MatchEvent.FIRST_ENTRY)
        assert sm.current_state == MatchState.IN_PROGRESS

        sm.transition(MatchEvent.ENTRY)
        sm.transition(MatchEvent.ELIMINATION)
        assert sm.current_state == MatchState.IN_PROGRESS

        sm.transition(MatchEvent.WINNER_DECLARED)
        assert sm.current_state == MatchState.COMPLETE

    def test_first_entry_only_once(self):
        """Test FIRST_ENTRY is not valid once the match is running."""
        sm = MatchStateMachine(Division.MENS, MatchState.IN_PROGRESS)
        with pytest.raises(InvalidTransition):
            sm.transition(MatchEvent.FIRST_ENTRY)

    @pytest.mark.parametrize("event", list(MatchEvent))
    def test_complete_is_terminal(self, event):
        """Test every event after COMPLETE raises MatchAlreadyComplete."""
        sm = MatchStateMachine(Division.MENS, MatchState.COMPLETE)
        with pytest.raises(MatchAlreadyComplete) as exc:
            sm.transition(event)
        assert exc.value.division == "mens"
