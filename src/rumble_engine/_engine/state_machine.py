# Area: Engine
"""
rumble_engine._engine.state_machine — Match State Machine
=========================================================

Implements the per-division match lifecycle. The controller builds
the machine from the stored snapshot at the start of every command and
validates the command's event against the transition table.
"""

import logging

from .enums import Division, MatchState, MatchEvent
from ..errors import InvalidTransition, MatchAlreadyComplete

logger = logging.getLogger("rumble_engine.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    MatchState.NOT_STARTED: {
        MatchEvent.FIRST_ENTRY: MatchState.IN_PROGRESS,
    },
    MatchState.IN_PROGRESS: {
        MatchEvent.ENTRY: MatchState.IN_PROGRESS,
        MatchEvent.ELIMINATION: MatchState.IN_PROGRESS,
        MatchEvent.WINNER_DECLARED: MatchState.COMPLETE,
    },
    MatchState.COMPLETE: {},
}


class MatchStateMachine:
    """
    State machine for one division's match.

    Attributes:
        division: The division this machine tracks
        current_state: The current state of the state machine
    """

    def __init__(
        self, division: Division, state: MatchState = MatchState.NOT_STARTED
    ):
        self.division = division
        self.current_state = state

    def can_transition(self, event: MatchEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: MatchEvent) -> MatchState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            MatchAlreadyComplete: If the match is already complete
            InvalidTransition: If the event is not valid in the current state
        """
        if self.current_state is MatchState.COMPLETE:
            raise MatchAlreadyComplete(self.division.value, event.value.lower())
        if not self.can_transition(event):
            raise InvalidTransition(
                f"Invalid transition: {event.value} from {self.current_state.value}",
                context={
                    "division": self.division.value,
                    "state": self.current_state.value,
                    "event": event.value,
                },
            )
        next_state = TRANSITIONS[self.current_state][event]
        if next_state is not self.current_state:
            logger.info(
                f"[{self.division.value}] {self.current_state.value} -> {next_state.value}"
            )
        self.current_state = next_state
        return next_state
