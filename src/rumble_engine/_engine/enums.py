# Area: Engine
"""
rumble_engine._engine.enums — Match Enums
=========================================

Defines divisions, the per-division match states and events, and the
closed set of outcome kinds the award ledger can record.
"""

from enum import Enum


class Division(Enum):
    """The two parallel 30-entrant brackets."""
    MENS = "mens"
    WOMENS = "womens"

    @property
    def label(self) -> str:
        return "Men's" if self is Division.MENS else "Women's"

    @property
    def iron_title(self) -> str:
        return "Iron Man" if self is Division.MENS else "Iron Woman"


class MatchState(Enum):
    """
    States of a division's match.

    State transitions:
    NOT_STARTED -> IN_PROGRESS (on FIRST_ENTRY)
    IN_PROGRESS -> IN_PROGRESS (on ENTRY or ELIMINATION)
    IN_PROGRESS -> COMPLETE (on WINNER_DECLARED)
    COMPLETE is terminal.
    """
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETE = "COMPLETE"


class MatchEvent(Enum):
    """
    Events that drive the match state machine.

    - FIRST_ENTRY: the first slot of the division entered
    - ENTRY: any later entry
    - ELIMINATION: an active slot was eliminated
    - WINNER_DECLARED: the host confirmed the sole survivor
    """
    FIRST_ENTRY = "FIRST_ENTRY"
    ENTRY = "ENTRY"
    ELIMINATION = "ELIMINATION"
    WINNER_DECLARED = "WINNER_DECLARED"


class OutcomeKind(Enum):
    """Kinds of scoreable facts. Values are used in storage keys."""
    ENTRANT_ONE = "entrant_1"
    ENTRANT_THIRTY = "entrant_30"
    FIRST_ELIMINATION = "first_elimination"
    MOST_ELIMINATIONS = "most_eliminations"
    LONGEST_DURATION = "longest_time"
    FINAL_FOUR = "final_four"
    DIVISION_WINNER = "winner"
    ELIMINATION = "elimination"
    MATCH_RESULT = "match"
    PROP_RESULT = "prop"


# Kinds that always belong to a division
DIVISION_KINDS = frozenset({
    OutcomeKind.ENTRANT_ONE,
    OutcomeKind.ENTRANT_THIRTY,
    OutcomeKind.FIRST_ELIMINATION,
    OutcomeKind.MOST_ELIMINATIONS,
    OutcomeKind.LONGEST_DURATION,
    OutcomeKind.FINAL_FOUR,
    OutcomeKind.DIVISION_WINNER,
    OutcomeKind.ELIMINATION,
})

# Kinds recorded through record_simple_outcome
SIMPLE_KINDS = frozenset({OutcomeKind.MATCH_RESULT, OutcomeKind.PROP_RESULT})

# Kinds that must carry an item (match id, prop id, slot number)
ITEM_KINDS = frozenset({
    OutcomeKind.ELIMINATION,
    OutcomeKind.MATCH_RESULT,
    OutcomeKind.PROP_RESULT,
})
