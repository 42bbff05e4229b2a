# Area: Engine
"""
rumble_engine._engine.outcome_key — Outcome Key Dataclass
=========================================================

Defines the OutcomeKey frozen dataclass that names one scoreable fact.
Keys are built from the closed OutcomeKind enum plus an optional
division and item, and render to a stable storage string.
"""

from dataclasses import dataclass, replace
from typing import Optional, Union

from .enums import Division, OutcomeKind, DIVISION_KINDS, ITEM_KINDS
from ..errors import InvalidTransition

FINAL_FOUR_PICKS = 4


@dataclass(frozen=True)
class OutcomeKey:
    """
    Identifier of a scoreable fact.

    Attributes:
        kind: What kind of fact this is
        division: Division the fact belongs to (None for undercard matches
            and event-wide props)
        item: Sub-identifier: match id, prop id, eliminated slot number,
            or the 1-based final four pick position
    """

    kind: OutcomeKind
    division: Optional[Division] = None
    item: Optional[str] = None

    def __post_init__(self):
        if self.kind in DIVISION_KINDS and self.division is None:
            raise InvalidTransition(
                f"Outcome '{self.kind.value}' requires a division",
                context={"kind": self.kind.value},
            )
        if self.kind is OutcomeKind.MATCH_RESULT and self.division is not None:
            raise InvalidTransition(
                "Match results are not division scoped",
                context={"kind": self.kind.value, "division": self.division.value},
            )
        if self.kind in ITEM_KINDS and not self.item:
            raise InvalidTransition(
                f"Outcome '{self.kind.value}' requires an item",
                context={"kind": self.kind.value},
            )
        if self.kind is OutcomeKind.ELIMINATION and not str(self.item).isdigit():
            raise InvalidTransition(
                f"Elimination key needs a slot number, got {self.item!r}",
                context={"kind": self.kind.value, "item": self.item},
            )
        if self.kind is OutcomeKind.FINAL_FOUR and self.item is not None:
            if self.item not in {str(i) for i in range(1, FINAL_FOUR_PICKS + 1)}:
                raise InvalidTransition(
                    f"Final four pick must be 1..{FINAL_FOUR_PICKS}, got {self.item!r}",
                    context={"kind": self.kind.value, "item": self.item},
                )
        if self.kind not in ITEM_KINDS and self.kind is not OutcomeKind.FINAL_FOUR:
            if self.item is not None:
                raise InvalidTransition(
                    f"Outcome '{self.kind.value}' does not take an item",
                    context={"kind": self.kind.value, "item": self.item},
                )

    def __str__(self) -> str:
        parts = []
        if self.division is not None:
            parts.append(self.division.value)
        parts.append(self.kind.value)
        if self.item is not None:
            parts.append(self.item)
        return ":".join(parts)

    @property
    def record_key(self) -> "OutcomeKey":
        """The key the result is recorded under (final four picks share one)."""
        if self.kind is OutcomeKind.FINAL_FOUR and self.item is not None:
            return replace(self, item=None)
        return self

    @classmethod
    def parse(cls, text: str) -> "OutcomeKey":
        """Parse a storage string back into a key."""
        parts = text.split(":")
        division = None
        if parts and parts[0] in {d.value for d in Division}:
            division = Division(parts[0])
            parts = parts[1:]
        if not parts or not parts[0]:
            raise InvalidTransition(f"Malformed outcome key: {text!r}")
        try:
            kind = OutcomeKind(parts[0])
        except ValueError:
            raise InvalidTransition(f"Unknown outcome kind in key: {text!r}") from None
        item = ":".join(parts[1:]) or None
        return cls(kind=kind, division=division, item=item)

    # ── Constructors ─────────────────────────────────────────

    @classmethod
    def entrant(cls, division: Division, number: int) -> "OutcomeKey":
        kind = OutcomeKind.ENTRANT_ONE if number == 1 else OutcomeKind.ENTRANT_THIRTY
        return cls(kind, division)

    @classmethod
    def elimination(cls, division: Division, number: int) -> "OutcomeKey":
        return cls(OutcomeKind.ELIMINATION, division, str(number))

    @classmethod
    def final_four_pick(cls, division: Division, position: int) -> "OutcomeKey":
        return cls(OutcomeKind.FINAL_FOUR, division, str(position))

    @classmethod
    def match_result(cls, match_id: str) -> "OutcomeKey":
        return cls(OutcomeKind.MATCH_RESULT, None, match_id)

    @classmethod
    def prop_result(
        cls, prop_id: str, division: Union[Division, None] = None
    ) -> "OutcomeKey":
        return cls(OutcomeKind.PROP_RESULT, division, prop_id)
