# Area: Engine
"""
rumble_engine._engine.controller — Match Controller
===================================================

Orchestrates host commands for one party. Every command:

1. Reloads the division's slots from the store and re-derives the
   match state (no cached milestones).
2. Validates and applies the slot mutation with a conditional write.
3. Reloads the division after its own write, picking up writes from
   other processes, and recomputes the derived statistics on it.
4. Records each newly-true milestone through the AwardLedger and
   applies the point grants that hang off it.
5. Publishes events only for changes the store confirmed as new.

A command that repeats an already-applied entry or elimination is a
replay: nothing is mutated or announced, but the award steps run again
so grants missed by an interrupted earlier attempt are completed.
"""

from __future__ import annotations
import json
import logging
import time
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple, TypeVar, Union

from .enums import Division, MatchEvent, MatchState, OutcomeKind, SIMPLE_KINDS
from .ledger import AwardLedger
from .notifier import (
    EliminationRecorded,
    EntryRecorded,
    EventNotifier,
    FourRemainingReached,
    IronPersonRecorded,
    MatchEventBase,
    OutcomeRecorded,
    PointsAwarded,
    WinnerDeclared,
)
from .outcome_key import FINAL_FOUR_PICKS, OutcomeKey
from .scoring import ScoringTable
from .slots import SLOT_COUNT, Slot, SlotRegistry, normalize_name
from .state_machine import MatchStateMachine
from . import stats
from .._store.base import MatchStore
from .._store.sqlite_store import SqliteStore
from ..errors import (
    InvalidTransition,
    MatchAlreadyComplete,
    PreconditionFailed,
    StorageUnavailable,
)
from ..types import DivisionSnapshot, PlayerStanding

if TYPE_CHECKING:
    from .._config import EngineConfig

logger = logging.getLogger("rumble_engine.controller")

T = TypeVar("T")

DivisionArg = Union[Division, str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MatchController:
    """
    Command surface of the elimination match engine for one party.

    Args:
        store: Storage adapter (local MemoryStore or shared SqliteStore)
        party_code: Party all commands apply to
        scoring: Point values; defaults to the standard table
        notifier: Receives domain events; a private one is created if omitted
        clock: Returns the current UTC time when a command gives no timestamp
        jobber_threshold_seconds: Eliminations faster than this are penalised
        final_four_requires_full_field: Only award the final four once all
            thirty entrants have entered
    """

    def __init__(
        self,
        store: MatchStore,
        party_code: str,
        scoring: Optional[ScoringTable] = None,
        notifier: Optional[EventNotifier] = None,
        clock: Callable[[], datetime] = utc_now,
        jobber_threshold_seconds: float = stats.JOBBER_THRESHOLD_SECONDS,
        final_four_requires_full_field: bool = True,
    ):
        if not party_code:
            raise InvalidTransition("party_code is required")
        self.store = store
        self.party_code = party_code
        self.scoring = scoring or ScoringTable()
        self.notifier = notifier if notifier is not None else EventNotifier()
        self.ledger = AwardLedger(store, party_code)
        self._clock = clock
        self.jobber_threshold_seconds = jobber_threshold_seconds
        self.final_four_requires_full_field = final_four_requires_full_field

    @classmethod
    def from_config(
        cls,
        config: "EngineConfig",
        store: Optional[MatchStore] = None,
        notifier: Optional[EventNotifier] = None,
    ) -> "MatchController":
        """Build a controller from an EngineConfig, opening its SQLite store."""
        if store is None:
            store = SqliteStore(config.db_path)
        return cls(
            store=store,
            party_code=config.party_code,
            scoring=config.scoring,
            notifier=notifier,
            jobber_threshold_seconds=config.jobber_threshold_seconds,
            final_four_requires_full_field=config.final_four_requires_full_field,
        )

    # ══════════════════════════════════════════════════════════
    # PRE-MATCH COMMANDS
    # ══════════════════════════════════════════════════════════

    def register_player(self, player_id: str, display_name: Optional[str] = None) -> None:
        """Create a player (or rename one) without touching their points."""
        if not player_id or not player_id.strip():
            raise InvalidTransition("player_id is required")
        name = (display_name or player_id).strip()
        self.store.save_player(self.party_code, player_id.strip(), name)
        logger.info(f"Registered player {player_id} ({name})")

    def assign_slot(self, division: DivisionArg, number: int, player_id: str) -> Slot:
        """Give a player ownership of a slot before it enters."""
        division = _division(division)
        registry, machine = self._load(division)
        if machine.current_state is MatchState.COMPLETE:
            raise MatchAlreadyComplete(division.value, "assign_slot")
        slot = registry.assign_owner(number, player_id)
        if not self.store.assign_owner(self.party_code, division.value, number, player_id):
            current = self._load(division)[0].get(number)
            raise InvalidTransition(
                f"Slot #{number} was taken concurrently",
                context={"division": division.value, "slot": number,
                         "owner": current.owner_player_id},
            )
        logger.info(f"[{division.value}] #{number} assigned to {player_id}")
        return slot

    def submit_prediction(self, player_id: str, key: OutcomeKey, value: str) -> None:
        """
        Save a player's pick for one outcome.

        Division milestone picks lock when the division's first entrant
        enters. Undercard and prop picks lock when their result is recorded.

        Raises:
            InvalidTransition: If the key is not predictable or the pick is locked
            PreconditionFailed: If the player is not registered
        """
        if key.kind is OutcomeKind.ELIMINATION or (
            key.kind is OutcomeKind.FINAL_FOUR and key.item is None
        ):
            raise InvalidTransition(
                f"Outcome {key} cannot be predicted",
                context={"outcome_key": str(key)},
            )
        if not value or not value.strip():
            raise InvalidTransition("Prediction value is required",
                                    context={"outcome_key": str(key)})
        if self.store.get_player(self.party_code, player_id) is None:
            raise PreconditionFailed(
                f"Player {player_id} is not registered",
                context={"player_id": player_id},
            )
        if key.kind in SIMPLE_KINDS:
            if self.ledger.recorded_value(key.division, key) is not None:
                raise InvalidTransition(
                    f"{key} is already decided; predictions are locked",
                    context={"outcome_key": str(key)},
                )
        else:
            state = self.match_state(key.division)
            if state is not MatchState.NOT_STARTED:
                raise InvalidTransition(
                    f"{key.division.label} match has started; predictions are locked",
                    context={"outcome_key": str(key), "state": state.value},
                )
        if key.kind is OutcomeKind.FINAL_FOUR:
            self._check_final_four_pick(player_id, key, value)
        self.store.save_prediction(self.party_code, player_id, str(key), value.strip())
        logger.debug(f"{player_id} predicts {key} = {value.strip()}")

    # ══════════════════════════════════════════════════════════
    # LIVE COMMANDS
    # ══════════════════════════════════════════════════════════

    def record_entry(
        self,
        division: DivisionArg,
        number: int,
        wrestler_name: str,
        owner_player_id: Optional[str] = None,
        at: Optional[datetime] = None,
    ) -> Slot:
        """
        Reveal the wrestler entering at a slot.

        Raises:
            MatchAlreadyComplete: If the winner was already declared
            InvalidTransition: If the slot already entered with someone else,
                the name is taken, or the slot is owned by another player
        """
        division = _division(division)
        at = self._timestamp(at)
        registry, machine = self._load(division)
        if machine.current_state is MatchState.COMPLETE:
            raise MatchAlreadyComplete(division.value, "record_entry")

        slot = registry.get(number)
        replay = _same_entry(slot, wrestler_name, owner_player_id)
        if not replay:
            event = MatchEvent.ENTRY if registry.entered_slots() else MatchEvent.FIRST_ENTRY
            slot = registry.record_entry(number, wrestler_name, at, owner_player_id)
            machine.transition(event)
            if not self.store.write_entry(self.party_code, division.value, slot):
                registry, _ = self._load(division)
                slot = registry.get(number)
                if not _same_entry(slot, wrestler_name, owner_player_id):
                    raise InvalidTransition(
                        f"Slot #{number} entered concurrently as {slot.wrestler_name}",
                        context={"division": division.value, "slot": number},
                    )
                replay = True

        if replay:
            logger.info(f"[{division.value}] #{number} entry replayed")
        else:
            logger.info(f"[{division.value}] #{number} {slot.wrestler_name} enters")
            self._publish(EntryRecorded(
                party_code=self.party_code,
                division=division,
                occurred_at=slot.entry_time,
                number=number,
                wrestler_name=slot.wrestler_name,
                owner_player_id=slot.owner_player_id,
            ))

        if number in (1, SLOT_COUNT):
            key = OutcomeKey.entrant(division, number)
            value, new = self._settle(division, key, lambda: slot.wrestler_name)
            if new:
                self._publish_outcome(division, key, value, at)
            self._grant_predictors(
                division, key, value, self.scoring.entrant_guess, "entrant_guess", at
            )

        self._evaluate_milestones(division, self._load(division)[0], at)
        return slot

    def record_elimination(
        self,
        division: DivisionArg,
        number: int,
        eliminated_by_number: int,
        at: Optional[datetime] = None,
    ) -> Slot:
        """
        Eliminate an active slot, crediting another active slot.

        Raises:
            MatchAlreadyComplete: If the winner was already declared
            InvalidTransition: If the slot is not active
            UnknownEliminator: If the eliminator is not an active slot
        """
        division = _division(division)
        at = self._timestamp(at)
        registry, machine = self._load(division)
        if machine.current_state is MatchState.COMPLETE:
            raise MatchAlreadyComplete(division.value, "record_elimination")

        slot = registry.get(number)
        replay = _same_elimination(slot, eliminated_by_number)
        if not replay:
            slot = registry.record_elimination(number, eliminated_by_number, at)
            machine.transition(MatchEvent.ELIMINATION)
            if not self.store.write_elimination(self.party_code, division.value, slot):
                registry, _ = self._load(division)
                slot = registry.get(number)
                if not _same_elimination(slot, eliminated_by_number):
                    raise InvalidTransition(
                        f"Slot #{number} was eliminated concurrently",
                        context={"division": division.value, "slot": number,
                                 "eliminated_by": slot.eliminated_by_number},
                    )
                replay = True

        eliminator = registry.get(slot.eliminated_by_number)
        jobber = stats.is_jobber(slot, self.jobber_threshold_seconds)

        if replay:
            logger.info(f"[{division.value}] #{number} elimination replayed")
        else:
            logger.info(
                f"[{division.value}] #{number} {slot.wrestler_name} eliminated by "
                f"#{eliminator.number} {eliminator.wrestler_name}"
            )
            self._publish(EliminationRecorded(
                party_code=self.party_code,
                division=division,
                occurred_at=slot.elimination_time,
                number=number,
                wrestler_name=slot.wrestler_name,
                eliminated_by_number=eliminator.number,
                eliminated_by_name=eliminator.wrestler_name,
                duration_seconds=slot.duration(slot.elimination_time),
                jobber=jobber,
            ))

        key = OutcomeKey.elimination(division, number)
        self._settle(division, key, lambda: str(eliminator.number))
        self._grant(division, key, eliminator.owner_player_id,
                    self.scoring.elimination, "elimination", at)
        if jobber:
            self._grant(division, key, slot.owner_player_id,
                        self.scoring.jobber_penalty, "jobber_penalty", at)

        self._evaluate_milestones(division, self._load(division)[0], at)
        return slot

    def declare_winner(
        self, division: DivisionArg, number: int, at: Optional[datetime] = None
    ) -> Slot:
        """
        Confirm the sole survivor and settle the end-of-match awards.

        Durations of still-active slots are measured to one reference
        time captured at the start of the command.

        Raises:
            PreconditionFailed: If the slot is not the sole survivor of a
                full thirty-entrant field
            MatchAlreadyComplete: If a different winner was already declared
        """
        division = _division(division)
        reference_time = self._timestamp(at)
        registry, machine = self._load(division)
        winner_key = OutcomeKey(OutcomeKind.DIVISION_WINNER, division)
        slot = registry.get(number)

        if machine.current_state is MatchState.COMPLETE:
            stored = self.ledger.recorded_value(division, winner_key)
            if not _same_name(stored, slot.wrestler_name):
                raise MatchAlreadyComplete(division.value, "declare_winner")
            logger.info(f"[{division.value}] winner declaration replayed")
        else:
            survivor = stats.sole_survivor(registry)
            if survivor is None or survivor.number != number:
                raise PreconditionFailed(
                    f"#{number} is not the sole survivor of the {division.label} match",
                    context={
                        "division": division.value,
                        "slot": number,
                        "active": [s.number for s in registry.active_slots()],
                        "entered": len(registry.entered_slots()),
                    },
                )

        # Iron Man / Iron Woman
        iron_key = OutcomeKey(OutcomeKind.LONGEST_DURATION, division)
        iron_name, iron_new = self._settle(
            division, iron_key,
            lambda: stats.longest_duration(registry, reference_time).wrestler_name,
        )
        iron = registry.find_by_wrestler(iron_name)
        if iron_new:
            self._publish(IronPersonRecorded(
                party_code=self.party_code,
                division=division,
                occurred_at=reference_time,
                number=iron.number,
                wrestler_name=iron.wrestler_name,
                duration_seconds=iron.duration(reference_time),
                title=division.iron_title,
            ))
        self._grant(division, iron_key, iron.owner_player_id,
                    self.scoring.iron_person, "iron_person", reference_time)
        self._grant_predictors(division, iron_key, iron_name,
                               self.scoring.longest_duration, "longest_duration",
                               reference_time)

        # Most eliminations
        most_key = OutcomeKey(OutcomeKind.MOST_ELIMINATIONS, division)
        most_name, most_new = self._settle(
            division, most_key, lambda: _name_of(stats.most_eliminations(registry))
        )
        if most_new:
            self._publish_outcome(division, most_key, most_name, reference_time)
        self._grant_predictors(division, most_key, most_name,
                               self.scoring.most_eliminations, "most_eliminations",
                               reference_time)

        # Winner last: its record is what marks the division COMPLETE
        if machine.current_state is not MatchState.COMPLETE:
            machine.transition(MatchEvent.WINNER_DECLARED)
        winner_name, winner_new = self._settle(
            division, winner_key, lambda: slot.wrestler_name
        )
        if winner_new:
            logger.info(f"[{division.value}] #{number} {slot.wrestler_name} wins")
            self._publish(WinnerDeclared(
                party_code=self.party_code,
                division=division,
                occurred_at=reference_time,
                number=number,
                wrestler_name=slot.wrestler_name,
                owner_player_id=slot.owner_player_id,
            ))
        self._grant(division, winner_key, slot.owner_player_id,
                    self.scoring.winner_number, "winner_number", reference_time)
        self._grant_predictors(division, winner_key, winner_name,
                               self.scoring.winner_pick, "winner_pick", reference_time)
        return slot

    def record_simple_outcome(
        self, key: OutcomeKey, value: str, at: Optional[datetime] = None
    ) -> bool:
        """
        Record an undercard match or prop result and pay its predictors.

        Returns:
            True if this call recorded the result, False for a replay

        Raises:
            InvalidTransition: If the key is not a match/prop key, or a
                different result was already recorded
        """
        if key.kind not in SIMPLE_KINDS:
            raise InvalidTransition(
                f"{key} is not a match or prop outcome",
                context={"outcome_key": str(key)},
            )
        if not value or not value.strip():
            raise InvalidTransition("Outcome value is required",
                                    context={"outcome_key": str(key)})
        at = self._timestamp(at)
        value = value.strip()
        stored, new = self._settle(key.division, key, lambda: value)
        if not _same_name(stored, value):
            raise InvalidTransition(
                f"{key} was already recorded as {stored!r}",
                context={"outcome_key": str(key), "recorded": stored, "value": value},
            )
        if key.kind is OutcomeKind.MATCH_RESULT:
            delta, reason = self.scoring.undercard_winner, "undercard_winner"
        else:
            delta, reason = self.scoring.prop_bet, "prop_bet"
        if new:
            self._publish_outcome(key.division, key, stored, at)
        self._grant_predictors(key.division, key, stored, delta, reason, at)
        return new

    # ══════════════════════════════════════════════════════════
    # READS
    # ══════════════════════════════════════════════════════════

    def match_state(self, division: DivisionArg) -> MatchState:
        return self._load(_division(division))[1].current_state

    def player_points(self, player_id: str) -> int:
        player = self.store.get_player(self.party_code, player_id)
        return player["points"] if player else 0

    def leaderboard(self) -> List[PlayerStanding]:
        """Players by points, highest first; equal points share a rank."""
        standings: List[PlayerStanding] = []
        previous = None
        rank = 0
        for position, player in enumerate(self.store.list_players(self.party_code), 1):
            if player["points"] != previous:
                rank = position
                previous = player["points"]
            standings.append({
                "rank": rank,
                "player_id": player["player_id"],
                "display_name": player["display_name"],
                "points": player["points"],
            })
        return standings

    def snapshot(
        self, division: DivisionArg, at: Optional[datetime] = None
    ) -> DivisionSnapshot:
        """Serializable view of a division, recomputed from the store."""
        division = _division(division)
        reference_time = self._timestamp(at)
        registry, machine = self._load(division)
        counts = stats.elimination_counts(registry)
        four = stats.four_remaining(registry)
        awards = {
            record["outcome_key"]: record["value"]
            for record in self.store.list_awards(self.party_code, division.value)
            if not record["outcome_key"].startswith(f"{division.value}:elimination:")
        }
        return {
            "party_code": self.party_code,
            "division": division.value,
            "label": division.label,
            "state": machine.current_state.value,
            "reference_time": reference_time.isoformat(),
            "slots": registry.to_snapshot(reference_time, counts),
            "entered_count": len(registry.entered_slots()),
            "next_entry_number": registry.next_entry_number(),
            "active_count": len(registry.active_slots()),
            "first_elimination": _number_of(stats.first_elimination(registry)),
            "four_remaining": [s.number for s in four] if four else None,
            "most_eliminations": _number_of(stats.most_eliminations(registry)),
            "longest_duration": _number_of(stats.longest_duration(registry, reference_time)),
            "sole_survivor": _number_of(stats.sole_survivor(registry)),
            "awards": awards,
        }

    # ══════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════

    def _load(self, division: Division) -> Tuple[SlotRegistry, MatchStateMachine]:
        registry = SlotRegistry(
            division, self.store.load_slots(self.party_code, division.value)
        )
        winner_key = OutcomeKey(OutcomeKind.DIVISION_WINNER, division)
        if self.ledger.recorded_value(division, winner_key) is not None:
            state = MatchState.COMPLETE
        elif registry.entered_slots():
            state = MatchState.IN_PROGRESS
        else:
            state = MatchState.NOT_STARTED
        return registry, MatchStateMachine(division, state)

    def _timestamp(self, at: Optional[datetime]) -> datetime:
        if at is None:
            at = self._clock()
        if at.tzinfo is None:
            return at.replace(tzinfo=timezone.utc)
        return at.astimezone(timezone.utc)

    def _settle(
        self,
        division: Optional[Division],
        key: OutcomeKey,
        compute: Callable[[], Optional[str]],
    ) -> Tuple[Optional[str], bool]:
        """
        Return (value, newly_recorded) for a milestone.

        An existing record always wins over a fresh computation, so a
        milestone keeps the value it had when it was first recorded.
        """
        stored = self.ledger.recorded_value(division, key)
        if stored is not None:
            return stored, False
        value = compute()
        if value is None:
            return None, False
        if self.ledger.try_record(division, key, value):
            return value, True
        return self.ledger.recorded_value(division, key), False

    def _evaluate_milestones(
        self, division: Division, registry: SlotRegistry, at: datetime
    ) -> None:
        first_key = OutcomeKey(OutcomeKind.FIRST_ELIMINATION, division)
        first_name, first_new = self._settle(
            division, first_key, lambda: _name_of(stats.first_elimination(registry))
        )
        if first_new:
            self._publish_outcome(division, first_key, first_name, at)
        self._grant_predictors(division, first_key, first_name,
                               self.scoring.first_elimination, "first_elimination", at)

        four_key = OutcomeKey(OutcomeKind.FINAL_FOUR, division)
        four_value, four_new = self._settle(
            division, four_key, lambda: self._final_four_value(registry)
        )
        if four_value is None:
            return
        names = json.loads(four_value)
        four = [registry.find_by_wrestler(name) for name in names]
        if four_new:
            logger.info(f"[{division.value}] final four: {', '.join(names)}")
            self._publish(FourRemainingReached(
                party_code=self.party_code,
                division=division,
                occurred_at=at,
                numbers=tuple(s.number for s in four),
                wrestler_names=tuple(names),
            ))
        for slot in four:
            self._grant(division, four_key, slot.owner_player_id,
                        self.scoring.final_four, f"final_four_slot_{slot.number}", at)
        wanted = {normalize_name(name) for name in names}
        pick_keys = {
            str(OutcomeKey.final_four_pick(division, position)): position
            for position in range(1, FINAL_FOUR_PICKS + 1)
        }
        paid = set()
        for prediction in self.store.list_predictions(self.party_code, list(pick_keys)):
            name = normalize_name(prediction["value"])
            if name in wanted and (prediction["player_id"], name) not in paid:
                paid.add((prediction["player_id"], name))
                pick_key = OutcomeKey.final_four_pick(
                    division, pick_keys[prediction["outcome_key"]]
                )
                self._grant(division, pick_key, prediction["player_id"],
                            self.scoring.final_four_pick, "final_four_pick", at)

    def _check_final_four_pick(self, player_id: str, key: OutcomeKey, value: str) -> None:
        """Reject a wrestler the player already named in another final four position."""
        others = [
            str(OutcomeKey.final_four_pick(key.division, position))
            for position in range(1, FINAL_FOUR_PICKS + 1)
            if str(position) != key.item
        ]
        for prediction in self.store.list_predictions(self.party_code, others):
            if prediction["player_id"] == player_id and _same_name(prediction["value"], value):
                raise InvalidTransition(
                    f"{value.strip()} is already picked at {prediction['outcome_key']}",
                    context={"outcome_key": str(key), "duplicate_of": prediction["outcome_key"]},
                )

    def _final_four_value(self, registry: SlotRegistry) -> Optional[str]:
        four = stats.final_four(registry, self.final_four_requires_full_field)
        if four is None:
            return None
        return json.dumps([s.wrestler_name for s in four])

    def _grant(
        self,
        division: Optional[Division],
        key: OutcomeKey,
        player_id: Optional[str],
        delta: int,
        reason: str,
        at: datetime,
    ) -> None:
        if not player_id or delta == 0:
            return
        if self.ledger.grant(key, player_id, delta, reason):
            self._publish(PointsAwarded(
                party_code=self.party_code,
                division=division,
                occurred_at=at,
                player_id=player_id,
                delta=delta,
                reason=reason,
                outcome_key=str(key),
            ))

    def _grant_predictors(
        self,
        division: Optional[Division],
        key: OutcomeKey,
        value: Optional[str],
        delta: int,
        reason: str,
        at: datetime,
    ) -> None:
        if value is None:
            return
        for prediction in self.store.list_predictions(self.party_code, [str(key)]):
            if _same_name(prediction["value"], value):
                self._grant(division, key, prediction["player_id"], delta, reason, at)

    def _publish_outcome(
        self, division: Optional[Division], key: OutcomeKey, value: str, at: datetime
    ) -> None:
        self._publish(OutcomeRecorded(
            party_code=self.party_code,
            division=division,
            occurred_at=at,
            outcome_key=str(key),
            value=value,
        ))

    def _publish(self, event: MatchEventBase) -> None:
        self.notifier.publish(event)


# ══════════════════════════════════════════════════════════════
# HELPERS
# ══════════════════════════════════════════════════════════════


def with_retry(
    fn: Callable[[], T],
    attempts: int = 3,
    base_delay: float = 0.1,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Run a command, retrying on StorageUnavailable with exponential backoff.

    Commands are safe to retry: the award ledger makes every grant
    apply at most once. Other engine errors are raised immediately.
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")
    attempt = 0
    while True:
        try:
            return fn()
        except StorageUnavailable as e:
            attempt += 1
            if attempt >= attempts:
                raise
            name = getattr(fn, "__name__", repr(fn))
            logger.warning(f"Retry attempt {attempt} for {name}: {e}")
            sleep(base_delay * (2 ** (attempt - 1)))


def _division(value: DivisionArg) -> Division:
    if isinstance(value, Division):
        return value
    try:
        return Division(value)
    except ValueError:
        raise InvalidTransition(
            f"Unknown division {value!r}",
            context={"division": value, "expected": [d.value for d in Division]},
        ) from None


def _same_name(a: Optional[str], b: Optional[str]) -> bool:
    if a is None or b is None:
        return False
    return normalize_name(a) == normalize_name(b)


def _same_entry(slot: Slot, wrestler_name: str, owner_player_id: Optional[str]) -> bool:
    return (
        slot.is_entered
        and _same_name(slot.wrestler_name, wrestler_name)
        and (owner_player_id is None or owner_player_id == slot.owner_player_id)
    )


def _same_elimination(slot: Slot, eliminated_by_number: int) -> bool:
    return slot.is_eliminated and slot.eliminated_by_number == eliminated_by_number


def _name_of(slot: Optional[Slot]) -> Optional[str]:
    return slot.wrestler_name if slot else None


def _number_of(slot: Optional[Slot]) -> Optional[int]:
    return slot.number if slot else None

