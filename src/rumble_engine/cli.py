# Area: Shared
"""
rumble_engine.cli — Command-line interface
==========================================

Host console for running a party's match from a terminal. Every
command opens the shared SQLite store, runs once and prints JSON.

Usage:
    rumble-engine --party ABC123 init-db
    rumble-engine --party ABC123 add-player p1 --name "Alex"
    rumble-engine --party ABC123 predict p1 mens:winner "Cody Rhodes"
    rumble-engine --party ABC123 enter mens 1 "Cody Rhodes" --owner p1
    rumble-engine --party ABC123 eliminate mens 2 --by 1
    rumble-engine --party ABC123 declare-winner mens 1
    rumble-engine --party ABC123 snapshot mens

Settings can also come from --config, a .env file or RUMBLE_*
environment variables (see rumble_engine._config).
"""

import argparse
import json
import sys
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from ._config import EngineConfig, load_config
from ._engine.controller import MatchController, with_retry
from ._engine.enums import Division
from ._engine.notifier import EventNotifier
from ._engine.outcome_key import OutcomeKey
from ._shared.event_ticker import EventTicker
from ._shared.logging_config import enable_ticker_mode, log_engine_error, setup_logging
from ._store.database import init_database
from .errors import RumbleEngineError

EXIT_OK = 0
EXIT_ERROR = 1


def _timestamp(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 timestamp: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rumble-engine",
        description="Rumble elimination match engine - host console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rumble-engine --party ABC123 enter mens 1 "Cody Rhodes"
  rumble-engine --party ABC123 eliminate mens 2 --by 1
  RUMBLE_PARTY_CODE=ABC123 rumble-engine leaderboard
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--party", dest="party_code", help="Party code")
    parser.add_argument("--db", dest="db_path", help="Path to the SQLite database")
    parser.add_argument("--log-file", dest="log_file", help="Path to the JSON log file")
    parser.add_argument(
        "--log-level", dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    parser.add_argument(
        "--ticker", action="store_true",
        help="Print a live feed line per event to stderr",
    )

    divisions = [d.value for d in Division]
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create the database schema")

    p = sub.add_parser("add-player", help="Register a player")
    p.add_argument("player_id")
    p.add_argument("--name", dest="display_name")

    p = sub.add_parser("assign", help="Give a player a slot before the match")
    p.add_argument("division", choices=divisions)
    p.add_argument("number", type=int)
    p.add_argument("player_id")

    p = sub.add_parser("predict", help="Submit a prediction")
    p.add_argument("player_id")
    p.add_argument("key", help="Outcome key, e.g. mens:winner or match:undercard_1")
    p.add_argument("value")

    p = sub.add_parser("enter", help="Record an entrant")
    p.add_argument("division", choices=divisions)
    p.add_argument("number", type=int)
    p.add_argument("wrestler_name")
    p.add_argument("--owner", dest="owner_player_id")
    p.add_argument("--at", type=_timestamp)

    p = sub.add_parser("eliminate", help="Record an elimination")
    p.add_argument("division", choices=divisions)
    p.add_argument("number", type=int)
    p.add_argument("--by", dest="eliminated_by_number", type=int, required=True)
    p.add_argument("--at", type=_timestamp)

    p = sub.add_parser("declare-winner", help="Confirm the sole survivor")
    p.add_argument("division", choices=divisions)
    p.add_argument("number", type=int)
    p.add_argument("--at", type=_timestamp)

    p = sub.add_parser("outcome", help="Record an undercard match or prop result")
    p.add_argument("key", help="Outcome key, e.g. match:undercard_1 or prop:prop_2")
    p.add_argument("value")

    p = sub.add_parser("snapshot", help="Show a division")
    p.add_argument("division", choices=divisions)

    p = sub.add_parser("points", help="Show a player's points")
    p.add_argument("player_id")

    sub.add_parser("leaderboard", help="Show the standings")
    return parser


def _slot_result(slot) -> Dict[str, Any]:
    return {
        "number": slot.number,
        "wrestler_name": slot.wrestler_name,
        "owner_player_id": slot.owner_player_id,
        "entry_time": slot.entry_time.isoformat() if slot.entry_time else None,
        "elimination_time": (
            slot.elimination_time.isoformat() if slot.elimination_time else None
        ),
        "eliminated_by_number": slot.eliminated_by_number,
    }


def run_command(
    args: argparse.Namespace, controller: MatchController
) -> Any:
    """Dispatch one parsed command and return its JSON-ready result."""
    command = args.command
    commands: Dict[str, Callable[[], Any]] = {
        "add-player": lambda: controller.register_player(args.player_id, args.display_name),
        "assign": lambda: _slot_result(
            controller.assign_slot(args.division, args.number, args.player_id)
        ),
        "predict": lambda: controller.submit_prediction(
            args.player_id, OutcomeKey.parse(args.key), args.value
        ),
        "enter": lambda: _slot_result(controller.record_entry(
            args.division, args.number, args.wrestler_name,
            owner_player_id=args.owner_player_id, at=args.at,
        )),
        "eliminate": lambda: _slot_result(controller.record_elimination(
            args.division, args.number, args.eliminated_by_number, at=args.at,
        )),
        "declare-winner": lambda: _slot_result(
            controller.declare_winner(args.division, args.number, at=args.at)
        ),
        "outcome": lambda: {
            "recorded": controller.record_simple_outcome(
                OutcomeKey.parse(args.key), args.value
            )
        },
        "snapshot": lambda: controller.snapshot(args.division),
        "points": lambda: {
            "player_id": args.player_id,
            "points": controller.player_points(args.player_id),
        },
        "leaderboard": lambda: controller.leaderboard(),
    }
    result = with_retry(commands[command])
    if result is None:
        result = {"ok": True}
    return result


def _emit(result: Any, events: List[Dict[str, Any]]) -> None:
    if isinstance(result, dict) and events:
        result = {**result, "events": events}
    print(json.dumps(result, indent=2, default=str))


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config: EngineConfig = load_config(
            args.config,
            overrides={
                "party_code": args.party_code,
                "db_path": args.db_path,
                "log_file": args.log_file,
                "log_level": args.log_level,
            },
        )
    except RumbleEngineError as e:
        log_engine_error(e)
        return EXIT_ERROR

    setup_logging(config.log_file, config.log_level)

    try:
        if args.command == "init-db":
            init_database(config.db_path)
            _emit({"ok": True, "db_path": config.db_path}, [])
            return EXIT_OK

        notifier = EventNotifier()
        if args.ticker:
            enable_ticker_mode()
            notifier.subscribe(EventTicker(stream=sys.stderr))
        events: List[Dict[str, Any]] = []
        notifier.subscribe(lambda event: events.append(event.to_dict()))

        controller = MatchController.from_config(config, notifier=notifier)
        result = run_command(args, controller)
        _emit(result, events)
        return EXIT_OK
    except RumbleEngineError as e:
        log_engine_error(e)
        return EXIT_ERROR
