# Area: Shared
"""
rumble_engine.errors — Custom exception classes
===============================================

Defines the exception hierarchy for engine commands.
Each exception stores the command context for structured logging
and says whether the caller may retry the same command.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import json


class RumbleEngineError(Exception):
    """Base exception for all rumble_engine errors."""

    error_type = "ENGINE_ERROR"
    retryable = False

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = dict(context or {})
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.error_type,
            "message": self.message,
            "retryable": self.retryable,
            "context": self.context,
        }

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.error_type,
            message=self.message,
            retryable=self.retryable,
            context=self.context,
        )


class InvalidTransition(RumbleEngineError):
    """Raised when a command does not fit the current slot or division state."""

    error_type = "INVALID_TRANSITION"


class UnknownEliminator(RumbleEngineError):
    """Raised when an elimination credits a slot that is not currently active."""

    error_type = "UNKNOWN_ELIMINATOR"

    def __init__(self, division: str, eliminated_by_number: int, number: int):
        self.division = division
        self.eliminated_by_number = eliminated_by_number
        self.number = number
        super().__init__(
            f"Slot #{eliminated_by_number} is not an active entrant in {division}",
            context={
                "division": division,
                "slot": number,
                "eliminated_by": eliminated_by_number,
            },
        )


class PreconditionFailed(RumbleEngineError):
    """Raised when a command needs state the match has not reached yet."""

    error_type = "PRECONDITION_FAILED"


class MatchAlreadyComplete(RumbleEngineError):
    """Raised for any slot mutation after the winner was declared."""

    error_type = "MATCH_ALREADY_COMPLETE"

    def __init__(self, division: str, command: str):
        self.division = division
        self.command = command
        super().__init__(
            f"{division} match is complete; '{command}' rejected",
            context={"division": division, "command": command},
        )


class StorageUnavailable(RumbleEngineError):
    """Raised when the store cannot be reached. Safe to retry the same command."""

    error_type = "STORAGE_UNAVAILABLE"
    retryable = True

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        super().__init__(
            f"Storage unavailable during {operation}" + (f": {detail}" if detail else ""),
            context={"operation": operation},
        )


class ConfigError(RumbleEngineError):
    """Raised when configuration is missing or invalid."""

    error_type = "CONFIG_ERROR"


def _format_error_block(
    error_type: str,
    message: str,
    retryable: bool,
    context: Dict[str, Any],
) -> str:
    """Format a structured error block for terminal output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " COMMAND REJECTED" if not retryable else " COMMAND FAILED (RETRYABLE)",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Message:      {message}",
        f" Retryable:    {'yes' if retryable else 'no'}",
    ]

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        lines.append(_indent_json(context))

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
