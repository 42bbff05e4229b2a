# Area: Shared
"""
Shared utilities for the engine and the host console.

This package contains:
- Logging configuration
- The live event ticker
"""

from .logging_config import (
    setup_logging,
    log_engine_error,
    enable_ticker_mode,
    disable_ticker_mode,
    is_ticker_mode_enabled,
)
from .event_ticker import EventTicker
