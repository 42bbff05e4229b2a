# Area: Engine
"""
Elimination match engine.

This package contains:
- Slot registry and derived statistics (pure, no storage)
- Award ledger (idempotent result recording and point grants)
- Match state machine and controller (command surface)
- Domain events and the event notifier
"""
