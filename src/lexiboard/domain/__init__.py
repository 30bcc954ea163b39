"""Rule engine for the lexiboard word game.

The package is organised leaf to root:

* :mod:`board` - the 15x15 grid and premium layout.
* :mod:`tiles` - letter values, distribution, bag and rack helpers.
* :mod:`validation` - turn, rack and geometry checks for a placement.
* :mod:`scoring` - primary and cross-word scoring, formed-word extraction.
* :mod:`turns` - the move/pass/exchange state machine.
* :mod:`session` - the per-game facade used by callers.
* :mod:`registry` - the in-memory directory of live sessions.

Everything here is synchronous, in-memory and free of I/O; persistence goes
through :mod:`lexiboard.repository`.
"""

from . import (
    board,
    enums,
    models,
    registry,
    rules_config,
    scoring,
    session,
    tiles,
    turns,
    validation,
)

__all__ = [
    "board",
    "enums",
    "models",
    "registry",
    "rules_config",
    "scoring",
    "session",
    "tiles",
    "turns",
    "validation",
]
