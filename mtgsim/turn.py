"""Turn structure: phases, steps and turn progression."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Phase(str, Enum):
    """A phase of a turn."""

    BEGINNING = "Beginning"
    PRE_COMBAT_MAIN = "Pre-Combat Main"
    COMBAT = "Combat"
    POST_COMBAT_MAIN = "Post-Combat Main"
    END = "End"

    def __str__(self) -> str:
        return self.value


class Step(str, Enum):
    """A step within a phase."""

    UNTAP = "Untap"
    UPKEEP = "Upkeep"
    DRAW = "Draw"
    BEGIN_COMBAT = "Begin Combat"
    DECLARE_ATTACKERS = "Declare Attackers"
    DECLARE_BLOCKERS = "Declare Blockers"
    COMBAT_DAMAGE = "Combat Damage"
    END_COMBAT = "End Combat"
    END = "End"
    CLEANUP = "Cleanup"

    def __str__(self) -> str:
        return self.value


# Main phases have no steps; their step is None.
TURN_ORDER: tuple[tuple[Phase, Optional[Step]], ...] = (
    (Phase.BEGINNING, Step.UNTAP),
    (Phase.BEGINNING, Step.UPKEEP),
    (Phase.BEGINNING, Step.DRAW),
    (Phase.PRE_COMBAT_MAIN, None),
    (Phase.COMBAT, Step.BEGIN_COMBAT),
    (Phase.COMBAT, Step.DECLARE_ATTACKERS),
    (Phase.COMBAT, Step.DECLARE_BLOCKERS),
    (Phase.COMBAT, Step.COMBAT_DAMAGE),
    (Phase.COMBAT, Step.END_COMBAT),
    (Phase.POST_COMBAT_MAIN, None),
    (Phase.END, Step.END),
    (Phase.END, Step.CLEANUP),
)


class Turn:
    """Tracks the current turn number, phase and step."""

    def __init__(self) -> None:
        self.turn_number = 1
        self._index = 0
        self.current_phase, self.current_step = TURN_ORDER[0]

    def next(self) -> None:
        """Advance to the next step, wrapping to a new turn after cleanup."""
        self._index += 1
        if self._index >= len(TURN_ORDER):
            self._index = 0
            self.turn_number += 1
        self.current_phase, self.current_step = TURN_ORDER[self._index]

    def __repr__(self) -> str:
        return (
            f"Turn(turn_number={self.turn_number}, phase={self.current_phase!s}, "
            f"step={self.current_step!s})"
        )