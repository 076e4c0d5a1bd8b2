"""Players of the game."""

from __future__ import annotations

from dataclasses import dataclass, field

from mtgsim.mana import Pool


@dataclass
class Player:
    """A player with a life total and a mana pool."""

    id: int
    life: int
    mana_pool: Pool = field(default_factory=Pool)