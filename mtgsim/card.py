"""The card model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Optional

from mtgsim.mana import Cost


@dataclass(eq=False)
class Card:
    """A single card in the game."""

    id: uuid.UUID = field(default_factory=uuid.uuid4)
    name: str = ""
    mana_cost: Optional[Cost] = None
    tapped: bool = False
    controller_id: int = 0