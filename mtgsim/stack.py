"""The stack and the spells that wait on it."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Optional

from mtgsim.card import Card
from mtgsim.mana import Cost


@dataclass(eq=False)
class Spell:
    """A card that has been cast and is on the stack."""

    card: Card
    caster_id: int = 0
    x_value: int = 0
    chosen_modes: list[str] = field(default_factory=list)
    targets: list[str] = field(default_factory=list)
    final_cost: Optional[Cost] = None

    def determine_total_cost(self) -> Cost:
        """Compute, store and return the spell's final mana cost."""
        base = self.card.mana_cost
        if base is None:
            self.final_cost = Cost()
        else:
            self.final_cost = dataclasses.replace(base, generic=base.generic + self.x_value)
        return self.final_cost


@dataclass
class Stack:
    """Spells awaiting resolution; the last one is on top."""

    spells: list[Spell] = field(default_factory=list)

    def push(self, spell: Spell) -> None:
        """Put a spell on top of the stack."""
        self.spells.append(spell)

    def pop(self) -> Optional[Spell]:
        """Remove and return the top spell, or None if the stack is empty."""
        if not self.spells:
            return None
        return self.spells.pop()

    def __len__(self) -> int:
        return len(self.spells)