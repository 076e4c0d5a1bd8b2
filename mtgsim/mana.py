"""Mana types, mana pools, costs and payments."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union


class ManaType(IntEnum):
    """A type of mana; the five colours followed by colorless."""

    WHITE = 0
    BLUE = 1
    BLACK = 2
    RED = 3
    GREEN = 4
    COLORLESS = 5

    @property
    def symbol(self) -> str:
        """The one-letter symbol of this mana type."""
        return _SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


_SYMBOLS = {
    ManaType.WHITE: "W",
    ManaType.BLUE: "U",
    ManaType.BLACK: "B",
    ManaType.RED: "R",
    ManaType.GREEN: "G",
    ManaType.COLORLESS: "C",
}

NUM_MANA_TYPES = len(ManaType)
NUM_COLORS = NUM_MANA_TYPES - 1

# Value held in a cost's generic part to stand for an 'X' cost.
X_VALUE_PLACEHOLDER = 0

Amounts = Union[Mapping[ManaType, int], Iterable[int], None]


def _amounts(values: Amounts, size: int) -> list[int]:
    """Normalise a mapping or a sequence of amounts into a list of ``size`` ints."""
    if not values:
        return [0] * size
    if isinstance(values, Mapping):
        result = [0] * size
        for key, amount in values.items():
            index = int(key)
            if not 0 <= index < size:
                raise ValueError(f"mana type {key!r} is out of range for this amount")
            result[index] = int(amount)
        return result
    result = [int(value) for value in values]
    if len(result) != size:
        raise ValueError(f"expected {size} amounts, got {len(result)}")
    return result


@dataclass(frozen=True)
class Cost:
    """The mana cost of a card or ability: coloured requirements plus a generic part."""

    colored: tuple[int, ...] = field(default=())
    generic: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "colored", tuple(_amounts(self.colored, NUM_COLORS)))

    @property
    def total(self) -> int:
        """Total mana needed to pay this cost."""
        return sum(self.colored) + self.generic


@dataclass(frozen=True)
class Payment:
    """The mana chosen to pay a cost, per mana type."""

    amounts: tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "amounts", tuple(_amounts(self.amounts, NUM_MANA_TYPES)))

    def total(self) -> int:
        """Total amount of mana in the payment."""
        return sum(self.amounts)


@dataclass
class Pool:
    """A player's mana pool."""

    amounts: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.amounts = _amounts(self.amounts, NUM_MANA_TYPES)

    def add(self, mana_type: ManaType | int, amount: int) -> None:
        """Add mana of the given type; unknown types past the last one are ignored."""
        index = int(mana_type)
        if index < 0:
            raise ValueError(f"invalid mana type: {mana_type!r}")
        if index < NUM_MANA_TYPES:
            self.amounts[index] += amount

    def total(self) -> int:
        """Total amount of mana in the pool."""
        return sum(self.amounts)

    def can_pay(self, cost: Cost) -> bool:
        """Whether the pool holds enough mana to pay ``cost``."""
        if any(have < need for have, need in zip(self.amounts, cost.colored)):
            return False
        remaining = sum(self.amounts) - sum(cost.colored)
        return remaining >= cost.generic

    def pay(self, cost: Cost, payment: Payment) -> bool:
        """Deduct ``payment`` from the pool if it exactly covers ``cost``.

        Returns True on success; on failure the pool is left unchanged.
        """
        if any(have < spend for have, spend in zip(self.amounts, payment.amounts)):
            return False
        if any(paid < need for paid, need in zip(payment.amounts, cost.colored)):
            return False
        if payment.total() != cost.total:
            return False
        self.amounts = [have - spend for have, spend in zip(self.amounts, payment.amounts)]
        return True