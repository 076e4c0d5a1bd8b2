"""Zones: ordered collections of cards such as a library or graveyard."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass, field

from mtgsim.card import Card


class ZoneError(Exception):
    """Base class for zone errors."""


class CardNotFoundError(ZoneError, LookupError):
    """The card is not in the zone."""

    def __init__(self, message: str = "card not found in zone") -> None:
        super().__init__(message)


class EmptyZoneError(ZoneError):
    """The zone holds no cards."""

    def __init__(self, message: str = "zone is empty") -> None:
        super().__init__(message)


@dataclass
class Zone:
    """An ordered collection of cards; the end of the list is the top."""

    cards: list[Card] = field(default_factory=list)

    def add(self, card: Card) -> None:
        """Put a card on top of the zone."""
        self.cards.append(card)

    def remove(self, card: Card) -> None:
        """Remove the card with the same id as ``card``."""
        for position, card_in_zone in enumerate(self.cards):
            if card_in_zone.id == card.id:
                del self.cards[position]
                return
        raise CardNotFoundError()

    def draw(self) -> Card:
        """Remove and return the top card."""
        if not self.cards:
            raise EmptyZoneError()
        return self.cards.pop()

    def shuffle(self) -> None:
        """Randomise the order of the cards."""
        random.shuffle(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)