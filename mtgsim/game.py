"""Core game state and rules engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mtgsim.card import Card
from mtgsim.mana import Payment
from mtgsim.player import Player
from mtgsim.stack import Spell, Stack
from mtgsim.turn import Step, Turn
from mtgsim.zone import CardNotFoundError, Zone


class GameError(Exception):
    """An action that the rules do not allow, or that cannot be carried out."""


@dataclass
class CastChoices:
    """Choices a player makes while casting a spell."""

    x_value: int = 0
    chosen_modes: list[str] = field(default_factory=list)
    targets: list[str] = field(default_factory=list)


def _zone_name(player_id: int, kind: str) -> str:
    return f"p{player_id}_{kind}"


class Game:
    """The whole state of a single game."""

    def __init__(self, player_ids: list[int], starting_life: int) -> None:
        if not player_ids:
            raise GameError("must have at least one player")

        self.stack = Stack()
        self.turn = Turn()
        self.zones: dict[str, Zone] = {}
        self.players: list[Player] = []
        self._consecutive_passes = 0

        for player_id in player_ids:
            self.players.append(Player(player_id, starting_life))
            for kind in ("library", "hand", "graveyard"):
                self.zones[_zone_name(player_id, kind)] = Zone()

        self.active_player: Player = self.players[0]
        self.priority_player: Player = self.players[0]

        for name in ("stack", "exile", "battlefield"):
            self.zones[name] = Zone()

    @property
    def consecutive_passes(self) -> int:
        """How many players have passed priority in a row."""
        return self._consecutive_passes

    def pay_spell_cost(self, player: Player, spell: Spell, payment: Payment) -> None:
        """Pay the spell's total cost from the player's mana pool."""
        cost = spell.determine_total_cost()
        if not player.mana_pool.pay(cost, payment):
            raise GameError("failed to pay mana cost")

    def check_state(self) -> None:
        """Resolve the top of the stack or advance the turn once everyone has passed."""
        if self._consecutive_passes < len(self.players):
            return

        spell = self.stack.pop()
        if spell is not None:
            self._resolve(spell)
        else:
            self.turn.next()
            self._handle_step_based_actions()

        self._consecutive_passes = 0
        self.priority_player = self.active_player

    def get_valid_targets(self, card: Card) -> list[Card]:
        """Valid targets for the card; no card has targets yet."""
        return []

    def _resolve(self, spell: Spell) -> None:
        # Every spell is treated as a permanent for now.
        spell.card.controller_id = spell.caster_id
        self.zones["battlefield"].add(spell.card)

    def _handle_step_based_actions(self) -> None:
        if self.turn.current_step is Step.UNTAP:
            self._untap_permanents()

    def _untap_permanents(self) -> None:
        for card in self.zones["battlefield"]:
            if card.controller_id == self.active_player.id and self._can_untap(card):
                card.tapped = False

    def _can_untap(self, card: Card) -> bool:
        # Hook for effects that stop permanents from untapping.
        return True

    def pass_priority(self) -> None:
        """Pass priority to the next player in turn order."""
        self._consecutive_passes += 1

        current = next(
            (
                position
                for position, player in enumerate(self.players)
                if player.id == self.priority_player.id
            ),
            None,
        )
        if current is None:
            self.priority_player = self.active_player
            return

        self.priority_player = self.players[(current + 1) % len(self.players)]

    def cast_spell(
        self,
        player: Player,
        card: Card,
        choices: Optional[CastChoices],
        payment: Payment,
    ) -> Spell:
        """Cast a card from the player's hand and put it on the stack."""
        hand = self.zones.get(_zone_name(player.id, "hand"))
        if hand is None:
            raise GameError(f"hand zone not found for player {player.id}")

        if not any(card_in_hand.id == card.id for card_in_hand in hand):
            raise GameError("card not in hand")

        choices = choices if choices is not None else CastChoices()
        spell = Spell(
            card=card,
            caster_id=player.id,
            x_value=choices.x_value,
            chosen_modes=list(choices.chosen_modes),
            targets=list(choices.targets),
            final_cost=card.mana_cost,
        )

        self.pay_spell_cost(player, spell, payment)

        try:
            hand.remove(card)
        except CardNotFoundError as exc:
            raise GameError(f"failed to remove card from hand after payment: {exc}") from exc

        self.stack.push(spell)
        self.priority_player = player
        self._consecutive_passes = 0
        return spell