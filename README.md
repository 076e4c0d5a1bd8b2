# mtgsim

A small rules engine for simulating games of Magic: The Gathering. It models
players, mana pools and costs, zones such as the library, hand and
battlefield, the stack, the turn structure, and the priority loop.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
mtgsim
```

This prints the banner `Magic: The Gathering Simulator` and exits. It takes
no options other than `--help`.

## Library use

```python
from mtgsim.card import Card
from mtgsim.game import Game, CastChoices
from mtgsim.mana import Cost, ManaType, Payment

game = Game([1, 2], 20)
p1 = game.players[0]

bolt = Card(name="Lightning Bolt", mana_cost=Cost(colored={ManaType.RED: 1}))
game.zones["p1_hand"].add(bolt)
p1.mana_pool.add(ManaType.RED, 1)

spell = game.cast_spell(p1, bolt, CastChoices(), Payment({ManaType.RED: 1}))

# Every player passes priority, and the top of the stack resolves.
game.pass_priority()
game.pass_priority()
game.check_state()

assert bolt in game.zones["battlefield"].cards
```

### Modules

- `mtgsim.mana`: `ManaType` (the five colours and colorless, each with a
  one-letter `symbol`), `Cost`, `Payment` and `Pool`. Costs and payments
  accept either a mapping from `ManaType` to an amount or a full sequence of
  amounts. `Pool.add` adds mana, `Pool.total` sums it, `Pool.can_pay` says
  whether the pool could cover a cost, and `Pool.pay` checks that a payment
  covers a cost exactly and deducts it, returning `False` and leaving the
  pool unchanged otherwise.
- `mtgsim.card`: `Card`, with an id, name, mana cost, tapped flag and
  controller id.
- `mtgsim.player`: `Player`, which has an id, a life total and a mana pool.
- `mtgsim.zone`: `Zone`, an ordered collection of cards whose last card is
  the top. It supports `add`, `remove`, `draw`, `shuffle`, `len()` and
  iteration. Removing a card that is not there raises `CardNotFoundError`;
  drawing from an empty zone raises `EmptyZoneError`. Both derive from
  `ZoneError`.
- `mtgsim.stack`: `Spell` and `Stack`. `Spell.determine_total_cost` adds the
  chosen X value to the generic part of the card's cost (a card with no cost
  costs nothing) and stores it as `final_cost`. `Stack.pop` returns `None`
  when the stack is empty.
- `mtgsim.turn`: `Phase`, `Step` and `Turn`. `Turn.next` advances through the
  phases and steps of a turn, and after cleanup starts the next turn with the
  untap step. The two main phases have no step (`current_step` is `None`).
- `mtgsim.game`: `Game`, `CastChoices` and `GameError`. A new `Game` creates
  a library, hand and graveyard for each player (`p<id>_library`,
  `p<id>_hand`, `p<id>_graveyard`) and shared `stack`, `exile` and
  `battlefield` zones; the first player is active and has priority.
  `cast_spell` moves a card from the caster's hand to the stack after paying
  for it, `pass_priority` hands priority to the next player, and
  `check_state`, once every player has passed in a row, either resolves the
  top spell onto the battlefield or advances the turn, untapping the active
  player's permanents at the untap step. Failures raise `GameError`.

## What it does not do

- There is no interactive game: the `mtgsim` command only prints a banner,
  and games are driven from Python.
- Cards have no types, abilities or rules text. Every resolved spell is put
  onto the battlefield as a permanent, and `Game.get_valid_targets` always
  returns an empty list.
- Nothing is saved; a game lives only in memory.