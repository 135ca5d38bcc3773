# sevens

A simulator for the card game **Sevens** (also known as Fan Tan) and a
spades-led variant of it. It plays many games between computer players that
use different strategies. It then reports how much the choice of strategy
affects who wins. The runs cover decks with different numbers of suits and
different numbers of cards per suit.

## Rules simulated

Each deck has `suit_count` suits with values `1..n_size`. The middle value
`n_size // 2` plays the part of the seven.

- **Sevens** (`sevens.vanilla.Sevens`): the middle card of a suit starts
  that suit. After that, a suit grows one card at a time, down from its
  lowest played card or up from its highest.
- **Sevens with spades** (`sevens.spades.SevensSpades`): the first suit
  (rank 0) leads. Its cards extend freely. A card of any other suit may only
  be played if its value lies inside the range of rank-0 cards already on
  the table. A middle card may always be played.

On each turn a player either plays one card or passes. The first player to
empty their hand wins. A game with no winner ends after
`len(deck) * player_count` turns.

## Strategies

Plain Sevens (`sevens.vanilla`):

- `VanillaRandom` ("A") plays a random legal card.
- `LowestFirst` ("B") plays the lowest legal card.
- `HighestFirst` ("C") plays the highest legal card.

Spades variant (`sevens.spades`). Each of these plays the middle rank-0 card
first whenever it holds it. After that:

- `SpadesRandom` ("A") plays a random legal card.
- `SpadeFirstStrategy` ("B") prefers a legal rank-0 card.
- `SpadeLastRandom` ("C") prefers a legal card of another suit.
- `SpadesLastHighest` ("D") plays the highest legal card of another suit.

The last three fall back to a random legal card when they have no preferred
card to play.

## Installation

```
pip install .
```

## Running

```
sevens
```

By default this runs both simulation suites with four players. Options:

- `--game {sevens,spades,both}` chooses the suite to run. The default is
  `both`.
- `--simulations N` sets the number of games played for each strategy
  line-up and deck shape. The default is 10000.

The deck shapes are 4, 8, 16, 32, 48 or 64 suits, each with 13, 27, 55, 83
or 111 cards per suit.

Each suite does two things:

- It writes its per-line-up results as pretty-printed JSON to
  `sevens_strategy_performance_data.json` or
  `spades_strategy_performance_data.json` in the current directory.
  Non-finite numbers are stored as `null`.
- It prints a report grouped by suit count. The report covers win-rate
  variance, the spread between the best and worst win rate, options per
  turn, trends and rough cost estimates.

The report assumes 10000 games per configuration when it counts games, so
the game totals it prints do not follow `--simulations`.

A full run at the default setting plays a very large number of games in a
single process and takes a long time.

## Using the library

```python
import random

from sevens.game import play_game
from sevens.vanilla import Sevens, VanillaRandom, LowestFirst, HighestFirst

rng = random.Random(1)
result = play_game(
    [VanillaRandom(), LowestFirst(), HighestFirst(), VanillaRandom()],
    Sevens(),
    player_count=4,
    suit_count=4,
    n_size=13,
    rng=rng,
)
print(result.winner, result.avg_options, result.min_options, result.max_options)
```

Other building blocks:

- `sevens.cards` holds `Suit`, `Card`, `Board` and `GameBoard`. It also has
  the `GameRules` and `Strategy` base classes, `alpha_suits`, `order_hand`
  and `alphabetical_label`.
- `sevens.game` has `build_deck`, `deal`, `play_game` and `GameResult`.
- `sevens.stats.SimulationStatistics` gathers `GameResult`s and produces a
  `StrategyPerformanceData` record.
- `sevens.simulation` has `run_simulations_sevens` and
  `run_simulations_spades`. It also has `save_performance_data`, plus
  `format_game_statistics`, which returns the report as a string, and
  `analyze_game_statistics`, which prints it.

## Tests

```
pip install .[test]
pytest
```