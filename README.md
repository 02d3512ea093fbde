# ludogame

Ludo for two or four players, sharing one terminal.

Each player has four pawns that wait at home. A pawn leaves home only when its
player rolls a 6. Pawns travel round a 52-square track, turn into their own
five-square final lane, and finish on the centre square. The first player to
bring all four pawns to the centre wins.

## Rules as played

- A 6 gives another roll. So does capturing an opponent's pawn.
- A pawn that lands on an opponent sends it back home. Opponents on a start
  square or in a final lane are safe.
- Two pawns of the same colour may not share a square.
- A roll that overshoots the centre square is not a valid move.
- If a roll leaves no valid move, the turn passes to the next player.

In a two-player game the colours are Blue and Green. In a four-player game
they are Red, Green, Yellow and Blue, in that order of play.

The game's messages are in Romanian; colours are shown as Rosu, Albastru,
Galben and Verde.

## Install

```
pip install .
```

## Play

```
ludogame --players 4 --red Ana --green Dan --yellow Ion --blue Eva
```

Options:

- `--players` — 2 or 4 (default 2)
- `--red`, `--blue`, `--yellow`, `--green` — the name of the player of that
  colour (default empty)
- `--seed` — seed for the die, to replay the same game

The program prints the players and whose turn it is, then reads commands from
standard input, one per line:

- `r` or an empty line — roll the die for the current player
- `1` to `4` — move that pawn of the current player
- `q` — quit

After a roll that allows a move, it lists where each of the current player's
pawns stands. The program ends when a player wins, on `q`, or at the end of
input.

## Use as a library

- `ludogame.pieces` — `Colour`, `PawnState`, `SquareKind`, `Square`, `Pawn`
  and `Player`.
- `ludogame.board.Board` — the squares of the board; `destination(pawn, steps)`
  tells where a pawn would land (or `None`), and `move(pawn, steps)` moves it
  and returns whether an opponent was captured.
- `ludogame.game.Game` — players taking turns on one board: `last_roll`,
  `has_valid_moves()`, `execute_move(pawn)`, `next_player()`.
- `ludogame.cli.GameSession` — the turn flow of one roll and one choice at a
  time, with the message to show in `info`. `player_names(count, names)`
  orders names given per colour the way the game seats players.

```python
from ludogame.cli import GameSession, player_names
from ludogame.game import Game
from ludogame.pieces import Colour

names = player_names(2, {Colour.BLUE: "Ana", Colour.GREEN: "Dan"})
session = GameSession(Game(names))
print(session.legend())      # ['Albastru: Ana', 'Verde: Dan']
print(session.roll(6))       # Albastru(Ana) alege un pion
print(session.choose(0, 0))  # Albastru(Ana) ai dat 6! Mai da o data.
```

`GameSession.roll` raises `ValueError` for a value outside 1 to 6 and
`RuntimeError` when the game is over or a pawn must be chosen first.

## What it does not do

There is no drawn board and no play over a network: all players share one
terminal, and the board is shown only as text. Squares carry screen
coordinates, but nothing in the package draws them.

## Tests

```
pip install .[test]
pytest
```