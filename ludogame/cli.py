"""Terminal front end for a local Ludo game."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Mapping, Sequence

from .game import Game
from .pieces import Colour, PawnState, Player

# Order in which the setup screen hands names to the game, by player count.
_SEATING = {
    2: (Colour.BLUE, Colour.GREEN),
    4: (Colour.RED, Colour.GREEN, Colour.YELLOW, Colour.BLUE),
}

_STATE_LABELS = {
    PawnState.HOME: "acasa",
    PawnState.ON_BOARD: "pe tabla",
    PawnState.IN_FINAL_ZONE: "in zona finala",
    PawnState.FINISHED: "finalizat",
}


def player_names(count: int, names: Mapping[Colour, str]) -> list[str]:
    """Order the names entered per colour the way the game seats players.

    Colours without a name get an empty one.
    """
    seating = _SEATING.get(count)
    if seating is None:
        raise ValueError(f"a game needs 2 or 4 players, got {count}")
    return [names.get(colour, "") for colour in seating]


def _label(player: Player) -> str:
    return f"{player.colour_name()} ({player.name})"


def _tight_label(player: Player) -> str:
    return f"{player.colour_name()}({player.name})"


class GameSession:
    """Turn flow of a game: rolling the die and choosing pawns.

    ``info`` holds the message shown to the players after each action.
    """

    def __init__(self, game: Game, rng: random.Random | None = None) -> None:
        self.game = game
        self.rng = rng if rng is not None else random.Random()
        self.die: int | None = None
        self.awaiting_roll = True
        self.winner: Player | None = None
        self.info = self._turn_message(valid=True)

    def _turn_message(self, valid: bool) -> str:
        text = f"Randul jucatorului: {_label(self.game.current_player())}"
        if valid:
            return text
        return "Nu ai mutari valide!\n\n" + text

    def legend(self) -> list[str]:
        """One line per player: colour and name."""
        return [f"{p.colour_name()}: {p.name}" for p in self.game.players]

    def roll(self, value: int | None = None) -> str:
        """Roll the die (or use ``value``) for the current player."""
        if self.winner is not None:
            raise RuntimeError("the game is over")
        if not self.awaiting_roll:
            raise RuntimeError("choose a pawn before rolling again")
        if value is None:
            value = self.rng.randint(1, 6)
        if not 1 <= value <= 6:
            raise ValueError(f"a die shows 1 to 6, got {value}")
        self.die = value
        self.game.last_roll = value
        player = self.game.current_player()
        if self.game.has_valid_moves():
            self.awaiting_roll = False
            self.info = f"{_tight_label(player)} alege un pion"
        else:
            self.game.next_player()
            self.awaiting_roll = True
            self.info = self._turn_message(valid=False)
        return self.info

    def choose(self, player_index: int, pawn_index: int) -> str:
        """Play the pawn ``pawn_index`` of player ``player_index``."""
        if self.awaiting_roll or self.winner is not None:
            return self.info
        if player_index != self.game.current_index:
            self.info = "Alege un pion de culoarea ta"
            return self.info
        player = self.game.player(player_index)
        pawn = player.pawn(pawn_index)
        if pawn.state == PawnState.HOME and self.die != 6:
            self.info = f"Mutare imposibila. {_label(player)} alege alt pion."
            return self.info
        if not self.game.execute_move(pawn):
            self.info = f"Mutare imposibila. {_tight_label(player)} alege alt pion."
            return self.info
        if player.has_won():
            self.winner = player
            self.info = f"FELICITARI!\nJucatorul {_label(player)} a castigat!"
            return self.info
        if self.die == 6:
            self.info = f"{_tight_label(player)} ai dat 6! Mai da o data."
        elif self.game.last_move_captured:
            self.info = f"{_tight_label(player)} ai trimis un pion in casa! Mai da o data."
        else:
            self.game.next_player()
            self.info = self._turn_message(valid=True)
        self.awaiting_roll = True
        return self.info

    def pawn_lines(self) -> list[str]:
        """Where each pawn of the current player stands."""
        player = self.game.current_player()
        lines = []
        for number, pawn in enumerate(player.pawns, start=1):
            where = _STATE_LABELS[pawn.state]
            if pawn.square is not None and pawn.state != PawnState.FINISHED:
                where += f" (casuta {pawn.square.id})"
            lines.append(f"  {number}: {where}")
        return lines


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ludogame", description="Play Ludo in the terminal.")
    parser.add_argument("--players", type=int, choices=(2, 4), default=2)
    parser.add_argument("--red", default="")
    parser.add_argument("--blue", default="")
    parser.add_argument("--yellow", default="")
    parser.add_argument("--green", default="")
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run an interactive game on standard input and output."""
    args = _parse_args(argv)
    names = {
        Colour.RED: args.red,
        Colour.BLUE: args.blue,
        Colour.YELLOW: args.yellow,
        Colour.GREEN: args.green,
    }
    session = GameSession(Game(player_names(args.players, names)), random.Random(args.seed))
    for line in session.legend():
        print(line)
    print(session.info)
    print("Comenzi: r = da cu zarul, 1-4 = alege pionul, q = iesire")

    for raw in sys.stdin:
        command = raw.strip().lower()
        if command == "q":
            break
        if command in ("", "r"):
            try:
                session.roll()
            except RuntimeError as exc:
                print(exc)
                continue
            print(f"Zar: {session.die}")
        elif command in ("1", "2", "3", "4"):
            session.choose(session.game.current_index, int(command) - 1)
        else:
            print(f"Comanda necunoscuta: {command}")
            continue
        print(session.info)
        if session.winner is not None:
            break
        if not session.awaiting_roll:
            print("\n".join(session.pawn_lines()))
    return 0


if __name__ == "__main__":
    sys.exit(main())