"""A local Ludo game: players taking turns on one board."""

from __future__ import annotations

from collections.abc import Sequence

from .board import Board
from .pieces import PAWNS_PER_PLAYER, Colour, Pawn, PawnState, Player

_COLOURS_BY_COUNT = {
    2: (Colour.BLUE, Colour.GREEN),
    4: (Colour.RED, Colour.GREEN, Colour.YELLOW, Colour.BLUE),
}


class Game:
    """A game for two or four players sharing one board.

    Each pawn starts on its own home square. ``last_roll`` holds the die
    value the current player must play.
    """

    def __init__(self, names: Sequence[str]) -> None:
        colours = _COLOURS_BY_COUNT.get(len(names))
        if colours is None:
            raise ValueError(f"a game needs 2 or 4 players, got {len(names)}")
        self.board = Board()
        self.players = [Player(name, colour) for name, colour in zip(names, colours)]
        self.current_index = 0
        self.last_roll = 0
        self.last_move_captured = False
        for player in self.players:
            for k, pawn in enumerate(player.pawns):
                square = self.board.home_square(player.colour * PAWNS_PER_PLAYER + k)
                pawn.move_to(square)
                square.place(pawn)

    @property
    def player_count(self) -> int:
        return len(self.players)

    def player(self, index: int) -> Player:
        if not 0 <= index < len(self.players):
            raise IndexError(f"player index out of range: {index}")
        return self.players[index]

    def current_player(self) -> Player:
        return self.players[self.current_index]

    def next_player(self) -> None:
        """Pass the turn to the next player."""
        self.current_index = (self.current_index + 1) % len(self.players)

    def has_valid_moves(self) -> bool:
        """Whether the current player can move any pawn with ``last_roll``."""
        pawns = self.current_player().pawns
        roll = self.last_roll
        if roll == 6 and any(p.state == PawnState.HOME for p in pawns):
            return True
        return any(
            self.board.destination(p, roll) is not None
            for p in pawns
            if p.state in (PawnState.ON_BOARD, PawnState.IN_FINAL_ZONE)
        )

    def execute_move(self, pawn: Pawn) -> bool:
        """Move ``pawn`` by ``last_roll``; return False if the move is impossible."""
        if self.board.destination(pawn, self.last_roll) is None:
            return False
        self.last_move_captured = self.board.move(pawn, self.last_roll)
        if pawn.state == PawnState.FINISHED:
            self.current_player().add_finished()
        return True