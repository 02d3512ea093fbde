"""Squares, pawns and players: the basic pieces of a Ludo game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

PAWNS_PER_PLAYER = 4


class Colour(IntEnum):
    """Colour of a player and of that player's pawns."""

    RED = 0
    BLUE = 1
    YELLOW = 2
    GREEN = 3

    @property
    def display_name(self) -> str:
        return _COLOUR_NAMES[self]


_COLOUR_NAMES = {
    Colour.RED: "Rosu",
    Colour.BLUE: "Albastru",
    Colour.YELLOW: "Galben",
    Colour.GREEN: "Verde",
}


class PawnState(IntEnum):
    """Where a pawn is in its journey round the board."""

    HOME = 0
    ON_BOARD = 1
    IN_FINAL_ZONE = 2
    FINISHED = 3


class SquareKind(IntEnum):
    """The role a square plays on the board."""

    NORMAL = 0
    START_RED = 1
    START_BLUE = 2
    START_YELLOW = 3
    START_GREEN = 4
    FINAL_ZONE = 5
    WIN = 6
    HOME = 7


@dataclass(eq=False)
class Square:
    """A single square of the board, holding at most one pawn."""

    id: int = -1
    kind: SquareKind = SquareKind.NORMAL
    x: int = 0
    y: int = 0
    pawn: Pawn | None = field(default=None, repr=False)

    def is_occupied(self) -> bool:
        return self.pawn is not None

    def place(self, pawn: Pawn | None) -> None:
        self.pawn = pawn

    def clear(self) -> None:
        self.pawn = None


@dataclass(eq=False)
class Pawn:
    """A pawn belonging to one player.

    ``visible`` stands for whether the pawn is still drawn on the board;
    it turns false once the pawn reaches the winning square.
    """

    id: int
    colour: Colour
    state: PawnState = PawnState.HOME
    square: Square | None = field(default=None, repr=False)
    visible: bool = True

    @property
    def position(self) -> tuple[int, int] | None:
        """Screen coordinates of the square the pawn stands on."""
        if self.square is None:
            return None
        return (self.square.x, self.square.y)

    def move_to(self, square: Square | None) -> None:
        """Put the pawn on ``square``; it disappears on the winning square."""
        if square is None:
            raise ValueError("a pawn cannot move to a missing square")
        self.square = square
        if square.kind == SquareKind.WIN:
            self.visible = False

    def leave_home(self, start: Square | None) -> None:
        """Bring a pawn at home onto its start square."""
        if self.state != PawnState.HOME or start is None:
            return
        if self.square is not None:
            self.square.clear()
        self.square = start
        self.state = PawnState.ON_BOARD
        self.move_to(start)

    def send_home(self, home: Square | None) -> None:
        """Return a captured pawn to a home square."""
        self.square = home
        self.state = PawnState.HOME
        self.move_to(home)


@dataclass(eq=False)
class Player:
    """A player with a name, a colour and four pawns."""

    name: str
    colour: Colour
    pawns: list[Pawn] = field(init=False, repr=False)
    finished: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.colour = Colour(self.colour)
        self.pawns = [Pawn(i, self.colour) for i in range(PAWNS_PER_PLAYER)]

    def colour_name(self) -> str:
        return self.colour.display_name

    def pawn(self, index: int) -> Pawn:
        if not 0 <= index < PAWNS_PER_PLAYER:
            raise IndexError(f"pawn index out of range: {index}")
        return self.pawns[index]

    def has_won(self) -> bool:
        return self.finished == PAWNS_PER_PLAYER

    def add_finished(self) -> None:
        self.finished += 1