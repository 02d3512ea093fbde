"""The Ludo board: its squares and the rules that move pawns across it."""

from __future__ import annotations

from .pieces import Colour, Pawn, PawnState, Square, SquareKind

TRACK_SIZE = 52
HOME_SQUARES = 16
FINAL_ZONE_SQUARES = 20
FINAL_ZONE_LENGTH = 5
WIN_SQUARE_ID = 999

_HOME_ID_BASE = 100
_FINAL_ID_BASE = 200

_TRACK_COORDS = [
    (10, 385), (56, 385), (102, 385), (148, 385), (194, 385), (240, 385),
    (286, 431), (286, 477), (286, 523), (286, 569), (286, 615), (286, 661),
    (336, 661), (384, 661), (384, 615), (384, 569), (384, 523), (384, 477),
    (384, 431), (430, 385), (476, 385), (525, 385), (571, 385), (617, 385),
    (663, 385), (663, 339), (663, 293), (617, 293), (571, 293), (525, 293),
    (476, 293), (430, 293), (384, 247), (384, 199), (384, 153), (384, 107),
    (384, 61), (384, 15), (336, 15), (290, 15), (290, 61), (290, 107),
    (290, 153), (290, 199), (290, 247), (242, 293), (196, 293), (150, 293),
    (104, 293), (56, 293), (10, 293), (10, 339),
]

_FINAL_ZONE_COORDS = [
    (56, 339), (102, 339), (148, 339), (194, 339), (240, 339),
    (336, 615), (336, 569), (336, 523), (336, 477), (336, 431),
    (617, 339), (571, 339), (525, 339), (479, 339), (433, 339),
    (336, 61), (336, 107), (336, 153), (336, 199), (336, 245),
]

_HOME_COORDS = [
    (80, 77), (170, 77), (80, 172), (170, 172),
    (80, 497), (170, 497), (80, 587), (170, 587),
    (505, 497), (595, 497), (505, 587), (595, 587),
    (505, 77), (595, 77), (505, 172), (595, 172),
]

_WIN_COORDS = (336, 333)

# Track square where each colour enters the board.
_START_INDEX = {
    Colour.RED: 49,
    Colour.BLUE: 10,
    Colour.YELLOW: 23,
    Colour.GREEN: 36,
}

_START_KIND = {
    Colour.RED: SquareKind.START_RED,
    Colour.BLUE: SquareKind.START_BLUE,
    Colour.YELLOW: SquareKind.START_YELLOW,
    Colour.GREEN: SquareKind.START_GREEN,
}

# Last track square before each colour turns into its final zone.
_GATE_INDEX = {
    Colour.RED: 51,
    Colour.BLUE: 12,
    Colour.YELLOW: 25,
    Colour.GREEN: 38,
}

_SAFE_KINDS = frozenset(
    {
        SquareKind.FINAL_ZONE,
        SquareKind.START_RED,
        SquareKind.START_BLUE,
        SquareKind.START_YELLOW,
        SquareKind.START_GREEN,
    }
)


class Board:
    """All squares of a Ludo board.

    The track is numbered so that pawns move towards lower indices,
    wrapping from 0 back to the last square.
    """

    def __init__(self) -> None:
        self.track = [
            Square(i, SquareKind.NORMAL, x, y)
            for i, (x, y) in enumerate(_TRACK_COORDS)
        ]
        for colour, index in _START_INDEX.items():
            self.track[index].kind = _START_KIND[colour]
        self.home = [
            Square(_HOME_ID_BASE + i, SquareKind.HOME, x, y)
            for i, (x, y) in enumerate(_HOME_COORDS)
        ]
        self.final_zone = [
            Square(_FINAL_ID_BASE + i, SquareKind.FINAL_ZONE, x, y)
            for i, (x, y) in enumerate(_FINAL_ZONE_COORDS)
        ]
        self.win_square = Square(WIN_SQUARE_ID, SquareKind.WIN, *_WIN_COORDS)

    def track_square(self, index: int) -> Square:
        if not 0 <= index < TRACK_SIZE:
            raise IndexError(f"track square out of range: {index}")
        return self.track[index]

    def home_square(self, index: int) -> Square:
        if not 0 <= index < HOME_SQUARES:
            raise IndexError(f"home square out of range: {index}")
        return self.home[index]

    def start_square(self, colour: Colour | int) -> Square:
        """The track square where pawns of ``colour`` enter play."""
        return self.track[_START_INDEX[Colour(colour)]]

    def free_home_square(self, colour: Colour | int) -> Square | None:
        """The first empty home square of ``colour``, or None if all are taken."""
        base = Colour(colour) * 4
        return next(
            (square for square in self.home[base:base + 4] if not square.is_occupied()),
            None,
        )

    def _final_square(self, colour: Colour, position: int) -> Square:
        return self.final_zone[colour * FINAL_ZONE_LENGTH + position]

    def destination(self, pawn: Pawn, steps: int) -> Square | None:
        """Where ``pawn`` would land after ``steps`` moves, or None if it cannot move."""
        if steps < 1:
            raise ValueError(f"a move needs at least one step, got {steps}")
        colour = Colour(pawn.colour)

        if pawn.state == PawnState.HOME:
            if steps != 6:
                return None
            start = self.start_square(colour)
            if start.is_occupied() and start.pawn.colour == colour:
                return None
            return start

        if pawn.state not in (PawnState.ON_BOARD, PawnState.IN_FINAL_ZONE):
            return None

        current_id = pawn.square.id
        gate = _GATE_INDEX[colour]
        target: Square | None = None

        if current_id < _HOME_ID_BASE:
            if current_id == gate:
                if steps < 6:
                    target = self._final_square(colour, steps - 1)
                elif steps == 6:
                    target = self.win_square
            else:
                steps_to_gate = None
                position = current_id
                for step in range(1, steps + 1):
                    position = (position - 1) % TRACK_SIZE
                    if position == gate:
                        steps_to_gate = step
                if steps_to_gate is None:
                    target = self.track[(current_id - steps) % TRACK_SIZE]
                else:
                    remaining = steps - steps_to_gate
                    if remaining == 0:
                        target = self.track[gate]
                    elif remaining <= FINAL_ZONE_LENGTH:
                        target = self._final_square(colour, remaining - 1)
        elif current_id >= _FINAL_ID_BASE:
            zone_index = current_id - _FINAL_ID_BASE
            new_position = zone_index - colour * FINAL_ZONE_LENGTH + steps
            if new_position < FINAL_ZONE_LENGTH:
                target = self.final_zone[zone_index + steps]
            elif new_position == FINAL_ZONE_LENGTH:
                target = self.win_square

        if target is not None and target.id != WIN_SQUARE_ID and target.is_occupied():
            if target.pawn.colour == colour or target.kind in _SAFE_KINDS:
                return None
        return target

    def move(self, pawn: Pawn, steps: int) -> bool:
        """Move ``pawn`` by ``steps``; return True if an opposing pawn was captured.

        An impossible move leaves the board unchanged and returns False.
        """
        target = self.destination(pawn, steps)
        if target is None:
            return False

        captured = False
        if target.is_occupied():
            opponent = target.pawn
            captured = True
            home = self.free_home_square(opponent.colour)
            target.clear()
            opponent.send_home(home)
            home.place(opponent)
            opponent.state = PawnState.HOME

        old = pawn.square
        if old is not None and old.pawn is pawn:
            old.clear()

        pawn.move_to(target)
        target.place(pawn)

        if target.kind == SquareKind.WIN:
            target.clear()
            pawn.state = PawnState.FINISHED
        elif target.kind == SquareKind.FINAL_ZONE:
            pawn.state = PawnState.IN_FINAL_ZONE
        elif pawn.state == PawnState.HOME and steps == 6:
            pawn.leave_home(target)
        elif pawn.state != PawnState.FINISHED:
            pawn.state = PawnState.ON_BOARD
        return captured