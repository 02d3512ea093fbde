import pytest

from ludogame.board import Board
from ludogame.pieces import Colour, Pawn, PawnState, SquareKind


def _put(pawn, square, state=PawnState.ON_BOARD):
    pawn.square = square
    square.place(pawn)
    pawn.state = state


@pytest.fixture
def board():
    return Board()


@pytest.mark.parametrize(
    "index,kind",
    [
        (49, SquareKind.START_RED),
        (10, SquareKind.START_BLUE),
        (23, SquareKind.START_YELLOW),
        (36, SquareKind.START_GREEN),
        (0, SquareKind.NORMAL),
    ],
)
def test_track_square_kinds(board, index, kind):
    assert board.track_square(index).kind == kind


def test_square_ids_and_coordinates(board):
    assert board.track_square(0).id == 0
    assert (board.track_square(0).x, board.track_square(0).y) == (10, 385)
    assert board.home_square(3).id == 103
    assert board.win_square.id == 999
    assert all(sq.kind == SquareKind.FINAL_ZONE for sq in board.final_zone)


def test_out_of_range_squares_raise(board):
    with pytest.raises(IndexError):
        board.track_square(52)
    with pytest.raises(IndexError):
        board.home_square(-1)


def test_start_square_per_colour(board):
    assert board.start_square(Colour.BLUE) is board.track_square(10)
    assert board.start_square(Colour.RED) is board.track_square(49)
    with pytest.raises(ValueError):
        board.start_square(7)


def test_free_home_square_skips_occupied(board):
    assert board.free_home_square(Colour.YELLOW) is board.home_square(8)
    board.home_square(8).place(Pawn(0, Colour.YELLOW))
    assert board.free_home_square(Colour.YELLOW) is board.home_square(9)
    for i in range(4):
        board.home_square(8 + i).place(Pawn(i, Colour.YELLOW))
    assert board.free_home_square(Colour.YELLOW) is None


def test_pawn_at_home_needs_six(board):
    pawn = Pawn(0, Colour.BLUE)
    assert board.destination(pawn, 5) is None
    assert board.destination(pawn, 6) is board.start_square(Colour.BLUE)


def test_own_pawn_on_start_blocks_leaving(board):
    blocker = Pawn(1, Colour.BLUE)
    _put(blocker, board.start_square(Colour.BLUE))
    assert board.destination(Pawn(0, Colour.BLUE), 6) is None


def test_simple_move_goes_down_the_track(board):
    pawn = Pawn(0, Colour.BLUE)
    _put(pawn, board.track_square(10))
    assert board.destination(pawn, 3) is board.track_square(7)


def test_track_wraps_around(board):
    pawn = Pawn(0, Colour.GREEN)
    _put(pawn, board.track_square(2))
    assert board.destination(pawn, 4) is board.track_square(50)


def test_passing_gate_enters_final_zone(board):
    pawn = Pawn(0, Colour.RED)
    _put(pawn, board.track_square(2))
    assert board.destination(pawn, 4) is board.final_zone[0]


def test_landing_exactly_on_gate_stays_on_track(board):
    pawn = Pawn(0, Colour.BLUE)
    _put(pawn, board.track_square(14))
    assert board.destination(pawn, 2) is board.track_square(12)


def test_from_gate_into_zone_or_win(board):
    pawn = Pawn(0, Colour.BLUE)
    _put(pawn, board.track_square(12))
    assert board.destination(pawn, 3) is board.final_zone[7]
    assert board.destination(pawn, 6) is board.win_square


def test_moves_inside_final_zone(board):
    pawn = Pawn(0, Colour.BLUE)
    _put(pawn, board.final_zone[5], PawnState.IN_FINAL_ZONE)
    assert board.destination(pawn, 4) is board.final_zone[9]
    assert board.destination(pawn, 5) is board.win_square
    assert board.destination(pawn, 6) is None


def test_cannot_land_on_own_pawn(board):
    mover, blocker = Pawn(0, Colour.BLUE), Pawn(1, Colour.BLUE)
    _put(mover, board.track_square(10))
    _put(blocker, board.track_square(7))
    assert board.destination(mover, 3) is None


def test_opponent_on_safe_square_is_immune(board):
    mover, other = Pawn(0, Colour.BLUE), Pawn(0, Colour.RED)
    _put(mover, board.track_square(26))
    _put(other, board.track_square(23))
    assert board.destination(mover, 3) is None
    assert board.move(mover, 3) is False
    assert mover.square is board.track_square(26)


def test_capture_sends_opponent_home(board):
    mover, victim = Pawn(0, Colour.BLUE), Pawn(0, Colour.RED)
    _put(mover, board.track_square(8))
    _put(victim, board.track_square(5))
    assert board.move(mover, 3) is True
    assert victim.state == PawnState.HOME
    assert victim.square is board.home_square(0)
    assert board.home_square(0).pawn is victim
    assert board.track_square(5).pawn is mover
    assert board.track_square(8).pawn is None


def test_plain_move_updates_squares(board):
    pawn = Pawn(0, Colour.BLUE)
    _put(pawn, board.track_square(10))
    assert board.move(pawn, 3) is False
    assert board.track_square(7).pawn is pawn
    assert not board.track_square(10).is_occupied()
    assert pawn.state == PawnState.ON_BOARD


def test_move_into_final_zone_sets_state(board):
    pawn = Pawn(0, Colour.BLUE)
    _put(pawn, board.track_square(12))
    board.move(pawn, 2)
    assert pawn.state == PawnState.IN_FINAL_ZONE
    assert pawn.square is board.final_zone[6]


def test_reaching_win_square_finishes_pawn(board):
    pawn = Pawn(0, Colour.BLUE)
    _put(pawn, board.track_square(12))
    board.move(pawn, 6)
    assert pawn.state == PawnState.FINISHED
    assert pawn.visible is False
    assert not board.win_square.is_occupied()


def test_leaving_home(board):
    pawn = Pawn(0, Colour.BLUE)
    _put(pawn, board.home_square(4), PawnState.HOME)
    board.move(pawn, 6)
    assert pawn.state == PawnState.ON_BOARD
    assert pawn.square is board.start_square(Colour.BLUE)
    assert not board.home_square(4).is_occupied()


def test_zero_steps_rejected(board):
    with pytest.raises(ValueError):
        board.destination(Pawn(0, Colour.RED), 0)