import pytest

from mobagen.chess_pieces import (
    bishop_attack_moves,
    bishop_cover_moves,
    knight_attack_moves,
    knight_cover_moves,
    queen_attack_moves,
    queen_cover_moves,
    rook_attack_moves,
    rook_cover_moves,
)
from mobagen.chess_state import PieceColor, PieceData, PieceType, WorldState
from mobagen.point2d import Point2D

WHITE = PieceColor.WHITE
BLACK = PieceColor.BLACK


def board_with(*placements):
    state = WorldState()
    for color, kind, x, y in placements:
        state.set_piece(PieceData(color, kind), Point2D(x, y))
    return state


@pytest.fixture
def start():
    state = WorldState()
    state.reset()
    return state


def test_sliders_blocked_at_start(start):
    assert rook_attack_moves(start, Point2D(0, 0)) == set()
    assert bishop_attack_moves(start, Point2D(2, 0)) == set()
    assert queen_attack_moves(start, Point2D(3, 0)) == set()


def test_knight_at_start(start):
    assert knight_attack_moves(start, Point2D(1, 0)) == {Point2D(0, 2), Point2D(2, 2)}


@pytest.mark.parametrize(
    "func",
    [
        rook_attack_moves,
        rook_cover_moves,
        queen_attack_moves,
        queen_cover_moves,
        knight_attack_moves,
        knight_cover_moves,
        bishop_attack_moves,
        bishop_cover_moves,
    ],
)
def test_wrong_piece_gives_nothing(start, func):
    assert func(start, Point2D(4, 4)) == set()
    assert func(start, Point2D(4, 0)) == set()


def test_rook_on_empty_board_covers_row_and_column():
    state = board_with((WHITE, PieceType.ROOK, 0, 0))
    moves = rook_attack_moves(state, Point2D(0, 0))
    expected = {Point2D(i, 0) for i in range(1, 8)} | {Point2D(0, i) for i in range(1, 8)}
    assert moves == expected
    assert rook_cover_moves(state, Point2D(0, 0)) == expected


def test_bishop_stays_on_diagonals():
    state = board_with((BLACK, PieceType.BISHOP, 3, 3))
    moves = bishop_attack_moves(state, Point2D(3, 3))
    assert moves
    assert all(abs(p.x - 3) == abs(p.y - 3) for p in moves)
    assert Point2D(0, 0) in moves and Point2D(7, 7) in moves


def test_queen_is_rook_plus_bishop():
    origin = Point2D(3, 4)
    queen = board_with((WHITE, PieceType.QUEEN, 3, 4), (BLACK, PieceType.PAWN, 3, 6), (WHITE, PieceType.PAWN, 5, 6))
    rook = board_with((WHITE, PieceType.ROOK, 3, 4), (BLACK, PieceType.PAWN, 3, 6), (WHITE, PieceType.PAWN, 5, 6))
    bishop = board_with((WHITE, PieceType.BISHOP, 3, 4), (BLACK, PieceType.PAWN, 3, 6), (WHITE, PieceType.PAWN, 5, 6))
    assert queen_attack_moves(queen, origin) == rook_attack_moves(rook, origin) | bishop_attack_moves(bishop, origin)
    assert queen_cover_moves(queen, origin) == rook_cover_moves(rook, origin) | bishop_cover_moves(bishop, origin)


def test_rook_attack_and_cover_with_blockers():
    state = board_with(
        (WHITE, PieceType.ROOK, 0, 0),
        (BLACK, PieceType.KNIGHT, 0, 3),
        (WHITE, PieceType.PAWN, 3, 0),
    )
    attack = rook_attack_moves(state, Point2D(0, 0))
    cover = rook_cover_moves(state, Point2D(0, 0))
    assert Point2D(0, 3) in attack and Point2D(0, 4) not in attack
    assert Point2D(3, 0) not in attack and Point2D(2, 0) in attack
    assert Point2D(3, 0) in cover and Point2D(0, 3) not in cover
    assert attack - cover == {Point2D(0, 3)}


def test_bishop_cover_includes_friend():
    state = board_with((WHITE, PieceType.BISHOP, 0, 0), (WHITE, PieceType.PAWN, 2, 2))
    assert bishop_cover_moves(state, Point2D(0, 0)) == {Point2D(1, 1), Point2D(2, 2)}
    assert bishop_attack_moves(state, Point2D(0, 0)) == {Point2D(1, 1)}


def test_knight_in_corner():
    state = board_with((WHITE, PieceType.KNIGHT, 0, 0))
    assert knight_attack_moves(state, Point2D(0, 0)) == {Point2D(1, 2), Point2D(2, 1)}
    # the cover jumps never go two files to the right
    assert knight_cover_moves(state, Point2D(0, 0)) == {Point2D(1, 2)}


def test_knight_attack_and_cover_by_colour():
    state = board_with(
        (WHITE, PieceType.KNIGHT, 4, 4),
        (WHITE, PieceType.PAWN, 3, 6),
        (BLACK, PieceType.PAWN, 5, 6),
    )
    attack = knight_attack_moves(state, Point2D(4, 4))
    cover = knight_cover_moves(state, Point2D(4, 4))
    assert Point2D(3, 6) not in attack and Point2D(5, 6) in attack
    assert Point2D(3, 6) in cover and Point2D(5, 6) not in cover
    assert all(state.piece_at(p).piece is not PieceType.WRONG for p in attack | cover)