"""Static evaluation of a chess position; positive scores favour white."""

from __future__ import annotations

from collections.abc import Callable

from mobagen.chess_pawn import (
    pawn_attack_moves,
    pawn_count_doubles,
    pawn_cover_moves,
    pawn_is_isolated,
    pawn_possible_moves,
)
from mobagen.chess_pieces import (
    bishop_attack_moves,
    knight_attack_moves,
    queen_attack_moves,
    rook_attack_moves,
)
from mobagen.chess_search import king_attack_moves, king_check_count
from mobagen.chess_state import PieceColor, PieceData, PieceType, WorldState
from mobagen.point2d import Point2D

_BOARD_SIZE = 8

_OFFICER_SCORES: dict[PieceType, tuple[int, Callable[[WorldState, Point2D], "set[Point2D]"]]] = {
    PieceType.QUEEN: (90, queen_attack_moves),
    PieceType.ROOK: (50, rook_attack_moves),
    PieceType.KNIGHT: (35, knight_attack_moves),
    PieceType.BISHOP: (30, bishop_attack_moves),
}


def distance_to_center(location: Point2D) -> int:
    """Closeness to the centre: 3 on the four central squares down to 0 on the rim."""
    dx = abs(location.x * 2 - 7)
    dy = abs(location.y * 2 - 7)
    return 3 - (min(dx, dy) - 1) // 2


def _piece_score(state: WorldState, piece: PieceData, location: Point2D) -> int:
    kind = piece.piece
    if kind is PieceType.KING:
        return (
            1000
            + len(king_attack_moves(state, location))
            + distance_to_center(location)
            - king_check_count(state, piece.color) * 10
        )
    if kind in _OFFICER_SCORES:
        value, moves = _OFFICER_SCORES[kind]
        return value + len(moves(state, location)) + distance_to_center(location)
    # pawn
    mobility = len(pawn_possible_moves(state, location))
    score = 10 + mobility + distance_to_center(location)
    score += len(pawn_attack_moves(state, location))
    score += len(pawn_cover_moves(state, location))
    if mobility == 0:
        score -= 2
    score -= 2 * pawn_count_doubles(state, location)
    if pawn_is_isolated(state, location):
        score -= 1
    return score


def material_score(state: WorldState) -> int:
    """Sum of piece values, mobility and position; black pieces count negative."""
    score = 0
    for line in range(_BOARD_SIZE):
        for column in range(_BOARD_SIZE):
            location = Point2D(column, line)
            piece = state.piece_at(location)
            if piece.piece in (PieceType.NONE, PieceType.WRONG):
                continue
            value = _piece_score(state, piece, location)
            score += -value if piece.color == PieceColor.BLACK else value
    return score