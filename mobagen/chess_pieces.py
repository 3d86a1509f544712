"""Moves of the sliding pieces and the knight."""

from __future__ import annotations

from mobagen.chess_state import PieceType, WorldState
from mobagen.point2d import Point2D

_ORTHOGONAL = (Point2D(0, 1), Point2D(0, -1), Point2D(1, 0), Point2D(-1, 0))
_DIAGONAL = (Point2D(1, 1), Point2D(-1, 1), Point2D(1, -1), Point2D(-1, -1))
_ALL_DIRECTIONS = _ORTHOGONAL + _DIAGONAL

_KNIGHT_DELTAS = tuple(
    Point2D(x, y) for x, y in ((-1, 2), (1, 2), (-2, 1), (2, 1), (-2, -1), (2, -1), (-1, -2), (1, -2))
)
# Cover squares deliberately repeat the two leftward jumps in place of the rightward ones.
_KNIGHT_COVER_DELTAS = tuple(
    Point2D(x, y) for x, y in ((-1, 2), (1, 2), (-2, 1), (-2, 1), (-2, -1), (-2, -1), (-1, -2), (1, -2))
)


def _slide(world: WorldState, origin: Point2D, kind: PieceType, directions, cover: bool) -> set[Point2D]:
    """Squares reached by sliding along ``directions`` until a piece or the edge.

    An attack includes the first enemy piece met; a cover includes the first
    friendly piece met instead.
    """
    piece = world.piece_at(origin)
    if piece.piece is not kind:
        return set()
    moves: set[Point2D] = set()
    for direction in directions:
        position = origin + direction
        while (other := world.piece_at(position)).piece is not PieceType.WRONG:
            if other.piece is PieceType.NONE:
                moves.add(position)
                position = position + direction
                continue
            if (other.color == piece.color) == cover:
                moves.add(position)
            break
    return moves


def bishop_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.BISHOP, _DIAGONAL, cover=False)


def bishop_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.BISHOP, _DIAGONAL, cover=True)


def rook_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.ROOK, _ORTHOGONAL, cover=False)


def rook_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.ROOK, _ORTHOGONAL, cover=True)


def queen_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.QUEEN, _ALL_DIRECTIONS, cover=False)


def queen_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.QUEEN, _ALL_DIRECTIONS, cover=True)


def _jumps(world: WorldState, origin: Point2D, deltas, skip_same_color: bool) -> set[Point2D]:
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KNIGHT:
        return set()
    moves: set[Point2D] = set()
    for delta in deltas:
        target = delta + origin
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if other.piece is not PieceType.NONE and (other.color == piece.color) == skip_same_color:
            continue
        moves.add(target)
    return moves


def knight_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Knight jumps onto empty squares or enemy pieces."""
    return _jumps(world, origin, _KNIGHT_DELTAS, skip_same_color=True)


def knight_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Knight jumps onto empty squares or friendly pieces."""
    return _jumps(world, origin, _KNIGHT_COVER_DELTAS, skip_same_color=False)