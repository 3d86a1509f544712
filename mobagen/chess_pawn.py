"""Pawn moves and pawn structure of the chess example."""

from __future__ import annotations

from mobagen.chess_state import PieceColor, PieceData, PieceType, WorldState
from mobagen.point2d import Point2D

_BOARD_SIZE = 8


def _direction(color: PieceColor) -> int:
    """Rank step of a pawn: white walks up the board, black walks down."""
    return 1 if color == PieceColor.WHITE else -1


def _start_rank(color: PieceColor) -> int:
    return 1 if color == PieceColor.WHITE else 6


def _pawn(world: WorldState, origin: Point2D) -> PieceData | None:
    piece = world.piece_at(origin)
    return piece if piece.piece is PieceType.PAWN else None


def _diagonals(world: WorldState, origin: Point2D, piece: PieceData, wanted: PieceColor) -> set[Point2D]:
    """Forward diagonals that are empty or hold a piece of colour ``wanted``."""
    step = _direction(piece.color)
    squares: set[Point2D] = set()
    for dx in (1, -1):
        target = Point2D(origin.x + dx, origin.y + step)
        other = world.piece_at(target)
        if other.piece is PieceType.NONE or (other.piece is not PieceType.WRONG and other.color == wanted):
            squares.add(target)
    return squares


def pawn_possible_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Squares the pawn on ``origin`` can move to: steps forward and captures."""
    piece = _pawn(world, origin)
    if piece is None:
        return set()
    step = _direction(piece.color)
    enemy = piece.color.opposite
    moves: set[Point2D] = set()

    ahead = Point2D(origin.x, origin.y + step)
    if world.piece_at(ahead).piece is PieceType.NONE:
        moves.add(ahead)
        if origin.y == _start_rank(piece.color):
            two_ahead = Point2D(origin.x, origin.y + 2 * step)
            if world.piece_at(two_ahead).piece is PieceType.NONE:
                moves.add(two_ahead)

    for dx in (1, -1):
        target = Point2D(origin.x + dx, origin.y + step)
        other = world.piece_at(target)
        if other.piece not in (PieceType.WRONG, PieceType.NONE) and other.color == enemy:
            moves.add(target)
    return moves


def pawn_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Forward diagonals that are empty or hold an enemy piece."""
    piece = _pawn(world, origin)
    if piece is None:
        return set()
    return _diagonals(world, origin, piece, piece.color.opposite)


def pawn_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Forward diagonals that are empty or hold a friendly piece."""
    piece = _pawn(world, origin)
    if piece is None:
        return set()
    return _diagonals(world, origin, piece, piece.color)


def pawn_count_doubles(world: WorldState, origin: Point2D) -> int:
    """How many other pawns of the same colour stand on the pawn's file."""
    piece = _pawn(world, origin)
    if piece is None:
        return 0
    same = sum(1 for y in range(_BOARD_SIZE) if world.piece_at(Point2D(origin.x, y)) == piece)
    return same - 1


def pawn_is_isolated(world: WorldState, origin: Point2D) -> bool:
    """True unless a pawn of the same colour stands on one of the eight adjacent squares.

    A square that does not hold a pawn counts as isolated.
    """
    piece = _pawn(world, origin)
    if piece is None:
        return True
    adjacency = (
        origin.right(),
        origin.left(),
        origin.up().left(),
        origin.up().right(),
        origin.down().left(),
        origin.down().right(),
        origin.up(),
        origin.down(),
    )
    return not any(world.piece_at(pos) == piece for pos in adjacency)