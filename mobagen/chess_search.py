"""King moves, move listing and a shallow search for the chess example."""

from __future__ import annotations

from collections.abc import Callable

from mobagen.chess_pawn import pawn_cover_moves, pawn_possible_moves
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
from mobagen.chess_state import Move, MoveState, PieceColor, PieceType, WorldState
from mobagen.point2d import Point2D

_BOARD_SIZE = 8
_SEARCH_DEPTH = 3
_KING_DIRECTIONS = tuple(
    Point2D(x, y) for x, y in ((0, 1), (0, -1), (1, 0), (-1, 0), (1, 1), (-1, 1), (1, -1), (-1, -1))
)

MoveGenerator = Callable[[WorldState, Point2D], "set[Point2D]"]


def _squares():
    for line in range(_BOARD_SIZE):
        for column in range(_BOARD_SIZE):
            yield Point2D(column, line)


def king_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """King steps onto empty or enemy squares that no enemy piece covers."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KING:
        return set()
    attacked = places_king_cannot_go(world, piece.color)
    moves: set[Point2D] = set()
    for direction in _KING_DIRECTIONS:
        target = origin + direction
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if (other.piece is PieceType.NONE or other.color != piece.color) and target not in attacked:
            moves.add(target)
    return moves


def king_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Adjacent squares that are empty or hold a friendly piece."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KING:
        return set()
    moves: set[Point2D] = set()
    for direction in _KING_DIRECTIONS:
        target = origin + direction
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if other.piece is PieceType.NONE or other.color == piece.color:
            moves.add(target)
    return moves


def find_king(state: WorldState, color: PieceColor) -> Point2D | None:
    """Square of the king of ``color``, or None when it is not on the board."""
    for location in _squares():
        piece = state.piece_at(location)
        if piece.color == color and piece.piece is PieceType.KING:
            return location
    return None


def king_check_count(state: WorldState, color: PieceColor) -> int:
    """Number of enemy moves that land on the king of ``color``."""
    king = find_king(state, color)
    if king is None:
        return 0
    return sum(1 for move in list_moves(state, color.opposite) if move.target == king)


_MOVE_GENERATORS: dict[PieceType, MoveGenerator] = {
    PieceType.ROOK: rook_attack_moves,
    PieceType.BISHOP: bishop_attack_moves,
    PieceType.PAWN: pawn_possible_moves,
    PieceType.QUEEN: queen_attack_moves,
    PieceType.KNIGHT: knight_attack_moves,
    PieceType.KING: king_attack_moves,
}

_COVER_GENERATORS: dict[PieceType, MoveGenerator] = {
    PieceType.ROOK: rook_cover_moves,
    PieceType.BISHOP: bishop_cover_moves,
    PieceType.PAWN: pawn_cover_moves,
    PieceType.QUEEN: queen_cover_moves,
    PieceType.KNIGHT: knight_cover_moves,
    PieceType.KING: king_cover_moves,
}


def list_moves(state: WorldState, turn: PieceColor) -> list[Move]:
    """Every move the pieces of ``turn`` can make, square by square from A1."""
    moves: list[Move] = []
    for location in _squares():
        piece = state.piece_at(location)
        if piece.piece is PieceType.NONE or piece.color != turn:
            continue
        generator = _MOVE_GENERATORS.get(piece.piece)
        if generator is None:
            continue
        targets = sorted(generator(state, location), key=lambda p: (p.y, p.x))
        moves.extend(Move.generate_list(piece, location, targets))
    return moves


def places_king_cannot_go(state: WorldState, turn: PieceColor) -> set[Point2D]:
    """Squares covered by the pieces of the side opposing ``turn``."""
    covered: set[Point2D] = set()
    for location in _squares():
        piece = state.piece_at(location)
        if piece.piece in (PieceType.NONE, PieceType.WRONG) or piece.color == turn:
            continue
        covered |= _COVER_GENERATORS[piece.piece](state, location)
    return covered


def _expand(states: list[MoveState], score: Callable[[WorldState], int]) -> list[MoveState]:
    expanded: list[MoveState] = []
    for node in states:
        for move in list_moves(node.state, node.state.turn):
            child = node.state.copy()
            child.move(move.origin, move.target)
            expanded.append(MoveState(child, [*node.moves, move], score(child)))
    return expanded


def next_move(state: WorldState) -> Move:
    """The move chosen by a three ply look-ahead scored on material.

    Each ply is ordered by score for the side that just moved; the first move
    of the line that ends on top of the last ply is returned.
    """
    from mobagen.chess_heuristics import material_score

    root = MoveState(state.copy(), [], 0)
    level = _expand([root], material_score)
    if not level:
        raise ValueError("no moves available for the side to move")

    for depth in range(1, _SEARCH_DEPTH + 1):
        if depth > 1:
            deeper = _expand(level, material_score)
            if not deeper:
                break
            level = deeper
        ascending_turn = PieceColor.BLACK if depth % 2 == 0 else PieceColor.WHITE
        level.sort(key=lambda node: node.score, reverse=level[0].state.turn != ascending_turn)

    return level[0].moves[0]