"""Board, pieces and moves of the chess example, packed four bits per square."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum

from mobagen.point2d import Point2D

_BOARD_SIZE = 8
_FILES = "A B C D E F G H"


class IllegalMoveError(ValueError):
    """Raised when a move cannot be played on the current board."""


class MoveType(IntEnum):
    NORMAL = 0b000
    CAPTURE = 0b001
    EN_PASSANT = 0b010
    CASTLING = 0b011
    PROMOTE_TO_BISHOP = 0b100
    PROMOTE_TO_KNIGHT = 0b101
    PROMOTE_TO_ROOK = 0b110
    PROMOTE_TO_QUEEN = 0b111


class PieceType(IntEnum):
    """Kind of piece; NONE marks an empty square, WRONG a square off the board."""

    NONE = 0b000
    KING = 0b001
    QUEEN = 0b010
    BISHOP = 0b011
    KNIGHT = 0b100
    ROOK = 0b101
    PAWN = 0b110
    WRONG = 0b111


class PieceColor(IntEnum):
    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> PieceColor:
        return PieceColor.WHITE if self is PieceColor.BLACK else PieceColor.BLACK


_CHARS = {
    PieceType.PAWN: "p",
    PieceType.ROOK: "r",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}


@dataclass(frozen=True)
class PieceData:
    """What stands on a square: a colour and a piece type."""

    color: PieceColor = PieceColor.WHITE
    piece: PieceType = PieceType.NONE

    @classmethod
    def empty(cls) -> PieceData:
        return cls(PieceColor.WHITE, PieceType.NONE)

    @classmethod
    def wrong(cls) -> PieceData:
        return cls(PieceColor.WHITE, PieceType.WRONG)

    def pack(self) -> int:
        """The piece as a nibble: colour in bit 0, type in bits 1 to 3."""
        return int(self.color) | (int(self.piece) << 1)

    @classmethod
    def unpack(cls, data: int) -> PieceData:
        return cls(PieceColor(data & 0b1), PieceType((data >> 1) & 0b111))

    def to_char(self) -> str:
        """One letter for the piece, upper case for white; '.' for no piece."""
        char = _CHARS.get(self.piece, ".")
        return char.upper() if self.color is PieceColor.WHITE else char


@dataclass(frozen=True)
class Move:
    """A piece moving from one square to another."""

    origin: Point2D
    target: Point2D
    color: PieceColor
    piece: PieceType
    move_type: MoveType = MoveType.NORMAL

    @property
    def piece_data(self) -> PieceData:
        return PieceData(self.color, self.piece)

    @classmethod
    def generate_list(cls, piece: PieceData, origin: Point2D, targets: Iterable[Point2D]) -> list[Move]:
        """Normal moves of ``piece`` from ``origin`` to each of ``targets``."""
        return [cls(origin, target, piece.color, piece.piece, MoveType.NORMAL) for target in targets]


_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _on_board(pos: Point2D) -> bool:
    return 0 <= pos.x < _BOARD_SIZE and 0 <= pos.y < _BOARD_SIZE


@dataclass
class WorldState:
    """A chess position: whose turn it is and 64 squares in 32 bytes.

    ``x`` is the file (0 = A) and ``y`` the rank (0 = rank 1, white's side).
    """

    turn: PieceColor = PieceColor.WHITE
    cells: bytearray = field(default_factory=lambda: bytearray(_BOARD_SIZE * _BOARD_SIZE // 2))

    def piece_at(self, pos: Point2D) -> PieceData:
        """The piece on ``pos``; ``PieceData.wrong()`` off the board."""
        if not _on_board(pos):
            return PieceData.wrong()
        value = self.cells[(pos.y * _BOARD_SIZE + pos.x) // 2]
        nibble = value & 0x0F if pos.x % 2 == 0 else value >> 4
        return PieceData.unpack(nibble)

    def set_piece(self, piece: PieceData, pos: Point2D) -> None:
        if not _on_board(pos):
            raise IndexError(f"{pos} is outside the board")
        packed = piece.pack()
        index = (pos.y * _BOARD_SIZE + pos.x) // 2
        value = self.cells[index]
        if pos.x % 2 == 0:
            value = (value & 0xF0) | packed
        else:
            value = (value & 0x0F) | (packed << 4)
        self.cells[index] = value

    def move(self, origin: Point2D, target: Point2D) -> None:
        """Move the piece on ``origin`` to ``target`` and pass the turn."""
        moving = self.piece_at(origin)
        standing = self.piece_at(target)
        if moving.piece is PieceType.WRONG:
            raise IllegalMoveError(f"Wrong FROM piece at position: {origin}")
        if moving.color != self.turn:
            raise IllegalMoveError(f"Piece color does not match the turn at position: {origin}")
        if standing.piece is PieceType.NONE or moving.color != standing.color:
            self.set_piece(moving, target)
            self.set_piece(PieceData.empty(), origin)
            self.end_turn()
            return
        raise IllegalMoveError(f"WRONG piece at position: {origin}")

    def end_turn(self) -> None:
        self.turn = self.turn.opposite

    def reset(self) -> None:
        """Set up the starting position with white to move."""
        self.turn = PieceColor.WHITE
        self.cells[:] = bytes(len(self.cells))
        for x, kind in enumerate(_BACK_RANK):
            self.set_piece(PieceData(PieceColor.WHITE, kind), Point2D(x, 0))
            self.set_piece(PieceData(PieceColor.WHITE, PieceType.PAWN), Point2D(x, 1))
            self.set_piece(PieceData(PieceColor.BLACK, PieceType.PAWN), Point2D(x, 6))
            self.set_piece(PieceData(PieceColor.BLACK, kind), Point2D(x, 7))

    def copy(self) -> WorldState:
        return WorldState(self.turn, bytearray(self.cells))

    def __str__(self) -> str:
        lines = []
        for line in range(_BOARD_SIZE - 1, -1, -1):
            chars = " ".join(self.piece_at(Point2D(col, line)).to_char() for col in range(_BOARD_SIZE))
            lines.append(f"{line + 1} {chars}\n")
        return "".join(lines) + f"  {_FILES}\n"


@dataclass
class MoveState:
    """A position reached by a sequence of moves, with its score; ordered by score."""

    state: WorldState
    moves: list[Move] = field(default_factory=list)
    score: int = 0

    def __lt__(self, other: MoveState) -> bool:
        if not isinstance(other, MoveState):
            return NotImplemented
        return self.score < other.score