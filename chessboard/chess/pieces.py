"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from chessboard.core.exceptions import NotationParseError


class PieceKind(Enum):
    KING = auto()
    QUEEN = auto()
    BISHOP = auto()
    KNIGHT = auto()
    ROOK = auto()
    PAWN = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()


FEN_TO_PIECE: dict[str, PieceKind] = {
    "k": PieceKind.KING,
    "q": PieceKind.QUEEN,
    "b": PieceKind.BISHOP,
    "n": PieceKind.KNIGHT,
    "r": PieceKind.ROOK,
    "p": PieceKind.PAWN,
}

PIECE_TO_FEN: dict[PieceKind, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# Exact letters only: str.lower() maps some non-ASCII letters (ex. the Kelvin sign) onto 'k'
PIECE_LETTERS: frozenset[str] = frozenset(FEN_TO_PIECE) | frozenset(
    letter.upper() for letter in FEN_TO_PIECE
)


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    color: Color

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        if character not in PIECE_LETTERS:
            raise NotationParseError(
                f"Unknown piece letter: {character!r}", fen=character, field="piece"
            )
        color = Color.WHITE if character.isupper() else Color.BLACK
        return cls(FEN_TO_PIECE[character.lower()], color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.kind].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.kind]
        )
