"""
FEN codec: translate between a FEN string and the data it encodes.

FEN, or Forsyth-Edwards Notation, is a standard notation for describing a particular board position of a chess game.

<piece placement> <active color> <castling rights> <en passant square> <half move clock> <full move number>

ex) The standard starting position has a FEN
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1
i.e. it is white to move, all castling options available, no en passant square, no half moves and we are in the first turn.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Self

from chessboard.chess.pieces import PIECE_LETTERS, Color, Piece
from chessboard.chess.square import (
    BOARD_DIMENSIONS,
    FILE_NAMES,
    NUM_SQUARES,
    RANK_NAMES,
    Square,
)
from chessboard.core.exceptions import NotationParseError

logger = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
EMPTY_RUN_DIGITS = "12345678"

# Positional record: one (optional) piece per square, indexed by Square.index
Placement = list[Optional[Piece]]


class CastlingDirection(Enum):
    """The four castling rights. Values represent their encodings in FEN string."""

    WHITE_KING_SIDE = "K"
    WHITE_QUEEN_SIDE = "Q"
    BLACK_KING_SIDE = "k"
    BLACK_QUEEN_SIDE = "q"


CASTLING_ORDER: tuple[CastlingDirection, ...] = (
    CastlingDirection.WHITE_KING_SIDE,
    CastlingDirection.WHITE_QUEEN_SIDE,
    CastlingDirection.BLACK_KING_SIDE,
    CastlingDirection.BLACK_QUEEN_SIDE,
)


# --- VALIDATION ---
def is_valid_fen(fen: str) -> bool:
    """Check if given string follows proper FEN notation."""
    try:
        _validate(fen)
    except NotationParseError:
        return False
    return True


def is_valid_placement(placement: str) -> bool:
    """Only check the part of the FEN encoding for the piece placement."""
    num_files, num_ranks = BOARD_DIMENSIONS
    rank_fens = placement.split("/")
    if len(rank_fens) != num_ranks:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        previous_was_digit = False
        for character in rank_fen:
            if character in EMPTY_RUN_DIGITS:
                # "44" would describe a single run of empty squares twice
                if previous_was_digit:
                    return False
                file_count += int(character)
                previous_was_digit = True
            elif character in PIECE_LETTERS:
                file_count += 1
                previous_was_digit = False
            else:
                return False

        if file_count != num_files:
            return False
    return True


def is_valid_color_code(color: str) -> bool:
    return color in {"w", "b"}


def is_valid_castling_rights(castling: str) -> bool:
    """Either '-' or each of K, Q, k, q at most once (in any order)."""
    if castling == "-":
        return True
    allowed = {direction.value for direction in CastlingDirection}
    return (
        len(castling) > 0
        and set(castling) <= allowed
        and len(set(castling)) == len(castling)
    )


def is_valid_square(square: str) -> bool:
    """Valid square should be a letter for the file + a number for the rank"""
    return (
        len(square) == 2
        and square[0] in FILE_NAMES
        and square[1] in RANK_NAMES
    )


def is_valid_en_passant(en_passant: str) -> bool:
    """Valid en passant square encoding should be a square that exists on the board or a '-'"""
    return (en_passant == "-") or is_valid_square(en_passant)


def is_valid_move_counter(counter: str) -> bool:
    # str.isdigit() also accepts things like superscripts, which int() refuses
    return len(counter) > 0 and all(character in "0123456789" for character in counter)


FIELD_VALIDATORS = (
    ("placement", is_valid_placement),
    ("active color", is_valid_color_code),
    ("castling rights", is_valid_castling_rights),
    ("en passant square", is_valid_en_passant),
    ("half move clock", is_valid_move_counter),
    ("full move number", is_valid_move_counter),
)


def _validate(fen: str) -> list[str]:
    """Split the FEN in its six parts, raise on the first part that is malformed."""
    parts = fen.split(" ")
    if len(parts) != len(FIELD_VALIDATORS):
        raise NotationParseError(
            f"FEN must contain {len(FIELD_VALIDATORS)} space-separated parts, got {len(parts)}: {fen!r}",
            fen=fen,
        )
    for (name, is_valid), part in zip(FIELD_VALIDATORS, parts):
        if not is_valid(part):
            raise NotationParseError(
                f"Invalid {name} {part!r} in FEN: {fen!r}", fen=fen, field=name
            )
    return parts


# --- PARTS OF THE FEN ---
def placement_from_fen(placement: str) -> Placement:
    """Fill the positional record from the first part of a (validated) FEN string.

    ex. standard starting position:
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
    means:
    * black pieces are on the 8th rank, starting with rook on a8, knight on b8, etc.
    * pawns cover 7th rank entirely
    * ranks 6 through 3 have 8 consecutive empty squares
    * rank 2 are the white pawns (capital letters)
    * 1st rank are the white pieces, again read from a1 to h1.
    """
    pieces: Placement = [None] * NUM_SQUARES
    num_ranks = BOARD_DIMENSIONS[1]
    for rank_idx, fen_one_rank in enumerate(placement.split("/")):
        # FEN string is read from top rank (8th) to bottom rank (1st)
        rank = num_ranks - rank_idx
        # ... but the first character is the a-file, so reads in normal direction
        file = 1
        for character in fen_one_rank:
            if character in PIECE_LETTERS:
                pieces[Square.from_file_rank(file, rank).index] = Piece.from_fen(character)
                file += 1
            else:
                # A number denotes the amount of empty squares after each other
                file += int(character)
    return pieces


def placement_to_fen(pieces: Placement) -> str:
    """Ranks are separated by slashes in FEN string."""
    return "/".join(
        _rank_to_fen(pieces, rank) for rank in range(BOARD_DIMENSIONS[1], 0, -1)
    )


def _rank_to_fen(pieces: Placement, rank: int) -> str:
    """FEN string of a single rank"""
    fen_characters: list[str] = []
    empty_count = 0
    for file in range(1, BOARD_DIMENSIONS[0] + 1):
        piece = pieces[Square.from_file_rank(file, rank).index]

        if piece is not None:
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())
        else:
            empty_count += 1

    # if the entire rank is empty, then we still place this number in the string
    if empty_count > 0:
        fen_characters.append(str(empty_count))
    return "".join(fen_characters)


def castling_from_fen(castle_fen: str) -> dict[CastlingDirection, bool]:
    """parse the part of the FEN string that encodes castling rights"""
    return {
        direction: (direction.value in castle_fen) for direction in CastlingDirection
    }


def castling_to_fen(castling_rights: dict[CastlingDirection, bool]) -> str:
    """create the part of the FEN string that encodes castling rights"""
    castling_chars = "".join(
        [
            direction.value
            for direction in CASTLING_ORDER
            if castling_rights.get(direction, False)
        ]
    )
    return castling_chars or "-"


@dataclass
class FENState:
    """
    Data that can be constructed from a FEN string.
    ----

    * pieces: the positional record, 64 slots indexed by Square.index (a1 = 0, h8 = 63)
    * The active color is either "w" or "b"
    * Castling rights are denoted as "k" for king-side or "q" for queen-side. Capital letters for the white pieces, small letters for the black pieces.
        In the starting position: KQkq (all rights available), and once all rights are revoked a "-" is used.
    * The en passant square indicates the square a pawn can take on. If not available a "-" is used.
    * The half move clock counts the number of moves made since the last pawn move or capture.
    * The full move number increments after every move black makes.
    """

    pieces: Placement
    color_to_move: Color = Color.WHITE
    castling_rights: dict[CastlingDirection, bool] = field(
        default_factory=lambda: {direction: False for direction in CastlingDirection}
    )
    en_passant_square: Optional[Square] = None
    half_move_clock: int = 0
    full_move_number: int = 1

    def __post_init__(self) -> None:
        if len(self.pieces) != NUM_SQUARES:
            raise ValueError(
                f"Positional record must hold exactly {NUM_SQUARES} squares, got {len(self.pieces)}."
            )

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Parse the FEN into data"""

        try:
            (
                placement,
                active_color,
                castling_str,
                en_passant_algebraic,
                half_move_clock,
                full_move_number,
            ) = _validate(fen)
        except NotationParseError as exc:
            logger.debug("Rejected FEN %r (%s)", fen, exc)
            raise

        en_passant_square = (
            Square.from_algebraic(en_passant_algebraic)
            if en_passant_algebraic != "-"
            else None
        )
        return cls(
            pieces=placement_from_fen(placement),
            color_to_move=Color.WHITE if active_color == "w" else Color.BLACK,
            castling_rights=castling_from_fen(castling_str),
            en_passant_square=en_passant_square,
            half_move_clock=int(half_move_clock),
            full_move_number=int(full_move_number),
        )

    def to_fen(self) -> str:
        """reverse operation: write a FEN from the given data"""
        placement = placement_to_fen(self.pieces)
        active_color = "w" if self.color_to_move == Color.WHITE else "b"
        castling_str = castling_to_fen(self.castling_rights)
        en_passant_algebraic = (
            self.en_passant_square.to_algebraic()
            if self.en_passant_square is not None
            else "-"
        )
        return f"{placement} {active_color} {castling_str} {en_passant_algebraic} {self.half_move_clock} {self.full_move_number}"

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_FEN)


def decode(fen: str) -> FENState:
    return FENState.from_fen(fen)


def encode(state: FENState) -> str:
    return state.to_fen()
