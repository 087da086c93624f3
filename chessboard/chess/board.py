"""
The Board owns the decoded FEN state and is the object the presentation layer talks to.

It does not know any chess rules: a relocation simply moves whatever stands on one square to another.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Self

from chessboard.chess.fen import FENState
from chessboard.chess.pieces import Piece
from chessboard.chess.square import Square
from chessboard.core.exceptions import InvalidRelocationError, InvalidSquareNameError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Relocation:
    """A completed drag of a piece from one square to another"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Coordinate notation, the way UCI writes moves:
        * "e2e4": whatever was on e2 goes to e4
        """
        if len(uci) != 4:
            raise InvalidRelocationError(
                f"Relocation must be written as two square names, ex. 'e2e4'. Got {uci!r}"
            )
        try:
            return cls(Square.from_algebraic(uci[:2]), Square.from_algebraic(uci[2:]))
        except InvalidSquareNameError as exc:
            raise InvalidRelocationError(f"Cannot interpret {uci!r}: {exc}") from exc

    def to_uci(self) -> str:
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


@dataclass
class Board:
    state: FENState

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Construct a board using a full FEN string. Raises NotationParseError on malformed input."""
        return cls(FENState.from_fen(fen))

    def to_fen(self) -> str:
        return self.state.to_fen()

    def piece(self, square: Square) -> Optional[Piece]:
        return self.state.pieces[square.index]

    def occupancy(self) -> Iterator[tuple[Square, Optional[Piece]]]:
        """All 64 squares (a1 first, h8 last) with whatever stands on them"""
        for square in Square.all():
            yield square, self.piece(square)

    def occupied_squares(self) -> list[Square]:
        return [square for square, piece in self.occupancy() if piece is not None]

    def relocate(self, from_square: Square, to_square: Square) -> None:
        """
        Put whatever stands on `from_square` onto `to_square`, then clear `from_square`.

        There are no checks: a piece on `to_square` is simply overwritten (even one of the same color),
        and relocating from an empty square empties `to_square`.
        Only the pieces change. Active color, castling rights, en passant square and move counters stay as they are.
        """
        piece_that_moved = self.piece(from_square)
        self.state.pieces[to_square.index] = piece_that_moved
        self.state.pieces[from_square.index] = None
        logger.debug(
            "Relocated %s from %s to %s",
            piece_that_moved.to_fen() if piece_that_moved else "nothing",
            from_square,
            to_square,
        )

    def apply(self, relocation: Relocation) -> None:
        self.relocate(relocation.from_square, relocation.to_square)

    def apply_all(self, relocations: Iterable[Relocation]) -> None:
        """convenience method to replay several drags (ex. to set up a board in a position reached after some moves)"""
        for relocation in relocations:
            self.apply(relocation)
