"""
A square on the board

(placed in its own module as multiple other modules need to import it)

Squares are numbered rank-major: a1 = 0, b1 = 1, ..., h1 = 7, a2 = 8, ..., h8 = 63.
The index doubles as the offset into the 64-slot positional record.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from chessboard.core.exceptions import InvalidSquareIndexError, InvalidSquareNameError

# (files, ranks)
BOARD_DIMENSIONS = (8, 8)
NUM_SQUARES = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]
FILE_NAMES = ascii_lowercase[: BOARD_DIMENSIONS[0]]
# ASCII only: str.isdigit() would also let through things like '²'
RANK_NAMES = "123456789"[: BOARD_DIMENSIONS[1]]


@dataclass(frozen=True, order=True)
class Square:
    index: int

    def __post_init__(self) -> None:
        # bool is an int subclass, but True/False are never meant as squares
        if (
            not isinstance(self.index, int)
            or isinstance(self.index, bool)
            or not (0 <= self.index < NUM_SQUARES)
        ):
            raise InvalidSquareIndexError(self.index)

    @classmethod
    def from_index(cls, index: int) -> Square:
        return cls(index)

    def to_index(self) -> int:
        return self.index

    @classmethod
    def from_file_rank(cls, file: int, rank: int) -> Square:
        """file and rank both count from 1, so a1 is (1, 1) and h8 is (8, 8)"""
        num_files, num_ranks = BOARD_DIMENSIONS
        if not (1 <= file <= num_files and 1 <= rank <= num_ranks):
            raise InvalidSquareIndexError((file, rank))
        return cls((rank - 1) * num_files + (file - 1))

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to index 0 - 63"""
        if len(sq) != 2 or sq[0] not in FILE_NAMES or sq[1] not in RANK_NAMES:
            raise InvalidSquareNameError(sq)
        rank = int(sq[1])
        if not (1 <= rank <= BOARD_DIMENSIONS[1]):
            raise InvalidSquareNameError(sq)
        return cls.from_file_rank(FILE_NAMES.index(sq[0]) + 1, rank)

    def to_algebraic(self) -> str:
        return f"{FILE_NAMES[self.file - 1]}{self.rank}"

    @classmethod
    def all(cls) -> list[Square]:
        """All squares in index order (a1, b1, ..., h8)"""
        return [cls(index) for index in range(NUM_SQUARES)]

    @property
    def file(self) -> int:
        return self.index % BOARD_DIMENSIONS[0] + 1

    @property
    def rank(self) -> int:
        return self.index // BOARD_DIMENSIONS[0] + 1

    def physical_position(self) -> tuple[int, int]:
        """
        Offset of the square relative to the center of the board, in units of one square.

        a1 sits at (-4, -4) and h8 at (3, 3): the offset points at the bottom-left corner
        of the square, which is where the presentation layer anchors its sprites.
        """
        num_files, num_ranks = BOARD_DIMENSIONS
        x = (self.index % num_files) - num_files // 2
        y = (self.index // num_files) - num_ranks // 2
        return x, y

    def __str__(self) -> str:
        return self.to_algebraic()
