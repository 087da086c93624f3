"""Unit tests for chessboard/chess/square.py"""

from string import ascii_lowercase

import pytest

from chessboard.chess.square import BOARD_DIMENSIONS, NUM_SQUARES, Square
from chessboard.core.exceptions import InvalidSquareIndexError, InvalidSquareNameError


@pytest.mark.parametrize("index", range(NUM_SQUARES))
def test_index_roundtrip(index: int) -> None:
    assert Square.from_index(index).to_index() == index


@pytest.mark.parametrize("index", [-1, 64, 100, -64])
def test_index_out_of_range(index: int) -> None:
    with pytest.raises(InvalidSquareIndexError):
        Square.from_index(index)


def test_bool_is_not_a_square() -> None:
    with pytest.raises(InvalidSquareIndexError):
        Square(True)


@pytest.mark.parametrize(
    "file, rank, notation",
    [
        (file, rank, f"{ascii_lowercase[file - 1]}{rank}")
        for file in range(1, 9)
        for rank in range(1, 9)
    ],
)
def test_creating_from_algebraic(file: int, rank: int, notation: str) -> None:
    """Simply checks if the notation for 'a1' indeed maps to file 1, rank 1, etc."""
    square = Square.from_algebraic(notation)
    assert square.file == file
    assert square.rank == rank
    assert square.to_algebraic() == notation


@pytest.mark.parametrize(
    "notation, index", [("a1", 0), ("h1", 7), ("a2", 8), ("e4", 28), ("h8", 63)]
)
def test_rank_major_ordering(notation: str, index: int) -> None:
    assert Square.from_algebraic(notation).index == index


@pytest.mark.parametrize(
    "notation", ["a0", "a9", "i1", "1a", "A1", "e", "e44", "", "a²", "e٣"]
)
def test_invalid_algebraic(notation: str) -> None:
    with pytest.raises(InvalidSquareNameError):
        Square.from_algebraic(notation)


def test_file_rank_out_of_bounds() -> None:
    with pytest.raises(InvalidSquareIndexError):
        Square.from_file_rank(BOARD_DIMENSIONS[0] + 1, 1)

    with pytest.raises(InvalidSquareIndexError):
        Square.from_file_rank(1, 0)


def test_all_squares_in_index_order() -> None:
    squares = Square.all()
    assert len(squares) == NUM_SQUARES
    assert [square.index for square in squares] == list(range(NUM_SQUARES))
    assert len(set(squares)) == NUM_SQUARES


@pytest.mark.parametrize(
    "notation, position",
    [("a1", (-4, -4)), ("h8", (3, 3)), ("h1", (3, -4)), ("a8", (-4, 3)), ("e4", (0, -1))],
)
def test_physical_position(notation: str, position: tuple[int, int]) -> None:
    assert Square.from_algebraic(notation).physical_position() == position


def test_physical_position_covers_grid() -> None:
    """Every square gets its own offset, and together they fill the 8x8 grid around the origin"""
    positions = {square.physical_position() for square in Square.all()}
    assert positions == {(x, y) for x in range(-4, 4) for y in range(-4, 4)}


def test_square_is_immutable_and_hashable() -> None:
    square = Square.from_algebraic("d5")
    with pytest.raises(AttributeError):
        square.index = 3  # type: ignore[misc]
    assert {square: "x"}[Square(square.index)] == "x"
