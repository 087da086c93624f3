"""Unit tests for chessboard/chess/pieces.py"""

import pytest

from chessboard.chess.pieces import FEN_TO_PIECE, PIECE_TO_FEN, Color, Piece, PieceKind
from chessboard.core.exceptions import NotationParseError


@pytest.mark.parametrize("char", [char.upper() for char in FEN_TO_PIECE.keys()])
def test_creating_white_piece_from_fen(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_fen(char)
    assert piece.kind == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.WHITE


@pytest.mark.parametrize("char", [char.lower() for char in FEN_TO_PIECE.keys()])
def test_creating_black_piece_from_fen(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_fen(char)
    assert piece.kind == FEN_TO_PIECE[char]
    assert piece.color == Color.BLACK


@pytest.mark.parametrize("kind", list(PieceKind))
def test_white_pieces_to_fen(kind: PieceKind) -> None:
    assert Piece(kind, Color.WHITE).to_fen() == PIECE_TO_FEN[kind].upper()


@pytest.mark.parametrize("kind", list(PieceKind))
def test_black_pieces_to_fen(kind: PieceKind) -> None:
    assert Piece(kind, Color.BLACK).to_fen() == PIECE_TO_FEN[kind]


@pytest.mark.parametrize("char", ["x", "Z", "1", "-", " ", "\u212a"])
def test_unknown_piece_letter(char: str) -> None:
    with pytest.raises(NotationParseError):
        Piece.from_fen(char)


def test_pieces_compare_by_value() -> None:
    assert Piece.from_fen("Q") == Piece(PieceKind.QUEEN, Color.WHITE)
    assert Piece.from_fen("q") != Piece.from_fen("Q")


def test_unknown_piece_letter_reports_the_letter() -> None:
    with pytest.raises(NotationParseError) as exc_info:
        Piece.from_fen("x")
    assert exc_info.value.fen == "x"
    assert exc_info.value.field == "piece"
