"""
Exceptions shared across the package.

Everything derives from ChessboardError so the presentation layer can catch a single type
when it wants to drop a failed user interaction.
"""

from typing import Optional


class ChessboardError(Exception):
    """Base class of every error raised by the board model"""


class NotationParseError(ChessboardError, ValueError):
    """
    A string could not be interpreted as FEN.

    `fen` holds the text that was being parsed: the full FEN string, or just the letter when a
    single piece is decoded on its own (then `field` is "piece").
    `field` names the part of the FEN that is broken, None when the number of parts is wrong.
    """

    def __init__(self, message: str, fen: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.fen = fen
        self.field = field


class InvalidSquareIndexError(ChessboardError, ValueError):
    def __init__(self, index: object) -> None:
        super().__init__(f"Square {index!r} is outside of the board (index 0-63).")
        self.index = index


class InvalidSquareNameError(ChessboardError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Cannot interpret {name!r} as a square name (a1 - h8).")
        self.name = name


class InvalidRelocationError(ChessboardError, ValueError):
    """Coordinate notation of a relocation (ex. 'e2e4') could not be parsed"""


class SettingsError(ChessboardError):
    """Settings file is missing, unreadable or contains invalid values"""
