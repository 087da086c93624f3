"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures shared by the tests of multiple modules.
"""

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from chessboard.chess.board import Board

STARTING_FEN_ZERO_MOVES = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 0"
EMPTY_PLACEMENT = "/".join(["8"] * 8)


@pytest.fixture
def starting_board() -> Board:
    """Standard set-up, the position the application opens with"""
    return Board.from_fen(STARTING_FEN_ZERO_MOVES)


@pytest.fixture
def empty_board() -> Board:
    return Board.from_fen(f"{EMPTY_PLACEMENT} w - - 0 1")


@pytest.fixture
def settings_file(tmp_path: Path) -> Callable[[Any], Path]:
    """Call the inner function with the content to write: dicts are dumped as JSON, strings are written as is"""

    def _write(content: Any) -> Path:
        path = tmp_path / "settings.json"
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
