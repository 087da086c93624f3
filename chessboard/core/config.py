"""
Settings for the presentation layer (square size, colors, animation speed, starting position).

Stored as a JSON file and validated with pydantic. (The settings file of the Rust version of this
viewer was RON; the keys are the same, only the file format differs.)
"""

import logging
import re
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from chessboard.chess.fen import STARTING_FEN, is_valid_fen
from chessboard.chess.square import Square
from chessboard.core.exceptions import SettingsError

logger = logging.getLogger(__name__)

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    space_size: float = 80.0
    light_color: str = "#eeeed2"
    dark_color: str = "#769656"
    piece_move_speed: int = 200  # duration of the move animation in milliseconds
    starting_fen: str = STARTING_FEN
    log_level: str = "INFO"

    @field_validator("space_size")
    @classmethod
    def validate_space_size(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"space_size must be positive, got {value}")
        return value

    @field_validator("light_color", "dark_color")
    @classmethod
    def validate_color(cls, value: str) -> str:
        if not HEX_COLOR.match(value):
            raise ValueError(f"Cannot interpret {value!r} as a '#rrggbb' color.")
        return value.lower()

    @field_validator("piece_move_speed")
    @classmethod
    def validate_move_speed(cls, value: int) -> int:
        if value < 0:
            raise ValueError(f"piece_move_speed cannot be negative, got {value}")
        return value

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: str) -> str:
        if not is_valid_fen(value):
            raise ValueError(f"Cannot interpret starting_fen as FEN: {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    def sprite_position(self, square: Square) -> tuple[float, float]:
        """Screen position of the bottom-left corner of a square, with the board centered at the origin"""
        x, y = square.physical_position()
        return x * self.space_size, y * self.space_size


def load_settings(path: str | Path) -> Settings:
    """Read and validate a settings file."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc

    try:
        settings = Settings.model_validate_json(raw)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings in {path}:\n{exc}") from exc

    logger.info("Loaded settings from %s", path)
    return settings


def configure_logging(settings: Settings) -> None:
    """Meant to be called once by the application. The library itself never configures logging."""
    logging.basicConfig(level=settings.log_level)
