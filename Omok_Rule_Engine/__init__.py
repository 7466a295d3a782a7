"""Omok_Rule_Engine package exports."""

from .Board import Board, coord_to_linear, linear_to_coord
from .errors import ConfigError
from .Omokgame import GameConfig, GameState, Omokgame, apply_move, new_game, prompt
from .Player import Player

# Subpackages for line generation, win rules, and helpers
from . import engine, utils

__all__ = [
    "Board",
    "ConfigError",
    "GameConfig",
    "GameState",
    "Omokgame",
    "Player",
    "apply_move",
    "coord_to_linear",
    "engine",
    "linear_to_coord",
    "new_game",
    "prompt",
    "utils",
]
