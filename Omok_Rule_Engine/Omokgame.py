"""Turn management and the click-driven game state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from .Board import Board
from .engine import referee, win_rules
from .engine.lines import generate_lines
from .engine.win_rules import DRAW, Conclusion, winners
from .errors import ConfigError
from .Player import Player

LOGGER = logging.getLogger(__name__)

PLAY_AGAIN = "Click anywhere to play again."


@dataclass(frozen=True)
class GameConfig:
    board_size: int = 15
    win_length: int = 5
    names: tuple[str, str] = ("First", "Second")

    def __post_init__(self):
        if self.win_length < 1:
            raise ConfigError(f"win length must be at least 1, got {self.win_length}")
        if self.board_size < self.win_length:
            raise ConfigError(
                f"board size {self.board_size} is smaller than win length {self.win_length}"
            )
        if len(self.names) != 2:
            raise ConfigError("names must hold exactly two player names")

    def name_of(self, player: Player) -> str:
        if not player.is_mover:
            raise ValueError("Player.NONE has no name")
        return self.names[player - 1]


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot. `conclusions` is empty while the game is in progress;
    once it holds a Win or Draw the game is concluded and the next click resets.
    """

    config: GameConfig
    board: Board
    turn: Player = Player.FIRST
    status_text: str = ""
    conclusions: tuple[Conclusion, ...] = field(default=())

    @property
    def concluded(self):
        return bool(self.conclusions)


def new_game(config: GameConfig | None = None) -> GameState:
    config = config or GameConfig()
    board = Board.create_empty(config.board_size, config.win_length)
    return GameState(config=config, board=board)


def conclusion_text(config: GameConfig, conclusions) -> str:
    found = winners(conclusions)
    if found:
        names = " and ".join(config.name_of(p) for p in found)
        verb = "wins" if len(found) == 1 else "win"
        return f"{names} {verb}! {PLAY_AGAIN}"
    if DRAW in conclusions:
        return f"It's a tie! {PLAY_AGAIN}"
    return ""


def prompt(state: GameState) -> str:
    """Status line for a renderer: the conclusion text or whose move it is."""
    if state.status_text:
        return state.status_text
    return f"{state.config.name_of(state.turn)} to move"


def apply_move(state: GameState, index: int) -> GameState:
    """
    The single transition. A click on a concluded game starts a new one and
    ignores the clicked cell. A click on an occupied cell returns `state`
    untouched. Otherwise the current player's mark goes on a copy of the board
    and the result is evaluated.
    """
    if state.concluded:
        return new_game(state.config)

    if not referee.check_move(index, state.board):
        return state

    board = state.board.place_index(index, state.turn)
    conclusions = win_rules.evaluate(board, state.config.win_length, generate_lines(board.size))
    if conclusions:
        return replace(
            state,
            board=board,
            status_text=conclusion_text(state.config, conclusions),
            conclusions=conclusions,
        )
    return replace(state, board=board, turn=state.turn.opponent, status_text="", conclusions=())


class Omokgame:
    """Owns the current snapshot and forwards clicks to `apply_move`."""

    def __init__(self, config=None, logger=None, renderer=None):
        self.state = new_game(config)
        self.logger = logger or LOGGER.info
        self.renderer = renderer
        self.move_index = 0

    def click(self, index):
        before = self.state
        self.state = apply_move(before, index)

        if before.concluded:
            self.move_index = 0
            self.logger(f"New game, {self.config.name_of(self.state.turn)} to move")
        elif self.state is before:
            self.logger(f"Rejected: cell {index} already occupied")
        else:
            self.move_index += 1
            name = self.config.name_of(before.turn)
            self.logger(f"Move {self.move_index}: {name} {index}")
            if self.state.concluded:
                self.logger(f"Result: {self.state.status_text}")

        if self.renderer:
            self.renderer(self.state)
        return self.state

    def reset(self):
        self.state = new_game(self.config)
        self.move_index = 0
        if self.renderer:
            self.renderer(self.state)
        return self.state

    @property
    def config(self):
        return self.state.config
