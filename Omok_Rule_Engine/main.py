"""Console entry point. Load config, build the game, feed typed moves to Omokgame."""

import sys
from pathlib import Path

import yaml

from .errors import ConfigError
from .Omokgame import GameConfig, Omokgame
from .render import render_text
from .utils.cli import parse_args
from .utils.logger import configure, log_event


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Omok_Rule_Engine/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def build_config(settings, args=None) -> GameConfig:
    """Merge settings file values with CLI overrides into a validated GameConfig."""
    board_size = getattr(args, "board_size", None) or settings.get("board_size", 15)
    win_length = getattr(args, "win_length", None) or settings.get("win_length", 5)
    names = settings.get("player_names") or ("First", "Second")
    return GameConfig(board_size=int(board_size), win_length=int(win_length), names=tuple(names))


def parse_move(raw: str, size: int) -> int:
    """Accept 'x y' (0-indexed) or a single linear index."""
    parts = raw.split()
    try:
        if len(parts) == 2:
            x, y = int(parts[0]), int(parts[1])
            if not (0 <= x < size and 0 <= y < size):
                raise IndexError(f"coordinate ({x}, {y}) out of range")
            return y * size + x
        if len(parts) == 1:
            index = int(parts[0])
            if not 0 <= index < size * size:
                raise IndexError(f"cell index {index} out of range")
            return index
    except ValueError as exc:
        raise ValueError("Invalid input format; expected 'x y' or a cell index") from exc
    raise ValueError("Invalid input format; expected 'x y' or a cell index")


def play(game, stdin=None, out=None):
    """Read moves until EOF or 'q'; re-render after every click."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    size = game.config.board_size
    print(render_text(game.state), file=out)
    for raw in stdin:
        raw = raw.strip()
        if raw.lower() in ("q", "quit", "exit"):
            break
        if not raw:
            continue
        try:
            index = parse_move(raw, size)
        except (ValueError, IndexError) as exc:
            print(exc, file=out)
            continue
        game.click(index)
        print(render_text(game.state), file=out)
    return game.state


def main(argv=None):
    args = parse_args(argv)
    configure(args.verbose)
    settings = load_settings(args.settings)

    try:
        config = build_config(settings, args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    log_event(f"Board {config.board_size}x{config.board_size}, {config.win_length} in a row")
    game = Omokgame(config=config, logger=log_event)
    play(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())
