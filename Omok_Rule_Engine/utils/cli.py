"""CLI options for board size, win length, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Omok rule engine (console play)")
    parser.add_argument("--board-size", type=int, help="Board size N for an N x N grid")
    parser.add_argument("--win-length", type=int, help="Run length needed to win")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--verbose", action="store_true", help="Show engine debug logging")
    return parser.parse_args(argv)
