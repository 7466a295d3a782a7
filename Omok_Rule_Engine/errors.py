"""Exceptions raised while setting up a game."""


class ConfigError(ValueError):
    """Board size / win length combination that can never produce a winner."""
