"""Ludo for two or four players: pieces, board, game rules and a terminal front end."""

__version__ = "0.1.0"
__all__ = ["board", "cli", "game", "pieces"]