"""Tic-tac-toe with several computer opponents, in the terminal or a window."""

__version__ = "0.1.0"