"""International checkers on a 10x10 board with a minimax opponent, in a terminal or a window."""

__version__ = "0.1.0"