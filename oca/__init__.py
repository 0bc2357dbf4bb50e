"""The Game of the Goose: board, squares, players, die, spiral drawing and a terminal game."""

__version__ = "0.1.0"