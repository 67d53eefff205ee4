"""Game of Fifteen — the sliding-tile puzzle, played in a terminal."""

__version__ = "1.0.0"
