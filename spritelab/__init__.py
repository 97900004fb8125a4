"""Game state and rules for small 2D sprite games: sliding puzzle, scores, snake, sprite sheets, particles, BMP headers, transforms and motion."""

__version__ = "0.1.0"

__all__ = [
    "bitmap",
    "motion",
    "particles",
    "puzzle",
    "puzzle_game",
    "scores",
    "sheet",
    "snake",
    "transform",
]