"""Sliding-tile picture puzzle: board state, moves and shuffling."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Rect:
    """Inclusive pixel region of a picture tile."""

    left: int
    top: int
    right: int
    bottom: int


class Direction(Enum):
    """Arrow key pressed; the tile next to the blank slides that way."""

    RIGHT = "right"
    LEFT = "left"
    DOWN = "down"
    UP = "up"


# How the blank cell moves (row delta, column delta) for each key.
_BLANK_STEP = {
    Direction.RIGHT: (0, -1),
    Direction.LEFT: (0, 1),
    Direction.DOWN: (-1, 0),
    Direction.UP: (1, 0),
}

# Order in which a random draw of 0..3 picks a move while shuffling.
_SHUFFLE_ORDER = (Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP)


class SlidingPuzzle:
    """A picture cut into ``rows`` x ``cols`` tiles with one blank cell.

    Tiles are numbered row by row from 0; the highest number marks the
    blank, which starts in the bottom-right corner. A new puzzle is
    solved; call :meth:`shuffle` to mix it.
    """

    def __init__(self, rows=3, cols=4, width=640, height=480, rng=None):
        if rows < 1 or cols < 1:
            raise ValueError("a puzzle needs at least one row and one column")
        self.rows = rows
        self.cols = cols
        self.block_width = width // cols
        self.block_height = height // rows
        self.blank_tile = rows * cols - 1
        self.rng = rng if rng is not None else random.Random()
        self._target = list(range(rows * cols))
        self._layout = [
            [row * cols + col for col in range(cols)] for row in range(rows)
        ]
        self.blank = (rows - 1, cols - 1)
        # Key presses counted toward the score; starts at one.
        self.moves = 1

    def _move_blank(self, direction: Direction) -> bool:
        d_row, d_col = _BLANK_STEP[direction]
        row, col = self.blank
        new_row, new_col = row + d_row, col + d_col
        if not (0 <= new_row < self.rows and 0 <= new_col < self.cols):
            return False
        self._layout[row][col] = self._layout[new_row][new_col]
        self._layout[new_row][new_col] = self.blank_tile
        self.blank = (new_row, new_col)
        return True

    def shuffle(self, passes=None):
        """Mix the board by random legal moves.

        Each pass makes ``100*n + randrange(10*n)`` random moves, where
        ``n`` is the number of cells. ``passes`` defaults to the square
        of the number of picture tiles.
        """
        if passes is None:
            passes = self.blank_tile * self.blank_tile
        cells = self.rows * self.cols
        for _ in range(passes):
            count = 100 * cells + self.rng.randrange(10 * cells)
            for _ in range(count):
                self._move_blank(_SHUFFLE_ORDER[self.rng.randrange(4)])

    def slide(self, direction):
        """Answer a key press; return True if a tile moved.

        Every successful slide adds to :attr:`moves` except an UP slide,
        which the scoring has never counted.
        """
        moved = self._move_blank(Direction(direction))
        if moved and direction is not Direction.UP:
            self.moves += 1
        return moved

    def is_solved(self):
        """True when every cell holds the tile its reference layout expects."""
        return all(
            tile == self._target[row * self.cols + col]
            for row, line in enumerate(self._layout)
            for col, tile in enumerate(line)
        )

    def tile_rect(self, tile):
        """Region of the source picture that ``tile`` shows."""
        if not 0 <= tile <= self.blank_tile:
            raise IndexError(f"tile {tile} out of range")
        row, col = divmod(tile, self.cols)
        left = self.block_width * col
        top = self.block_height * row
        return Rect(
            left, top, left + self.block_width - 1, top + self.block_height - 1
        )

    def cell_position(self, row, col):
        """Screen position (x, y) of the top-left corner of a cell."""
        self._check_cell(row, col)
        return (float(self.block_width * col), float(self.block_height * row))

    def tile_at(self, row, col):
        """Tile number currently in a cell; the blank is ``blank_tile``."""
        self._check_cell(row, col)
        return self._layout[row][col]

    def adopt_current_layout(self):
        """Take the board as it stands as the solution (the cheat key)."""
        self._target = [tile for line in self._layout for tile in line]

    def _check_cell(self, row, col):
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) out of range")