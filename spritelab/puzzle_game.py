"""Puzzle game flow: start screen, play and high-score screen."""

from __future__ import annotations

import random
from enum import Enum, auto

from spritelab.puzzle import Direction, SlidingPuzzle
from spritelab.scores import SCORE_LIMIT, ScoreEntry, append_score, read_scores

IMAGES = ("Texture/img1.bmp", "Texture/img2.bmp", "Texture/img3.bmp")
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
MIN_CELLS = 3
MAX_CELLS = 99
RESET_SCORE = 10000


class Key(Enum):
    """Keys the game reacts to."""

    RETURN = auto()
    SPACE = auto()
    RIGHT = auto()
    LEFT = auto()
    UP = auto()
    DOWN = auto()
    HOME = auto()
    END = auto()
    ADD = auto()


class Phase(Enum):
    """Screen the game is on."""

    START = 0
    PLAY = 1
    SCORE = 2


_SLIDE_KEYS = (
    (Key.RIGHT, Direction.RIGHT),
    (Key.LEFT, Direction.LEFT),
    (Key.DOWN, Direction.DOWN),
    (Key.UP, Direction.UP),
)


def _blank_scores():
    return [ScoreEntry() for _ in range(SCORE_LIMIT)]


class PuzzleGame:
    """Frame-by-frame state of the sliding-picture game.

    Call :meth:`update` once per frame with the set of keys held down;
    a key acts on the frame it goes down.
    """

    def __init__(self, score_path="Data/Score.txt", rng=None):
        self.score_path = score_path
        self.rng = rng if rng is not None else random.Random()
        self.phase = Phase.START
        self.rows = MIN_CELLS
        self.cols = MIN_CELLS
        self.image = 0
        self.score = 0
        self.success = False
        self.windowed = True
        self.puzzle = None
        self.scores = _blank_scores()
        self._held = frozenset()
        self._pressed = frozenset()

    def _went_down(self, key):
        return key in self._pressed

    def update(self, keys):
        """Advance one frame given the keys currently held; return the phase."""
        held = frozenset(keys)
        self._pressed = held - self._held
        self._held = held

        if self._went_down(Key.ADD):
            self.windowed = not self.windowed

        if self.phase is Phase.START:
            self._start_frame()
        elif self.phase is Phase.PLAY:
            self._play_frame()
        else:
            self._score_frame()
        return self.phase

    def _start_frame(self):
        if self._went_down(Key.RETURN):
            self.phase = Phase.PLAY
            self.success = False
            self.puzzle = SlidingPuzzle(
                self.rows, self.cols, SCREEN_WIDTH, SCREEN_HEIGHT, self.rng
            )
            self.puzzle.shuffle()
            return
        if self._went_down(Key.SPACE):
            self.image += 1
        if self._went_down(Key.RIGHT):
            self.rows += 1
        if self._went_down(Key.LEFT):
            self.rows -= 1
        if self._went_down(Key.UP):
            self.cols += 1
        if self._went_down(Key.DOWN):
            self.cols -= 1
        if not 0 <= self.image < len(IMAGES):
            self.image = 0
        if not MIN_CELLS <= self.rows <= MAX_CELLS:
            self.rows = MIN_CELLS
        if not MIN_CELLS <= self.cols <= MAX_CELLS:
            self.cols = MIN_CELLS

    def _reset_settings(self):
        self.rows = MIN_CELLS
        self.cols = MIN_CELLS
        self.image = 0
        self.phase = Phase.START
        self.success = False
        self.puzzle = None

    def _play_frame(self):
        if self._went_down(Key.HOME):
            self._reset_settings()
            self.score = RESET_SCORE
            return
        if self._went_down(Key.END):
            self.phase = Phase.SCORE
            return
        if self.success:
            return
        for key, direction in _SLIDE_KEYS:
            if self._went_down(key):
                self.puzzle.slide(direction)
        if self.puzzle.is_solved():
            self.puzzle.moves += 1
            self.score = RESET_SCORE * self.puzzle.blank_tile // self.puzzle.moves
            self.success = True
            self._record()

    def _record(self):
        try:
            append_score(self.score_path, self.puzzle.moves)
        except OSError:
            return
        entries = read_scores(self.score_path, SCORE_LIMIT)
        self.scores = entries + [ScoreEntry()] * (SCORE_LIMIT - len(entries))

    def _score_frame(self):
        if self._went_down(Key.HOME):
            self._reset_settings()

    def start_screen_text(self):
        """Text drawn on the start screen as (x, y, text) triples."""
        return [
            (260, 290, IMAGES[self.image]),
            (280, 318, str(self.rows)),
            (280, 339, str(self.cols)),
        ]

    def score_screen_lines(self):
        """One (date line, score text) pair per high-score slot."""
        return [
            (
                f"{rank:2d}: {entry.year}/ {entry.month:2d}/ {entry.day:2d}/ "
                f"{entry.hour:6d}: {entry.minute:2d}: {entry.second:2d}",
                f"{entry.score:5d}",
            )
            for rank, entry in enumerate(self.scores, start=1)
        ]