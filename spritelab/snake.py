"""Snake game on a 20-pixel grid: moving, eating, items and walls."""

from __future__ import annotations

import random
from enum import Enum

CELL = 20
FIELD_WIDTH = 480
FIELD_HEIGHT = 480
MAX_TAIL = (FIELD_WIDTH // CELL) * (FIELD_HEIGHT // CELL)
START_POSITION = (200.0, 200.0)
STAGE_LENGTH = 4
POINTS_PER_FOOD = 100

_LEVEL_SPEED = {0: 200, 1: 200, 2: 100, 3: 50, 4: 0}
_MIN_LEVEL = 1
_MAX_LEVEL = 4

# Food slots: the food itself, the growth item and the shrink item.
FOOD = 0
GROW_ITEM = 1
SHRINK_ITEM = 2


class Heading(Enum):
    """Direction the head moves on the next step."""

    DOWN = 0
    UP = 1
    LEFT = 2
    RIGHT = 3


class GamePhase(Enum):
    """Screen the game is on."""

    START = 0
    PLAY = 1
    END = 2


_STEP = {
    Heading.DOWN: (0, CELL),
    Heading.UP: (0, -CELL),
    Heading.LEFT: (-CELL, 0),
    Heading.RIGHT: (CELL, 0),
}


def level_speed(level):
    """Milliseconds between moves for a difficulty level (0 to 4)."""
    try:
        return _LEVEL_SPEED[level]
    except KeyError:
        raise ValueError(f"unknown level {level}") from None


class SnakeGame:
    """State of one snake session.

    ``segments[0]`` is the head; ``segments[1:length + 1]`` is the tail.
    Slots beyond the tail keep old positions, which a sudden growth
    brings back into the tail.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.phase = GamePhase.START
        self.level = 0
        self.speed = level_speed(0)
        self.heading = Heading.DOWN
        self.length = 1
        self.stage = 0
        self.foods_eaten = 0
        self.item_count = 0
        self.segments = [(0.0, 0.0)] * MAX_TAIL
        self.food = [(0, 0)] * 3
        self.last_move = 0

    @property
    def head(self):
        """Position of the head."""
        return self.segments[0]

    @property
    def score(self):
        """Points shown beside the field; kept across games."""
        return self.foods_eaten * POINTS_PER_FOOD

    @property
    def body(self):
        """Head followed by the drawn tail segments.

        Drawing stops at the first tail segment lying on the top row.
        """
        tail = []
        for segment in self.segments[1 : self.length + 1]:
            if segment[1] == 0:
                break
            tail.append(segment)
        return [self.head, *tail]

    def change_level(self, delta):
        """Raise or lower the difficulty, wrapping between 1 and 4."""
        self.level += delta
        if self.level > _MAX_LEVEL:
            self.level = _MIN_LEVEL
        elif self.level < _MIN_LEVEL:
            self.level = _MAX_LEVEL
        self.speed = level_speed(self.level)
        return self.level

    def start(self):
        """Clear the field, place food and begin play."""
        self.phase = GamePhase.PLAY
        self.segments = [(0.0, 0.0)] * MAX_TAIL
        self.food = [(0, 0)] * 3
        self._place(FOOD)
        self.stage = 0
        self.length = 0
        self.segments[0] = START_POSITION

    def steer(self, heading):
        """Set the heading for the following steps."""
        self.heading = Heading(heading)

    def tick(self, now):
        """Advance play to time ``now`` (ms); step when the delay has passed."""
        if self.phase is GamePhase.PLAY and self.last_move + self.speed <= now:
            self.step()
            self.last_move = now
        return self.phase

    def step(self):
        """Move the snake one cell and resolve what it runs into."""
        if self.length:
            self.segments[1 : self.length + 1] = self.segments[0 : self.length]
        dx, dy = _STEP[self.heading]
        x, y = self.segments[0]
        head = (x + dx, y + dy)
        self.segments[0] = head
        x, y = head

        if x >= FIELD_WIDTH or y + CELL >= FIELD_HEIGHT or x <= 0 or y <= 0:
            self.phase = GamePhase.END

        if head == self.food[FOOD]:
            self.length = min(self.length + 1, MAX_TAIL - 1)
            self.stage += 1
            self.foods_eaten += 1
            self._place(FOOD)
        if head == self.food[GROW_ITEM]:
            self.item_count = 0
            self.length = min(self.length + self.rng.randrange(20), MAX_TAIL - 1)
        if head == self.food[SHRINK_ITEM]:
            self.item_count = 0
            self.length = 0

        if any(self.segments[i] == head for i in range(1, self.length)):
            self.phase = GamePhase.END

        if self.stage > STAGE_LENGTH:
            self.stage = 0
            # The item draw only ever yields the growth item.
            self.item_count = GROW_ITEM
            self._place(self.item_count)
        return self.phase

    def return_to_intro(self):
        """Leave the game-over screen for the start screen."""
        if self.phase is GamePhase.END:
            self.phase = GamePhase.START
        return self.phase

    def _place(self, slot):
        for index in range(self.length + 1):
            x = (self.rng.randrange(22) + 1) * CELL
            y = (self.rng.randrange(22) + 1) * CELL
            seg_x, seg_y = self.segments[index]
            if seg_x != x and seg_y != y:
                self.food[slot] = (x, y)