"""Time-driven sprite motion: strip animation, orbits and a spiral path."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


def orbit_position(time_ms):
    """Screen position of the orbiting sprite at time ``time_ms``."""
    x = 2 * math.cos(math.pi * time_ms * 0.0001)
    y = math.sin(math.pi * time_ms * 0.0003)
    return (x * 100.0 + 300.0, y * 100.0 + 300.0)


@dataclass
class StripAnimator:
    """Steps a frame window along a horizontal strip of animation frames.

    The window moves one frame once more than ``interval`` ms have
    passed, and goes back to the start when the next frame would reach
    the end of the strip. Times are 32-bit millisecond counters.
    """

    start_time: int = 0
    frame_width: int = 32
    strip_width: int = 960
    height: int = 32
    interval: int = 12
    left: int = 0
    right: int = 0
    position: tuple = field(init=False)

    def __post_init__(self):
        self.position = orbit_position(self.start_time)

    @property
    def rect(self):
        """Current source rectangle (left, top, right, bottom)."""
        return (self.left, 0, self.right, self.height)

    def update(self, now):
        """Advance to time ``now``; return the source rectangle to draw."""
        if ((now - self.start_time) & 0xFFFFFFFF) > self.interval:
            self.left += self.frame_width
            if self.left + self.frame_width >= self.strip_width:
                self.left = 0
            self.right = self.left + self.frame_width
            self.start_time = now
        self.position = orbit_position(self.start_time)
        return self.rect


def frame_rect(time_ms, frame_width, frame_count, height, speed=120.0):
    """Source rectangle of the frame shown at ``time_ms``.

    A frame lasts ``speed`` ms and the animation loops over
    ``frame_count`` frames laid side by side.
    """
    if frame_count <= 0:
        raise ValueError("frame_count must be positive")
    if speed <= 0:
        raise ValueError("speed must be positive")
    index = int(time_ms / speed) % frame_count
    return (index * frame_width, 0, (index + 1) * frame_width, height)


@dataclass
class SpiralMover:
    """A sprite steering ever more gently, so it draws an opening spiral.

    Each step turns the heading towards its perpendicular (left or right
    by ``direction``), weighted against the growing ``radius``.
    """

    x: float = 400.0
    y: float = 200.0
    vx: float = 1.0
    vy: float = 0.0
    speed: float = 4.0
    radius: float = 0.0
    radius_step: float = 0.1
    direction: float = 1.0

    def step(self):
        """Move one frame; return the new position."""
        angle = math.acos(max(-1.0, min(1.0, self.vx)))
        if self.vy < 0:
            angle = -angle
        turn_x = -math.sin(angle) * self.direction
        turn_y = math.cos(angle) * self.direction
        vx = self.radius * self.vx + turn_x
        vy = self.radius * self.vy + turn_y
        length = math.hypot(vx, vy)
        if length > 0:
            vx, vy = vx / length, vy / length
        self.vx, self.vy = vx, vy
        self.x += vx * self.speed
        self.y += vy * self.speed
        self.radius += self.radius_step
        return (self.x, self.y)