"""Particle fountain drawn straight into a pixel buffer."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
PARTICLE_COUNT = 4000
EMITTER_STEP = 4.0


def xrgb(r, g, b):
    """Opaque 32-bit ARGB colour; each channel keeps its low eight bits."""
    return 0xFF000000 | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


@dataclass
class Particle:
    """Position, velocity, acceleration and colour of one particle."""

    px: float = 0.0
    py: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    ax: float = 0.0
    ay: float = 0.0
    color: int = 0


class ParticleSystem:
    """A fixed set of particles thrown out from a movable emitter.

    A particle that leaves the screen is thrown out again from the
    emitter's current position.
    """

    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT,
                 count=PARTICLE_COUNT, rng=None):
        if width <= 0 or height <= 0:
            raise ValueError("the screen must have a positive size")
        if count < 0:
            raise ValueError("count must not be negative")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.emitter_x = width / 2.0
        self.emitter_y = height / 2.0
        self.particles = [Particle() for _ in range(count)]
        for index in range(count):
            self.respawn(index)

    def respawn(self, index):
        """Throw particle ``index`` out again from the emitter; return it."""
        rand = self.rng.randrange
        angle = rand(10000) * 2 * math.pi * 0.0001
        offset = rand(3000) * 0.01
        speed = (3000 + rand(30000)) * 0.001
        cos_a, sin_a = math.cos(angle), math.sin(angle)

        particle = self.particles[index]
        particle.ax = -speed * cos_a * 0.01
        particle.ay = -speed * sin_a * 0.01
        particle.vx = speed * cos_a
        particle.vy = speed * sin_a
        particle.px = self.emitter_x + offset * cos_a
        particle.py = self.emitter_y + offset * sin_a
        particle.color = xrgb(100 + rand(156), 100 + rand(156), 100 + rand(256))
        return particle

    def move_emitter(self, dx, dy):
        """Shift the emitter by (dx, dy); return its new position."""
        self.emitter_x += dx
        self.emitter_y += dy
        return (self.emitter_x, self.emitter_y)

    def update(self):
        """Advance every particle one frame, respawning those that left."""
        for index, particle in enumerate(self.particles):
            particle.vx += particle.ax
            particle.vy += particle.ay
            particle.px += particle.vx
            particle.py += particle.vy
            if (particle.px <= 0 or particle.px >= self.width
                    or particle.py <= 0 or particle.py >= self.height):
                self.respawn(index)

    def plot(self):
        """Pixels to set, as a mapping of (x, y) to colour.

        Particles on the screen border are left out; where two land on
        the same pixel the later one wins.
        """
        pixels = {}
        for particle in self.particles:
            x, y = int(particle.px), int(particle.py)
            if 0 < x < self.width and 0 < y < self.height:
                pixels[(x, y)] = particle.color
        return pixels