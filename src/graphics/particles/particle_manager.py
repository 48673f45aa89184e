"""
particle_manager.py
-------------------
Lightweight visual particles and the burst helpers that emit them.

Usage:
    # One-shot radial burst (explosions, hits)
    ParticleEmitter.burst(state.particles, enemy.pos, color, count=15, rng=state.rng)

    # Evenly spaced ring (power-up feedback)
    ParticleEmitter.ring(state.particles, center, (255, 255, 255), count=30, rng=state.rng)

Particles have no gameplay effect; they only age, drift and die.
"""

import math
import random

from src.core.debug.debug_logger import DebugLogger


# Per-frame velocity retention at 60 FPS
PARTICLE_DRAG = 0.95
REFERENCE_FPS = 60


class Particle:
    """Single fading dot with a countdown lifetime."""

    __slots__ = ("x", "y", "vx", "vy", "color", "lifetime", "max_lifetime", "size")

    def __init__(self, x, y, color, lifetime, size, vx=0.0, vy=0.0):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.color = color
        self.lifetime = lifetime
        self.max_lifetime = lifetime
        self.size = size

    def update(self, dt: float):
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.lifetime -= dt

        drag = PARTICLE_DRAG ** (dt * REFERENCE_FPS)
        self.vx *= drag
        self.vy *= drag

    def is_dead(self) -> bool:
        return self.lifetime <= 0

    @property
    def alpha(self) -> float:
        """Remaining life fraction in [0, 1], used for fading."""
        if self.max_lifetime <= 0:
            return 0.0
        return max(0.0, min(1.0, self.lifetime / self.max_lifetime))


class ParticleEmitter:
    """Stateless helpers that append particles to a world's particle list."""

    @staticmethod
    def burst(particles, position, color, count, lifetime=0.6, size=None,
              speed_range=(30, 110), rng=None):
        """
        Emit `count` particles at random angles.

        Args:
            particles: Target list (the world's particle collection).
            position: (x, y) origin.
            color: RGB tuple, or a sequence of RGB tuples to pick from.
            count: Exact number of particles appended.
            lifetime: Seconds each particle lives.
            size: Fixed size, or None for a random 2-4 px dot.
            speed_range: (min, max) initial speed in px/s.
            rng: random.Random-like source.
        """
        rng = rng or random
        x, y = position[0], position[1]
        palette = color if color and isinstance(color[0], (tuple, list)) else None
        lo, hi = speed_range

        for _ in range(count):
            angle = rng.random() * math.tau
            speed = lo + rng.random() * (hi - lo)
            particles.append(Particle(
                x, y,
                tuple(rng.choice(palette)) if palette else color,
                lifetime,
                size if size is not None else 2 + rng.random() * 2,
                math.cos(angle) * speed,
                math.sin(angle) * speed,
            ))

        DebugLogger.trace(f"Burst x{count} at ({x:.0f}, {y:.0f})", category="particle")

    @staticmethod
    def ring(particles, position, color, count, lifetime=0.8, size=3,
             speed_range=(200, 300), rng=None):
        """Emit `count` particles at evenly spaced angles."""
        rng = rng or random
        x, y = position[0], position[1]
        lo, hi = speed_range

        for i in range(count):
            angle = math.tau * i / count
            speed = lo + rng.random() * (hi - lo)
            particles.append(Particle(
                x, y, color, lifetime, size,
                math.cos(angle) * speed,
                math.sin(angle) * speed,
            ))

    @staticmethod
    def trail(particles, position, color, lifetime=0.5, size=2):
        """Single motionless trail dot."""
        particles.append(Particle(position[0], position[1], color, lifetime, size))
