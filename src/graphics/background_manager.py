"""
background_manager.py
---------------------
Scrolling, twinkling star field drawn behind the playfield.

The star field is decorative and outlives game sessions: it is created
once with the world state and never reset on restart.
"""

import random

from src.core.runtime.game_settings import Display, Bounds


class Star:
    """Single background star that twinkles and scrolls down-field."""

    __slots__ = ("x", "y", "size", "brightness", "fade_speed", "fade_direction", "scroll_speed", "_rng")

    def __init__(self, rng=None):
        self._rng = rng or random
        r = self._rng
        self.x = r.random() * Display.WIDTH
        self.y = r.random() * Display.HEIGHT
        self.size = 0.5 + r.random() * 1.5
        self.brightness = r.random()
        self.fade_speed = 0.5 + r.random() * 1.5
        self.fade_direction = 1 if r.random() < 0.5 else -1
        # Slower than enemies for a parallax feel
        self.scroll_speed = 30 + r.random() * 50

    def update(self, dt: float):
        self.brightness += self.fade_direction * self.fade_speed * dt
        if self.brightness >= 1.0:
            self.brightness = 1.0
            self.fade_direction = -1
        elif self.brightness <= 0.0:
            self.brightness = 0.0
            self.fade_direction = 1

        self.y += self.scroll_speed * dt

        if self.y > Display.HEIGHT + Bounds.STAR_WRAP_MARGIN:
            self.y = -Bounds.STAR_WRAP_MARGIN
            self.x = self._rng.random() * Display.WIDTH


class BackgroundManager:
    """Owns the fixed-size, ordered star sequence."""

    def __init__(self, count: int = Display.STAR_COUNT, rng=None):
        self.stars = tuple(Star(rng) for _ in range(count))

    def update(self, dt: float):
        for star in self.stars:
            star.update(dt)

    def __len__(self):
        return len(self.stars)

    def __iter__(self):
        return iter(self.stars)
