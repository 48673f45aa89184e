"""
base_entity.py
--------------
Foundational class for the simulated entities (Player, Enemy, Bullet).

Coordinate System
-----------------
All entities use center-based playfield-logical coordinates:
- self.pos is the entity's physical center
- self.radius is its collision circle
- Display scaling is the renderer's concern, never the entity's
"""

import pygame

from src.core.runtime.game_settings import Display
from src.entities.entity_state import LifecycleState


class BaseEntity:
    """
    Base class for circular playfield entities.

    Subclassed by Player, Enemy and Bullet. Provides position/velocity
    storage, the circle-overlap test and the off-screen test.
    """

    __slots__ = ("pos", "vel", "radius", "death_state", "category")

    def __init__(self, x: float, y: float, radius: float, vel=(0, 0), category=None):
        self.pos = pygame.Vector2(x, y)
        self.vel = pygame.Vector2(vel)
        self.radius = radius
        self.death_state = LifecycleState.ALIVE
        self.category = category

    # ===========================================================
    # Convenience Accessors
    # ===========================================================
    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    @property
    def alive(self) -> bool:
        return self.death_state == LifecycleState.ALIVE

    def mark_dead(self):
        self.death_state = LifecycleState.DEAD

    # ===========================================================
    # Geometry
    # ===========================================================
    def distance_to(self, other: "BaseEntity") -> float:
        return self.pos.distance_to(other.pos)

    def overlaps(self, other: "BaseEntity", other_radius: float = None) -> bool:
        """
        Circle-circle overlap: distance between centers < sum of radii.

        Args:
            other: Entity to test against.
            other_radius: Override for the other entity's radius
                (the player collides with its smaller hit radius).
        """
        r = self.radius + (other.radius if other_radius is None else other_radius)
        return self.pos.distance_squared_to(other.pos) < r * r

    def is_offscreen(self, margin_x: float, margin_y: float = None) -> bool:
        """True once the center is beyond the margin outside any playfield edge."""
        if margin_y is None:
            margin_y = margin_x
        return (self.pos.x < -margin_x or self.pos.x > Display.WIDTH + margin_x or
                self.pos.y < -margin_y or self.pos.y > Display.HEIGHT + margin_y)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} pos=({self.pos.x:.1f}, {self.pos.y:.1f}) r={self.radius}>"
