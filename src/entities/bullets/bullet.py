"""
bullet.py
---------
Defines the ballistic Bullet shared by the player and enemies.

Responsibilities
----------------
- Hold an immutable owner tag deciding which side the bullet can damage.
- Move in a straight line at a velocity fixed at construction.
- Report when it has left the playfield so the driver can prune it.
"""

from src.core.runtime.game_settings import Bounds
from src.core.services.config_manager import load_config
from src.entities.base_entity import BaseEntity
from src.entities.entity_types import BulletOwner, EntityCategory


DEFAULT_BULLET_CONFIG = {
    "player": {"speed": 300, "radius": 3, "color": [64, 224, 255]},
    "enemy": {"fallback_speed": 150, "radius": 3, "color": [255, 90, 90]},
}


class Bullet(BaseEntity):
    """Straight-line projectile with an owner tag."""

    __slots__ = ("_owner", "color")

    _cached_defaults = None

    @classmethod
    def defaults(cls) -> dict:
        if cls._cached_defaults is None:
            cls._cached_defaults = load_config("bullets.json", DEFAULT_BULLET_CONFIG)
        return cls._cached_defaults

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, x, y, dir_x, dir_y, owner, speed=None):
        """
        Args:
            x, y: Spawn position.
            dir_x, dir_y: Unit direction of travel.
            owner: BulletOwner.PLAYER or BulletOwner.ENEMY.
            speed: Explicit speed. Player bullets default to the configured
                player speed, enemy bullets to the configured fallback.
        """
        if owner not in BulletOwner.ALL:
            raise ValueError(f"Unknown bullet owner: {owner!r}")

        params = self.defaults()[owner]
        if not speed:
            speed = params["speed"] if owner == BulletOwner.PLAYER else params["fallback_speed"]

        super().__init__(
            x, y,
            radius=params["radius"],
            vel=(dir_x * speed, dir_y * speed),
            category=EntityCategory.PROJECTILE,
        )
        self._owner = owner
        self.color = tuple(params["color"])

    @property
    def owner(self) -> str:
        return self._owner

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self, dt: float):
        self.pos.x += self.vel.x * dt
        self.pos.y += self.vel.y * dt

    def is_offscreen(self, margin_x: float = Bounds.BULLET_CLEANUP_MARGIN, margin_y: float = None) -> bool:
        return super().is_offscreen(margin_x, margin_y)
