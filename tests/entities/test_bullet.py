"""
test_bullet.py
--------------
Tests for the ballistic Bullet and the shared circle-overlap geometry.
"""

import pytest

from src.core.runtime.game_settings import Display
from src.entities.base_entity import BaseEntity
from src.entities.bullets.bullet import Bullet
from src.entities.entity_types import BulletOwner


class TestBullet:

    def test_player_bullet_defaults_to_configured_speed(self):
        bullet = Bullet(10, 10, 0, -1, BulletOwner.PLAYER)
        assert bullet.vel.y == pytest.approx(-300)

    def test_enemy_bullet_uses_supplied_speed(self):
        bullet = Bullet(10, 10, 1, 0, BulletOwner.ENEMY, 220)
        assert bullet.vel.x == pytest.approx(220)

    def test_enemy_bullet_falls_back_without_speed(self):
        bullet = Bullet(10, 10, 0, 1, BulletOwner.ENEMY)
        assert bullet.vel.y == pytest.approx(150)

    def test_unknown_owner_rejected(self):
        with pytest.raises(ValueError):
            Bullet(0, 0, 0, 1, "neutral")

    def test_owner_is_read_only(self):
        bullet = Bullet(0, 0, 0, 1, BulletOwner.ENEMY)
        with pytest.raises(AttributeError):
            bullet.owner = BulletOwner.PLAYER

    def test_moves_with_constant_velocity(self):
        bullet = Bullet(100, 100, 0, 1, BulletOwner.ENEMY, 100)
        bullet.update(0.5)
        bullet.update(0.5)
        assert bullet.pos.y == pytest.approx(200)

    def test_offscreen_after_margin(self):
        bullet = Bullet(100, -5, 0, -1, BulletOwner.PLAYER)
        assert not bullet.is_offscreen()
        bullet.pos.y = -11
        assert bullet.is_offscreen()
        bullet.pos.update(Display.WIDTH + 11, 100)
        assert bullet.is_offscreen()


class TestCircleOverlap:

    def test_overlap_when_distance_below_radius_sum(self):
        bullet = BaseEntity(100, 100, radius=3)
        enemy = BaseEntity(102, 100, radius=8)
        assert bullet.overlaps(enemy)
        assert enemy.overlaps(bullet)

    def test_no_overlap_when_far(self):
        bullet = BaseEntity(100, 100, radius=3)
        enemy = BaseEntity(120, 100, radius=8)
        assert not bullet.overlaps(enemy)

    def test_touching_circles_do_not_overlap(self):
        a = BaseEntity(0, 0, radius=5)
        b = BaseEntity(10, 0, radius=5)
        assert not a.overlaps(b)

    def test_radius_override(self):
        a = BaseEntity(0, 0, radius=3)
        b = BaseEntity(12, 0, radius=10)
        assert a.overlaps(b)
        assert not a.overlaps(b, other_radius=6)
