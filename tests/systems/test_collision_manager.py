"""
test_collision_manager.py
-------------------------
Tests for the three collision passes.
"""

import pytest

from src.entities.bullets.bullet import Bullet
from src.entities.enemies import Enemy
from src.entities.entity_types import BulletOwner
from src.systems.combat.collision_manager import CollisionManager


def _player_bullet(x, y):
    return Bullet(x, y, 0, -1, BulletOwner.PLAYER)


def _enemy_bullet(x, y):
    return Bullet(x, y, 0, 1, BulletOwner.ENEMY, 150)


class TestPlayerBulletsVsEnemies:

    def test_overlap_destroys_enemy_and_bullet(self, playing_world):
        playing_world.bullets.append(_player_bullet(100, 100))
        playing_world.enemies.append(Enemy("basic", 102, 100, 1.0, playing_world))

        CollisionManager(playing_world).detect()

        assert playing_world.bullets == []
        assert playing_world.enemies == []
        assert playing_world.score == 10

    def test_no_overlap_leaves_both(self, playing_world):
        playing_world.bullets.append(_player_bullet(100, 100))
        playing_world.enemies.append(Enemy("basic", 120, 100, 1.0, playing_world))

        CollisionManager(playing_world).detect()

        assert len(playing_world.bullets) == 1
        assert len(playing_world.enemies) == 1

    def test_bullet_harms_at_most_one_enemy(self, playing_world):
        playing_world.bullets.append(_player_bullet(100, 100))
        playing_world.enemies.extend([
            Enemy("basic", 101, 100, 1.0, playing_world),
            Enemy("basic", 99, 100, 1.0, playing_world),
        ])

        CollisionManager(playing_world).detect()

        assert playing_world.bullets == []
        assert len(playing_world.enemies) == 1
        assert playing_world.score == 10

    def test_surviving_enemy_stays(self, playing_world):
        enemy = Enemy("shooter", 100, 100, 1.0, playing_world)
        playing_world.enemies.append(enemy)
        playing_world.bullets.append(_player_bullet(100, 100))

        CollisionManager(playing_world).detect()

        assert playing_world.enemies == [enemy]
        assert enemy.hp == 1
        assert playing_world.score == 0

    def test_enemy_bullets_ignore_enemies(self, playing_world):
        playing_world.bullets.append(_enemy_bullet(100, 100))
        playing_world.enemies.append(Enemy("basic", 100, 100, 1.0, playing_world))

        CollisionManager(playing_world).detect()

        assert len(playing_world.bullets) == 1
        assert len(playing_world.enemies) == 1


class TestEnemyBulletsVsPlayer:

    def test_hit_uses_player_hit_radius(self, playing_world):
        player = playing_world.player
        near = _enemy_bullet(player.pos.x + 8, player.pos.y)
        far = _enemy_bullet(player.pos.x - 10, player.pos.y)
        playing_world.bullets.extend([near, far])

        CollisionManager(playing_world).detect()

        assert playing_world.bullets == [far]
        assert playing_world.lives == 2

    def test_player_bullets_ignore_player(self, playing_world):
        player = playing_world.player
        playing_world.bullets.append(_player_bullet(player.pos.x, player.pos.y))

        CollisionManager(playing_world).detect()

        assert len(playing_world.bullets) == 1
        assert playing_world.lives == 3

    def test_second_bullet_same_frame_blocked_by_invincibility(self, playing_world):
        player = playing_world.player
        playing_world.bullets.extend([
            _enemy_bullet(player.pos.x, player.pos.y),
            _enemy_bullet(player.pos.x + 1, player.pos.y),
        ])

        CollisionManager(playing_world).detect()

        assert playing_world.lives == 2
        assert playing_world.bullets == []


class TestEnemiesVsPlayer:

    def test_single_hit_per_frame(self, playing_world):
        player = playing_world.player
        playing_world.enemies.extend([
            Enemy("basic", player.pos.x, player.pos.y, 1.0, playing_world),
            Enemy("basic", player.pos.x + 2, player.pos.y, 1.0, playing_world),
        ])

        CollisionManager(playing_world).detect()

        assert playing_world.lives == 2
        assert len(playing_world.enemies) == 2

    def test_skipped_while_invincible(self, playing_world):
        player = playing_world.player
        player.invincible_timer = 0.5
        playing_world.enemies.append(Enemy("basic", player.pos.x, player.pos.y, 1.0, playing_world))

        CollisionManager(playing_world).detect()

        assert playing_world.lives == 3


class TestWithoutPlayer:

    def test_missing_player_is_a_no_op(self, world):
        world.bullets.append(_enemy_bullet(100, 100))
        world.enemies.append(Enemy("basic", 100, 100, 1.0, world))

        CollisionManager(world).detect()

        assert len(world.bullets) == 1
        assert len(world.enemies) == 1

    def test_player_bullets_still_resolve(self, world):
        world.bullets.append(_player_bullet(100, 100))
        world.enemies.append(Enemy("basic", 100, 100, 1.0, world))

        CollisionManager(world).detect()

        assert world.enemies == []
        assert world.score == pytest.approx(10)
