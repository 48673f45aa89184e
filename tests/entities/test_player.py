"""
test_player.py
--------------
Regression tests for the Player entity.

Covers:
1. Movement normalization, pointer override and playfield clamping
2. Auto-fire cadence and power-scaled bullets
3. Dash gating, invincibility and cooldown
4. Hit handling: lives, invincibility window, game over exactly once
"""

import math

import pytest

from src.core.runtime.game_settings import Display
from src.core.runtime.game_state import GameMode
from src.core.services.event_manager import (
    PlayerDashEvent, PlayerHitEvent, GameOverEvent,
)
from src.entities.entity_types import BulletOwner
from src.entities.player.player_core import Player, DEFAULT_PLAYER_CONFIG


@pytest.fixture
def player(playing_world):
    return playing_world.player


def _record(world, event_type):
    received = []
    world.events.subscribe(event_type, received.append)
    return received


# ===========================================================
# Movement
# ===========================================================

class TestPlayerMovement:

    def test_spawns_bottom_center(self, player):
        assert player.pos.x == Display.WIDTH / 2
        assert player.pos.y == Display.HEIGHT - 80

    def test_axis_move_covers_base_speed(self, player):
        start = player.pos.copy()
        player.update(0.1, (1, 0))
        assert player.pos.distance_to(start) == pytest.approx(20.0)

    def test_diagonal_move_is_normalized(self, player):
        start = player.pos.copy()
        player.update(0.1, (1, 1))
        moved = player.pos - start
        assert moved.length() == pytest.approx(20.0)
        assert moved.x == pytest.approx(moved.y)

    def test_pointer_overrides_keyboard(self, player):
        start_x = player.pos.x
        player.update(0.1, (-1, 0), pointer_move=(0.5, 0.0))
        assert player.pos.x == pytest.approx(start_x + 20.0)

    def test_pointer_inside_deadzone_falls_back_to_keyboard(self, player):
        start_x = player.pos.x
        player.update(0.1, (-1, 0), pointer_move=(0.05, 0.05))
        assert player.pos.x == pytest.approx(start_x - 20.0)

    def test_clamped_inside_playfield(self, playing_world):
        player = Player(playing_world, x=5, y=Display.HEIGHT - 2)
        player.update(0.05, (-1, 1))
        assert player.pos.x == player.radius
        assert player.pos.y == Display.HEIGHT - player.radius

    def test_power_level_scales_move_speed(self, player):
        player.state.power_level = 2
        start = player.pos.copy()
        player.update(0.1, (0, -1))
        assert player.pos.distance_to(start) == pytest.approx(200 * 1.2 * 0.1)


# ===========================================================
# Shooting
# ===========================================================

class TestPlayerShooting:

    def test_fires_immediately_then_waits_interval(self, player):
        bullets = player.state.bullets
        player.update(0.01)
        assert len(bullets) == 1
        assert player.shot_timer == pytest.approx(0.2)

        player.update(0.1)
        assert len(bullets) == 1

        player.update(0.11)
        assert len(bullets) == 2

    def test_bullet_travels_up_at_base_speed(self, player):
        player.update(0.01)
        bullet = player.state.bullets[0]
        assert bullet.owner == BulletOwner.PLAYER
        assert bullet.vel.x == 0
        assert bullet.vel.y == pytest.approx(-300)

    def test_power_level_scales_fire_rate_and_bullet_speed(self, player):
        player.state.power_level = 2
        player.update(0.01)
        bullet = player.state.bullets[0]
        assert bullet.vel.y == pytest.approx(-300 * 1.2)
        assert player.shot_timer == pytest.approx(0.2 / 1.3)


# ===========================================================
# Dash
# ===========================================================

class TestPlayerDash:

    def test_dash_grants_speed_and_invincibility(self, player):
        dashes = _record(player.state, PlayerDashEvent)
        player.update(0.01, dash_requested=True)

        assert player.is_dashing
        assert player.is_invincible()
        assert player.current_speed() == pytest.approx(200 * 2.5)
        assert len(dashes) == 1
        assert player.state.stats.dashes == 1

    def test_dash_blocked_during_cooldown(self, player):
        assert player.dash()
        for _ in range(10):
            player.update(0.05)
        assert not player.is_dashing
        assert not player.dash()

    def test_dash_ends_after_duration(self, player):
        player.update(0.05, dash_requested=True)
        for _ in range(5):
            player.update(0.05)
        assert not player.is_dashing
        assert not player.is_invincible()

    def test_dash_available_again_after_cooldown(self, player):
        player.dash()
        for _ in range(41):
            player.update(0.05)
        assert player.dash_cooldown_timer <= 0
        assert player.dash()


# ===========================================================
# Damage
# ===========================================================

class TestPlayerHit:

    def test_hit_costs_a_life_and_starts_invincibility(self, player):
        world = player.state
        hits = _record(world, PlayerHitEvent)

        assert player.hit()
        assert world.lives == 2
        assert player.invincible_timer == pytest.approx(1.0)
        assert len(world.particles) == DEFAULT_PLAYER_CONFIG["combat"]["hit_particle_count"]
        assert hits[0].lives_left == 2
        assert world.stats.hits_taken == 1

    def test_hit_while_invincible_is_ignored(self, player):
        world = player.state
        player.hit()
        particles_after_first = len(world.particles)

        assert not player.hit()
        assert world.lives == 2
        assert len(world.particles) == particles_after_first

    def test_last_life_sets_game_over_once(self, player):
        world = player.state
        world.lives = 1
        overs = _record(world, GameOverEvent)

        assert player.hit()
        assert world.lives == 0
        assert world.mode is GameMode.GAME_OVER

        player.invincible_timer = 0
        assert not player.hit()
        assert world.lives == 0
        assert len(overs) == 1

    def test_lives_never_negative_under_repeated_hits(self, player):
        world = player.state
        for _ in range(10):
            player.invincible_timer = 0
            player.hit()
            assert world.lives >= 0
        assert world.lives == 0


# ===========================================================
# Misc
# ===========================================================

class TestPlayerConfig:

    def test_trail_particles_only_while_moving(self, player):
        player._trail_chance = 1.0
        player.update(0.01)
        assert len(player.state.particles) == 0

        player.update(0.01, (1, 0))
        assert len(player.state.particles) == 1

    def test_missing_config_section_raises(self, playing_world):
        cfg = {"core_attributes": DEFAULT_PLAYER_CONFIG["core_attributes"]}
        with pytest.raises(ValueError):
            Player(playing_world, cfg=cfg)

    def test_reset_position_recenters(self, player):
        player.pos.update(10, 10)
        player.reset_position()
        assert math.isclose(player.pos.x, Display.WIDTH / 2)
        assert math.isclose(player.pos.y, Display.HEIGHT - 80)
