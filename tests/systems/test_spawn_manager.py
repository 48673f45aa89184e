"""
test_spawn_manager.py
---------------------
Tests for the token-bucket enemy spawner.
"""

import math
import random

import pytest

from conftest import make_phase, make_stages
from src.core.runtime.game_settings import Display
from src.core.runtime.game_state import GameState
from src.systems.entity_management.spawn_manager import SpawnManager


def _world(rate, cap, types=("basic",), speed=1.0, seed=7):
    stages = make_stages((600, [make_phase(0, 600, rate=rate, cap=cap, types=types, speed=speed)]))
    return GameState(stages=stages, rng=random.Random(seed), star_count=0)


class TestTokenBucket:

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_spawn_count_bounded_by_rate_times_time(self, seed):
        rate = 2.0
        world = _world(rate, cap=1000, seed=seed)
        spawner = SpawnManager(world)
        frames = random.Random(seed * 31)

        total_time = 0.0
        for _ in range(400):
            dt = frames.uniform(0.001, 0.05)
            total_time += dt
            spawner.update(dt)

        expected = rate * total_time
        assert len(world.enemies) <= expected + 1e-6
        assert len(world.enemies) >= math.floor(expected - 1e-9)
        assert 0.0 <= world.spawn_accumulator < 1.0 + 1e-9

    def test_cap_limits_population_and_keeps_credit(self):
        world = _world(rate=100.0, cap=3)
        spawner = SpawnManager(world)

        assert spawner.update(1.0) == 3
        assert len(world.enemies) == 3
        assert world.spawn_accumulator == pytest.approx(97.0)

        world.enemies.pop()
        assert spawner.update(0.0) == 1
        assert len(world.enemies) == 3

    def test_zero_cap_never_spawns(self):
        world = _world(rate=10.0, cap=0)
        assert SpawnManager(world).update(1.0) == 0

    def test_power_level_scales_spawn_rate(self):
        world = _world(rate=1.0, cap=10)
        world.power_level = 2
        SpawnManager(world).update(1.0)
        assert len(world.enemies) == 1
        assert world.spawn_accumulator == pytest.approx(0.3)


class TestSpawnPlacement:

    def test_spawns_allowed_types_on_top_margin(self):
        types = ("basic", "zigzag", "homing")
        world = _world(rate=50.0, cap=50, types=types)
        SpawnManager(world).update(1.0)

        assert len(world.enemies) == 50
        for enemy in world.enemies:
            assert enemy.type_tag in types
            assert 0 <= enemy.start_x < Display.WIDTH
            assert enemy.pos.y == -20

    def test_phase_speed_multiplier_applied(self):
        world = _world(rate=1.0, cap=5, speed=1.5)
        SpawnManager(world).update(1.0)
        assert world.enemies[0].speed_multiplier == pytest.approx(1.5)

    def test_cleanup_drops_offscreen_enemies(self):
        world = _world(rate=2.0, cap=5)
        spawner = SpawnManager(world)
        spawner.update(1.0)
        world.enemies[0].pos.y = Display.HEIGHT + 100

        assert spawner.cleanup() == 1
        assert len(world.enemies) == 1
