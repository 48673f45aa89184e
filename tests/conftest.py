"""
conftest.py
-----------
Shared pytest configuration and fixtures for Orbit-Bloom tests.

Contains:
- Headless pygame setup (real math types, no window)
- A fresh, seeded world per test
- Small builders for in-memory stage schedules
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random

import pytest

from src.core.debug.debug_logger import LoggerConfig
from src.core.runtime.game_state import GameState, GameMode
from src.entities.player.player_core import Player
from src.systems.level.stage_loader import StageLoader


# ===========================================================
# Logging
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep test output clean."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Stage Builders
# ===========================================================

def make_phase(start, end, rate=1.0, cap=10, types=("basic",), speed=1.0, bullet_speed=150):
    return {
        "startTime": start, "endTime": end,
        "spawnRate": rate, "maxEnemies": cap,
        "allowedTypes": list(types),
        "enemySpeedMultiplier": speed, "bulletSpeed": bullet_speed,
    }


def make_stages(*stages):
    """Build a stage tuple from (duration, [phase dicts]) pairs."""
    return StageLoader.load({"stages": [
        {"duration": duration, "phases": phases} for duration, phases in stages
    ]})


@pytest.fixture
def quiet_stages():
    """One long stage that never spawns."""
    return make_stages((60, [make_phase(0, 60, rate=0.0, cap=0)]))


# ===========================================================
# World Fixtures
# ===========================================================

@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def world(rng, quiet_stages):
    """Fresh world in Title mode with no spawning."""
    return GameState(stages=quiet_stages, rng=rng, star_count=8)


@pytest.fixture
def playing_world(world):
    """World in Playing mode with a player at bottom-center."""
    world.player = Player(world)
    world.mode = GameMode.PLAYING
    return world


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks multi-frame scene tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
