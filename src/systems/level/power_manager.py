"""
power_manager.py
----------------
Progressive power system.

The power level is a non-negative integer that only grows during a run.
Each level adds a fixed fraction to player and enemy stat multipliers:

    multiplier = 1 + level * fraction

Enemies read the enemy multipliers once, when they are created.
"""

from dataclasses import dataclass

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Display
from src.core.services.config_manager import load_config
from src.core.services.event_manager import PowerUpEvent
from src.graphics.particles.particle_manager import ParticleEmitter


DEFAULT_POWER_CONFIG = {
    "player": {"move_speed": 0.10, "fire_rate": 0.15, "bullet_speed": 0.10},
    "enemy": {"hp": 0.30, "speed": 0.12, "spawn_rate": 0.15},
    "power_up": {
        "feedback_duration": 2.0,
        "burst_count": 50,
        "ring_count": 30,
        "burst_colors": [[255, 217, 90], [64, 224, 255], [255, 90, 242], [124, 255, 90]],
    },
}


@dataclass(frozen=True)
class PlayerMultipliers:
    move_speed: float = 1.0
    fire_rate: float = 1.0
    bullet_speed: float = 1.0


@dataclass(frozen=True)
class EnemyMultipliers:
    hp: float = 1.0
    speed: float = 1.0
    spawn_rate: float = 1.0


class PowerManager:
    """Derives stat multipliers from a power level and applies power-ups."""

    def __init__(self, config=None):
        cfg = config if config is not None else load_config("power.json", DEFAULT_POWER_CONFIG)
        self.player_rates = cfg["player"]
        self.enemy_rates = cfg["enemy"]
        self.power_up_cfg = cfg["power_up"]

    # ===========================================================
    # Multipliers
    # ===========================================================
    def player_multipliers(self, level: int) -> PlayerMultipliers:
        level = max(0, level)
        r = self.player_rates
        return PlayerMultipliers(
            move_speed=1 + level * r["move_speed"],
            fire_rate=1 + level * r["fire_rate"],
            bullet_speed=1 + level * r["bullet_speed"],
        )

    def enemy_multipliers(self, level: int) -> EnemyMultipliers:
        level = max(0, level)
        r = self.enemy_rates
        return EnemyMultipliers(
            hp=1 + level * r["hp"],
            speed=1 + level * r["speed"],
            spawn_rate=1 + level * r["spawn_rate"],
        )

    # ===========================================================
    # Power-Up
    # ===========================================================
    def trigger_power_up(self, state):
        """
        Increment the world's power level and play the feedback burst.

        Also used for scripted power-ups outside stage clears.
        """
        cfg = self.power_up_cfg
        state.power_level += 1
        state.power_up_timer = cfg["feedback_duration"]
        state.stats.set_power_level(state.power_level)

        center = (Display.WIDTH / 2, Display.HEIGHT / 2)
        colors = [tuple(c) for c in cfg["burst_colors"]]
        ParticleEmitter.burst(
            state.particles, center, colors, cfg["burst_count"],
            lifetime=1.0, size=4, speed_range=(100, 250), rng=state.rng,
        )
        ParticleEmitter.ring(
            state.particles, center, (255, 255, 255), cfg["ring_count"], rng=state.rng,
        )

        DebugLogger.action(f"Power up! Level {state.power_level}", category="power")
        state.events.dispatch(PowerUpEvent(power_level=state.power_level))

    @staticmethod
    def update_timer(state, dt: float):
        """Count down the visual-only power-up feedback timer."""
        if state.power_up_timer > 0:
            state.power_up_timer = max(0.0, state.power_up_timer - dt)


def scale_hit_points(base_hp: int, multiplier: float) -> int:
    """
    Scale hit points by a power multiplier, rounding half up.

    Result is never below 1 so every enemy starts alive.
    """
    return max(1, int(base_hp * multiplier + 0.5))
