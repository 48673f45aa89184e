"""
player_core.py
--------------
Defines the Player entity core used to coordinate its components.
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Display, Bounds
from src.core.services.config_manager import load_config
from src.entities.base_entity import BaseEntity
from src.entities.entity_types import EntityCategory
from src.graphics.particles.particle_manager import ParticleEmitter
from .player_movement import update_movement
from . import player_ability
from .player_logic import damage_collision


DEFAULT_PLAYER_CONFIG = {
    "core_attributes": {
        "move_speed": 200,
        "radius": 10,
        "hit_radius": 6,
        "initial_lives": 3,
        "color": [64, 224, 255],
    },
    "combat": {
        "shot_interval": 0.2,
        "invincible_duration_on_hit": 1.0,
        "hit_particle_count": 20,
    },
    "dash": {
        "speed_multiplier": 2.5,
        "duration": 0.2,
        "cooldown": 2.0,
    },
    "trail": {
        "move_threshold": 0.1,
        "chance": 0.3,
        "lifetime": 0.5,
        "size": 2,
    },
}


def load_player_config() -> dict:
    return load_config("player.json", DEFAULT_PLAYER_CONFIG)


class Player(BaseEntity):
    """Represents the controllable player avatar."""

    def __init__(self, state, x=None, y=None, cfg=None):
        """
        Args:
            state: World state the player reads power from and writes
                bullets, particles and lives into.
            x, y: Spawn position (defaults to bottom-center).
            cfg: Player config dict (defaults to player.json).
        """
        cfg = cfg or load_player_config()
        self.cfg = cfg

        _REQUIRED_SECTIONS = ("core_attributes", "combat", "dash")
        missing = [s for s in _REQUIRED_SECTIONS if s not in cfg]
        if missing:
            DebugLogger.fail(f"player config missing required sections: {missing}", category="loading")
            raise ValueError(f"Invalid player config: missing {missing}")

        core = cfg["core_attributes"]
        combat = cfg["combat"]
        dash = cfg["dash"]
        trail = cfg.get("trail", DEFAULT_PLAYER_CONFIG["trail"])

        if x is None:
            x = Display.WIDTH / 2
        if y is None:
            y = Display.HEIGHT - Bounds.PLAYER_SPAWN_OFFSET_Y

        super().__init__(x, y, radius=core["radius"], category=EntityCategory.PLAYER)
        self.state = state

        # Core stats
        self.base_speed = core["move_speed"]
        self.hit_radius = core["hit_radius"]
        self.color = tuple(core["color"])

        # Combat
        self.shot_interval = combat["shot_interval"]
        self.invincible_duration_on_hit = combat["invincible_duration_on_hit"]
        self.hit_particle_count = combat["hit_particle_count"]

        # Dash
        self.dash_speed_multiplier = dash["speed_multiplier"]
        self.dash_duration = dash["duration"]
        self.dash_cooldown = dash["cooldown"]

        # Trail
        self._trail_threshold = trail["move_threshold"]
        self._trail_chance = trail["chance"]
        self._trail_lifetime = trail["lifetime"]
        self._trail_size = trail["size"]

        # Timers (all count down, clamped at zero)
        self.shot_timer = 0.0
        self.dash_timer = 0.0
        self.dash_cooldown_timer = 0.0
        self.invincible_timer = 0.0
        self.is_dashing = False

    # ===========================================================
    # Derived Stats
    # ===========================================================
    def multipliers(self):
        return self.state.power.player_multipliers(self.state.power_level)

    def current_speed(self) -> float:
        speed = self.base_speed * self.multipliers().move_speed
        if self.is_dashing:
            speed *= self.dash_speed_multiplier
        return speed

    def is_invincible(self) -> bool:
        return self.invincible_timer > 0

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self, dt: float, movement_input=(0.0, 0.0), dash_requested: bool = False,
               pointer_move=None):
        """
        Advance the player by dt seconds.

        Args:
            dt: Clamped frame delta.
            movement_input: Keyboard direction (x, y), each axis in [-1, 1].
            dash_requested: Rising-edge dash trigger for this frame.
            pointer_move: Virtual joystick vector; overrides the keyboard
                when active.
        """
        if dash_requested:
            player_ability.try_dash(self)

        magnitude = update_movement(self, dt, movement_input, pointer_move)

        self.invincible_timer = max(0.0, self.invincible_timer - dt)
        player_ability.update_dash(self, dt)
        player_ability.update_shooting(self, dt)

        if magnitude > self._trail_threshold and self.state.rng.random() < self._trail_chance:
            ParticleEmitter.trail(self.state.particles, self.pos, self.color,
                                  self._trail_lifetime, self._trail_size)

    def dash(self) -> bool:
        return player_ability.try_dash(self)

    def hit(self) -> bool:
        return damage_collision(self)

    def reset_position(self):
        self.pos.update(Display.WIDTH / 2, Display.HEIGHT - Bounds.PLAYER_SPAWN_OFFSET_Y)
        self.vel.update(0, 0)
