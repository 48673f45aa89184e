"""
game_state.py
-------------
The single mutable world-state aggregate for a game session.

Every subsystem receives this object explicitly; nothing else keeps a
private copy of the entity collections, so tests can build a fresh world
per case.
"""

import random
from enum import Enum
from typing import List, Optional

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.session_stats import SessionStats
from src.core.services.event_manager import EventManager
from src.core.services.input_manager import InputSnapshot
from src.entities.enemies.enemy_definitions import load_enemy_definitions
from src.graphics.background_manager import BackgroundManager
from src.systems.level.power_manager import PowerManager
from src.systems.level.stage_loader import Stage, StageLoader, get_current_phase


class GameMode(Enum):
    """Controls which subsystems run each frame."""
    TITLE = "title"
    PLAYING = "playing"
    STAGE_CLEAR = "stage_clear"
    GAME_OVER = "game_over"


DEFAULT_INITIAL_LIVES = 3


class GameState:
    """Authoritative world state: mode, counters, timers and entity collections."""

    def __init__(self, stages=None, initial_lives: int = DEFAULT_INITIAL_LIVES,
                 rng: Optional[random.Random] = None, events: Optional[EventManager] = None,
                 star_count: Optional[int] = None, enemy_definitions=None,
                 power: Optional[PowerManager] = None):
        """
        Args:
            stages: Pre-loaded stage tuple, or None for the bundled schedule.
            initial_lives: Lives granted on every game start.
            rng: Random source shared by all subsystems (unseeded by default).
            events: Event bus; a fresh one is created when omitted.
            star_count: Size of the decorative star field.
            enemy_definitions: Enemy type table, or None for enemies.json.
            power: Power multiplier source, or None for power.json.
        """
        self.rng = rng or random.Random()
        self.events = events or EventManager()
        self.stats = SessionStats()

        self.enemy_definitions = (enemy_definitions if enemy_definitions is not None
                                  else load_enemy_definitions())
        self.power = power or PowerManager()
        self.stages: tuple = (tuple(stages) if stages is not None
                              else StageLoader.load(known_types=self.enemy_definitions))
        if not self.stages:
            raise ValueError("GameState requires at least one stage")
        self.initial_lives = initial_lives

        # Mode & counters
        self.mode = GameMode.TITLE
        self.score = 0
        self.lives = initial_lives
        self.stage_index = 0
        self.elapsed_time = 0.0
        self.time_left = self.stages[0].duration
        self.power_level = 0
        self.power_up_timer = 0.0
        self.spawn_accumulator = 0.0

        # Entities
        self.player = None
        self.enemies: List = []
        self.bullets: List = []
        self.particles: List = []
        bg_kwargs = {"rng": self.rng}
        if star_count is not None:
            bg_kwargs["count"] = star_count
        self.background = BackgroundManager(**bg_kwargs)

        # Latest normalized input, written by the input collaborator
        self.input = InputSnapshot()

    # ===========================================================
    # Derived Accessors
    # ===========================================================
    @property
    def stars(self):
        return self.background.stars

    @property
    def current_stage(self) -> Stage:
        return self.stages[self.stage_index]

    def current_phase(self):
        return get_current_phase(self.current_stage, self.elapsed_time)

    @property
    def is_playing(self) -> bool:
        return self.mode is GameMode.PLAYING

    # ===========================================================
    # Mutators
    # ===========================================================
    def add_score(self, amount: int):
        if amount <= 0:
            return
        self.score += amount
        self.stats.add_score(amount)

    def set_mode(self, mode: GameMode):
        if mode is self.mode:
            return
        DebugLogger.state(f"Mode {self.mode.name} -> {mode.name}", category="game_state")
        self.mode = mode

    def reset_session(self):
        """Reset counters for a full restart. Stars and high score persist."""
        self.score = 0
        self.lives = self.initial_lives
        self.stage_index = 0
        self.elapsed_time = 0.0
        self.time_left = self.stages[0].duration
        self.power_level = 0
        self.power_up_timer = 0.0
        self.spawn_accumulator = 0.0
        self.stats.reset()
        self.clear_entities()

    def clear_entities(self, keep_player: bool = False):
        """Discard enemies, bullets and particles (and the player unless kept)."""
        self.enemies = []
        self.bullets = []
        self.particles = []
        if not keep_player:
            self.player = None

    def snapshot(self) -> dict:
        """Read-only summary for UI collaborators."""
        return {
            "mode": self.mode.value,
            "score": self.score,
            "lives": self.lives,
            "stage_index": self.stage_index,
            "elapsed_time": self.elapsed_time,
            "time_left": max(0.0, self.time_left),
            "power_level": self.power_level,
            "enemies": len(self.enemies),
            "bullets": len(self.bullets),
            "particles": len(self.particles),
        }
