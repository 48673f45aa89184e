"""
enemy.py
--------
Data-driven enemy entity.

One class covers every variant: the type tag selects an EnemyDefinition,
whose motion and attack names pick strategy functions from MOTIONS and
ATTACKS. Hit points and speed are scaled by the power level once, at
construction; later power-ups only affect enemies spawned afterwards.
"""

import math

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Bounds
from src.core.services.event_manager import EnemyDestroyedEvent
from src.entities.base_entity import BaseEntity
from src.entities.entity_types import EntityCategory
from src.graphics.particles.particle_manager import ParticleEmitter
from src.systems.level.power_manager import scale_hit_points
from .enemy_definitions import get_definition
from .enemy_motion import MOTIONS
from .enemy_attacks import update_attack


DEATH_PARTICLE_COUNT = 15


class Enemy(BaseEntity):
    """Hostile entity spawned above the playfield."""

    def __init__(self, type_tag: str, x: float, y: float, speed_multiplier: float, state):
        """
        Args:
            type_tag: Key into the world's enemy definition table.
            x, y: Spawn position.
            speed_multiplier: Phase speed multiplier; the power speed
                multiplier is folded in here.
            state: World state (player target, bullets, particles, score).

        Raises:
            UnknownEnemyTypeError: type_tag is not in the table.
        """
        definition = get_definition(state.enemy_definitions, type_tag)
        super().__init__(x, y, radius=definition.radius, category=EntityCategory.ENEMY)

        power = state.power.enemy_multipliers(state.power_level)
        self.state = state
        self.definition = definition
        self.type_tag = type_tag
        self.color = definition.color
        self.score = definition.score
        self.speed_multiplier = speed_multiplier * power.speed
        self.hp = scale_hit_points(definition.hp, power.hp)
        self.max_hp = self.hp

        # Per-instance behavior state
        self.time = 0.0
        self.start_x = x
        self.center_y = y
        self.phase_offset = state.rng.random() * math.tau
        self.heading = math.pi / 2
        self.turn_timer = 0.0
        self.shot_timer = definition.params.get("shot_interval", 0.0)
        self.attack_angle = 0.0

        self._motion = MOTIONS[definition.motion]

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self, dt: float, bullet_speed: float):
        """Advance motion and, for shooters, the attack timer."""
        if not self.alive:
            return
        self.time += dt
        self._motion(self, dt)
        update_attack(self, dt, bullet_speed)

    # ===========================================================
    # Damage
    # ===========================================================
    def hit(self, damage: int = 1) -> bool:
        """
        Apply damage. Returns True when this call destroyed the enemy.

        Destruction happens once: score, burst, kill stat and event fire
        only on the transition to zero hit points.
        """
        if not self.alive:
            return False

        self.hp -= damage
        if self.hp > 0:
            return False

        self.hp = 0
        self.mark_dead()
        state = self.state
        state.add_score(self.score)
        state.stats.add_kill()
        ParticleEmitter.burst(state.particles, self.pos, self.color, DEATH_PARTICLE_COUNT, rng=state.rng)
        DebugLogger.action(f"{self.type_tag} destroyed (+{self.score})", category="combat")
        state.events.dispatch(EnemyDestroyedEvent(
            position=(self.pos.x, self.pos.y), enemy_type=self.type_tag, score=self.score,
        ))
        return True

    def is_offscreen(self, margin_x: float = Bounds.ENEMY_CLEANUP_MARGIN_X,
                     margin_y: float = Bounds.ENEMY_CLEANUP_MARGIN_Y) -> bool:
        return super().is_offscreen(margin_x, margin_y)
