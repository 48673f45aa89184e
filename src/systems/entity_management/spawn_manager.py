"""
spawn_manager.py
----------------
Time-driven enemy spawner.

Responsibilities
----------------
- Accrue spawn credit from the active phase's rate and the power spawn multiplier
- Spawn enemies while credit and the phase population cap allow
- Prune enemies that left the playfield
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Display, Bounds
from src.entities.enemies.enemy import Enemy


class SpawnManager:
    """
    Token-bucket spawner for the world's enemy list.

    spawn_accumulator lives on the world state so a restart resets it with
    every other counter. Credit is never discarded: while the cap is
    reached it keeps accruing and is spent once room frees up.
    """

    def __init__(self, state):
        self.state = state
        DebugLogger.init_entry("SpawnManager Initialized")

    # ===========================================================
    # Spawning
    # ===========================================================
    def update(self, dt: float) -> int:
        """
        Accrue credit for dt seconds and spawn as many enemies as allowed.

        Returns:
            int: Number of enemies spawned this call.
        """
        state = self.state
        phase = state.current_phase()
        power = state.power.enemy_multipliers(state.power_level)

        state.spawn_accumulator += phase.spawn_rate * power.spawn_rate * dt

        spawned = 0
        while state.spawn_accumulator >= 1.0 and len(state.enemies) < phase.max_enemies:
            state.spawn_accumulator -= 1.0
            self.spawn_one(phase)
            spawned += 1
        return spawned

    def spawn_one(self, phase) -> Enemy:
        """Spawn one enemy of a random allowed type along the top edge."""
        state = self.state
        type_tag = state.rng.choice(phase.allowed_types)
        x = state.rng.random() * Display.WIDTH
        enemy = Enemy(type_tag, x, Bounds.SPAWN_Y, phase.enemy_speed_multiplier, state)
        state.enemies.append(enemy)
        DebugLogger.trace(f"Spawned {type_tag} at x={x:.0f}", category="entity_spawn")
        return enemy

    # ===========================================================
    # Cleanup
    # ===========================================================
    def cleanup(self) -> int:
        """Drop dead and off-screen enemies. Returns the number removed."""
        before = len(self.state.enemies)
        self.state.enemies = [e for e in self.state.enemies if e.alive and not e.is_offscreen()]
        removed = before - len(self.state.enemies)
        if removed:
            DebugLogger.trace(f"Removed {removed} enemies", category="entity_cleanup")
        return removed
