"""
player_logic.py
---------------
Player damage response: lives, invincibility window and game over.
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_state import GameMode
from src.core.services.event_manager import PlayerHitEvent, GameOverEvent
from src.graphics.particles.particle_manager import ParticleEmitter


def damage_collision(player) -> bool:
    """
    Apply one hit to the player.

    Flow:
        - Skip while invincible (dash or post-hit window)
        - Lose a life, start the hit invincibility window
        - Emit the hit burst
        - Switch the world to GAME_OVER when lives run out

    Returns:
        bool: True when the hit was applied.
    """
    state = player.state
    if player.is_invincible() or state.lives <= 0:
        DebugLogger.trace("Player invincible - hit ignored", category="collision")
        return False

    state.lives -= 1
    state.stats.add_hit()
    player.invincible_timer = player.invincible_duration_on_hit

    ParticleEmitter.burst(
        state.particles, player.pos, player.color, player.hit_particle_count,
        lifetime=0.8, size=3, speed_range=(50, 150), rng=state.rng,
    )

    DebugLogger.action(f"Player hit, lives left: {state.lives}", category="player")
    state.events.dispatch(PlayerHitEvent(position=(player.pos.x, player.pos.y), lives_left=state.lives))

    if state.lives <= 0:
        on_death(player)
    return True


def on_death(player):
    """Switch the world to GAME_OVER. Runs once per session."""
    state = player.state
    state.lives = 0
    state.set_mode(GameMode.GAME_OVER)
    DebugLogger.state(f"Game over, final score {state.score}", category="player")
    state.events.dispatch(GameOverEvent(score=state.score))
