"""
player_ability.py
-----------------
Handles the player's auto-fire and dash abilities.
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.services.event_manager import PlayerDashEvent
from src.entities.bullets.bullet import Bullet
from src.entities.entity_types import BulletOwner


# ===========================================================
# Shooting System
# ===========================================================
def update_shooting(player, dt: float):
    """Count down the shot timer and fire one forward bullet when it expires."""
    player.shot_timer = max(0.0, player.shot_timer - dt)
    if player.shot_timer > 0:
        return

    _fire_bullet(player)
    player.shot_timer = player.shot_interval / player.multipliers().fire_rate


def _fire_bullet(player):
    """Spawn a straight up-field bullet at power-scaled speed."""
    speed = Bullet.defaults()["player"]["speed"] * player.multipliers().bullet_speed
    player.state.bullets.append(
        Bullet(player.pos.x, player.pos.y, 0, -1, BulletOwner.PLAYER, speed)
    )
    DebugLogger.trace("Player bullet fired", category="combat")


# ===========================================================
# Dash System
# ===========================================================
def try_dash(player) -> bool:
    """
    Start a dash if not already dashing and the cooldown has expired.

    The dash grants invincibility for its duration.

    Returns:
        bool: True when a dash started.
    """
    if player.is_dashing or player.dash_cooldown_timer > 0:
        return False

    player.is_dashing = True
    player.dash_timer = player.dash_duration
    player.dash_cooldown_timer = player.dash_cooldown
    player.invincible_timer = max(player.invincible_timer, player.dash_duration)

    player.state.stats.add_dash()
    player.state.events.dispatch(PlayerDashEvent(position=(player.pos.x, player.pos.y)))
    DebugLogger.trace("Dash started", category="player")
    return True


def update_dash(player, dt: float):
    player.dash_cooldown_timer = max(0.0, player.dash_cooldown_timer - dt)
    if player.is_dashing:
        player.dash_timer = max(0.0, player.dash_timer - dt)
        if player.dash_timer <= 0:
            player.is_dashing = False
