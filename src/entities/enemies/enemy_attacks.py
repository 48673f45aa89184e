"""
enemy_attacks.py
----------------
Attack strategies for shooting enemies, keyed by the "attack" name in
enemies.json.

Each strategy is `attack(enemy, bullet_speed)` and is called when the
enemy's shot timer has run out. It returns True when the volley was
handled so the timer resets; aimed volleys return False when there is no
player or no bearing to it, and retry next frame.
"""

import math

from src.core.debug.debug_logger import DebugLogger
from src.entities.bullets.bullet import Bullet
from src.entities.entity_types import BulletOwner


DOWN = math.pi / 2


def _fire(enemy, angle, bullet_speed):
    enemy.state.bullets.append(Bullet(
        enemy.pos.x, enemy.pos.y,
        math.cos(angle), math.sin(angle),
        BulletOwner.ENEMY, bullet_speed,
    ))


def _bearing_to_player(enemy):
    """Angle toward the player, or None when there is no valid target."""
    player = enemy.state.player
    if player is None:
        return None
    dx = player.pos.x - enemy.pos.x
    dy = player.pos.y - enemy.pos.y
    if dx == 0 and dy == 0:
        return None
    return math.atan2(dy, dx)


def attack_aimed(enemy, bullet_speed):
    """Single shot at the player. Skipped without a player or at zero distance."""
    if enemy.state.player is None:
        return False
    angle = _bearing_to_player(enemy)
    if angle is None:
        return False
    _fire(enemy, angle, bullet_speed)
    return True


def attack_spread(enemy, bullet_speed):
    """Fan of bullets centered on the player bearing."""
    if enemy.state.player is None:
        return False
    p = enemy.definition.params
    count = p["spread_count"]
    step = p["spread_angle"]
    center = _bearing_to_player(enemy)
    if center is None:
        return False

    first = center - step * (count - 1) / 2
    for i in range(count):
        _fire(enemy, first + step * i, bullet_speed)
    return True


def attack_radial(enemy, bullet_speed):
    """Evenly spaced ring whose start angle rotates each volley."""
    p = enemy.definition.params
    count = p["radial_count"]
    for i in range(count):
        _fire(enemy, enemy.attack_angle + math.tau * i / count, bullet_speed)
    enemy.attack_angle = (enemy.attack_angle + p["radial_step"]) % math.tau
    return True


def attack_spiral(enemy, bullet_speed):
    """Two counter-rotating arms, one bullet each per tick."""
    step = enemy.definition.params["spiral_step"]
    enemy.attack_angle = (enemy.attack_angle + step) % math.tau
    _fire(enemy, DOWN + enemy.attack_angle, bullet_speed)
    _fire(enemy, DOWN - enemy.attack_angle, bullet_speed)
    return True


def update_attack(enemy, dt, bullet_speed):
    """Advance the shot timer and run the enemy's attack when it expires."""
    attack = ATTACKS.get(enemy.definition.attack)
    if attack is None:
        return

    enemy.shot_timer -= dt
    if enemy.shot_timer > 0:
        return

    if attack(enemy, bullet_speed):
        enemy.shot_timer = enemy.definition.params["shot_interval"]
        DebugLogger.trace(f"{enemy.type_tag} volley", category="combat")
    else:
        enemy.shot_timer = 0.0


ATTACKS = {
    "aimed": attack_aimed,
    "spread": attack_spread,
    "radial": attack_radial,
    "spiral": attack_spiral,
}

ATTACK_PARAMS = {
    "aimed": ("shot_interval",),
    "spread": ("shot_interval", "spread_count", "spread_angle"),
    "radial": ("shot_interval", "radial_count", "radial_step"),
    "spiral": ("shot_interval", "spiral_step"),
}
