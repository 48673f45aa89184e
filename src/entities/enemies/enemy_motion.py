"""
enemy_motion.py
---------------
Movement strategies for enemies, keyed by the "motion" name in enemies.json.

Each strategy is a plain function `motion(enemy, dt)` that moves the enemy
using its definition parameters and its own per-instance state
(elapsed time, spawn x, heading, turn timer). Adding a motion means adding
one function here and one entry to MOTIONS.
"""

import math


def move_straight(enemy, dt):
    """Constant descent."""
    enemy.vel.update(0, enemy.definition.params["speed_y"] * enemy.speed_multiplier)
    enemy.pos.y += enemy.vel.y * dt


def move_zigzag(enemy, dt):
    """Descent with a horizontal sine swing around the spawn column."""
    p = enemy.definition.params
    enemy.vel.update(0, p["speed_y"] * enemy.speed_multiplier)
    enemy.pos.y += enemy.vel.y * dt
    enemy.pos.x = enemy.start_x + math.sin(enemy.time * p["freq"]) * p["amp_x"]


def move_wave(enemy, dt):
    """Wider, slower sway than zigzag, starting at a random phase."""
    p = enemy.definition.params
    enemy.vel.update(0, p["speed_y"] * enemy.speed_multiplier)
    enemy.pos.y += enemy.vel.y * dt
    enemy.pos.x = enemy.start_x + math.sin(enemy.time * p["freq"] + enemy.phase_offset) * p["amp_x"]


def move_spiral(enemy, dt):
    """Orbit a descending center on a radius that grows over time."""
    p = enemy.definition.params
    enemy.center_y += p["speed_y"] * enemy.speed_multiplier * dt
    radius = p["spiral_growth"] * enemy.time
    angle = enemy.time * p["freq"] * math.pi
    enemy.pos.x = enemy.start_x + math.cos(angle) * radius
    enemy.pos.y = enemy.center_y + math.sin(angle) * radius


def move_homing(enemy, dt):
    """
    Pursue the player with a bounded turn rate.

    Every turn_interval seconds the heading rotates toward the bearing to
    the player by at most turn_angle radians along the shortest way.
    """
    p = enemy.definition.params
    enemy.turn_timer += dt
    if enemy.turn_timer >= p["turn_interval"]:
        enemy.turn_timer = 0.0
        player = enemy.state.player
        if player is not None:
            enemy.heading = steer_heading(
                enemy.heading,
                math.atan2(player.pos.y - enemy.pos.y, player.pos.x - enemy.pos.x),
                p["turn_angle"],
            )

    speed = p["speed"] * enemy.speed_multiplier
    enemy.vel.update(math.cos(enemy.heading) * speed, math.sin(enemy.heading) * speed)
    enemy.pos += enemy.vel * dt


def steer_heading(heading: float, target: float, max_turn: float) -> float:
    """Rotate `heading` toward `target` by at most `max_turn` radians."""
    delta = wrap_angle(target - heading)
    if delta == 0:
        return heading
    return heading + math.copysign(min(abs(delta), max_turn), delta)


def wrap_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi]."""
    while angle > math.pi:
        angle -= math.tau
    while angle < -math.pi:
        angle += math.tau
    return angle


MOTIONS = {
    "straight": move_straight,
    "zigzag": move_zigzag,
    "wave": move_wave,
    "spiral": move_spiral,
    "homing": move_homing,
}

# Definition params each motion reads
MOTION_PARAMS = {
    "straight": ("speed_y",),
    "zigzag": ("speed_y", "amp_x", "freq"),
    "wave": ("speed_y", "amp_x", "freq"),
    "spiral": ("speed_y", "spiral_growth", "freq"),
    "homing": ("speed", "turn_interval", "turn_angle"),
}
