"""
player_movement.py
------------------
Translates normalized input into player displacement.

Responsibilities
----------------
- Pick pointer (virtual joystick) input over keyboard when it is active.
- Normalize the direction so diagonals are not faster than axis moves.
- Scale by base speed, power multiplier and dash multiplier.
- Clamp the player so its full radius stays inside the playfield.
"""

import pygame

from src.core.runtime.game_settings import Display, Input


def resolve_direction(keyboard_move, pointer_move=None) -> pygame.Vector2:
    """
    Choose this frame's raw movement direction.

    Pointer input overrides keyboard when either of its components exceeds
    the deadzone; otherwise the keyboard vector is used.
    """
    if pointer_move is not None:
        px, py = pointer_move
        if abs(px) > Input.POINTER_DEADZONE or abs(py) > Input.POINTER_DEADZONE:
            return pygame.Vector2(px, py)
    if keyboard_move is None:
        return pygame.Vector2(0, 0)
    return pygame.Vector2(keyboard_move)


def update_movement(player, dt: float, keyboard_move, pointer_move=None) -> float:
    """
    Move the player for one frame.

    Returns:
        float: Magnitude of the raw input direction (0 when idle), used to
        gate trail particles.
    """
    direction = resolve_direction(keyboard_move, pointer_move)
    magnitude = direction.length()
    if magnitude > 0:
        direction /= magnitude

    speed = player.current_speed()
    player.vel.update(direction.x * speed, direction.y * speed)
    player.pos += player.vel * dt

    clamp_to_playfield(player)
    return magnitude


def clamp_to_playfield(player):
    r = player.radius
    player.pos.x = max(r, min(Display.WIDTH - r, player.pos.x))
    player.pos.y = max(r, min(Display.HEIGHT - r, player.pos.y))
