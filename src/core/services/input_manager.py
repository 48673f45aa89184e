"""
input_manager.py
----------------
Input collaborator: turns raw pygame events into a normalized snapshot.

Provides:
- Keyboard movement from a held-key set (WASD / arrows)
- Edge-triggered dash and start requests
- Pointer/touch virtual joystick, dash button and flick-to-dash gesture
- One immutable InputSnapshot per frame; the simulation never sees events
"""

import math
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Display, Input


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_left": [pygame.K_LEFT, pygame.K_a],
    "move_right": [pygame.K_RIGHT, pygame.K_d],
    "move_up": [pygame.K_UP, pygame.K_w],
    "move_down": [pygame.K_DOWN, pygame.K_s],
    "dash": [pygame.K_LSHIFT, pygame.K_RSHIFT, pygame.K_SPACE],
}


@dataclass(frozen=True)
class InputSnapshot:
    """
    Normalized input for one simulation frame.

    move: keyboard direction, each axis in [-1, 1] (not yet normalized).
    pointer_move: virtual joystick vector with magnitude <= 1, or None.
    dash_requested / start_requested: rising edges since the last snapshot.
    pointer_pos: last pointer position in playfield coordinates, or None.
    """
    move: Tuple[float, float] = (0.0, 0.0)
    pointer_move: Optional[Tuple[float, float]] = None
    dash_requested: bool = False
    start_requested: bool = False
    pointer_pos: Optional[Tuple[float, float]] = None


class PointerGesture:
    """State of one active press/touch."""

    __slots__ = ("start", "current", "start_time", "drives_joystick")

    def __init__(self, pos, now, drives_joystick):
        self.start = pygame.Vector2(pos)
        self.current = pygame.Vector2(pos)
        self.start_time = now
        self.drives_joystick = drives_joystick

    def joystick_vector(self) -> Tuple[float, float]:
        """Displacement clamped to the joystick range, scaled to magnitude <= 1."""
        delta = self.current - self.start
        max_dist = Input.JOYSTICK_MAX_DISTANCE
        if delta.length_squared() > max_dist * max_dist:
            delta.scale_to_length(max_dist)
        return delta.x / max_dist, delta.y / max_dist

    def is_flick(self, now) -> bool:
        travelled = self.current.distance_to(self.start)
        return travelled > Input.FLICK_DISTANCE and (now - self.start_time) < Input.FLICK_TIME


class InputManager:
    """
    Small input state machine polled once per frame.

    Usage:
        for event in pygame.event.get():
            input_manager.handle_event(event)
        input_manager.update(dt)
        snapshot = input_manager.get_snapshot()
    """

    def __init__(self, key_bindings=None, to_playfield: Callable = None, window_size=None):
        """
        Args:
            key_bindings: Action -> key list mapping (defaults to DEFAULT_KEY_BINDINGS).
            to_playfield: Converts window pixel coords to playfield coords.
            window_size: Window size, used for normalized finger events.
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.to_playfield = to_playfield or (lambda pos: (float(pos[0]), float(pos[1])))
        self.window_size = window_size or (Display.WIDTH, Display.HEIGHT)

        self._key_to_action = {}
        for action, keys in self.key_bindings.items():
            for key in keys:
                self._key_to_action[key] = action

        self._held_actions = set()
        self._dash_edge = False
        self._start_edge = False

        self._gesture: Optional[PointerGesture] = None
        self._pointer_pos = None
        self.dash_button_cooldown = 0.0
        self.dash_button_center = (
            Display.WIDTH - Input.DASH_BUTTON_OFFSET,
            Display.HEIGHT - Input.DASH_BUTTON_OFFSET,
        )

        DebugLogger.init_entry("InputManager")

    # ===========================================================
    # Event Intake
    # ===========================================================
    def handle_event(self, event, now: float = None):
        """Route a single pygame event into the input state."""
        if now is None:
            now = time.perf_counter()

        etype = event.type
        if etype == pygame.KEYDOWN:
            self._start_edge = True
            action = self._key_to_action.get(event.key)
            if action:
                if action == "dash" and action not in self._held_actions:
                    self._dash_edge = True
                self._held_actions.add(action)
        elif etype == pygame.KEYUP:
            action = self._key_to_action.get(event.key)
            if action:
                self._held_actions.discard(action)

        elif etype == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._pointer_down(self.to_playfield(event.pos), now)
        elif etype == pygame.MOUSEMOTION:
            self._pointer_move(self.to_playfield(event.pos))
        elif etype == pygame.MOUSEBUTTONUP and event.button == 1:
            self._pointer_up(now)

        elif etype == pygame.FINGERDOWN:
            self._pointer_down(self._finger_pos(event), now)
        elif etype == pygame.FINGERMOTION:
            self._pointer_move(self._finger_pos(event))
        elif etype == pygame.FINGERUP:
            self._pointer_up(now)

    def _finger_pos(self, event):
        w, h = self.window_size
        return self.to_playfield((event.x * w, event.y * h))

    def _pointer_down(self, pos, now):
        self._start_edge = True
        self._pointer_pos = pos

        bx, by = self.dash_button_center
        if math.hypot(pos[0] - bx, pos[1] - by) < Input.DASH_BUTTON_RADIUS:
            if self.dash_button_cooldown <= 0:
                self._dash_edge = True
                self.dash_button_cooldown = Input.DASH_BUTTON_COOLDOWN
            return

        drives_joystick = pos[0] < Display.WIDTH / 2
        self._gesture = PointerGesture(pos, now, drives_joystick)

    def _pointer_move(self, pos):
        self._pointer_pos = pos
        if self._gesture is not None:
            self._gesture.current.update(pos)

    def _pointer_up(self, now):
        gesture = self._gesture
        if gesture is None:
            return
        if gesture.is_flick(now):
            self._dash_edge = True
            DebugLogger.trace("Flick gesture -> dash", category="input")
        self._gesture = None

    # ===========================================================
    # Per-Frame
    # ===========================================================
    def update(self, dt: float):
        if self.dash_button_cooldown > 0:
            self.dash_button_cooldown = max(0.0, self.dash_button_cooldown - dt)

    def keyboard_vector(self) -> Tuple[float, float]:
        held = self._held_actions
        x = float(("move_right" in held) - ("move_left" in held))
        y = float(("move_down" in held) - ("move_up" in held))
        return x, y

    def get_snapshot(self) -> InputSnapshot:
        """Build this frame's snapshot and clear edge triggers."""
        pointer_move = None
        if self._gesture is not None and self._gesture.drives_joystick:
            pointer_move = self._gesture.joystick_vector()

        snapshot = InputSnapshot(
            move=self.keyboard_vector(),
            pointer_move=pointer_move,
            dash_requested=self._dash_edge,
            start_requested=self._start_edge,
            pointer_pos=self._pointer_pos,
        )
        self._dash_edge = False
        self._start_edge = False
        return snapshot

    @property
    def joystick_active(self) -> bool:
        return self._gesture is not None and self._gesture.drives_joystick

    @property
    def gesture(self) -> Optional[PointerGesture]:
        return self._gesture
