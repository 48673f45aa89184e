"""
draw_manager.py
---------------
Renders a read-only view of the world onto the logical playfield surface.

Responsibilities:
- Draw stars, particles, bullets, enemies and the player with pygame.draw
- Draw the HUD (score, lives, time, stage, power) and mode overlays
- Draw the touch controls (virtual joystick, dash button)

Never mutates the world state.
"""

import math

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Display, Input, Debug
from src.core.runtime.game_state import GameMode


BACKGROUND_COLOR = (10, 10, 26)
HUD_COLOR = (255, 255, 255)
TITLE_COLOR = (64, 224, 255)
GAME_OVER_COLOR = (255, 90, 90)
POWER_COLOR = (255, 217, 90)

# Enemy silhouettes by motion name
ENEMY_SHAPES = {
    "straight": "circle",
    "zigzag": "diamond",
    "wave": "diamond",
    "spiral": "ring",
    "homing": "triangle",
}


class DrawManager:
    """Draws one frame from the world state."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        pygame.font.init()
        self.font_small = pygame.font.Font(None, 22)
        self.font_medium = pygame.font.Font(None, 30)
        self.font_large = pygame.font.Font(None, 52)
        self._overlay = pygame.Surface((Display.WIDTH, Display.HEIGHT), pygame.SRCALPHA)
        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Frame Rendering
    # ===========================================================

    def render(self, surface, state, input_manager=None, fps=None):
        """Draw the whole frame onto `surface` (logical playfield size)."""
        surface.fill(BACKGROUND_COLOR)
        self._draw_stars(surface, state.stars)
        self._draw_particles(surface, state.particles)

        for bullet in state.bullets:
            pygame.draw.circle(surface, bullet.color, bullet.pos, bullet.radius)
        for enemy in state.enemies:
            self._draw_enemy(surface, enemy)
        if state.player is not None:
            self._draw_player(surface, state.player)

        if state.mode is GameMode.PLAYING:
            self._draw_hud(surface, state)
            if input_manager is not None:
                self._draw_touch_controls(surface, input_manager)
            if state.power_up_timer > 0:
                self._draw_power_up_banner(surface, state)
        else:
            self._draw_overlay(surface, state)

        if Debug.SHOW_FPS and fps is not None:
            self._text(surface, f"{fps:.0f} FPS", self.font_small, HUD_COLOR, (Display.WIDTH - 40, Display.HEIGHT - 14))

    # ===========================================================
    # Entities
    # ===========================================================

    def _draw_stars(self, surface, stars):
        for star in stars:
            level = int(80 + 175 * star.brightness)
            pygame.draw.circle(surface, (level, level, level), (star.x, star.y), star.size)

    def _draw_particles(self, surface, particles):
        for p in particles:
            a = p.alpha
            color = tuple(int(c * a) for c in p.color)
            pygame.draw.circle(surface, color, (p.x, p.y), max(1, p.size * (0.5 + 0.5 * a)))

    def _draw_enemy(self, surface, enemy):
        x, y = enemy.pos
        r = enemy.radius
        shape = ENEMY_SHAPES.get(enemy.definition.motion, "circle")
        if enemy.definition.attack:
            shape = "square"

        if shape == "diamond":
            pygame.draw.polygon(surface, enemy.color, [(x, y - r), (x + r, y), (x, y + r), (x - r, y)])
        elif shape == "ring":
            pygame.draw.circle(surface, enemy.color, (x, y), r, 3)
        elif shape == "triangle":
            angle = enemy.heading
            points = [
                (x + math.cos(angle + k * math.tau / 3) * r, y + math.sin(angle + k * math.tau / 3) * r)
                for k in range(3)
            ]
            pygame.draw.polygon(surface, enemy.color, points)
        elif shape == "square":
            rect = pygame.Rect(0, 0, r * 1.6, r * 1.6)
            rect.center = (x, y)
            pygame.draw.rect(surface, enemy.color, rect)
        else:
            pygame.draw.circle(surface, enemy.color, (x, y), r)

        if enemy.max_hp > 1:
            frac = enemy.hp / enemy.max_hp
            bar = pygame.Rect(x - r, y - r - 5, 2 * r * frac, 2)
            pygame.draw.rect(surface, HUD_COLOR, bar)

        if Debug.HITBOX_VISIBLE:
            pygame.draw.circle(surface, (255, 255, 0), (x, y), r, 1)

    def _draw_player(self, surface, player):
        # Blink while invincible after a hit
        if player.is_invincible() and not player.is_dashing:
            if int(player.invincible_timer * 10) % 2 == 0:
                return

        x, y = player.pos
        r = player.radius
        color = HUD_COLOR if player.is_dashing else player.color
        pygame.draw.polygon(surface, color, [(x, y - r), (x + r * 0.8, y + r), (x - r * 0.8, y + r)])
        if Debug.HITBOX_VISIBLE:
            pygame.draw.circle(surface, (255, 0, 0), (x, y), player.hit_radius, 1)

    # ===========================================================
    # HUD & Overlays
    # ===========================================================

    def _draw_hud(self, surface, state):
        self._text(surface, f"SCORE {state.score}", self.font_small, HUD_COLOR, (60, 14))
        self._text(surface, f"LIVES {state.lives}", self.font_small, HUD_COLOR, (Display.WIDTH - 50, 14))
        self._text(surface, f"STAGE {state.stage_index + 1}  {max(0.0, state.time_left):.0f}s",
                   self.font_small, HUD_COLOR, (Display.WIDTH / 2, 14))
        self._text(surface, f"POWER {state.power_level}", self.font_small, POWER_COLOR, (50, 34))

    def _draw_power_up_banner(self, surface, state):
        self._text(surface, f"POWER UP! Lv {state.power_level}", self.font_medium, POWER_COLOR,
                   (Display.WIDTH / 2, Display.HEIGHT / 2 - 60))

    def _draw_overlay(self, surface, state):
        self._overlay.fill((0, 0, 0, 150))
        surface.blit(self._overlay, (0, 0))
        cx, cy = Display.WIDTH / 2, Display.HEIGHT / 2

        if state.mode is GameMode.TITLE:
            self._text(surface, Display.CAPTION, self.font_large, TITLE_COLOR, (cx, cy - 40))
            self._text(surface, "Press any key to start", self.font_medium, HUD_COLOR, (cx, cy + 30))
            self._text(surface, "WASD/Arrows: Move | Shift/Space: Dash", self.font_small, (170, 170, 170), (cx, cy + 70))
        elif state.mode is GameMode.STAGE_CLEAR:
            self._text(surface, "Stage Clear!", self.font_large, POWER_COLOR, (cx, cy - 40))
            self._text(surface, f"Next: stage {state.stage_index + 1}", self.font_medium, HUD_COLOR, (cx, cy + 10))
            self._text(surface, "Press any key to continue", self.font_small, HUD_COLOR, (cx, cy + 50))
        elif state.mode is GameMode.GAME_OVER:
            self._text(surface, "Game Over", self.font_large, GAME_OVER_COLOR, (cx, cy - 80))
            self._text(surface, f"Score: {state.score}", self.font_medium, HUD_COLOR, (cx, cy - 20))
            self._text(surface, f"High score: {state.stats.high_score}", self.font_small, HUD_COLOR, (cx, cy + 10))
            self._text(surface, f"Reached stage {state.stage_index + 1}", self.font_small, TITLE_COLOR, (cx, cy + 35))
            self._text(surface, "Press any key to retry", self.font_medium, HUD_COLOR, (cx, cy + 75))

    def _draw_touch_controls(self, surface, input_manager):
        gesture = input_manager.gesture
        if gesture is not None and gesture.drives_joystick:
            pygame.draw.circle(surface, (120, 120, 160), gesture.start, Input.JOYSTICK_RADIUS, 2)
            dx, dy = gesture.joystick_vector()
            knob = (gesture.start.x + dx * Input.JOYSTICK_MAX_DISTANCE,
                    gesture.start.y + dy * Input.JOYSTICK_MAX_DISTANCE)
            pygame.draw.circle(surface, TITLE_COLOR, knob, 16)

        ready = input_manager.dash_button_cooldown <= 0
        color = TITLE_COLOR if ready else (80, 80, 100)
        pygame.draw.circle(surface, color, input_manager.dash_button_center, Input.DASH_BUTTON_RADIUS, 3)
        self._text(surface, "DASH", self.font_small, color, input_manager.dash_button_center)

    @staticmethod
    def _text(surface, text, font, color, center):
        rendered = font.render(text, True, color)
        surface.blit(rendered, rendered.get_rect(center=(int(center[0]), int(center[1]))))
