"""
game_loop.py
------------
Defines the main GameLoop class that owns the window and drives frames.

Responsibilities
----------------
- Initialize pygame, the window and the clock
- Route pygame events into the InputManager
- Feed raw frame time and the input snapshot to the GameScene
- Render the world through the DrawManager, scaled to the window
"""

import time

import pygame

from src.core.runtime.game_settings import Display, Debug
from src.core.runtime.game_state import GameState
from src.core.services.input_manager import InputManager
from src.core.debug.debug_logger import DebugLogger
from src.entities.player.player_core import load_player_config
from src.graphics.draw_manager import DrawManager
from src.scenes.game.game_scene import GameScene


class GameLoop:
    """Core runtime controller that manages the game's main loop."""

    def __init__(self, pause_on_stage_clear: bool = False):
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")

        self.window_size = (int(Display.WIDTH * Display.WINDOW_SCALE),
                            int(Display.HEIGHT * Display.WINDOW_SCALE))
        self.window = pygame.display.set_mode(self.window_size)
        self.game_surface = pygame.Surface((Display.WIDTH, Display.HEIGHT))
        DebugLogger.init_sub(f"Window {self.window_size[0]}x{self.window_size[1]}")

        self.input_manager = InputManager(to_playfield=self.to_playfield, window_size=self.window_size)
        self.draw_manager = DrawManager()

        lives = load_player_config()["core_attributes"]["initial_lives"]
        self.state = GameState(initial_lives=lives)
        self.scene = GameScene(self.state, pause_on_stage_clear=pause_on_stage_clear)

        self.clock = pygame.time.Clock()
        self.running = True
        self._last_perf_warn_time = 0.0
        DebugLogger.init_entry("GameLoop Runtime")

    def to_playfield(self, pos):
        """Window pixel coordinates -> logical playfield coordinates."""
        return (pos[0] * Display.WIDTH / self.window_size[0],
                pos[1] * Display.HEIGHT / self.window_size[1])

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self):
        """Main loop that runs until the window is closed."""
        DebugLogger.section("Game Loop")

        while self.running:
            raw_dt = self.clock.tick(Display.FPS) / 1000.0

            self._handle_events()
            self.input_manager.update(raw_dt)
            self.scene.update(raw_dt, self.input_manager.get_snapshot())

            self._draw()

        DebugLogger.system(f"Session summary: {self.state.stats.summary()}")
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
                break
            self.input_manager.handle_event(event)

    # ===========================================================
    # Rendering
    # ===========================================================
    def _draw(self):
        start = time.perf_counter()

        self.draw_manager.render(self.game_surface, self.state, self.input_manager, self.clock.get_fps())
        pygame.transform.scale(self.game_surface, self.window_size, self.window)
        pygame.display.flip()

        frame_time_ms = (time.perf_counter() - start) * 1000
        if frame_time_ms > Debug.FRAME_TIME_WARNING:
            now = time.perf_counter()
            if now - self._last_perf_warn_time > 1.0:
                self._last_perf_warn_time = now
                DebugLogger.warn(f"Slow frame: render took {frame_time_ms:.2f} ms", category="render")
