"""
game_scene.py
-------------
Per-frame simulation driver for a game session.

Frame order while Playing:
    clamp dt -> stage timer / power-up -> power feedback timer
    -> player -> spawner -> enemies -> bullets -> particles -> stars
    -> collisions -> prune stale entities

Outside Playing the simulation does not advance; a start request from
Title/GameOver restarts the session and from StageClear resumes it.
"""

from dataclasses import replace

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Physics
from src.core.runtime.game_state import GameMode
from src.core.services.event_manager import GameStartEvent, StageClearEvent
from src.core.services.input_manager import InputSnapshot
from src.entities.player.player_core import Player
from src.systems.combat.collision_manager import CollisionManager
from src.systems.entity_management.spawn_manager import SpawnManager


class GameScene:
    """Owns the subsystems for one world and advances it frame by frame."""

    def __init__(self, state, pause_on_stage_clear: bool = False, player_cfg=None):
        """
        Args:
            state: GameState to drive.
            pause_on_stage_clear: Stop in StageClear after each stage
                instead of looping straight into the next one.
            player_cfg: Player config override (defaults to player.json).
        """
        DebugLogger.section("Initializing Scene: GameScene")
        self.state = state
        self.pause_on_stage_clear = pause_on_stage_clear
        self.player_cfg = player_cfg
        self.frame = 0

        self.spawn_manager = SpawnManager(state)
        self.collision_manager = CollisionManager(state)
        DebugLogger.init_sub(f"Stages: {len(state.stages)}, pause on clear: {pause_on_stage_clear}")

    # ===========================================================
    # Session Control
    # ===========================================================
    def start_game(self):
        """Reset the session and enter Playing with a fresh player."""
        state = self.state
        state.reset_session()
        state.player = Player(state, cfg=self.player_cfg)
        self.frame = 0
        state.set_mode(GameMode.PLAYING)
        DebugLogger.state(f"Game started with {state.lives} lives")
        state.events.dispatch(GameStartEvent(lives=state.lives))

    def next_stage(self):
        """Resume Playing after a StageClear pause, keeping lives and score."""
        state = self.state
        if state.mode is not GameMode.STAGE_CLEAR:
            return
        if state.player is None:
            state.player = Player(state, cfg=self.player_cfg)
        state.set_mode(GameMode.PLAYING)
        DebugLogger.state(f"Resuming on stage {state.stage_index + 1}", category="stage")

    def handle_start_request(self):
        mode = self.state.mode
        if mode in (GameMode.TITLE, GameMode.GAME_OVER):
            self.start_game()
        elif mode is GameMode.STAGE_CLEAR:
            self.next_stage()

    @staticmethod
    def clamp_dt(raw_dt: float) -> float:
        """Clamp a wall-clock delta to [0, MAX_FRAME_TIME]."""
        return min(max(0.0, raw_dt), Physics.MAX_FRAME_TIME)

    # ===========================================================
    # Frame Update
    # ===========================================================
    def update(self, raw_dt: float, snapshot: InputSnapshot = None) -> float:
        """
        Advance one frame.

        Args:
            raw_dt: Wall-clock seconds since the previous frame.
            snapshot: Normalized input for this frame; the last stored
                snapshot is reused when omitted.

        Returns:
            float: Simulated dt (0.0 when the simulation did not advance).
        """
        state = self.state
        frame_input = snapshot if snapshot is not None else state.input
        # Edge triggers are consumed by this frame
        state.input = replace(frame_input, dash_requested=False, start_requested=False)

        if frame_input.start_requested and not state.is_playing:
            self.handle_start_request()
            # The press that starts or resumes a session never dashes
            frame_input = replace(frame_input, dash_requested=False)

        if not state.is_playing:
            return 0.0

        dt = self.clamp_dt(raw_dt)
        self.frame += 1
        DebugLogger.set_frame(self.frame)

        self._update_stage_timer(dt)
        if state.is_playing:
            self._update_world(dt, frame_input)
        if not state.is_playing:
            self._end_playing()
        return dt

    def _update_stage_timer(self, dt: float):
        state = self.state
        state.elapsed_time += dt
        state.time_left = state.current_stage.duration - state.elapsed_time
        if state.time_left <= 0:
            self._clear_stage()

    def _clear_stage(self):
        state = self.state
        cleared = state.stage_index
        if self.pause_on_stage_clear:
            self._enter_stage_clear()
        state.power.trigger_power_up(state)
        state.stage_index = (cleared + 1) % len(state.stages)
        state.elapsed_time = 0.0
        state.time_left = state.current_stage.duration
        state.stats.add_stage_clear()

        DebugLogger.state(f"Stage {cleared + 1} clear -> stage {state.stage_index + 1}", category="stage")
        state.events.dispatch(StageClearEvent(stage_index=cleared, next_stage_index=state.stage_index))

    def _enter_stage_clear(self):
        """Discard enemies and bullets and re-center the player for the pause screen."""
        state = self.state
        state.clear_entities(keep_player=True)
        if state.player is not None:
            state.player.reset_position()
        state.set_mode(GameMode.STAGE_CLEAR)
        DebugLogger.state("Entities cleared on entering STAGE_CLEAR", category="entity_cleanup")

    def _update_world(self, dt: float, snapshot: InputSnapshot):
        state = self.state

        state.power.update_timer(state, dt)
        state.stats.add_time(dt)

        if state.player is not None:
            state.player.update(dt, snapshot.move, snapshot.dash_requested, snapshot.pointer_move)

        phase = state.current_phase()
        self.spawn_manager.update(dt)

        for enemy in state.enemies:
            enemy.update(dt, phase.bullet_speed)
        for bullet in state.bullets:
            bullet.update(dt)
        for particle in state.particles:
            particle.update(dt)
        state.background.update(dt)

        self.collision_manager.detect()
        self._prune()

    def _prune(self):
        state = self.state
        self.spawn_manager.cleanup()
        state.bullets = [b for b in state.bullets if not b.is_offscreen()]
        state.particles = [p for p in state.particles if not p.is_dead()]

    def _end_playing(self):
        """Discard entities in the frame the session ended."""
        state = self.state
        if state.mode is GameMode.STAGE_CLEAR:
            return
        state.clear_entities()
        DebugLogger.state(f"Entities cleared on entering {state.mode.name}", category="entity_cleanup")
