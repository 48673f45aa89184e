"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Playfield
# ===========================================================

class Display:
    """Logical playfield and window configuration."""
    WIDTH: int = 360
    HEIGHT: int = 640
    FPS: int = 60
    CAPTION: str = "Orbit-Bloom"
    WINDOW_SCALE: float = 1.25
    STAR_COUNT: int = 100


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Frame timing."""
    MAX_FRAME_TIME: float = 0.05  # seconds


# ===========================================================
# Input Configuration
# ===========================================================

class Input:
    """Pointer/touch gesture tuning."""
    POINTER_DEADZONE: float = 0.1
    JOYSTICK_MAX_DISTANCE: float = 40.0
    JOYSTICK_RADIUS: float = 60.0
    DASH_BUTTON_RADIUS: float = 40.0
    DASH_BUTTON_OFFSET: float = 80.0  # from bottom-right corner
    DASH_BUTTON_COOLDOWN: float = 0.3
    FLICK_DISTANCE: float = 50.0
    FLICK_TIME: float = 0.2


# ===========================================================
# Bounds & Margins
# ===========================================================

class Bounds:
    """Margin values for spawning and cleanup."""
    SPAWN_Y: float = -20
    ENEMY_CLEANUP_MARGIN_X: int = 50
    ENEMY_CLEANUP_MARGIN_Y: int = 50
    BULLET_CLEANUP_MARGIN: int = 10
    STAR_WRAP_MARGIN: int = 10
    PLAYER_SPAWN_OFFSET_Y: int = 80  # distance from bottom edge


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    BACKGROUND: int = 0
    PARTICLES: int = 100
    BULLETS: int = 200
    ENEMIES: int = 300
    PLAYER: int = 400
    UI: int = 600
    OVERLAY: int = 700


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    SHOW_FPS: bool = False
    HITBOX_VISIBLE: bool = False
    FRAME_TIME_WARNING: float = 16.67  # ms
