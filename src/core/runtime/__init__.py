"""
Runtime configuration exports.

Provides game-wide constants and settings. All exports are lightweight
class constants with no initialization overhead.
"""

from src.core.runtime.game_settings import (
    Display,
    Layers,
    Debug,
    Physics,
    Input,
    Bounds,
)
from src.core.runtime.session_stats import SessionStats

__all__ = [
    # Display & Rendering
    'Display',
    'Layers',
    # Configuration
    'Physics',
    'Input',
    'Bounds',
    # Debug
    'Debug',
    # Session
    'SessionStats',
]
