"""
Core services exports.

Provides config loading, the event system and input normalization.
"""

from src.core.services.config_manager import load_config
from src.core.services.event_manager import (
    EventManager,
    BaseEvent,
    GameStartEvent,
    EnemyDestroyedEvent,
    PlayerHitEvent,
    PlayerDashEvent,
    PowerUpEvent,
    StageClearEvent,
    GameOverEvent,
)
from src.core.services.input_manager import InputManager, InputSnapshot

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'BaseEvent',
    'GameStartEvent',
    'EnemyDestroyedEvent',
    'PlayerHitEvent',
    'PlayerDashEvent',
    'PowerUpEvent',
    'StageClearEvent',
    'GameOverEvent',
    # Input
    'InputManager',
    'InputSnapshot',
]
