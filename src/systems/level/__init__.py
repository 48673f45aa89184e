"""
Level system exports.

Provides stage schedule loading and power-level scaling.
"""

from src.systems.level.stage_loader import StageLoader, Stage, Phase, get_current_phase
from src.systems.level.power_manager import PowerManager, scale_hit_points

__all__ = [
    'StageLoader',
    'Stage',
    'Phase',
    'get_current_phase',
    'PowerManager',
    'scale_hit_points',
]
