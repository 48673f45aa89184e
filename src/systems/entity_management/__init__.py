"""
Entity management system exports.

Provides the enemy spawner and off-screen cleanup.
"""

from src.systems.entity_management.spawn_manager import SpawnManager

__all__ = [
    'SpawnManager',
]
