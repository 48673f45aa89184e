"""
src/entities/__init__.py
------------------------
Entity module exports.

Provides core entity states and type constants used across all game entities.
These are lightweight enums and constants with no heavy dependencies.

Exports:
    LifecycleState  - Entity life/death progression (ALIVE, DEAD)
    EntityCategory  - Logical entity groupings (PLAYER, ENEMY, PROJECTILE, etc.)
    BulletOwner     - Bullet owner tags (PLAYER, ENEMY)
"""

from src.entities.entity_state import LifecycleState
from src.entities.entity_types import EntityCategory, BulletOwner

__all__ = [
    # States
    'LifecycleState',
    # Types
    'EntityCategory',
    'BulletOwner',
]
