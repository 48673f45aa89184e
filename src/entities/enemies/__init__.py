"""
Enemy entity package.
One data-driven Enemy class plus the type table and strategy tables it reads.
"""

from .enemy_definitions import (
    EnemyDefinition,
    UnknownEnemyTypeError,
    load_enemy_definitions,
)
from .enemy import Enemy

__all__ = [
    'Enemy',
    'EnemyDefinition',
    'UnknownEnemyTypeError',
    'load_enemy_definitions',
]
