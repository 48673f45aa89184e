"""
entity_state.py
---------------
Defines runtime state enumerations for entities.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks the life/death progression of an entity.
    DEAD entities are pruned by the world driver at the end of the frame.
    """
    ALIVE = 0
    DEAD = 1
