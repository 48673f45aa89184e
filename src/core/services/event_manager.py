"""
event_manager.py
----------------
Event-driven system for decoupled game component communication.
Lets the simulation announce what happened (kills, hits, power-ups)
to UI, audio and statistics listeners without depending on them.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from src.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class GameStartEvent(BaseEvent):
    """Dispatched when a new session enters Playing."""
    lives: int


@dataclass(frozen=True)
class EnemyDestroyedEvent(BaseEvent):
    """Dispatched when an enemy's hit points reach zero."""
    position: tuple
    enemy_type: str
    score: int


@dataclass(frozen=True)
class PlayerHitEvent(BaseEvent):
    """Dispatched when the player loses a life."""
    position: tuple
    lives_left: int


@dataclass(frozen=True)
class PlayerDashEvent(BaseEvent):
    """Dispatched when a dash starts."""
    position: tuple


@dataclass(frozen=True)
class PowerUpEvent(BaseEvent):
    """Dispatched when the power level increases."""
    power_level: int


@dataclass(frozen=True)
class StageClearEvent(BaseEvent):
    """Dispatched when the active stage's duration elapses."""
    stage_index: int
    next_stage_index: int


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched once when lives reach zero."""
    score: int


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        subscribers = self._subscribers.setdefault(event_type, [])
        if callback in subscribers:
            return

        subscribers.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A callback that raises is logged and skipped so a faulty listener
        cannot abort the simulation frame.
        """
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}", category="event")

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
