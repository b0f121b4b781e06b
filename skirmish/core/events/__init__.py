"""Event system for publisher-subscriber communication.

This package contains the complete event-driven architecture:
- event_manager.py: Synchronous publisher-subscriber event routing
- events.py: Event definitions published by the battle engine
"""

from .event_manager import EventManager
from .events import (
    BattleEvent,
    EventType,
    BattleStarted,
    RoundResolved,
    CombatantDefeated,
    BattleEnded,
    LogMessage,
    DebugMessage,
)

__all__ = [
    "EventManager",
    "BattleEvent",
    "EventType",
    "BattleStarted",
    "RoundResolved",
    "CombatantDefeated",
    "BattleEnded",
    "LogMessage",
    "DebugMessage",
]
