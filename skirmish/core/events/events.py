"""Battle events and their payloads.

This module defines the events that the battle engine publishes and that
collaborators (logging, statistics, presentation) can subscribe to.

Event Design Principles:
- Events are immutable dataclasses with rich object payloads
- All events carry the round number they belong to (0 before the first round)
- Events use proper enums instead of magic strings
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
from abc import ABC
from enum import Enum, auto

from ..data import BattleOutcome, LogCategory, LogLevel, Side

if TYPE_CHECKING:
    from ...game.entities.combatant import CombatantSnapshot
    from ...game.fight_round import FightRound


class EventType(Enum):
    """Types of battle events that collaborators can subscribe to."""
    # Battle lifecycle
    BATTLE_STARTED = auto()
    ROUND_RESOLVED = auto()
    COMBATANT_DEFEATED = auto()
    BATTLE_ENDED = auto()

    # Logging
    LOG_MESSAGE = auto()
    DEBUG_MESSAGE = auto()


@dataclass(frozen=True)
class BattleEvent(ABC):
    """Base class for all battle events."""
    round_number: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class BattleStarted(BattleEvent):
    """Event emitted when a battle manager is created with two fresh combatants."""
    player: "CombatantSnapshot"
    enemy: "CombatantSnapshot"

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.BATTLE_STARTED)


@dataclass(frozen=True)
class RoundResolved(BattleEvent):
    """Event emitted after a round has been appended to the history."""
    fight_round: "FightRound"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ROUND_RESOLVED)


@dataclass(frozen=True)
class CombatantDefeated(BattleEvent):
    """Event emitted when a combatant's health reaches zero."""
    combatant: "CombatantSnapshot"
    side: Side

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.COMBATANT_DEFEATED)


@dataclass(frozen=True)
class BattleEnded(BattleEvent):
    """Event emitted once the battle reaches a terminal state."""
    outcome: BattleOutcome
    winner: Optional["CombatantSnapshot"] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_ENDED)


@dataclass(frozen=True)
class LogMessage(BattleEvent):
    """Event emitted when a log message is created."""
    message: str
    category: LogCategory = LogCategory.SYSTEM
    level: LogLevel = LogLevel.INFO
    source: str = "unknown"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class DebugMessage(BattleEvent):
    """Event emitted for debug-specific messages."""
    message: str
    source: str
    context: Optional[dict] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEBUG_MESSAGE)
