"""Centralized battle enums and constants.

This module contains the enums that are used across multiple modules,
eliminating duplication and providing a single source of truth.
"""

from enum import Enum, auto


class Side(Enum):
    """The two sides of a duel."""
    PLAYER = 0
    ENEMY = 1


class BattleOutcome(Enum):
    """States of the battle state machine."""
    ONGOING = auto()  # Both combatants still have health
    WON = auto()      # Exactly one combatant still has health
    DRAW = auto()     # Both combatants dropped to zero in the same round


class StrategyType(Enum):
    """Available fight strategies."""
    AGGRESSIVE = auto()
    DEFENSIVE = auto()
    EVASIVE = auto()


class CombatModeType(Enum):
    """Configurable strategy-selection policies."""
    MOSTLY_EVASIVE = auto()
    RANDOM = auto()
    ALWAYS_AGGRESSIVE = auto()
    ALWAYS_DEFENSIVE = auto()
    ALWAYS_EVASIVE = auto()


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()    # Setup, configuration, file output
    BATTLE = auto()    # Round results and outcomes
    STRATEGY = auto()  # Strategy selection decisions
    DEBUG = auto()     # Debug messages
    WARNING = auto()   # Warning messages
    ERROR = auto()     # Error messages


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


STRATEGY_NAMES = {
    StrategyType.AGGRESSIVE: "Aggressive",
    StrategyType.DEFENSIVE: "Defensive",
    StrategyType.EVASIVE: "Evasive",
}

SIDE_NAMES = {
    Side.PLAYER: "Player",
    Side.ENEMY: "Enemy",
}

LOG_CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BATTLE: "BTL",
    LogCategory.STRATEGY: "STR",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}
