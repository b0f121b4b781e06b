"""Core data definitions.

This package contains fundamental enums and lookup tables:
- game_enums.py: Centralized enums for sides, outcomes, strategies and logging
"""

from .game_enums import (
    Side,
    BattleOutcome,
    StrategyType,
    CombatModeType,
    LogCategory,
    LogLevel,
    STRATEGY_NAMES,
    SIDE_NAMES,
    LOG_CATEGORY_TAGS,
)

__all__ = [
    "Side",
    "BattleOutcome",
    "StrategyType",
    "CombatModeType",
    "LogCategory",
    "LogLevel",
    "STRATEGY_NAMES",
    "SIDE_NAMES",
    "LOG_CATEGORY_TAGS",
]
