"""Combat Mode Classes

A combat mode decides which fight strategy a combatant uses in the next
round. Each combatant gets its own mode instance per battle, since modes may
keep counters. New selection policies are added by subclassing CombatMode;
the battle manager only ever calls next_strategy().
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from ...core.data import CombatModeType, StrategyType
from ...core.errors import InvalidArgumentError
from .fight_strategies import FightStrategy, create_fight_strategy

if TYPE_CHECKING:
    from ..entities.combatant import Combatant


class CombatMode(ABC):
    """Abstract base class for strategy-selection policies."""

    @abstractmethod
    def next_strategy(self) -> FightStrategy:
        """Choose the strategy for the upcoming round.

        Called exactly once per round. Must always return a strategy.
        """

    @abstractmethod
    def get_mode_name(self) -> str:
        """Get the name of this combat mode."""


class MostlyEvasiveCombatMode(CombatMode):
    """Evasive most of the time, Aggressive on every third round."""

    def __init__(self):
        self._strategy_counter = 0

    @property
    def strategy_counter(self) -> int:
        return self._strategy_counter

    def next_strategy(self) -> FightStrategy:
        self._strategy_counter += 1

        if self._strategy_counter % 3 == 0:
            return create_fight_strategy(StrategyType.AGGRESSIVE)
        return create_fight_strategy(StrategyType.EVASIVE)

    def get_mode_name(self) -> str:
        return "Mostly Evasive"


class RandomCombatMode(CombatMode):
    """Picks Aggressive, Defensive or Evasive uniformly at random every round."""

    CHOICES = (StrategyType.AGGRESSIVE, StrategyType.DEFENSIVE, StrategyType.EVASIVE)

    def __init__(self, rng: Optional[np.random.Generator] = None):
        """
        Args:
            rng: Random generator to draw from; pass a seeded
                numpy.random.default_rng(seed) for reproducible battles
        """
        self._rng = rng if rng is not None else np.random.default_rng()

    def next_strategy(self) -> FightStrategy:
        index = int(self._rng.integers(0, len(self.CHOICES)))
        return create_fight_strategy(self.CHOICES[index])

    def get_mode_name(self) -> str:
        return "Random"


class FixedCombatMode(CombatMode):
    """Always returns the same strategy."""

    def __init__(self, strategy: FightStrategy):
        if strategy is None:
            raise InvalidArgumentError("strategy")
        self._strategy = strategy

    def next_strategy(self) -> FightStrategy:
        return self._strategy

    def get_mode_name(self) -> str:
        return f"Always {self._strategy.get_strategy_name()}"


class ScriptedCombatMode(CombatMode):
    """Cycles through a fixed sequence of strategies, starting over at the end."""

    def __init__(self, strategies: Sequence[FightStrategy]):
        if not strategies:
            raise InvalidArgumentError("strategies", "At least one strategy is required")
        if any(strategy is None for strategy in strategies):
            raise InvalidArgumentError("strategies", "Sequence must not contain None")
        self._strategies = tuple(strategies)
        self._position = 0

    def next_strategy(self) -> FightStrategy:
        strategy = self._strategies[self._position]
        self._position = (self._position + 1) % len(self._strategies)
        return strategy

    def get_mode_name(self) -> str:
        return "Scripted"


class HealthThresholdCombatMode(CombatMode):
    """Aggressive while healthy, Defensive once health falls to a threshold.

    The threshold is a ratio of the combatant's health at the time the mode
    is created.
    """

    def __init__(self, combatant: "Combatant", threshold_ratio: float = 0.5):
        if combatant is None:
            raise InvalidArgumentError("combatant")
        if threshold_ratio is None or not 0.0 < threshold_ratio <= 1.0:
            raise InvalidArgumentError("threshold_ratio", "Value must be in the range (0, 1]")

        self._combatant = combatant
        self._threshold_health = combatant.health * threshold_ratio

    @property
    def threshold_health(self) -> float:
        return self._threshold_health

    def next_strategy(self) -> FightStrategy:
        if self._combatant.health > self._threshold_health:
            return create_fight_strategy(StrategyType.AGGRESSIVE)
        return create_fight_strategy(StrategyType.DEFENSIVE)

    def get_mode_name(self) -> str:
        return "Health Threshold"


def create_combat_mode(mode_type: CombatModeType, rng: Optional[np.random.Generator] = None) -> CombatMode:
    """Factory function to create configurable combat modes.

    Args:
        mode_type: Type of combat mode to create
        rng: Random generator used by CombatModeType.RANDOM

    Returns:
        A new CombatMode instance

    Raises:
        InvalidArgumentError: If mode_type is not supported
    """
    if mode_type == CombatModeType.MOSTLY_EVASIVE:
        return MostlyEvasiveCombatMode()
    elif mode_type == CombatModeType.RANDOM:
        return RandomCombatMode(rng)
    elif mode_type == CombatModeType.ALWAYS_AGGRESSIVE:
        return FixedCombatMode(create_fight_strategy(StrategyType.AGGRESSIVE))
    elif mode_type == CombatModeType.ALWAYS_DEFENSIVE:
        return FixedCombatMode(create_fight_strategy(StrategyType.DEFENSIVE))
    elif mode_type == CombatModeType.ALWAYS_EVASIVE:
        return FixedCombatMode(create_fight_strategy(StrategyType.EVASIVE))
    else:
        raise InvalidArgumentError("mode_type", f"Unsupported combat mode: {mode_type}")
