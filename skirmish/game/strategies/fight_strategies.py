"""Fight Strategy Classes

This module implements the Strategy design pattern for combat stances.
Each strategy rewrites a combatant's in-combat attack and defence from its
base stats using two fixed factors. Strategies hold no state, so the
instances returned by create_fight_strategy() are shared.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ...core.data import StrategyType
from ...core.errors import InvalidArgumentError

if TYPE_CHECKING:
    from ..entities.combatant import Combatant


class FightStrategy(ABC):
    """Abstract base class for fight strategies."""

    ATTACK_FACTOR: float
    DEFENCE_FACTOR: float

    @property
    @abstractmethod
    def strategy_type(self) -> StrategyType:
        """The enum member identifying this strategy."""

    @abstractmethod
    def get_strategy_name(self) -> str:
        """Get the short name of this strategy, e.g. 'Aggressive'."""

    def apply(self, combatant: "Combatant") -> "Combatant":
        """Recompute the combatant's in-combat stats from its base stats.

        Applying a strategy never builds on the previous in-combat values, so
        switching strategies between rounds does not compound.

        Args:
            combatant: The combatant to modify in place

        Returns:
            The same combatant, for chaining

        Raises:
            InvalidArgumentError: If combatant is None
        """
        if combatant is None:
            raise InvalidArgumentError("combatant")

        combatant.fight_attack = combatant.base_attack * self.ATTACK_FACTOR
        combatant.fight_defence = combatant.base_defence * self.DEFENCE_FACTOR
        return combatant

    def __str__(self) -> str:
        return (f"{self.get_strategy_name()} Strategy - Attack factor: {self.ATTACK_FACTOR} "
                f"- Defence factor {self.DEFENCE_FACTOR}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class AggressiveFightStrategy(FightStrategy):
    """Trades defence for a heavy attack."""

    ATTACK_FACTOR = 1.8
    DEFENCE_FACTOR = 0.6

    @property
    def strategy_type(self) -> StrategyType:
        return StrategyType.AGGRESSIVE

    def get_strategy_name(self) -> str:
        return "Aggressive"


class DefensiveFightStrategy(FightStrategy):
    """Turtles up: strong defence, weak attack."""

    ATTACK_FACTOR = 0.6
    DEFENCE_FACTOR = 1.8

    @property
    def strategy_type(self) -> StrategyType:
        return StrategyType.DEFENSIVE

    def get_strategy_name(self) -> str:
        return "Defensive"


class EvasiveFightStrategy(FightStrategy):
    """Keeps distance, lowering both attack and defence."""

    ATTACK_FACTOR = 0.4
    DEFENCE_FACTOR = 0.8

    @property
    def strategy_type(self) -> StrategyType:
        return StrategyType.EVASIVE

    def get_strategy_name(self) -> str:
        return "Evasive"


_SHARED_STRATEGIES: dict[StrategyType, FightStrategy] = {
    StrategyType.AGGRESSIVE: AggressiveFightStrategy(),
    StrategyType.DEFENSIVE: DefensiveFightStrategy(),
    StrategyType.EVASIVE: EvasiveFightStrategy(),
}


def create_fight_strategy(strategy_type: StrategyType) -> FightStrategy:
    """Factory function returning the shared instance for a strategy type.

    Args:
        strategy_type: Type of strategy to return

    Returns:
        FightStrategy instance

    Raises:
        InvalidArgumentError: If strategy_type is not supported
    """
    try:
        return _SHARED_STRATEGIES[strategy_type]
    except KeyError:
        raise InvalidArgumentError("strategy_type", f"Unsupported strategy type: {strategy_type}")
