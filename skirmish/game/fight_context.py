"""Strategy pattern context.

The fight context holds the currently selected strategy and applies it to
whichever combatant enters combat mode.
"""

from .entities.combatant import Combatant
from .strategies.fight_strategies import FightStrategy
from ..core.errors import InvalidArgumentError


class FightContext:
    """Applies the selected fight strategy to combatants."""

    def __init__(self, fight_strategy: FightStrategy):
        """Initialize the context with a starting strategy.

        Raises:
            InvalidArgumentError: If fight_strategy is None
        """
        if fight_strategy is None:
            raise InvalidArgumentError("fight_strategy")
        self._fight_strategy = fight_strategy

    @property
    def fight_strategy(self) -> FightStrategy:
        return self._fight_strategy

    def set_fight_strategy(self, fight_strategy: FightStrategy) -> None:
        """Swap the strategy used by the next enter_combat_mode() call.

        Raises:
            InvalidArgumentError: If fight_strategy is None
        """
        if fight_strategy is None:
            raise InvalidArgumentError("fight_strategy")
        self._fight_strategy = fight_strategy

    def enter_combat_mode(self, combatant: Combatant) -> Combatant:
        """Alter the combatant's in-combat attack and defence using the current strategy.

        Raises:
            InvalidArgumentError: If combatant is None
        """
        if combatant is None:
            raise InvalidArgumentError("combatant")
        return self._fight_strategy.apply(combatant)
