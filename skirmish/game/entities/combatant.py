"""Combatant entity.

A combatant keeps two sets of attack/defence numbers: the base stats it was
created with, and the in-combat stats that the current fight strategy
derives from them. Only health changes as a result of damage.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Optional, Union

from ...core.errors import InvalidArgumentError


def _validate_score(param_name: str, value, allow_zero: bool) -> float:
    """Return value as a float, rejecting non-numbers, NaN, infinity and out-of-range values."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(param_name, f"Value must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidArgumentError(param_name, f"Value must be finite, got {value}")
    if allow_zero and value < 0.0:
        raise InvalidArgumentError(param_name, "Value must be greater than or equal to 0")
    if not allow_zero and value <= 0.0:
        raise InvalidArgumentError(param_name, "Value must be greater than 0")
    return float(value)


@dataclass(frozen=True)
class CombatantSnapshot:
    """Read-only copy of a combatant at one moment of the battle.

    Stored in round records and carried by events, so nothing that reads the
    history can change what happened.
    """
    character_class: str
    health: float
    base_attack: float
    base_defence: float
    fight_attack: float
    fight_defence: float

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def __str__(self) -> str:
        return (f"{self.character_class} with Health: {self.health}, BaseAttack: {self.base_attack}, "
                f"BaseDefence {self.base_defence}, FightAttack: {self.fight_attack}, "
                f"FightDefence {self.fight_defence}")


class Combatant:
    """A participant in a duel.

    Base stats and the class label are fixed at construction. The in-combat
    stats start equal to the base stats and are meant to be rewritten by a
    FightStrategy before each round.
    """

    def __init__(self, character_class: str, health: float, base_attack: float, base_defence: float):
        """Initialize a combatant.

        Args:
            character_class: Class or name label (e.g. "Ranger")
            health: Starting health, must be >= 0
            base_attack: Base attack score, must be > 0
            base_defence: Base defence score, must be > 0

        Raises:
            InvalidArgumentError: If any value is missing or out of range
        """
        if character_class is None or not isinstance(character_class, str) or not character_class.strip():
            raise InvalidArgumentError("character_class", "Value must be a non-empty string")

        self._character_class = character_class
        self._health = _validate_score("health", health, allow_zero=True)
        self._base_attack = _validate_score("base_attack", base_attack, allow_zero=False)
        self._base_defence = _validate_score("base_defence", base_defence, allow_zero=False)

        self.fight_attack = self._base_attack
        self.fight_defence = self._base_defence

    @property
    def character_class(self) -> str:
        return self._character_class

    @property
    def health(self) -> float:
        return self._health

    @property
    def base_attack(self) -> float:
        return self._base_attack

    @property
    def base_defence(self) -> float:
        return self._base_defence

    @property
    def is_alive(self) -> bool:
        return self._health > 0

    def receive_damage(self, damage: float) -> float:
        """Subtract damage from health, never going below zero.

        Negative damage is ignored.

        Args:
            damage: The damage received by the combatant

        Returns:
            Health after the damage was applied
        """
        if damage < 0:
            return self._health

        self._health = max(0.0, self._health - damage)
        return self._health

    def clone(self) -> "Combatant":
        """Create an independent copy including the current in-combat stats."""
        copy = Combatant(self._character_class, self._health, self._base_attack, self._base_defence)
        copy.fight_attack = self.fight_attack
        copy.fight_defence = self.fight_defence
        return copy

    def snapshot(self) -> CombatantSnapshot:
        """Freeze the current state, including the in-combat stats."""
        return CombatantSnapshot(
            character_class=self._character_class,
            health=self._health,
            base_attack=self._base_attack,
            base_defence=self._base_defence,
            fight_attack=self.fight_attack,
            fight_defence=self.fight_defence,
        )

    def __repr__(self) -> str:
        return (f"Combatant({self._character_class!r}, health={self._health}, "
                f"base_attack={self._base_attack}, base_defence={self._base_defence})")

    def __str__(self) -> str:
        return str(self.snapshot())


def describe_health(combatant: Optional[Union[Combatant, CombatantSnapshot]]) -> str:
    """Short health summary such as 'Ranger (10.8 HP)'."""
    if combatant is None:
        return "nobody"
    return f"{combatant.character_class} ({combatant.health:g} HP)"
