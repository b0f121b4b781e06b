"""Strategy pattern components.

This package contains the swappable pieces of a battle:
- fight_strategies.py: Stateless stat modifiers (Aggressive, Defensive, Evasive)
- combat_modes.py: Per-combatant policies choosing a strategy each round
"""

from .fight_strategies import (
    FightStrategy,
    AggressiveFightStrategy,
    DefensiveFightStrategy,
    EvasiveFightStrategy,
    create_fight_strategy,
)
from .combat_modes import (
    CombatMode,
    MostlyEvasiveCombatMode,
    RandomCombatMode,
    FixedCombatMode,
    ScriptedCombatMode,
    HealthThresholdCombatMode,
    create_combat_mode,
)

__all__ = [
    "FightStrategy",
    "AggressiveFightStrategy",
    "DefensiveFightStrategy",
    "EvasiveFightStrategy",
    "create_fight_strategy",
    "CombatMode",
    "MostlyEvasiveCombatMode",
    "RandomCombatMode",
    "FixedCombatMode",
    "ScriptedCombatMode",
    "HealthThresholdCombatMode",
    "create_combat_mode",
]
