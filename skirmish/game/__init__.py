"""Battle simulation.

This package contains the combat rules and their collaborators:
- entities: Combatants and YAML templates
- strategies: Fight strategies and combat modes
- fight_context.py: Strategy pattern context
- battle_manager.py: Round loop, damage and history
- fight_round.py: Immutable round records
- log_manager.py: Event-driven battle log
- battle_statistics.py: numpy summaries of a history
- simulation.py: Runner that wires a whole duel together
"""

from .battle_manager import BattleManager, calculate_damage
from .fight_context import FightContext
from .fight_round import FightRound

__all__ = [
    "BattleManager",
    "calculate_damage",
    "FightContext",
    "FightRound",
]
