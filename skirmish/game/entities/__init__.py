"""Entity definitions.

This package contains the battle participants:
- combatant.py: Combatant with base and in-combat stats, and its frozen snapshot
- combatant_templates.py: Named presets loaded from YAML
"""

from .combatant import Combatant, CombatantSnapshot, describe_health
from .combatant_templates import (
    CombatantTemplate,
    load_combatant_templates,
    get_template,
    create_combatant,
)

__all__ = [
    "Combatant",
    "CombatantSnapshot",
    "describe_health",
    "CombatantTemplate",
    "load_combatant_templates",
    "get_template",
    "create_combatant",
]
