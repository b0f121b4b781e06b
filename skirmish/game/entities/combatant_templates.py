"""Combatant templates for quick battle setup.

Templates are loaded from a YAML file and converted to data structures that
specify the starting health and base stats for each named combatant
(Ranger, Skeleton, ...).
"""

from dataclasses import dataclass
from typing import Optional

import yaml

from ...core.config import resolve_project_path
from ...core.errors import ConfigurationError
from .combatant import Combatant

DEFAULT_TEMPLATES_PATH = "assets/data/combatants/combatant_templates.yaml"


@dataclass(frozen=True)
class CombatantTemplate:
    """Starting values for a combatant."""
    name: str
    health: float
    attack: float
    defence: float

    def create(self) -> Combatant:
        """Build a fresh combatant from this template."""
        return Combatant(self.name, self.health, self.attack, self.defence)


_loaded_templates: Optional[dict[str, CombatantTemplate]] = None


def load_combatant_templates(yaml_path: Optional[str] = None) -> dict[str, CombatantTemplate]:
    """Load combatant templates from a YAML file.

    Args:
        yaml_path: Path to the templates file (defaults to the bundled presets)

    Returns:
        Dictionary mapping template names to CombatantTemplate objects

    Raises:
        ConfigurationError: If the file is missing or has an invalid structure
    """
    template_file = resolve_project_path(yaml_path or DEFAULT_TEMPLATES_PATH)

    try:
        with open(template_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Combatant templates file not found: {template_file}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse combatant templates {template_file}: {e}")

    try:
        templates = {}
        for name, template_data in data["combatant_templates"].items():
            templates[name] = CombatantTemplate(
                name=name,
                health=float(template_data["health"]),
                attack=float(template_data["attack"]),
                defence=float(template_data["defence"]),
            )
        return templates

    except (KeyError, TypeError, AttributeError) as e:
        raise ConfigurationError(f"Invalid template structure in {template_file}: {e}")
    except ValueError as e:
        raise ConfigurationError(f"Invalid template value in {template_file}: {e}")


def _default_templates() -> dict[str, CombatantTemplate]:
    global _loaded_templates
    if _loaded_templates is None:
        _loaded_templates = load_combatant_templates()
    return _loaded_templates


def get_template(name: str, templates: Optional[dict[str, CombatantTemplate]] = None) -> CombatantTemplate:
    """Get a combatant template by name.

    Args:
        name: Template name, e.g. "Ranger"
        templates: Templates to search (defaults to the bundled presets)

    Raises:
        ConfigurationError: If no template has this name
    """
    available = templates if templates is not None else _default_templates()
    if name not in available:
        raise ConfigurationError(
            f"No template found for combatant '{name}'. Available: {', '.join(sorted(available))}"
        )
    return available[name]


def create_combatant(name: str, templates: Optional[dict[str, CombatantTemplate]] = None) -> Combatant:
    """Create a new combatant from a named template."""
    return get_template(name, templates).create()
