"""
Configuration loader for simulation settings.

This module handles loading and parsing of the YAML file that chooses the
default duel: which templates fight, which combat modes drive them, the
random seed and the round cap imposed by the simulation runner.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .data import CombatModeType
from .errors import ConfigurationError

DEFAULT_CONFIG_PATH = "assets/config/simulation.yaml"


@dataclass
class SimulationConfig:
    """Settings for a single simulated duel."""
    player_template: str = "Ranger"
    enemy_template: str = "Skeleton"
    player_mode: CombatModeType = CombatModeType.MOSTLY_EVASIVE
    enemy_mode: CombatModeType = CombatModeType.RANDOM
    seed: Optional[int] = None
    max_rounds: Optional[int] = 100  # None lets the battle run until a terminal state

    def __post_init__(self):
        if self.max_rounds is not None and self.max_rounds <= 0:
            raise ConfigurationError(f"max_rounds must be positive, got {self.max_rounds}")
        if self.seed is not None and self.seed < 0:
            raise ConfigurationError(f"seed must be a non-negative integer, got {self.seed}")


def resolve_project_path(path: str) -> Path:
    """Resolve a path relative to the project root unless it is absolute."""
    if os.path.isabs(path):
        return Path(path)
    project_root = Path(__file__).parent.parent.parent
    return project_root / path


def parse_combat_mode(value: Any) -> CombatModeType:
    """Convert a config string such as 'mostly_evasive' into a CombatModeType."""
    if isinstance(value, CombatModeType):
        return value
    try:
        return CombatModeType[str(value).strip().upper()]
    except KeyError:
        valid = ", ".join(mode.name.lower() for mode in CombatModeType)
        raise ConfigurationError(f"Unknown combat mode '{value}'. Expected one of: {valid}")


def load_simulation_config(config_path: Optional[str] = None) -> SimulationConfig:
    """Load simulation settings from a YAML file.

    Missing keys fall back to the SimulationConfig defaults.

    Args:
        config_path: Path to the YAML file (defaults to assets/config/simulation.yaml)

    Returns:
        Parsed SimulationConfig

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    config_file = resolve_project_path(config_path or DEFAULT_CONFIG_PATH)

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise ConfigurationError(f"Simulation config file not found: {config_file}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse simulation config {config_file}: {e}")

    section = data.get('simulation', {}) if isinstance(data, dict) else None
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config structure in {config_file}: expected a 'simulation' mapping")

    defaults = SimulationConfig()
    seed = section.get('seed', defaults.seed)
    max_rounds = section.get('max_rounds', defaults.max_rounds)

    try:
        return SimulationConfig(
            player_template=str(section.get('player', defaults.player_template)),
            enemy_template=str(section.get('enemy', defaults.enemy_template)),
            player_mode=parse_combat_mode(section.get('player_mode', defaults.player_mode)),
            enemy_mode=parse_combat_mode(section.get('enemy_mode', defaults.enemy_mode)),
            seed=None if seed is None else int(seed),
            max_rounds=None if max_rounds is None else int(max_rounds),
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value in {config_file}: {e}")
