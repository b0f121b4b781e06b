"""
Simulation runner wiring a full duel together.

Builds combatants from templates, combat modes from the config, an event bus
and a log manager, then drives the battle manager one round at a time so a
round cap can be enforced from outside the engine.
"""
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.config import SimulationConfig
from ..core.data import BattleOutcome, CombatModeType
from ..core.events import EventManager
from .battle_manager import BattleManager
from .battle_statistics import BattleStatistics, summarize_history
from .entities.combatant import Combatant
from .entities.combatant_templates import CombatantTemplate, create_combatant
from .log_manager import LogManager
from .strategies.combat_modes import create_combat_mode


@dataclass
class SimulationResult:
    """Everything a caller needs to report on a finished simulation."""
    battle_manager: BattleManager
    log_manager: LogManager
    statistics: BattleStatistics
    stalemate: bool  # True if the round cap stopped an ongoing battle

    @property
    def outcome(self) -> BattleOutcome:
        return self.battle_manager.outcome

    @property
    def winner(self) -> Optional[Combatant]:
        return self.battle_manager.get_winner()

    @property
    def rounds(self) -> int:
        return self.battle_manager.round_count


def _spawn_generators(seed: Optional[int]) -> tuple[np.random.Generator, np.random.Generator]:
    """Independent generators for the two sides, reproducible for a given seed."""
    player_seq, enemy_seq = np.random.SeedSequence(seed).spawn(2)
    return np.random.default_rng(player_seq), np.random.default_rng(enemy_seq)


def run_simulation(
    config: SimulationConfig,
    templates: Optional[dict[str, CombatantTemplate]] = None,
    event_manager: Optional[EventManager] = None
) -> SimulationResult:
    """Run one duel as described by the config.

    Args:
        config: Templates, combat modes, seed and round cap to use
        templates: Template table (defaults to the bundled presets)
        event_manager: Event bus to publish on (a new one is created if omitted)

    Returns:
        SimulationResult with the finished (or capped) battle

    Raises:
        ConfigurationError: If a template name is unknown
    """
    event_manager = event_manager or EventManager()
    log_manager = LogManager(event_manager)

    player = create_combatant(config.player_template, templates)
    enemy = create_combatant(config.enemy_template, templates)

    player_rng, enemy_rng = _spawn_generators(config.seed)
    player_mode = create_combat_mode(config.player_mode, player_rng)
    enemy_mode = create_combat_mode(config.enemy_mode, enemy_rng)

    log_manager.system(
        f"Simulating {player.character_class} ({player_mode.get_mode_name()}) vs "
        f"{enemy.character_class} ({enemy_mode.get_mode_name()}), seed={config.seed}"
    )

    battle_manager = BattleManager(player, enemy, player_mode, enemy_mode, event_manager)

    if config.max_rounds is None:
        battle_manager.fight()
    else:
        while battle_manager.is_ongoing() and battle_manager.round_count < config.max_rounds:
            battle_manager.fight_single_round()

    stalemate = battle_manager.is_ongoing()
    if stalemate:
        log_manager.warning(f"No result after {battle_manager.round_count} rounds; stopping at the round cap")

    bus_stats = event_manager.get_statistics()
    log_manager.debug(
        f"Event bus delivered {bus_stats['events_published']} events, "
        f"{bus_stats['subscriber_errors']} subscriber errors"
    )
    # Later battles on a shared bus must not reach this log
    log_manager.detach()

    return SimulationResult(
        battle_manager=battle_manager,
        log_manager=log_manager,
        statistics=summarize_history(battle_manager.fight_history),
        stalemate=stalemate,
    )


def describe_modes() -> list[str]:
    """Names accepted for combat modes in config files and on the command line."""
    return [mode.name.lower() for mode in CombatModeType]
