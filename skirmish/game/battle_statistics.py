"""
Battle statistics computed from a fight history.

Per-round values are gathered into numpy arrays so totals, averages and
health curves are single vectorized operations.
"""
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .fight_round import FightRound


@dataclass
class BattleStatistics:
    """Summary of a (possibly unfinished) battle."""
    rounds: int
    damage_to_player: np.ndarray
    damage_to_enemy: np.ndarray
    player_health: np.ndarray
    enemy_health: np.ndarray
    player_strategy_usage: dict[str, int] = field(default_factory=dict)
    enemy_strategy_usage: dict[str, int] = field(default_factory=dict)

    @property
    def total_damage_to_player(self) -> float:
        return float(self.damage_to_player.sum())

    @property
    def total_damage_to_enemy(self) -> float:
        return float(self.damage_to_enemy.sum())

    @property
    def mean_damage_to_player(self) -> float:
        return float(self.damage_to_player.mean()) if self.rounds else 0.0

    @property
    def mean_damage_to_enemy(self) -> float:
        return float(self.damage_to_enemy.mean()) if self.rounds else 0.0

    @property
    def stalled_rounds(self) -> int:
        """Rounds in which neither side dealt any damage."""
        stalled_mask = (self.damage_to_player == 0) & (self.damage_to_enemy == 0)
        return int(np.count_nonzero(stalled_mask))


def _count_labels(labels: list[str]) -> dict[str, int]:
    if not labels:
        return {}
    unique, counts = np.unique(np.array(labels), return_counts=True)
    return {str(label): int(count) for label, count in zip(unique, counts)}


def summarize_history(history: Sequence[FightRound]) -> BattleStatistics:
    """Build statistics from an ordered fight history.

    Args:
        history: Rounds in the order they were fought

    Returns:
        BattleStatistics; an empty history yields zero rounds and empty arrays
    """
    damage_to_player = np.array([r.player_damage_suffered for r in history], dtype=np.float64)
    damage_to_enemy = np.array([r.enemy_damage_suffered for r in history], dtype=np.float64)
    player_health = np.array([r.current_player_status.health for r in history], dtype=np.float64)
    enemy_health = np.array([r.current_enemy_status.health for r in history], dtype=np.float64)

    return BattleStatistics(
        rounds=len(history),
        damage_to_player=damage_to_player,
        damage_to_enemy=damage_to_enemy,
        player_health=player_health,
        enemy_health=enemy_health,
        player_strategy_usage=_count_labels([r.player_fight_strategy for r in history]),
        enemy_strategy_usage=_count_labels([r.enemy_fight_strategy for r in history]),
    )
