"""Round record kept in the battle history."""

from dataclasses import dataclass

from .entities.combatant import CombatantSnapshot


@dataclass(frozen=True)
class FightRound:
    """Immutable record of one resolved round.

    The combatant statuses are frozen snapshots taken after damage was
    applied, so neither later rounds nor readers of the history can change them.
    """
    round_number: int
    player_fight_strategy: str
    enemy_fight_strategy: str
    player_damage_suffered: float
    enemy_damage_suffered: float
    current_player_status: CombatantSnapshot
    current_enemy_status: CombatantSnapshot
