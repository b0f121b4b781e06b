"""
Battle management for a duel between two combatants.

This module runs the round loop: each side's strategy is selected (from its
combat mode or passed in explicitly), applied through the fight context,
damage is computed from both sides' post-strategy stats at once, health is
reduced and an immutable FightRound is appended to the history.
"""
from typing import Optional, TYPE_CHECKING

from ..core.data import BattleOutcome, LogCategory, LogLevel, Side, SIDE_NAMES
from ..core.errors import InvalidArgumentError, InvalidStateError
from ..core.events import (
    BattleEnded,
    BattleStarted,
    CombatantDefeated,
    DebugMessage,
    LogMessage,
    RoundResolved,
)
from .entities.combatant import Combatant
from .fight_context import FightContext
from .fight_round import FightRound
from .strategies.fight_strategies import FightStrategy

if TYPE_CHECKING:
    from ..core.events import EventManager
    from .strategies.combat_modes import CombatMode


def calculate_damage(attack_score: float, defence_score: float) -> float:
    """Damage dealt by an attack against a defence, never negative."""
    damage_done = attack_score - defence_score
    return damage_done if damage_done >= 0 else 0.0


class BattleManager:
    """Owns two combatants and their combat modes for the duration of one battle.

    States:
        ONGOING: both combatants have health left (initial state)
        WON: exactly one combatant has health left (terminal)
        DRAW: both combatants reached zero in the same round (terminal)

    fight() has no round cap. If neither side can ever out-attack the other's
    defence the loop does not end; callers that need a bound should drive
    fight_single_round() themselves.
    """

    def __init__(
        self,
        player: Combatant,
        enemy: Combatant,
        player_combat_mode: Optional["CombatMode"] = None,
        enemy_combat_mode: Optional["CombatMode"] = None,
        event_manager: Optional["EventManager"] = None
    ):
        """Initialize the battle with the components needed to perform the fight.

        Args:
            player: The combatant used by the player
            enemy: The combatant used by the enemy
            player_combat_mode: Strategy selection policy for the player
            enemy_combat_mode: Strategy selection policy for the enemy
            event_manager: Optional event bus that receives battle events

        Raises:
            InvalidArgumentError: If a combatant is missing or starts with no health
        """
        if player is None:
            raise InvalidArgumentError("player")
        if enemy is None:
            raise InvalidArgumentError("enemy")
        if player.health <= 0:
            raise InvalidArgumentError("player", "Combatant must start with health greater than 0")
        if enemy.health <= 0:
            raise InvalidArgumentError("enemy", "Combatant must start with health greater than 0")
        if player is enemy:
            raise InvalidArgumentError("enemy", "Player and enemy must be different combatants")

        self._player = player
        self._enemy = enemy
        self._player_combat_mode = player_combat_mode
        self._enemy_combat_mode = enemy_combat_mode
        self.event_manager = event_manager
        self._fight_history: list[FightRound] = []

        self._publish(BattleStarted(round_number=0, player=player.snapshot(), enemy=enemy.snapshot()))
        self._emit_log(
            f"Battle started: {player.character_class} vs {enemy.character_class}",
            LogCategory.SYSTEM
        )

    @property
    def player(self) -> Combatant:
        return self._player

    @property
    def enemy(self) -> Combatant:
        return self._enemy

    @property
    def fight_history(self) -> tuple[FightRound, ...]:
        """The battle history in read-only form."""
        return tuple(self._fight_history)

    @property
    def round_count(self) -> int:
        return len(self._fight_history)

    @property
    def outcome(self) -> BattleOutcome:
        if self.is_ongoing():
            return BattleOutcome.ONGOING
        if self.is_draw():
            return BattleOutcome.DRAW
        return BattleOutcome.WON

    def is_ongoing(self) -> bool:
        """Return True while both combatants are alive."""
        return self._player.health > 0 and self._enemy.health > 0

    def is_draw(self) -> bool:
        """Return True if both combatants are dead."""
        return self._player.health == 0 and self._enemy.health == 0

    def get_winner(self) -> Optional[Combatant]:
        """Return the surviving combatant, or None while ongoing or on a draw."""
        if self.is_ongoing() or self.is_draw():
            return None

        return self._player if self._player.health > 0 else self._enemy

    def fight_single_round(
        self,
        player_strategy: Optional[FightStrategy] = None,
        enemy_strategy: Optional[FightStrategy] = None
    ) -> FightRound:
        """Perform one round and save the result in the fight history.

        A side without an explicit strategy gets one from its combat mode.

        Args:
            player_strategy: Strategy for the player this round
            enemy_strategy: Strategy for the enemy this round

        Returns:
            The FightRound appended to the history

        Raises:
            InvalidStateError: If the battle is already over
            InvalidArgumentError: If a strategy is invalid or a needed combat mode is missing
        """
        if not self.is_ongoing():
            raise InvalidStateError(
                f"Battle is over ({self.outcome.name}) after {self.round_count} rounds; no further rounds allowed"
            )

        # Validate everything before any combat mode counter or combatant is touched
        self._check_strategy_source("player", player_strategy, self._player_combat_mode)
        self._check_strategy_source("enemy", enemy_strategy, self._enemy_combat_mode)

        # Both modes are asked before either answer is checked
        player_from_mode = player_strategy is None
        enemy_from_mode = enemy_strategy is None
        if player_from_mode:
            player_strategy = self._player_combat_mode.next_strategy()
        if enemy_from_mode:
            enemy_strategy = self._enemy_combat_mode.next_strategy()
        if player_from_mode:
            self._check_mode_choice(self._player_combat_mode, player_strategy)
        if enemy_from_mode:
            self._check_mode_choice(self._enemy_combat_mode, enemy_strategy)
        if player_from_mode:
            self._log_mode_choice(Side.PLAYER, self._player_combat_mode, player_strategy)
        if enemy_from_mode:
            self._log_mode_choice(Side.ENEMY, self._enemy_combat_mode, enemy_strategy)

        # Strategy pattern: the context applies whichever strategy was selected
        combat_context = FightContext(player_strategy)
        combat_context.enter_combat_mode(self._player)
        combat_context.set_fight_strategy(enemy_strategy)
        combat_context.enter_combat_mode(self._enemy)
        self._publish(DebugMessage(
            round_number=self.round_count + 1,
            message=(f"{self._player.character_class} fights at {self._player.fight_attack:g}/"
                     f"{self._player.fight_defence:g}, {self._enemy.character_class} at "
                     f"{self._enemy.fight_attack:g}/{self._enemy.fight_defence:g} (attack/defence)"),
            source="BattleManager",
            context={'player': self._player.snapshot(), 'enemy': self._enemy.snapshot()},
        ))

        # Both damages come from the same post-strategy stats
        damage_dealt_to_player = calculate_damage(self._enemy.fight_attack, self._player.fight_defence)
        damage_dealt_to_enemy = calculate_damage(self._player.fight_attack, self._enemy.fight_defence)

        self._player.receive_damage(damage_dealt_to_player)
        self._enemy.receive_damage(damage_dealt_to_enemy)

        fight_round = FightRound(
            round_number=self.round_count + 1,
            player_fight_strategy=str(player_strategy),
            enemy_fight_strategy=str(enemy_strategy),
            player_damage_suffered=damage_dealt_to_player,
            enemy_damage_suffered=damage_dealt_to_enemy,
            current_player_status=self._player.snapshot(),
            current_enemy_status=self._enemy.snapshot(),
        )
        self._fight_history.append(fight_round)

        self._announce_round(fight_round)
        return fight_round

    def fight(self) -> Optional[Combatant]:
        """Run rounds until the battle reaches a terminal state.

        Returns:
            The winner, or None on a draw

        Raises:
            InvalidStateError: If the battle is already over
        """
        if not self.is_ongoing():
            raise InvalidStateError(f"Battle is already over ({self.outcome.name})")

        while self.is_ongoing():
            self.fight_single_round()

        return self.get_winner()

    def _check_strategy_source(
        self,
        side_name: str,
        strategy: Optional[FightStrategy],
        combat_mode: Optional["CombatMode"]
    ) -> None:
        if strategy is None:
            if combat_mode is None:
                raise InvalidArgumentError(
                    f"{side_name}_combat_mode",
                    "A combat mode is required when no strategy is supplied"
                )
        elif not isinstance(strategy, FightStrategy):
            raise InvalidArgumentError(
                f"{side_name}_strategy",
                f"Expected a FightStrategy, got {type(strategy).__name__}"
            )

    def _check_mode_choice(self, combat_mode: "CombatMode", strategy) -> None:
        if not isinstance(strategy, FightStrategy):
            raise InvalidStateError(
                f"{combat_mode.__class__.__name__} returned {strategy!r} instead of a fight strategy"
            )

    def _log_mode_choice(self, side: Side, combat_mode: "CombatMode", strategy: FightStrategy) -> None:
        self._emit_log(
            f"{SIDE_NAMES[side]} mode '{combat_mode.get_mode_name()}' chose {strategy.get_strategy_name()}",
            LogCategory.STRATEGY,
            LogLevel.DEBUG,
            round_number=self.round_count + 1
        )

    def _announce_round(self, fight_round: FightRound) -> None:
        round_number = fight_round.round_number
        self._publish(RoundResolved(round_number=round_number, fight_round=fight_round))

        for side, combatant in ((Side.PLAYER, self._player), (Side.ENEMY, self._enemy)):
            if combatant.health == 0:
                self._publish(CombatantDefeated(round_number=round_number, combatant=combatant.snapshot(), side=side))

        if not self.is_ongoing():
            winner = self.get_winner()
            self._publish(BattleEnded(
                round_number=round_number,
                outcome=self.outcome,
                winner=winner.snapshot() if winner is not None else None
            ))

    def _publish(self, event) -> None:
        if self.event_manager is not None:
            self.event_manager.publish(event)

    def _emit_log(
        self,
        message: str,
        category: LogCategory = LogCategory.BATTLE,
        level: LogLevel = LogLevel.INFO,
        round_number: Optional[int] = None
    ) -> None:
        """Emit a log message event."""
        self._publish(LogMessage(
            round_number=self.round_count if round_number is None else round_number,
            message=message,
            category=category,
            level=level,
            source="BattleManager"
        ))
