"""
Unit tests for combat modes.

Tests the round-counting, random, fixed, scripted and health-threshold
selection policies and the combat mode factory.
"""

from unittest.mock import Mock

import numpy as np
import pytest

from skirmish.core.data import CombatModeType
from skirmish.core.errors import InvalidArgumentError
from skirmish.game.entities.combatant import Combatant
from skirmish.game.strategies import (
    AggressiveFightStrategy,
    CombatMode,
    DefensiveFightStrategy,
    EvasiveFightStrategy,
    FightStrategy,
    FixedCombatMode,
    HealthThresholdCombatMode,
    MostlyEvasiveCombatMode,
    RandomCombatMode,
    ScriptedCombatMode,
    create_combat_mode,
)


class TestMostlyEvasiveCombatMode:
    """Test the every-third-round-aggressive policy."""

    def test_one_out_of_three_is_aggressive(self):
        combat_mode = MostlyEvasiveCombatMode()

        for call in range(1, 13):
            strategy = combat_mode.next_strategy()

            if call % 3 == 0:
                assert isinstance(strategy, AggressiveFightStrategy), f"call {call}"
            else:
                assert isinstance(strategy, EvasiveFightStrategy), f"call {call}"

    def test_counter_persists(self):
        combat_mode = MostlyEvasiveCombatMode()

        for _ in range(4):
            combat_mode.next_strategy()

        assert combat_mode.strategy_counter == 4

    def test_instances_count_independently(self):
        first = MostlyEvasiveCombatMode()
        second = MostlyEvasiveCombatMode()

        first.next_strategy()
        first.next_strategy()

        assert isinstance(first.next_strategy(), AggressiveFightStrategy)
        assert isinstance(second.next_strategy(), EvasiveFightStrategy)


class TestRandomCombatMode:
    """Test random strategy selection."""

    def test_uses_injected_generator(self):
        rng = Mock()
        rng.integers.side_effect = [0, 1, 2, 1]
        combat_mode = RandomCombatMode(rng)

        picks = [combat_mode.next_strategy() for _ in range(4)]

        assert isinstance(picks[0], AggressiveFightStrategy)
        assert isinstance(picks[1], DefensiveFightStrategy)
        assert isinstance(picks[2], EvasiveFightStrategy)
        assert isinstance(picks[3], DefensiveFightStrategy)
        rng.integers.assert_called_with(0, 3)

    def test_same_seed_same_sequence(self):
        first = RandomCombatMode(np.random.default_rng(42))
        second = RandomCombatMode(np.random.default_rng(42))

        first_names = [first.next_strategy().get_strategy_name() for _ in range(20)]
        second_names = [second.next_strategy().get_strategy_name() for _ in range(20)]

        assert first_names == second_names

    def test_all_strategies_eventually_chosen(self):
        combat_mode = RandomCombatMode(np.random.default_rng(1234))

        names = {combat_mode.next_strategy().get_strategy_name() for _ in range(300)}

        assert names == {"Aggressive", "Defensive", "Evasive"}

    def test_default_generator(self):
        strategy = RandomCombatMode().next_strategy()

        assert isinstance(strategy, FightStrategy)


class TestFixedAndScriptedModes:
    """Test deterministic helper modes."""

    def test_fixed_mode(self, defensive):
        combat_mode = FixedCombatMode(defensive)

        assert all(combat_mode.next_strategy() is defensive for _ in range(5))
        assert combat_mode.get_mode_name() == "Always Defensive"

    def test_fixed_mode_requires_strategy(self):
        with pytest.raises(InvalidArgumentError):
            FixedCombatMode(None)

    def test_scripted_mode_cycles(self, aggressive, defensive):
        combat_mode = ScriptedCombatMode([aggressive, defensive])

        picks = [combat_mode.next_strategy() for _ in range(5)]

        assert picks == [aggressive, defensive, aggressive, defensive, aggressive]

    @pytest.mark.parametrize("strategies", [[], (), None])
    def test_scripted_mode_requires_strategies(self, strategies):
        with pytest.raises(InvalidArgumentError):
            ScriptedCombatMode(strategies)

    def test_scripted_mode_rejects_none_entries(self, aggressive):
        with pytest.raises(InvalidArgumentError):
            ScriptedCombatMode([aggressive, None])


class TestHealthThresholdCombatMode:
    """Test a policy added without changing the battle manager."""

    def test_switches_to_defensive_when_hurt(self):
        combatant = Combatant("Knight", 20, 8, 11)
        combat_mode = HealthThresholdCombatMode(combatant, threshold_ratio=0.5)

        assert isinstance(combat_mode.next_strategy(), AggressiveFightStrategy)

        combatant.receive_damage(10)
        assert isinstance(combat_mode.next_strategy(), DefensiveFightStrategy)

    def test_threshold_uses_starting_health(self):
        combatant = Combatant("Knight", 20, 8, 11)
        combat_mode = HealthThresholdCombatMode(combatant, threshold_ratio=0.25)

        assert combat_mode.threshold_health == pytest.approx(5)

    @pytest.mark.parametrize("ratio", [0, -0.5, 1.5, None])
    def test_invalid_ratio(self, ratio):
        with pytest.raises(InvalidArgumentError):
            HealthThresholdCombatMode(Combatant("Knight", 20, 8, 11), threshold_ratio=ratio)

    def test_requires_combatant(self):
        with pytest.raises(InvalidArgumentError):
            HealthThresholdCombatMode(None)


class TestCombatModeFactory:
    """Test create_combat_mode."""

    @pytest.mark.parametrize("mode_type,expected_class", [
        (CombatModeType.MOSTLY_EVASIVE, MostlyEvasiveCombatMode),
        (CombatModeType.RANDOM, RandomCombatMode),
        (CombatModeType.ALWAYS_AGGRESSIVE, FixedCombatMode),
        (CombatModeType.ALWAYS_DEFENSIVE, FixedCombatMode),
        (CombatModeType.ALWAYS_EVASIVE, FixedCombatMode),
    ])
    def test_factory(self, mode_type, expected_class):
        combat_mode = create_combat_mode(mode_type)

        assert isinstance(combat_mode, expected_class)
        assert isinstance(combat_mode, CombatMode)
        assert isinstance(combat_mode.next_strategy(), FightStrategy)

    def test_fixed_modes_pick_their_strategy(self):
        assert isinstance(create_combat_mode(CombatModeType.ALWAYS_EVASIVE).next_strategy(), EvasiveFightStrategy)

    def test_random_mode_receives_generator(self):
        rng = Mock()
        rng.integers.return_value = 2

        combat_mode = create_combat_mode(CombatModeType.RANDOM, rng)

        assert isinstance(combat_mode.next_strategy(), EvasiveFightStrategy)

    def test_unknown_mode(self):
        with pytest.raises(InvalidArgumentError):
            create_combat_mode("CAUTIOUS")

    def test_factory_returns_new_instances(self):
        first = create_combat_mode(CombatModeType.MOSTLY_EVASIVE)
        second = create_combat_mode(CombatModeType.MOSTLY_EVASIVE)

        assert first is not second
