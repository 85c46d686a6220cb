"""
Tests for dice rolling.

This module covers the roll() primitive, the DiceRoller wrapper, ability
roll ranges and the shared process-wide roller.
"""

import random
from unittest.mock import Mock

import pytest

from creational.builder.dice import AbilityRoll, DiceRoller, get_dice_roller, reset_dice_roller, roll
from creational.exceptions import InvalidDiceError


class TestRoll:
    """The roll() primitive."""

    @pytest.mark.parametrize(("quantity", "sides"), [(1, 1), (1, 6), (3, 6), (9, 2), (6, 3), (10, 20)])
    def test_result_within_bounds(self, quantity, sides):
        rng = random.Random(7)
        for _ in range(200):
            assert quantity <= roll(quantity, sides, rng) <= quantity * sides

    def test_zero_dice_rolls_zero(self):
        assert roll(0, 6) == 0

    def test_one_sided_dice_are_deterministic(self):
        assert roll(5, 1) == 5

    def test_sums_independent_draws(self):
        rng = Mock(spec=random.Random)
        rng.randint.side_effect = [1, 4, 6]

        assert roll(3, 6, rng) == 11
        assert rng.randint.call_count == 3
        rng.randint.assert_called_with(1, 6)

    def test_reaches_both_extremes(self):
        rng = random.Random(99)
        results = {roll(2, 2, rng) for _ in range(500)}

        assert results == {2, 3, 4}

    def test_uses_module_random_without_rng(self):
        random.seed(5)
        first = roll(4, 6)
        random.seed(5)

        assert roll(4, 6) == first

    @pytest.mark.parametrize(("quantity", "sides"), [(-1, 6), (1, 0), (2, -3)])
    def test_invalid_parameters_raise(self, quantity, sides):
        with pytest.raises(InvalidDiceError) as exc_info:
            roll(quantity, sides)

        assert exc_info.value.details == {"quantity": quantity, "sides": sides}
        assert isinstance(exc_info.value, ValueError)


class TestAbilityRoll:
    def test_range(self):
        ability_roll = AbilityRoll(12, 1, 6)

        assert ability_roll.minimum == 13
        assert ability_roll.maximum == 18

    def test_str(self):
        assert str(AbilityRoll(12, 1, 6)) == "12+1d6"
        assert str(AbilityRoll(0, 3, 6)) == "3d6"


class TestDiceRoller:
    def test_same_seed_same_rolls(self):
        first = DiceRoller(seed=42)
        second = DiceRoller(seed=42)

        assert [first.roll(3, 6) for _ in range(10)] == [second.roll(3, 6) for _ in range(10)]

    def test_injected_generator_is_used(self):
        rng = Mock(spec=random.Random)
        rng.randint.return_value = 2
        roller = DiceRoller(rng=rng)

        assert roller.roll(4, 6) == 8

    def test_roll_ability_adds_offset(self):
        rng = Mock(spec=random.Random)
        rng.randint.return_value = 3
        roller = DiceRoller(rng=rng)

        assert roller.roll_ability(AbilityRoll(12, 1, 6)) == 15

    def test_roll_ability_within_declared_range(self, seeded_roller):
        ability_roll = AbilityRoll(6, 2, 4)
        for _ in range(200):
            assert ability_roll.minimum <= seeded_roller.roll_ability(ability_roll) <= ability_roll.maximum


class TestSharedRoller:
    def test_returns_same_instance(self):
        assert get_dice_roller() is get_dice_roller()

    def test_reset_creates_new_instance(self):
        first = get_dice_roller()
        reset_dice_roller()

        assert get_dice_roller() is not first

    def test_seed_from_environment(self, monkeypatch):
        monkeypatch.setenv("DICE_SEED", "2024")
        rolls = [get_dice_roller().roll(3, 6) for _ in range(5)]
        reset_dice_roller()

        assert [get_dice_roller().roll(3, 6) for _ in range(5)] == rolls
