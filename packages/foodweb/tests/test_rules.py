"""Tests for rule configuration, role lookups and presets."""

import pytest

from foodweb.rules import (
    INVERTED_RULES,
    NORMAL_RULES,
    UNREACHABLE,
    EnergyRules,
    InteractionRule,
    RegrowthRules,
    ReproductionRules,
    RuleMode,
    RuleSet,
    create_rule_set,
)
from foodweb.types import InvalidRuleSetError, Kind


def _rules(interactions, min_age=None, max_age=40):
    return RuleSet(
        mode=RuleMode.NORMAL,
        interactions=interactions,
        energy_rules=EnergyRules(20, 10, 2, 1),
        reproduction_rules=ReproductionRules(28, 14, 12, 6, min_age=min_age or {}),
        regrowth_rules=RegrowthRules(6, 8),
        max_age=max_age,
    )


# --- Presets ---


class TestPresets:
    def test_normal_interactions(self):
        assert NORMAL_RULES.mode is RuleMode.NORMAL
        assert NORMAL_RULES.interactions == (
            InteractionRule(Kind.PREDATOR, Kind.PREY, 14),
            InteractionRule(Kind.PREY, Kind.GRASS, 6),
        )

    def test_inverted_interactions(self):
        assert INVERTED_RULES.mode is RuleMode.INVERTED
        assert INVERTED_RULES.interactions == (
            InteractionRule(Kind.PREY, Kind.PREDATOR, 14),
            InteractionRule(Kind.PREY, Kind.GRASS, 6),
        )

    @pytest.mark.parametrize("rules", [NORMAL_RULES, INVERTED_RULES])
    def test_shared_numbers(self, rules):
        assert rules.energy_rules == EnergyRules(20, 10, 2, 1)
        rr = rules.reproduction_rules
        assert (rr.eater_min_energy, rr.victim_min_energy) == (28, 14)
        assert (rr.eater_energy_cost, rr.victim_energy_cost) == (12, 6)
        assert dict(rr.min_age) == {Kind.PREY: 6, Kind.PREDATOR: 10}
        assert rules.regrowth_rules.grass_regrowth_ticks == 6
        assert rules.regrowth_rules.grass_per_regrowth == 8
        assert rules.max_age == 40

    def test_create_rule_set_matches_constants(self):
        assert create_rule_set(RuleMode.NORMAL) == NORMAL_RULES
        assert create_rule_set(RuleMode.INVERTED) == INVERTED_RULES


# --- Roles ---


def test_roles_normal():
    assert NORMAL_RULES.eaters == {Kind.PREDATOR, Kind.PREY}
    assert NORMAL_RULES.victims == {Kind.PREY, Kind.GRASS}


def test_roles_inverted():
    assert INVERTED_RULES.eaters == {Kind.PREY}
    assert INVERTED_RULES.victims == {Kind.PREDATOR, Kind.GRASS}


def test_can_eat():
    assert NORMAL_RULES.can_eat(Kind.PREDATOR, Kind.PREY)
    assert not NORMAL_RULES.can_eat(Kind.PREY, Kind.PREDATOR)
    assert INVERTED_RULES.can_eat(Kind.PREY, Kind.PREDATOR)
    assert not INVERTED_RULES.can_eat(Kind.PREDATOR, Kind.GRASS)


def test_rule_for_returns_first_match():
    rules = _rules(
        (
            InteractionRule(Kind.PREY, Kind.GRASS, 6),
            InteractionRule(Kind.PREY, Kind.GRASS, 99),
        )
    )
    assert rules.rule_for(Kind.PREY, Kind.GRASS).energy_gain == 6
    assert rules.rule_for(Kind.GRASS, Kind.PREY) is None


def test_decay_normal():
    assert NORMAL_RULES.decay_for(Kind.PREDATOR) == 2
    # prey both eats and is eaten; the eater rate applies
    assert NORMAL_RULES.decay_for(Kind.PREY) == 2
    # grass is eaten but never decays
    assert NORMAL_RULES.decay_for(Kind.GRASS) == 0


def test_decay_inverted():
    assert INVERTED_RULES.decay_for(Kind.PREY) == 2
    assert INVERTED_RULES.decay_for(Kind.PREDATOR) == 1


def test_decay_zero_for_kind_in_no_interaction():
    rules = _rules((InteractionRule(Kind.PREY, Kind.GRASS, 6),))
    assert rules.decay_for(Kind.PREDATOR) == 0
    assert rules.decay_for(Kind.PREY) == 2


def test_reproduction_lookups_by_role():
    assert NORMAL_RULES.min_energy_for(Kind.PREDATOR) == 28
    assert NORMAL_RULES.energy_cost_for(Kind.PREDATOR) == 12
    assert NORMAL_RULES.initial_energy_for(Kind.PREDATOR) == 20
    assert INVERTED_RULES.min_energy_for(Kind.PREDATOR) == 14
    assert INVERTED_RULES.energy_cost_for(Kind.PREDATOR) == 6
    assert INVERTED_RULES.initial_energy_for(Kind.PREDATOR) == 10


def test_missing_min_age_is_unreachable():
    rules = _rules((InteractionRule(Kind.PREY, Kind.GRASS, 6),), min_age={Kind.PREY: 3})
    assert rules.min_age_for(Kind.PREY) == 3
    assert rules.min_age_for(Kind.PREDATOR) == UNREACHABLE


def test_interactions_list_is_frozen_to_tuple():
    rules = _rules([InteractionRule(Kind.PREY, Kind.GRASS, 6)])
    assert isinstance(rules.interactions, tuple)


def test_min_age_table_is_read_only():
    with pytest.raises(TypeError):
        NORMAL_RULES.reproduction_rules.min_age[Kind.PREY] = 0
    assert INVERTED_RULES.min_age_for(Kind.PREY) == 6


def test_min_age_copied_from_caller_mapping():
    table = {Kind.PREY: 3}
    rules = _rules((InteractionRule(Kind.PREY, Kind.GRASS, 6),), min_age=table)
    table[Kind.PREY] = 99
    assert rules.min_age_for(Kind.PREY) == 3


# --- Validation ---


def test_regrowth_ticks_must_be_positive():
    with pytest.raises(InvalidRuleSetError, match="grass_regrowth_ticks") as exc:
        RegrowthRules(grass_regrowth_ticks=0)
    assert exc.value.field_name == "grass_regrowth_ticks"


def test_grass_per_regrowth_non_negative():
    with pytest.raises(InvalidRuleSetError):
        RegrowthRules(grass_regrowth_ticks=6, grass_per_regrowth=-1)


def test_negative_decay_rejected():
    with pytest.raises(InvalidRuleSetError):
        EnergyRules(20, 10, -1, 1)


def test_negative_cost_rejected():
    with pytest.raises(InvalidRuleSetError):
        ReproductionRules(28, 14, 12, -6)


def test_negative_energy_gain_rejected():
    with pytest.raises(InvalidRuleSetError, match="energy_gain") as exc:
        InteractionRule(Kind.PREDATOR, Kind.PREY, -3)
    assert exc.value.field_name == "energy_gain"


def test_zero_energy_gain_allowed():
    assert InteractionRule(Kind.PREY, Kind.GRASS, 0).energy_gain == 0


def test_max_age_must_be_positive():
    with pytest.raises(InvalidRuleSetError, match="max_age"):
        _rules((), max_age=0)


def test_invalid_rule_set_error_is_value_error():
    with pytest.raises(ValueError):
        RegrowthRules(grass_regrowth_ticks=-2)
