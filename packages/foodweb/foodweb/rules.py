"""Rule configuration - who eats whom and the energy economy around it.

A RuleSet is plain data. Behaviour per kind is resolved by table lookups
here rather than by subclassing entities: a kind is an *eater* when any
interaction lists it as the eater, otherwise it is treated as a *victim* for
reproduction purposes. Decay applies only to animal kinds named by some
interaction; grass never decays.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from foodweb.types import InvalidRuleSetError, Kind

# Threshold used when a kind has no configured minimum reproduction age.
UNREACHABLE = sys.maxsize


class RuleMode(Enum):
    NORMAL = "normal"
    INVERTED = "inverted"


@dataclass(frozen=True, slots=True)
class InteractionRule:
    eater: Kind
    eaten: Kind
    energy_gain: int

    def __post_init__(self) -> None:
        if self.energy_gain < 0:
            raise InvalidRuleSetError("energy_gain", "energy_gain must be non-negative")


@dataclass(frozen=True, slots=True)
class EnergyRules:
    eater_initial_energy: int
    victim_initial_energy: int
    eater_decay: int
    victim_decay: int

    def __post_init__(self) -> None:
        if self.eater_decay < 0:
            raise InvalidRuleSetError("eater_decay", "eater_decay must be non-negative")
        if self.victim_decay < 0:
            raise InvalidRuleSetError("victim_decay", "victim_decay must be non-negative")


@dataclass(frozen=True, slots=True)
class ReproductionRules:
    eater_min_energy: int
    victim_min_energy: int
    eater_energy_cost: int
    victim_energy_cost: int
    min_age: Mapping[Kind, int] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "min_age", MappingProxyType(dict(self.min_age)))
        if self.eater_energy_cost < 0:
            raise InvalidRuleSetError(
                "eater_energy_cost", "eater_energy_cost must be non-negative"
            )
        if self.victim_energy_cost < 0:
            raise InvalidRuleSetError(
                "victim_energy_cost", "victim_energy_cost must be non-negative"
            )


@dataclass(frozen=True, slots=True)
class RegrowthRules:
    grass_regrowth_ticks: int
    grass_per_regrowth: int = 8

    def __post_init__(self) -> None:
        if self.grass_regrowth_ticks <= 0:
            raise InvalidRuleSetError(
                "grass_regrowth_ticks", "grass_regrowth_ticks must be positive"
            )
        if self.grass_per_regrowth < 0:
            raise InvalidRuleSetError(
                "grass_per_regrowth", "grass_per_regrowth must be non-negative"
            )


@dataclass(frozen=True, slots=True)
class RuleSet:
    mode: RuleMode
    interactions: tuple[InteractionRule, ...]
    energy_rules: EnergyRules
    reproduction_rules: ReproductionRules
    regrowth_rules: RegrowthRules
    max_age: int

    def __post_init__(self) -> None:
        if not isinstance(self.interactions, tuple):
            object.__setattr__(self, "interactions", tuple(self.interactions))
        if self.max_age <= 0:
            raise InvalidRuleSetError("max_age", "max_age must be positive")

    # --- Roles ---

    @property
    def eaters(self) -> frozenset[Kind]:
        return frozenset(rule.eater for rule in self.interactions)

    @property
    def victims(self) -> frozenset[Kind]:
        return frozenset(rule.eaten for rule in self.interactions)

    def is_eater(self, kind: Kind) -> bool:
        return any(rule.eater is kind for rule in self.interactions)

    def rule_for(self, eater: Kind, eaten: Kind) -> InteractionRule | None:
        """First interaction matching the pair, if any."""
        for rule in self.interactions:
            if rule.eater is eater and rule.eaten is eaten:
                return rule
        return None

    def can_eat(self, eater: Kind, eaten: Kind) -> bool:
        return self.rule_for(eater, eaten) is not None

    # --- Per-kind lookups ---

    def decay_for(self, kind: Kind) -> int:
        # grass energy stays at zero whatever eats it
        if kind is Kind.GRASS:
            return 0
        if kind in self.eaters:
            return self.energy_rules.eater_decay
        if kind in self.victims:
            return self.energy_rules.victim_decay
        return 0

    def min_energy_for(self, kind: Kind) -> int:
        rr = self.reproduction_rules
        return rr.eater_min_energy if self.is_eater(kind) else rr.victim_min_energy

    def energy_cost_for(self, kind: Kind) -> int:
        rr = self.reproduction_rules
        return rr.eater_energy_cost if self.is_eater(kind) else rr.victim_energy_cost

    def initial_energy_for(self, kind: Kind) -> int:
        er = self.energy_rules
        return er.eater_initial_energy if self.is_eater(kind) else er.victim_initial_energy

    def min_age_for(self, kind: Kind) -> int:
        return self.reproduction_rules.min_age.get(kind, UNREACHABLE)


# --- Presets ---

DEFAULT_ENERGY_RULES = EnergyRules(
    eater_initial_energy=20,
    victim_initial_energy=10,
    eater_decay=2,
    victim_decay=1,
)

DEFAULT_REPRODUCTION_RULES = ReproductionRules(
    eater_min_energy=28,
    victim_min_energy=14,
    eater_energy_cost=12,
    victim_energy_cost=6,
    min_age={Kind.PREY: 6, Kind.PREDATOR: 10},
)

DEFAULT_REGROWTH_RULES = RegrowthRules(grass_regrowth_ticks=6, grass_per_regrowth=8)

DEFAULT_MAX_AGE = 40


def create_rule_set(mode: RuleMode) -> RuleSet:
    """Build one of the two fixed presets."""
    if mode is RuleMode.NORMAL:
        interactions = (
            InteractionRule(eater=Kind.PREDATOR, eaten=Kind.PREY, energy_gain=14),
            InteractionRule(eater=Kind.PREY, eaten=Kind.GRASS, energy_gain=6),
        )
    else:
        interactions = (
            InteractionRule(eater=Kind.PREY, eaten=Kind.PREDATOR, energy_gain=14),
            InteractionRule(eater=Kind.PREY, eaten=Kind.GRASS, energy_gain=6),
        )
    return RuleSet(
        mode=mode,
        interactions=interactions,
        energy_rules=DEFAULT_ENERGY_RULES,
        reproduction_rules=DEFAULT_REPRODUCTION_RULES,
        regrowth_rules=DEFAULT_REGROWTH_RULES,
        max_age=DEFAULT_MAX_AGE,
    )


NORMAL_RULES = create_rule_set(RuleMode.NORMAL)
INVERTED_RULES = create_rule_set(RuleMode.INVERTED)
