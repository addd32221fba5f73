"""foodweb - a deterministic predator/prey/grass grid simulator."""

from foodweb.model import Entity, World
from foodweb.presets import DensityLevel, build_initial_world
from foodweb.rng import SimulationRng
from foodweb.rules import (
    INVERTED_RULES,
    NORMAL_RULES,
    EnergyRules,
    InteractionRule,
    RegrowthRules,
    ReproductionRules,
    RuleMode,
    RuleSet,
    create_rule_set,
)
from foodweb.simulation import DETERMINISTIC_SEED, Simulation, SimulationConfig
from foodweb.status import WorldStatus, classify, classify_counts
from foodweb.tick import advance
from foodweb.types import InvalidRuleSetError, InvalidWorldError, Kind, Position

__all__ = [
    "advance",
    "classify",
    "classify_counts",
    "build_initial_world",
    "create_rule_set",
    "NORMAL_RULES",
    "INVERTED_RULES",
    "Entity",
    "World",
    "Kind",
    "Position",
    "RuleMode",
    "RuleSet",
    "InteractionRule",
    "EnergyRules",
    "ReproductionRules",
    "RegrowthRules",
    "DensityLevel",
    "WorldStatus",
    "SimulationRng",
    "Simulation",
    "SimulationConfig",
    "DETERMINISTIC_SEED",
    "InvalidWorldError",
    "InvalidRuleSetError",
]
