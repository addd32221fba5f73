"""World status - a coarse label for the health of the food web."""

from __future__ import annotations

from enum import Enum

from foodweb.model import World
from foodweb.types import Kind

GRASS_PRESSURE_RATIO = 0.5
PREY_PRESSURE_RATIO = 0.5


class WorldStatus(Enum):
    BALANCED = "balanced"
    PREY_STARVATION = "prey_starvation"
    PREDATOR_STARVATION = "predator_starvation"
    PREY_EXTINCTION = "prey_extinction"
    PREDATOR_EXTINCTION = "predator_extinction"
    EMPTY_WORLD = "empty_world"


def classify_counts(grass: int, prey: int, predator: int) -> WorldStatus:
    """Label a population triple. The first matching rule wins."""
    if prey == 0 and predator == 0:
        return WorldStatus.EMPTY_WORLD
    if prey == 0:
        return WorldStatus.PREY_EXTINCTION
    if predator == 0:
        return WorldStatus.PREDATOR_EXTINCTION
    if grass < prey * GRASS_PRESSURE_RATIO:
        return WorldStatus.PREY_STARVATION
    if prey < predator * PREY_PRESSURE_RATIO:
        return WorldStatus.PREDATOR_STARVATION
    return WorldStatus.BALANCED


def classify(world: World) -> WorldStatus:
    counts = world.counts()
    return classify_counts(
        counts[Kind.GRASS], counts[Kind.PREY], counts[Kind.PREDATOR]
    )
