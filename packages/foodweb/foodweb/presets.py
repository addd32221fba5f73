"""Initial world construction from density levels."""

from __future__ import annotations

from enum import Enum

from foodweb.model import Entity, World
from foodweb.rng import SimulationRng
from foodweb.types import Kind, Position

# Starting energy for animals before jitter.
BASE_ANIMAL_ENERGY = 10
# Jitter and starting age are drawn from [0, SPAWN_JITTER).
SPAWN_JITTER = 3


class DensityLevel(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


_DIVISORS = {
    DensityLevel.LOW: 10,
    DensityLevel.MEDIUM: 5,
    DensityLevel.HIGH: 3,
}


def density_to_count(level: DensityLevel, total_cells: int) -> int:
    return total_cells // _DIVISORS[level]


def build_initial_world(
    rows: int,
    cols: int,
    grass_density: DensityLevel,
    prey_density: DensityLevel,
    predator_density: DensityLevel,
    rng: SimulationRng,
) -> World:
    """Scatter grass, prey and predators over a fresh grid.

    Cells are shuffled once, then handed out front to back: grass first, then
    prey, then predators, each group capped by the cells still free. Prey
    get a quarter and predators an eighth of their density count.
    """
    # validate extents before touching the rng
    empty = World(rows=rows, cols=cols)
    total = empty.total_cells

    plan = (
        (Kind.GRASS, density_to_count(grass_density, total)),
        (Kind.PREY, density_to_count(prey_density, total) // 4),
        (Kind.PREDATOR, density_to_count(predator_density, total) // 8),
    )

    free: list[Position] = rng.shuffle(list(empty.cells()))
    cursor = 0
    next_id = 1
    entities: list[Entity] = []

    for kind, wanted in plan:
        for _ in range(min(wanted, len(free) - cursor)):
            pos = free[cursor]
            cursor += 1
            if kind is Kind.GRASS:
                energy = 0
            else:
                energy = BASE_ANIMAL_ENERGY + rng.next_int(SPAWN_JITTER)
            age = rng.next_int(SPAWN_JITTER)
            entities.append(
                Entity(id=next_id, kind=kind, position=pos, energy=energy, age=age)
            )
            next_id += 1

    return World(rows=rows, cols=cols, entities=tuple(entities), tick=0, next_id=next_id)
