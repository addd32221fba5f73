"""Tick processor - advances a World by one generation.

The pipeline runs seven phases in a fixed order:

1. eating        - each entity eats at most one adjacent edible neighbor
2. decay         - eaters and victims lose their per-tick energy
3. death         - non-grass with no energy or too old are removed
4. movement      - animals step toward food or into an empty cell
5. reproduction  - eligible animals spawn one child into an empty cell
6. regrowth      - every N ticks grass appears on random empty cells
7. aging         - everything, newborns included, ages by one

Each phase reads the list produced by the previous one and returns a new
list; entity values are replaced, never mutated. All randomness goes through
the SimulationRng passed in, and the order of draws follows list order, so
the same inputs always give the same output.
"""

from __future__ import annotations

import logging
from typing import Sequence

from foodweb.grid import cells, neighbors4
from foodweb.model import Entity, World
from foodweb.rng import SimulationRng
from foodweb.rules import InteractionRule, RuleSet
from foodweb.types import EntityId, Kind, Position

logger = logging.getLogger(__name__)


def advance(world: World, rules: RuleSet, rng: SimulationRng) -> World:
    """Run one full tick and return the next World."""
    rows, cols = world.rows, world.cols
    snapshot = list(world.entities)

    after_eating = resolve_eating(snapshot, rules, rng, rows, cols)
    after_decay = apply_decay(after_eating, rules)
    after_death = resolve_deaths(after_decay, rules)
    after_move = resolve_movement(after_death, rules, rng, rows, cols)

    next_id = world.id_floor()
    after_repro, next_id = resolve_reproduction(
        after_move, rules, rng, rows, cols, next_id
    )
    after_regrowth, next_id = regrow_grass(
        after_repro, rules, rng, rows, cols, world.tick, next_id
    )
    aged = age_entities(after_regrowth)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "tick %d: %d entities -> eaten %d, died %d, born %d, regrown %d",
            world.tick,
            len(snapshot),
            len(snapshot) - len(after_eating),
            len(after_decay) - len(after_death),
            len(after_repro) - len(after_move),
            len(after_regrowth) - len(after_repro),
        )

    return World(
        rows=rows,
        cols=cols,
        entities=tuple(aged),
        tick=world.tick + 1,
        next_id=next_id,
    )


# --- Phase 1: eating ---


def resolve_eating(
    entities: Sequence[Entity],
    rules: RuleSet,
    rng: SimulationRng,
    rows: int,
    cols: int,
) -> list[Entity]:
    """Each entity, in list order, eats at most one adjacent edible neighbor.

    Eaten entities are dropped from the result and cannot eat later in the
    same pass. Candidates are offered to ``pick_one`` in list order.
    """
    index_at: dict[Position, int] = {e.position: i for i, e in enumerate(entities)}
    eaten: set[EntityId] = set()
    gains: dict[EntityId, int] = {}

    for entity in entities:
        if entity.id in eaten:
            continue

        meals: list[tuple[int, Entity, InteractionRule]] = []
        for pos in neighbors4(entity.position, rows, cols):
            i = index_at.get(pos)
            if i is None:
                continue
            target = entities[i]
            if target.id in eaten:
                continue
            rule = rules.rule_for(entity.kind, target.kind)
            if rule is not None:
                meals.append((i, target, rule))
        meals.sort(key=lambda m: m[0])

        chosen = rng.pick_one(meals)
        if chosen is not None:
            _, target, rule = chosen
            eaten.add(target.id)
            gains[entity.id] = gains.get(entity.id, 0) + rule.energy_gain

    result: list[Entity] = []
    for entity in entities:
        if entity.id in eaten:
            continue
        gain = gains.get(entity.id, 0)
        if gain > 0:
            entity = entity.with_energy(entity.energy + gain)
        result.append(entity)
    return result


# --- Phase 2: energy decay ---


def apply_decay(entities: Sequence[Entity], rules: RuleSet) -> list[Entity]:
    result: list[Entity] = []
    for entity in entities:
        decay = rules.decay_for(entity.kind)
        if decay:
            entity = entity.with_energy(entity.energy - decay)
        result.append(entity)
    return result


# --- Phase 3: death ---


def is_alive(entity: Entity, rules: RuleSet) -> bool:
    # grass only leaves the world by being eaten
    if entity.kind is Kind.GRASS:
        return True
    return entity.energy > 0 and entity.age < rules.max_age


def resolve_deaths(entities: Sequence[Entity], rules: RuleSet) -> list[Entity]:
    return [e for e in entities if is_alive(e, rules)]


# --- Phase 4: movement ---


def resolve_movement(
    entities: Sequence[Entity],
    rules: RuleSet,
    rng: SimulationRng,
    rows: int,
    cols: int,
) -> list[Entity]:
    """Move animals one step, earlier entities first.

    Cells holding something edible are preferred. Such a cell is occupied, so
    the mover keeps its place beside the meal and eats it next tick. With no
    food in reach, a random empty neighbor is taken; with none, it stays.
    """
    occupied: dict[Position, Entity] = {e.position: e for e in entities}
    result: list[Entity] = []

    for entity in entities:
        if entity.kind is Kind.GRASS:
            result.append(entity)
            continue

        neighbors = neighbors4(entity.position, rows, cols)
        edible = [
            pos
            for pos in neighbors
            if pos in occupied and rules.can_eat(entity.kind, occupied[pos].kind)
        ]
        if edible:
            target = rng.pick_one(edible)
        else:
            target = rng.pick_one([pos for pos in neighbors if pos not in occupied])

        if target is not None and target not in occupied:
            occupied.pop(entity.position, None)
            entity = entity.moved_to(target)
            occupied[target] = entity
        result.append(entity)

    return result


# --- Phase 5: reproduction ---


def can_reproduce(entity: Entity, rules: RuleSet) -> bool:
    if entity.kind is Kind.GRASS:
        return False
    return (
        entity.energy >= rules.min_energy_for(entity.kind)
        and entity.age >= rules.min_age_for(entity.kind)
    )


def resolve_reproduction(
    entities: Sequence[Entity],
    rules: RuleSet,
    rng: SimulationRng,
    rows: int,
    cols: int,
    next_id: EntityId,
) -> tuple[list[Entity], EntityId]:
    """Spawn at most one child per eligible parent.

    Returns the new list (each child right after its parent) and the next
    free id. A spawn cell is reserved as soon as it is chosen.
    """
    occupied: set[Position] = {e.position for e in entities}
    result: list[Entity] = []

    for entity in entities:
        if not can_reproduce(entity, rules):
            result.append(entity)
            continue

        free = [
            pos for pos in neighbors4(entity.position, rows, cols) if pos not in occupied
        ]
        spawn_at = rng.pick_one(free)
        if spawn_at is None:
            result.append(entity)
            continue

        parent = entity.with_energy(entity.energy - rules.energy_cost_for(entity.kind))
        child = Entity(
            id=next_id,
            kind=entity.kind,
            position=spawn_at,
            energy=rules.initial_energy_for(entity.kind) + rng.next_int(3) - 1,
            age=0,
        )
        next_id += 1
        occupied.add(spawn_at)
        result.append(parent)
        result.append(child)

    return result, next_id


# --- Phase 6: grass regrowth ---


def regrow_grass(
    entities: Sequence[Entity],
    rules: RuleSet,
    rng: SimulationRng,
    rows: int,
    cols: int,
    tick: int,
    next_id: EntityId,
) -> tuple[list[Entity], EntityId]:
    """Scatter new grass on empty cells when *tick* hits the regrowth cadence."""
    result = list(entities)
    regrowth = rules.regrowth_rules
    if tick % regrowth.grass_regrowth_ticks != 0:
        return result, next_id

    occupied = {e.position for e in entities}
    empty = [pos for pos in cells(rows, cols) if pos not in occupied]
    count = min(regrowth.grass_per_regrowth, len(empty))

    for pos in rng.shuffle(empty)[:count]:
        result.append(Entity(id=next_id, kind=Kind.GRASS, position=pos, energy=0, age=0))
        next_id += 1

    return result, next_id


# --- Phase 7: aging ---


def age_entities(entities: Sequence[Entity]) -> list[Entity]:
    return [e.aged() for e in entities]
