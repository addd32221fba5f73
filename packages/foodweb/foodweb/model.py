"""Entity and World - immutable snapshot value types."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterator

from foodweb.grid import cells as _cells
from foodweb.grid import in_bounds as _in_bounds
from foodweb.types import EntityId, InvalidWorldError, Kind, Position


@dataclass(frozen=True, slots=True)
class Entity:
    """One grass patch, prey or predator.

    Values are never mutated; each tick produces replacements that keep the
    same ``id``.
    """

    id: EntityId
    kind: Kind
    position: Position
    energy: int
    age: int = 0

    def moved_to(self, position: Position) -> Entity:
        return dataclasses.replace(self, position=position)

    def with_energy(self, energy: int) -> Entity:
        return dataclasses.replace(self, energy=energy)

    def aged(self, ticks: int = 1) -> Entity:
        return dataclasses.replace(self, age=self.age + ticks)


@dataclass(frozen=True, slots=True)
class World:
    """Grid extents, ordered entities and the tick counter.

    Entity order is part of the reproducibility contract: it decides who
    eats, moves and reproduces first. ``next_id`` remembers the id counter
    between ticks so ids of dead entities are never handed out again.
    """

    rows: int
    cols: int
    entities: tuple[Entity, ...] = ()
    tick: int = 0
    next_id: int = 0

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidWorldError(
                f"grid must be at least 1x1, got {self.rows}x{self.cols}"
            )
        if self.tick < 0:
            raise InvalidWorldError(f"tick must be non-negative, got {self.tick}")
        if self.next_id < 0:
            raise InvalidWorldError(
                f"next_id must be non-negative, got {self.next_id}"
            )
        if not isinstance(self.entities, tuple):
            object.__setattr__(self, "entities", tuple(self.entities))

        seen: set[EntityId] = set()
        for e in self.entities:
            if e.id in seen:
                raise InvalidWorldError(f"duplicate entity id {e.id}")
            seen.add(e.id)
            if not self.in_bounds(e.position):
                raise InvalidWorldError(
                    f"entity {e.id} at {e.position} is outside the "
                    f"{self.rows}x{self.cols} grid"
                )
            if e.age < 0:
                raise InvalidWorldError(f"entity {e.id} has negative age {e.age}")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, pos: Position) -> bool:
        return _in_bounds(pos, self.rows, self.cols)

    def cells(self) -> Iterator[Position]:
        return _cells(self.rows, self.cols)

    def count(self, kind: Kind) -> int:
        return sum(1 for e in self.entities if e.kind is kind)

    def counts(self) -> dict[Kind, int]:
        result = {kind: 0 for kind in Kind}
        for e in self.entities:
            result[e.kind] += 1
        return result

    def id_floor(self) -> EntityId:
        """First id that may be issued to a new entity."""
        highest = max((e.id for e in self.entities), default=0)
        return max(self.next_id, highest + 1, 1)
