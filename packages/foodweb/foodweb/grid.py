"""Grid helpers - bounds, 4-neighbor lookup and cell enumeration."""

from __future__ import annotations

from typing import Iterator

from foodweb.types import Position

# up, down, left, right
_DIRS: tuple[Position, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def in_bounds(pos: Position, rows: int, cols: int) -> bool:
    row, col = pos
    return 0 <= row < rows and 0 <= col < cols


def neighbors4(pos: Position, rows: int, cols: int) -> list[Position]:
    """In-bounds orthogonal neighbors of *pos*, in up/down/left/right order."""
    row, col = pos
    result: list[Position] = []
    for dr, dc in _DIRS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            result.append((nr, nc))
    return result


def cells(rows: int, cols: int) -> Iterator[Position]:
    """All cells in row-major order."""
    for row in range(rows):
        for col in range(cols):
            yield (row, col)
