"""Shared types and error classes for the food-web simulator."""

from __future__ import annotations

from enum import Enum

EntityId = int

# (row, col)
Position = tuple[int, int]


class Kind(Enum):
    """Species of an entity. The set is closed."""

    GRASS = "grass"
    PREY = "prey"
    PREDATOR = "predator"


class InvalidWorldError(ValueError):
    """Raised when a World is built with impossible extents or counters."""


class InvalidRuleSetError(ValueError):
    """Raised when a RuleSet carries numbers the tick pipeline cannot use."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(message)
