"""
Species tags, gender constants and per-species tunable parameters.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


# Gender bit; only females breed.
FEMALE = 0
MALE = 1


class Species(Enum):
    # 0 is the empty cell in numeric grid snapshots
    RABBIT = 1
    FOX = 2
    LION = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


# Fixed lifespans, not exposed as settings.
MAX_AGE = {
    Species.RABBIT: 40,
    Species.FOX: 150,
    Species.LION: 70,
}


class FoodValues(Mapping):
    """Read-only prey -> food value table; hashable so parameters can be set members or dict keys."""

    def __init__(self, values=()):
        self._values = dict(values)

    def __getitem__(self, prey: Species) -> int:
        return self._values[prey]

    def __iter__(self) -> Iterator[Species]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"FoodValues({self._values!r})"


@dataclass(frozen=True)
class SpeciesParameters:
    """
    Breeding and diet settings for one species.

    food_values maps a prey species to the food level a predator is reset to
    after eating one; it is empty for rabbits. Values are not validated:
    probability in [0, 1], litter size >= 1 and positive food values are
    the caller's responsibility.
    """
    breeding_age: int
    breeding_probability: float
    max_litter_size: int
    food_values: Mapping[Species, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "food_values", FoodValues(self.food_values))

    def food_value(self, prey: Species) -> int:
        return self.food_values[prey]

    def replace(self, **changes) -> "SpeciesParameters":
        return dataclasses.replace(self, **changes)
