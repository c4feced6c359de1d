"""
Organism state shared by all species.

Species-specific behaviour lives in behaviors.py and is looked up by the
species tag; an Organism only carries state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from predprey_savanna.location import Location
from predprey_savanna.randomizer import Randomizer
from predprey_savanna.species import FEMALE, MAX_AGE, Species, SpeciesParameters


@dataclass(eq=False)
class Organism:
    species: Species
    location: Optional[Location]
    age: int = 0
    gender: int = FEMALE
    food_level: int = 0  # predators only
    alive: bool = True

    @property
    def is_female(self) -> bool:
        return self.gender == FEMALE

    @property
    def max_age(self) -> int:
        return MAX_AGE[self.species]

    @classmethod
    def random_initial(
        cls,
        species: Species,
        location: Location,
        params: SpeciesParameters,
        rng: Randomizer,
    ) -> "Organism":
        """An organism for a freshly populated field: random age, hunger and gender."""
        org = cls(species=species, location=location)
        max_age = MAX_AGE[species]
        if species is Species.RABBIT:
            org.gender = rng.next_int(2)
            org.age = rng.next_int(max_age)
        elif species is Species.FOX:
            org.age = rng.next_int(max_age)
            org.food_level = rng.next_int(params.food_value(Species.RABBIT))
            org.gender = rng.next_int(2)
        else:
            org.age = rng.next_int(max_age)
            org.food_level = rng.next_int(params.food_value(Species.FOX))
            org.gender = rng.next_int(2)
        return org

    @classmethod
    def newborn(
        cls,
        species: Species,
        location: Location,
        params: SpeciesParameters,
        rng: Randomizer,
    ) -> "Organism":
        org = cls(species=species, location=location, gender=rng.next_int(2))
        if species is not Species.RABBIT:
            org.food_level = params.food_value(Species.RABBIT)
        return org

    def __repr__(self) -> str:
        state = "alive" if self.alive else "dead"
        return (
            f"{self.species.label}(age={self.age}, gender={self.gender}, "
            f"food={self.food_level}, at={self.location}, {state})"
        )
