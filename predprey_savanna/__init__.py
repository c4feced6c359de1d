"""Rabbit, fox and lion population model on a bounded grid."""

from predprey_savanna.field import Field
from predprey_savanna.field_stats import FieldStats, is_viable
from predprey_savanna.location import Location
from predprey_savanna.organism import Organism
from predprey_savanna.randomizer import Randomizer
from predprey_savanna.simulator import Simulator
from predprey_savanna.species import FEMALE, MALE, Species, SpeciesParameters

__all__ = [
    "FEMALE",
    "MALE",
    "Field",
    "FieldStats",
    "Location",
    "Organism",
    "Randomizer",
    "Simulator",
    "Species",
    "SpeciesParameters",
    "is_viable",
]
