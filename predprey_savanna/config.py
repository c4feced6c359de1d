"""
Simulation-wide constants and default per-species parameters.

Species parameters start from the values of the savanna settings panel;
a run picks them up through `default_parameters()` and a change to any of
them forces a reset.
"""

from __future__ import annotations

from typing import Dict

from predprey_savanna.species import Species, SpeciesParameters


# ============================================================
# CONFIG
# ============================================================

# World
DEFAULT_WIDTH = 147
DEFAULT_DEPTH = 94
SEED = 1111

# Population initialization (per-cell creation rolls, lion first)
LION_CREATION_PROBABILITY = 0.01
FOX_CREATION_PROBABILITY = 0.02
RABBIT_CREATION_PROBABILITY = 0.08

# Run length / reporting
STEPS = 4000
REPORT_EVERY = 100

# Rabbit
RABBIT_BREEDING_AGE = 5
RABBIT_BREEDING_PROBABILITY = 0.12
RABBIT_MAX_LITTER_SIZE = 4

# Fox
FOX_BREEDING_AGE = 15
FOX_BREEDING_PROBABILITY = 0.08
FOX_MAX_LITTER_SIZE = 2
FOX_RABBIT_FOOD_VALUE = 9

# Lion
LION_BREEDING_AGE = 20
LION_BREEDING_PROBABILITY = 0.08
LION_MAX_LITTER_SIZE = 2
LION_RABBIT_FOOD_VALUE = 9
LION_FOX_FOOD_VALUE = 5


def default_parameters() -> Dict[Species, SpeciesParameters]:
    return {
        Species.RABBIT: SpeciesParameters(
            breeding_age=RABBIT_BREEDING_AGE,
            breeding_probability=RABBIT_BREEDING_PROBABILITY,
            max_litter_size=RABBIT_MAX_LITTER_SIZE,
        ),
        Species.FOX: SpeciesParameters(
            breeding_age=FOX_BREEDING_AGE,
            breeding_probability=FOX_BREEDING_PROBABILITY,
            max_litter_size=FOX_MAX_LITTER_SIZE,
            food_values={Species.RABBIT: FOX_RABBIT_FOOD_VALUE},
        ),
        Species.LION: SpeciesParameters(
            breeding_age=LION_BREEDING_AGE,
            breeding_probability=LION_BREEDING_PROBABILITY,
            max_litter_size=LION_MAX_LITTER_SIZE,
            food_values={
                Species.RABBIT: LION_RABBIT_FOOD_VALUE,
                Species.FOX: LION_FOX_FOOD_VALUE,
            },
        ),
    }
