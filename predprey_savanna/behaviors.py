"""
Per-species behaviour for one simulation step.

Each act function advances a single live organism: ageing (and hunger for
predators), breeding, foraging/fighting and movement. Newborns are placed
on the field immediately but collected in `newborns` so they only start
acting on the next step. Field changes made here are visible to every
organism processed later in the same step.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from predprey_savanna.field import Field
from predprey_savanna.location import Location
from predprey_savanna.organism import Organism
from predprey_savanna.randomizer import Randomizer
from predprey_savanna.species import FEMALE, MALE, Species, SpeciesParameters

ActFn = Callable[[Organism, Field, SpeciesParameters, Randomizer, List[Organism]], None]

# Male lions hunt foxes, females hunt rabbits.
LION_DIET = {
    MALE: Species.FOX,
    FEMALE: Species.RABBIT,
}


# ============================================================
# SHARED HELPERS
# ============================================================

def set_dead(field: Field, organism: Organism) -> None:
    organism.alive = False
    if organism.location is not None:
        field.clear(organism.location)
        organism.location = None


def move_to(field: Field, organism: Organism, new_location: Location) -> None:
    if organism.location is not None:
        field.clear(organism.location)
    organism.location = new_location
    field.place(organism, new_location)


def increment_age(field: Field, organism: Organism) -> None:
    organism.age += 1
    if organism.age > organism.max_age:
        set_dead(field, organism)


def increment_hunger(field: Field, organism: Organism) -> None:
    organism.food_level -= 1
    if organism.food_level <= 0:
        set_dead(field, organism)


def can_breed(organism: Organism, params: SpeciesParameters) -> bool:
    return organism.age >= params.breeding_age and organism.gender == FEMALE


def breed(organism: Organism, params: SpeciesParameters, rng: Randomizer) -> int:
    """Number of births this time, possibly zero."""
    # No draw at all when the organism cannot breed.
    if can_breed(organism, params) and rng.next_double() <= params.breeding_probability:
        return rng.next_int(params.max_litter_size) + 1
    return 0


def produce_litter(
    organism: Organism,
    field: Field,
    params: SpeciesParameters,
    rng: Randomizer,
    newborns: List[Organism],
) -> None:
    free = field.free_adjacent_locations(organism.location)
    births = breed(organism, params, rng)
    for where in free[:births]:
        young = Organism.newborn(organism.species, where, params, rng)
        field.place(young, where)
        newborns.append(young)


def find_food(
    organism: Organism,
    field: Field,
    params: SpeciesParameters,
    prey_species: Species,
) -> Optional[Location]:
    """Eat the first live adjacent prey of the given species; return its cell."""
    for where in field.adjacent_locations(organism.location):
        prey = field.get_occupant(where)
        if prey is not None and prey.species is prey_species and prey.alive:
            set_dead(field, prey)
            organism.food_level = params.food_value(prey_species)
            return where
    return None


# ============================================================
# RABBIT
# ============================================================

def rabbit_give_birth(
    rabbit: Organism,
    field: Field,
    params: SpeciesParameters,
    rng: Randomizer,
    newborns: List[Organism],
) -> None:
    # One litter attempt per adjacent rabbit of the opposite gender.
    for where in field.adjacent_locations(rabbit.location):
        mate = field.get_occupant(where)
        if (
            mate is not None
            and mate.species is Species.RABBIT
            and mate.alive
            and mate.gender != rabbit.gender
        ):
            produce_litter(rabbit, field, params, rng, newborns)


def act_rabbit(
    rabbit: Organism,
    field: Field,
    params: SpeciesParameters,
    rng: Randomizer,
    newborns: List[Organism],
) -> None:
    increment_age(field, rabbit)
    if not rabbit.alive:
        return
    rabbit_give_birth(rabbit, field, params, rng, newborns)
    new_location = field.free_adjacent_location(rabbit.location)
    if new_location is not None:
        move_to(field, rabbit, new_location)
    else:
        # overcrowding
        set_dead(field, rabbit)


# ============================================================
# FOX
# ============================================================

def act_fox(
    fox: Organism,
    field: Field,
    params: SpeciesParameters,
    rng: Randomizer,
    newborns: List[Organism],
) -> None:
    increment_age(field, fox)
    if fox.alive:
        increment_hunger(field, fox)
    if not fox.alive:
        return
    produce_litter(fox, field, params, rng, newborns)
    new_location = find_food(fox, field, params, Species.RABBIT)
    if new_location is None:
        new_location = field.free_adjacent_location(fox.location)
    if new_location is not None:
        move_to(field, fox, new_location)
    else:
        set_dead(field, fox)


# ============================================================
# LION
# ============================================================

def fight(lion: Organism, field: Field) -> Optional[Location]:
    """A male lion kills the first live adjacent male lion; return its cell."""
    # Females scan too, keeping the neighbour-order draw in the stream.
    for where in field.adjacent_locations(lion.location):
        rival = field.get_occupant(where)
        if (
            lion.gender == MALE
            and rival is not None
            and rival.species is Species.LION
            and rival.alive
            and rival.gender == MALE
        ):
            set_dead(field, rival)
            return where
    return None


def act_lion(
    lion: Organism,
    field: Field,
    params: SpeciesParameters,
    rng: Randomizer,
    newborns: List[Organism],
) -> None:
    increment_age(field, lion)
    if lion.alive:
        increment_hunger(field, lion)
    if not lion.alive:
        return
    # No mate needs to be adjacent, unlike rabbits.
    produce_litter(lion, field, params, rng, newborns)
    food_location = find_food(lion, field, params, LION_DIET[lion.gender])
    rival_location = fight(lion, field)

    if food_location is not None:
        new_location = food_location
    elif rival_location is not None:
        new_location = rival_location
    else:
        new_location = field.free_adjacent_location(lion.location)

    if new_location is not None:
        move_to(field, lion, new_location)
    else:
        set_dead(field, lion)


ACTIONS: Dict[Species, ActFn] = {
    Species.RABBIT: act_rabbit,
    Species.FOX: act_fox,
    Species.LION: act_lion,
}


def act(
    organism: Organism,
    field: Field,
    params: SpeciesParameters,
    rng: Randomizer,
    newborns: List[Organism],
) -> None:
    ACTIONS[organism.species](organism, field, params, rng, newborns)
