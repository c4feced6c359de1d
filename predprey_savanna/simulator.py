"""
Step orchestration for the rabbit/fox/lion savanna.

The Simulator owns the field, the live population and the step counter.
One call to `simulate_one_step` processes every organism alive at the start
of the step exactly once, in population order; newborns join the population
only after the pass, and dead organisms are dropped at the same time.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional

from predprey_savanna import config
from predprey_savanna.behaviors import act
from predprey_savanna.field import Field
from predprey_savanna.field_stats import FieldStats
from predprey_savanna.location import Location
from predprey_savanna.organism import Organism
from predprey_savanna.randomizer import Randomizer
from predprey_savanna.species import FEMALE, Species, SpeciesParameters

StatusCallback = Callable[[int, Field], None]

# Creation rolls per cell, first success wins.
CREATION_PROBABILITIES = [
    (Species.LION, config.LION_CREATION_PROBABILITY),
    (Species.FOX, config.FOX_CREATION_PROBABILITY),
    (Species.RABBIT, config.RABBIT_CREATION_PROBABILITY),
]


class Simulator:
    def __init__(
        self,
        depth: int = config.DEFAULT_DEPTH,
        width: int = config.DEFAULT_WIDTH,
        parameters: Optional[Mapping[Species, SpeciesParameters]] = None,
        randomizer: Optional[Randomizer] = None,
        on_status: Optional[StatusCallback] = None,
        populate: bool = True,
    ):
        self.parameters: Dict[Species, SpeciesParameters] = config.default_parameters()
        if parameters is not None:
            self.parameters.update(parameters)
        self.rng = randomizer if randomizer is not None else Randomizer()
        self.field = Field(depth, width, self.rng)
        self.population: List[Organism] = []
        self.step = 0
        self.on_status = on_status
        self.reset(populate=populate)

    # ---- lifecycle ----

    def reset(self, populate: bool = True) -> None:
        """Start over from the current parameters and the randomizer's seed."""
        self.rng.reset()
        self.step = 0
        self.population = []
        self.field.clear_all()
        if populate:
            self.populate()
        self.show_status()

    def populate(self) -> None:
        for row in range(self.field.depth):
            for col in range(self.field.width):
                for species, probability in CREATION_PROBABILITIES:
                    if self.rng.next_double() <= probability:
                        location = Location(row, col)
                        organism = Organism.random_initial(
                            species, location, self.parameters[species], self.rng
                        )
                        self.population.append(organism)
                        self.field.place(organism, location)
                        break

    def set_parameters(self, species: Species, params: SpeciesParameters) -> None:
        """Swap one species' parameters; the run restarts."""
        self.parameters[species] = params
        self.reset()

    def add_organism(
        self,
        species: Species,
        location: Location,
        age: int = 0,
        gender: int = FEMALE,
        food_level: Optional[int] = None,
    ) -> Organism:
        """Place a hand-built organism at the end of the acting order."""
        if self.field.get_occupant(location) is not None:
            raise ValueError(f"location {location} is already occupied")
        if food_level is None:
            food_level = 0 if species is Species.RABBIT else self.parameters[species].food_value(Species.RABBIT)
        organism = Organism(
            species=species,
            location=location,
            age=age,
            gender=gender,
            food_level=food_level,
        )
        self.population.append(organism)
        self.field.place(organism, location)
        return organism

    # ---- stepping ----

    def simulate_one_step(self) -> int:
        self.step += 1
        newborns: List[Organism] = []
        for organism in list(self.population):
            # may have been eaten or killed earlier in this pass
            if not organism.alive:
                continue
            act(organism, self.field, self.parameters[organism.species], self.rng, newborns)

        self.population = [o for o in self.population if o.alive]
        self.population.extend(o for o in newborns if o.alive)
        self.field.rebuild(self.population)
        self.show_status()
        return self.step

    def simulate(self, num_steps: int, stop_when_not_viable: bool = True) -> int:
        """Run up to num_steps steps; return how many were taken."""
        taken = 0
        for _ in range(num_steps):
            if stop_when_not_viable and not self.is_viable():
                break
            self.simulate_one_step()
            taken += 1
        return taken

    # ---- reporting ----

    def show_status(self) -> None:
        if self.on_status is not None:
            self.on_status(self.step, self.field)

    def stats(self) -> FieldStats:
        return FieldStats(self.field)

    def counts(self) -> Dict[Species, int]:
        return dict(self.stats().counts)

    def is_viable(self) -> bool:
        return self.stats().is_viable()
