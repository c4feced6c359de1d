import numpy as np
import pytest

from predprey_savanna.location import Location
from predprey_savanna.randomizer import Randomizer
from predprey_savanna.simulator import Simulator
from predprey_savanna.species import Species


def _populated(seed=7, depth=30, width=40, on_status=None):
    return Simulator(depth=depth, width=width, randomizer=Randomizer(seed), on_status=on_status)


def _assert_single_occupancy(sim):
    locations = [o.location for o in sim.population]
    assert len(locations) == len(set(locations))
    assert all(o.alive for o in sim.population)
    for organism in sim.population:
        assert sim.field.get_occupant(organism.location) is organism
    assert len(sim.field.occupied_locations()) == len(sim.population)


def test_reset_populates_every_species_and_reports_step_zero():
    calls = []
    sim = _populated(on_status=lambda step, field: calls.append(step))

    assert sim.step == 0
    assert calls == [0]
    counts = sim.counts()
    assert all(counts[species] > 0 for species in Species)
    _assert_single_occupancy(sim)


def test_status_reported_after_every_step():
    calls = []
    sim = _populated(on_status=lambda step, field: calls.append(step))
    for _ in range(3):
        sim.simulate_one_step()
    assert calls == [0, 1, 2, 3]


def test_one_organism_per_cell_throughout_a_run():
    sim = _populated()
    for _ in range(40):
        sim.simulate_one_step()
        _assert_single_occupancy(sim)


def test_age_advances_by_one_for_survivors():
    sim = _populated()
    before = {id(o): (o, o.age) for o in sim.population}
    sim.simulate_one_step()
    survivors = [o for o in sim.population if id(o) in before]
    assert survivors
    for organism in survivors:
        assert organism.age == before[id(organism)][1] + 1
    newcomers = [o for o in sim.population if id(o) not in before]
    assert all(o.age == 0 for o in newcomers)


def test_same_seed_same_run():
    a = _populated(seed=11)
    b = _populated(seed=11)
    for _ in range(25):
        a.simulate_one_step()
        b.simulate_one_step()
        assert a.counts() == b.counts()
    assert np.array_equal(a.field.species_grid(), b.field.species_grid())


def test_reset_replays_the_run():
    sim = _populated(seed=3)
    sim.simulate(15, stop_when_not_viable=False)
    grid = sim.field.species_grid()

    sim.reset()
    assert sim.step == 0
    sim.simulate(15, stop_when_not_viable=False)
    assert np.array_equal(sim.field.species_grid(), grid)


def test_non_viable_population_keeps_stepping_when_asked(make_sim):
    sim = make_sim()
    sim.add_organism(Species.RABBIT, Location(5, 5), age=1)
    assert not sim.is_viable()

    assert sim.simulate(5) == 0
    assert sim.step == 0

    sim.simulate_one_step()
    assert sim.step == 1
    assert sim.simulate(4, stop_when_not_viable=False) == 4
    assert sim.step == 5


def test_set_parameters_restarts_the_run():
    sim = _populated()
    sim.simulate_one_step()
    lion = sim.parameters[Species.LION]
    sim.set_parameters(Species.LION, lion.replace(breeding_probability=0.5))
    assert sim.step == 0
    assert sim.parameters[Species.LION].breeding_probability == 0.5
    assert sim.parameters[Species.LION].food_values == lion.food_values


def test_add_organism_refuses_occupied_cell(make_sim):
    sim = make_sim()
    sim.add_organism(Species.FOX, Location(1, 1), food_level=3)
    with pytest.raises(ValueError):
        sim.add_organism(Species.RABBIT, Location(1, 1))


def test_add_organism_outside_field_raises(make_sim):
    sim = make_sim()
    with pytest.raises(IndexError):
        sim.add_organism(Species.RABBIT, Location(10, 0))
