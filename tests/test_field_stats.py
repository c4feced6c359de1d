from predprey_savanna.field_stats import FieldStats, is_viable
from predprey_savanna.location import Location
from predprey_savanna.species import Species


def test_counts_and_details(make_sim):
    sim = make_sim()
    sim.add_organism(Species.RABBIT, Location(0, 0))
    sim.add_organism(Species.RABBIT, Location(0, 1))
    sim.add_organism(Species.LION, Location(9, 9), food_level=4)

    stats = FieldStats(sim.field)
    assert stats.counts == {Species.RABBIT: 2, Species.FOX: 0, Species.LION: 1}
    assert stats.population_details() == "Rabbit: 2 Lion: 1"
    assert stats.is_viable()


def test_single_species_or_empty_field_is_not_viable(make_sim):
    sim = make_sim()
    assert not is_viable(sim.field)
    assert FieldStats(sim.field).population_details() == ""

    sim.add_organism(Species.FOX, Location(3, 3), food_level=4)
    assert not is_viable(sim.field)

    sim.add_organism(Species.RABBIT, Location(6, 6))
    assert is_viable(sim.field)


def test_reset_zeroes_counts(make_sim):
    sim = make_sim()
    sim.add_organism(Species.RABBIT, Location(0, 0))
    stats = FieldStats(sim.field)
    stats.reset()
    assert sum(stats.counts.values()) == 0
