import numpy as np
import pytest

from predprey_savanna.field import NEIGHBOUR_OFFSETS, Field
from predprey_savanna.location import Location
from predprey_savanna.organism import Organism
from predprey_savanna.randomizer import Randomizer
from predprey_savanna.species import Species


def _field(depth=10, width=10, seed=1):
    return Field(depth, width, Randomizer(seed))


def test_location_is_a_hashable_value():
    assert Location(2, 3) == Location(2, 3)
    assert len({Location(2, 3), Location(2, 3), Location(3, 2)}) == 2
    with pytest.raises(AttributeError):
        Location(2, 3).row = 4


def test_rejects_non_positive_dimensions():
    with pytest.raises(ValueError):
        Field(0, 5, Randomizer(1))


@pytest.mark.parametrize("loc", [Location(-1, 0), Location(0, -1), Location(10, 0), Location(0, 10)])
def test_out_of_bounds_access_fails_fast(loc):
    field = _field()
    with pytest.raises(IndexError):
        field.get_occupant(loc)
    with pytest.raises(IndexError):
        field.place(Organism(Species.RABBIT, loc), loc)
    with pytest.raises(IndexError):
        field.clear(loc)


def test_place_and_clear_only_touch_one_cell():
    field = _field()
    rabbit = Organism(Species.RABBIT, Location(3, 4))
    field.place(rabbit, Location(3, 4))
    assert field.get_occupant(Location(3, 4)) is rabbit
    assert field.occupied_locations() == [Location(3, 4)]

    field.clear(Location(3, 4))
    assert field.get_occupant(Location(3, 4)) is None
    assert field.occupied_locations() == []


def test_corner_has_three_neighbours():
    field = _field()
    adjacent = field.adjacent_locations(Location(0, 0))
    assert set(adjacent) == {Location(0, 1), Location(1, 0), Location(1, 1)}


def test_adjacent_order_is_a_rotation_of_the_fixed_order():
    field = _field(seed=3)
    centre = Location(5, 5)
    base = [Location(5 + dr, 5 + dc) for dr, dc in NEIGHBOUR_OFFSETS]
    rotations = [base[k:] + base[:k] for k in range(len(base))]
    starts = set()
    for _ in range(40):
        adjacent = field.adjacent_locations(centre)
        assert adjacent in rotations
        starts.add(adjacent[0])
    # different calls start in different directions
    assert len(starts) > 1


def test_free_adjacent_locations_skip_occupied_cells():
    field = _field()
    fox = Organism(Species.FOX, Location(4, 4))
    field.place(fox, Location(4, 4))
    free = field.free_adjacent_locations(Location(5, 5))
    assert len(free) == 7
    assert Location(4, 4) not in free


def test_free_adjacent_location_none_when_crowded():
    field = _field(depth=3, width=3)
    for row in range(3):
        for col in range(3):
            if (row, col) != (1, 1):
                field.place(Organism(Species.RABBIT, Location(row, col)), Location(row, col))
    assert field.free_adjacent_location(Location(1, 1)) is None


def test_single_cell_field_has_no_neighbours():
    field = _field(depth=1, width=1)
    assert field.adjacent_locations(Location(0, 0)) == []
    assert field.free_adjacent_location(Location(0, 0)) is None


def test_species_grid_and_rebuild():
    field = _field(depth=2, width=3)
    lion = Organism(Species.LION, Location(0, 2))
    rabbit = Organism(Species.RABBIT, Location(1, 0))
    dead_fox = Organism(Species.FOX, Location(1, 1), alive=False)
    field.rebuild([lion, rabbit, dead_fox])

    expected = np.array([[0, 0, 3], [1, 0, 0]], dtype=np.int8)
    assert np.array_equal(field.species_grid(), expected)
    assert field.get_occupant(Location(1, 1)) is None
