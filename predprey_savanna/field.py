"""
Rectangular occupancy grid.

Each cell holds at most one live organism. Locations outside the grid are
rejected with IndexError; there is no wrap-around.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from predprey_savanna.location import Location

if TYPE_CHECKING:
    from predprey_savanna.organism import Organism
    from predprey_savanna.randomizer import Randomizer


# 8-neighbourhood in fixed row-major order; rotated per query.
NEIGHBOUR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


class Field:
    def __init__(self, depth: int, width: int, randomizer: "Randomizer"):
        if depth <= 0 or width <= 0:
            raise ValueError(f"field dimensions must be positive, got {depth}x{width}")
        self.depth = depth
        self.width = width
        self.rng = randomizer
        self._cells = np.empty((depth, width), dtype=object)

    def is_within(self, loc: Location) -> bool:
        return 0 <= loc.row < self.depth and 0 <= loc.col < self.width

    def _check(self, loc: Location) -> None:
        if not self.is_within(loc):
            raise IndexError(f"location {loc} outside {self.depth}x{self.width} field")

    # ---- occupancy ----

    def get_occupant(self, loc: Location) -> Optional["Organism"]:
        self._check(loc)
        return self._cells[loc.row, loc.col]

    def place(self, organism: "Organism", loc: Location) -> None:
        """Put organism at loc; the caller has already cleared its old cell."""
        self._check(loc)
        self._cells[loc.row, loc.col] = organism

    def clear(self, loc: Location) -> None:
        self._check(loc)
        self._cells[loc.row, loc.col] = None

    def clear_all(self) -> None:
        self._cells[...] = None

    def rebuild(self, population: Iterable["Organism"]) -> None:
        """Re-derive occupancy from the live members of population."""
        self.clear_all()
        for organism in population:
            if organism.alive:
                self.place(organism, organism.location)

    def occupants(self) -> Iterator[Tuple[Location, "Organism"]]:
        """(location, organism) pairs in row-major order."""
        rows, cols = np.nonzero(self._cells != None)  # noqa: E711
        for r, c in zip(rows, cols):
            yield Location(int(r), int(c)), self._cells[r, c]

    def occupied_locations(self) -> List[Location]:
        return [loc for loc, _ in self.occupants()]

    def species_grid(self) -> np.ndarray:
        """(depth, width) int8 array of species codes, 0 for empty cells."""
        grid = np.zeros((self.depth, self.width), dtype=np.int8)
        for loc, organism in self.occupants():
            grid[loc.row, loc.col] = organism.species.value
        return grid

    # ---- adjacency ----

    def adjacent_locations(self, loc: Location) -> List[Location]:
        """
        In-bounds 8-neighbours of loc, rotated by a random start offset so
        that no direction is systematically scanned first.
        """
        self._check(loc)
        adjacent = [
            Location(loc.row + dr, loc.col + dc)
            for dr, dc in NEIGHBOUR_OFFSETS
            if 0 <= loc.row + dr < self.depth and 0 <= loc.col + dc < self.width
        ]
        if not adjacent:
            return adjacent
        start = self.rng.next_int(len(adjacent))
        return adjacent[start:] + adjacent[:start]

    def free_adjacent_locations(self, loc: Location) -> List[Location]:
        return [where for where in self.adjacent_locations(loc) if self.get_occupant(where) is None]

    def free_adjacent_location(self, loc: Location) -> Optional[Location]:
        """One uniformly chosen free neighbour, or None when crowded in."""
        free = self.free_adjacent_locations(loc)
        if not free:
            return None
        return self.rng.choice(free)
