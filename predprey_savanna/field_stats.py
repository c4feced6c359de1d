"""
Per-species population counts for a field.
"""

from __future__ import annotations

from typing import Dict

import numpy as np

from predprey_savanna.field import Field
from predprey_savanna.species import Species


class FieldStats:
    def __init__(self, field: Field | None = None):
        self.counts: Dict[Species, int] = {species: 0 for species in Species}
        if field is not None:
            self.count(field)

    def reset(self) -> None:
        for species in self.counts:
            self.counts[species] = 0

    def count(self, field: Field) -> Dict[Species, int]:
        """Recount every species from the field's occupancy."""
        codes = field.species_grid().ravel()
        tally = np.bincount(codes, minlength=len(Species) + 1)
        for species in Species:
            self.counts[species] = int(tally[species.value])
        return self.counts

    def population_details(self) -> str:
        """e.g. 'Rabbit: 120 Fox: 31 Lion: 4' (species with nobody left are omitted)."""
        return " ".join(
            f"{species.label}: {n}" for species, n in self.counts.items() if n > 0
        )

    def is_viable(self) -> bool:
        return sum(1 for n in self.counts.values() if n > 0) > 1


def is_viable(field: Field) -> bool:
    """True while more than one species is still present on the field."""
    return FieldStats(field).is_viable()
