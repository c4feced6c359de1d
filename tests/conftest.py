import pytest

from predprey_savanna import config
from predprey_savanna.randomizer import Randomizer
from predprey_savanna.simulator import Simulator


@pytest.fixture
def make_sim():
    """Empty simulator factory; keyword overrides are merged into the default parameters."""
    def _make(depth=10, width=10, seed=42, randomizer=None, **overrides):
        params = config.default_parameters()
        for species, changes in overrides.items():
            key = next(s for s in params if s.name.lower() == species)
            params[key] = params[key].replace(**changes)
        return Simulator(
            depth=depth,
            width=width,
            parameters=params,
            randomizer=randomizer if randomizer is not None else Randomizer(seed),
            populate=False,
        )
    return _make
