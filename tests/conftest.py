import random

import pytest

from world.generation import generate_grid
from world_state import WorldState


@pytest.fixture
def grid():
    return generate_grid(random.Random(7))


@pytest.fixture
def world():
    return WorldState.create(seed=7)


@pytest.fixture
def settled_world():
    state = WorldState.create(seed=3)
    state.place_structures(6)
    state.add_decorations()
    return state
