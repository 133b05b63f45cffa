"""
Sample state generator for the Banker's Algorithm Visualizer.

Produces random but reproducible allocation states for demonstrations:
4-6 processes, 3-4 resource types, and one of four recipes.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional

from models.allocation_state import AllocationState


DEADLOCK_PROBABILITY = 0.25

# recipe -> (allocation range, max headroom range, available range), half-open
RECIPES = {
    'deadlock': ((2, 5), (3, 7), (0, 2)),
    'safe': ((0, 4), (0, 5), (2, 6)),
    'borderline': ((1, 4), (2, 5), (1, 4)),
    'mixed': ((0, 5), (0, 4), (0, 5)),
}
NON_DEADLOCK_RECIPES = ('safe', 'borderline', 'mixed')


@dataclass(frozen=True)
class Sample:
    """A generated state and the recipe that produced it."""
    state: AllocationState
    recipe: str


def generate_sample(
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None
) -> Sample:
    """
    Generate a sample allocation state.

    Recipes:
    - deadlock (25%): high allocation, high extra demand, 0-1 available
    - safe: moderate allocation and demand, 2-5 available
    - borderline: higher allocation, tight 1-3 available
    - mixed: widely varying allocation, 0-4 available

    "deadlock" and "safe" describe intent; the generated state is not
    guaranteed to classify that way.

    Args:
        seed: Seed for a fresh generator (ignored when rng is given)
        rng: Generator to draw from

    Returns:
        Sample with the state and recipe name
    """
    if rng is None:
        rng = np.random.default_rng(seed)

    num_processes = int(rng.integers(4, 7))
    num_resources = int(rng.integers(3, 5))

    if rng.random() < DEADLOCK_PROBABILITY:
        recipe = 'deadlock'
    else:
        recipe = NON_DEADLOCK_RECIPES[int(rng.integers(0, len(NON_DEADLOCK_RECIPES)))]

    return Sample(
        state=_build(rng, recipe, num_processes, num_resources),
        recipe=recipe
    )


def _build(
    rng: np.random.Generator,
    recipe: str,
    num_processes: int,
    num_resources: int
) -> AllocationState:
    alloc_range, headroom_range, available_range = RECIPES[recipe]
    shape = (num_processes, num_resources)

    allocation = rng.integers(*alloc_range, size=shape)
    max_demand = allocation + rng.integers(*headroom_range, size=shape)
    available = rng.integers(*available_range, size=num_resources)

    return AllocationState.from_lists(
        allocation.tolist(),
        max_demand.tolist(),
        available.tolist(),
        num_processes,
        num_resources
    )
