"""
===============================================================================
QUERY KEY SAMPLER
===============================================================================
Draws the lookup keys a benchmark run replays against every structure.

Keys are picked uniformly at random, independently and with replacement,
from the dataset's own keys. The sequence is generated once per data size
and the same list is reused for every structure so that each one answers
exactly the same queries.
===============================================================================
"""

from typing import List

import numpy as np

from lookup_bench.utils.data_loader import Dataset
from lookup_bench.utils.errors import InvalidConfiguration


class QueryKeySampler:
    """Sample query keys from a dataset with a seedable Generator."""

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def sample(self, dataset: Dataset, iterations: int) -> List[str]:
        """Return exactly `iterations` keys drawn from `dataset`."""
        if iterations < 1:
            raise InvalidConfiguration(f"Iterations must be >= 1, got {iterations}")
        if len(dataset) == 0:
            raise InvalidConfiguration("Cannot sample query keys from an empty dataset")

        positions = self.rng.integers(0, len(dataset), size=iterations)
        return [dataset[p].key for p in positions]
