from __future__ import annotations

import numpy as np
import pytest

from lookup_bench.utils.data_loader import DatasetGenerator


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def dataset(rng: np.random.Generator) -> list:
    return DatasetGenerator(rng).build(200)


class FakeClock:
    """Advances by a fixed step on every read."""

    def __init__(self, step: float = 0.25) -> None:
        self.step = step
        self.t = 0.0
        self.reads = 0

    def now(self) -> float:
        self.reads += 1
        self.t += self.step
        return self.t


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
