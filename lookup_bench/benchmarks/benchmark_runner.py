import functools
import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from lookup_bench.benchmarks.clock import Clock, PerfCounterClock
from lookup_bench.benchmarks.report import render
from lookup_bench.structures.adapter import StructureAdapter
from lookup_bench.structures.base import LookupStructure
from lookup_bench.utils.data_loader import DatasetGenerator
from lookup_bench.utils.errors import InvalidConfiguration
from lookup_bench.utils.query_sampler import QueryKeySampler

logger = logging.getLogger(__name__)

BenchmarkResult = Dict[str, float]


class RunStage(Enum):
    CONFIGURED = "configured"
    DATASET_BUILT = "dataset_built"
    STRUCTURES_PREPARED = "structures_prepared"
    KEYS_SAMPLED = "keys_sampled"
    MEASURED = "measured"
    REPORTED = "reported"


def validate_config(sizes: Sequence[int], iterations: int) -> None:
    """Reject configurations that could never produce a report."""
    if not sizes:
        raise InvalidConfiguration("At least one data size is required")
    for size in sizes:
        if size < 0:
            raise InvalidConfiguration(f"Data sizes must be >= 0, got {size}")
    if iterations < 1:
        raise InvalidConfiguration(f"Iterations must be >= 1, got {iterations}")


class Benchmark:
    """Lookup benchmark across data sizes and structure kinds.

    For each size: build a dataset, wrap it in every structure, sample one
    query sequence, then time a full pass of that sequence against each
    structure in registration order. Any InvalidConfiguration aborts the
    whole run; blocks already emitted for earlier sizes stay emitted.
    """

    def __init__(self, sizes: Sequence[int], iterations: int,
                 rng: Union[np.random.Generator, int, None] = None,
                 clock: Optional[Clock] = None,
                 adapter: Optional[StructureAdapter] = None,
                 emit: Optional[Callable[[str], None]] = None):
        self.sizes = list(sizes)
        validate_config(self.sizes, iterations)
        self.iterations = iterations
        self.rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
        self.clock = clock or PerfCounterClock()
        self.adapter = adapter or StructureAdapter()
        self.emit = emit or functools.partial(print, end="")
        self.datasets = DatasetGenerator(self.rng)
        self.sampler = QueryKeySampler(self.rng)
        self.stage = RunStage.CONFIGURED
        self.history: List[Tuple[int, RunStage, Optional[str]]] = []

    def _advance(self, size: int, stage: RunStage, kind: Optional[str] = None):
        self.stage = stage
        self.history.append((size, stage, kind))
        logger.debug("size=%d -> %s%s", size, stage.value, f" ({kind})" if kind else "")

    def measure_lookup_time(self, structure: LookupStructure, queries: Sequence[str]) -> float:
        """Elapsed ms for one lookup per query, in order."""
        lookup = structure.lookup
        start = self.clock.now()
        for key in queries:
            lookup(key)
        end = self.clock.now()
        return (end - start) * 1000  # ms

    def run_size(self, size: int) -> BenchmarkResult:
        self._advance(size, RunStage.CONFIGURED)
        dataset = self.datasets.build(size)
        self._advance(size, RunStage.DATASET_BUILT)
        structures = self.adapter.prepare(dataset)
        self._advance(size, RunStage.STRUCTURES_PREPARED)
        queries = self.sampler.sample(dataset, self.iterations)
        self._advance(size, RunStage.KEYS_SAMPLED)

        result = {}
        for structure in structures:
            result[structure.kind] = self.measure_lookup_time(structure, queries)
            self._advance(size, RunStage.MEASURED, structure.kind)
        return result

    def run(self) -> List[Tuple[int, BenchmarkResult]]:
        """Run every size in order, emitting one report block per size."""
        reported = []
        for size in self.sizes:
            try:
                result = self.run_size(size)
            except InvalidConfiguration:
                logger.error("Aborting run at data size %d", size)
                raise
            self.emit(render(size, self.iterations, result))
            self._advance(size, RunStage.REPORTED)
            reported.append((size, result))
        return reported


if __name__ == "__main__":
    Benchmark([100, 1000, 10_000], iterations=10_000, rng=0).run()
