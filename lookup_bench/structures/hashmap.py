"""
===============================================================================
SEPARATE-CHAINING HASH MAP
===============================================================================
An explicit hash table used as the "hashmap" view, so its behaviour can be
compared with the interpreter's own dict.

It currently supports:
    • Single-pass build from a dataset
    • Key lookup via hash(key) -> bucket -> short chain scan
    • Doubling the bucket array once the load factor passes 0.75

Each doubling rehashes every entry into a table with shorter chains. This is
the representation switch that makes lookup cost non-monotonic in size: a
table that has just grown is faster than one about to grow.

Usage:
    import numpy as np
    from lookup_bench.structures.hashmap import ChainedHashMap
    from lookup_bench.utils.data_loader import DatasetGenerator

    dataset = DatasetGenerator(np.random.default_rng(1)).build(1000)
    table = ChainedHashMap()
    table.build(dataset)
    print(table.lookup(dataset[50].key))
===============================================================================
"""

from typing import List, Optional

from lookup_bench.structures.base import LookupStructure
from lookup_bench.utils.data_loader import Dataset, Record


class ChainedHashMap(LookupStructure):
    """Hash table of Records keyed by Record.key, collisions chained per bucket."""

    kind = "hashmap"

    def __init__(self, initial_capacity: int = 8, max_load: float = 0.75):
        """
        Args:
            initial_capacity: Starting number of buckets (rounded up to a power of two).
            max_load: Entries per bucket that triggers a resize.
        """
        capacity = 1
        while capacity < max(1, initial_capacity):
            capacity *= 2
        self.max_load = max_load
        self.buckets: List[List[Record]] = [[] for _ in range(capacity)]
        self.count = 0
        self.resizes = 0

    # ----------------------------------------------------------------------
    # Build
    # ----------------------------------------------------------------------
    def build(self, dataset: Dataset) -> None:
        self.buckets = [[] for _ in range(len(self.buckets))]
        self.count = 0
        self.resizes = 0
        for record in dataset:
            self.insert(record)

    def insert(self, record: Record) -> None:
        """Insert or replace the entry for record.key."""
        chain = self.buckets[hash(record.key) & (len(self.buckets) - 1)]
        for i, existing in enumerate(chain):
            if existing.key == record.key:
                chain[i] = record
                return
        chain.append(record)
        self.count += 1
        if self.count > self.max_load * len(self.buckets):
            self._grow()

    def _grow(self):
        old = self.buckets
        self.buckets = [[] for _ in range(len(old) * 2)]
        mask = len(self.buckets) - 1
        for chain in old:
            for record in chain:
                self.buckets[hash(record.key) & mask].append(record)
        self.resizes += 1

    # ----------------------------------------------------------------------
    # Search
    # ----------------------------------------------------------------------
    def lookup(self, key: str) -> Optional[Record]:
        chain = self.buckets[hash(key) & (len(self.buckets) - 1)]
        for record in chain:
            if record.key == key:
                return record
        return None

    # ----------------------------------------------------------------------
    # Utilities
    # ----------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        return len(self.buckets)

    def load_factor(self) -> float:
        return self.count / len(self.buckets)

    def __len__(self) -> int:
        return self.count
