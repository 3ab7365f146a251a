"""
===============================================================================
LINEAR SCAN BASELINE
===============================================================================
The dataset list itself, searched front to back comparing each Record's key.
O(N) per lookup; misses always pay for a full scan.
===============================================================================
"""

from typing import Optional

from lookup_bench.structures.base import LookupStructure
from lookup_bench.utils.data_loader import Dataset, Record


class LinearScan(LookupStructure):
    """Exhaustive scan over the records in dataset order."""

    kind = "linear"

    def __init__(self):
        self.records: Dataset = []

    def build(self, dataset: Dataset) -> None:
        # No copy: the view shares the dataset's list.
        self.records = dataset

    def lookup(self, key: str) -> Optional[Record]:
        for record in self.records:
            if record.key == key:
                return record
        return None

    def __len__(self) -> int:
        return len(self.records)
