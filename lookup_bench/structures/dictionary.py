"""
===============================================================================
BUILT-IN DICT VIEW
===============================================================================
A plain `dict` mapping key -> Record, filled in one insertion pass.

CPython's dict resizes its hash table as it grows, so lookup time is not
guaranteed to get monotonically worse with size; a dataset just above a
resize point can be faster than one just below it.
===============================================================================
"""

from typing import Dict, Optional

from lookup_bench.structures.base import LookupStructure
from lookup_bench.utils.data_loader import Dataset, Record


class DictionaryView(LookupStructure):
    kind = "dictionary"

    def __init__(self):
        self.table: Dict[str, Record] = {}

    def build(self, dataset: Dataset) -> None:
        table = {}
        for record in dataset:
            table[record.key] = record
        self.table = table

    def lookup(self, key: str) -> Optional[Record]:
        return self.table.get(key)

    def __len__(self) -> int:
        return len(self.table)
