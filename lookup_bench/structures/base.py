"""
===============================================================================
LOOKUP STRUCTURE INTERFACE
===============================================================================
Every benchmarked representation implements the same small contract:

    build(dataset)  — load all Records in one pass
    lookup(key)     — return the Record for `key`, or None when absent

The runner only ever talks to this interface, so a new representation is
added by writing one subclass and registering it in the adapter.
===============================================================================
"""

from abc import ABC, abstractmethod
from typing import Optional

from lookup_bench.utils.data_loader import Dataset, Record


class LookupStructure(ABC):
    """Read-only key -> Record view over a dataset."""

    kind: str = ""

    @abstractmethod
    def build(self, dataset: Dataset) -> None:
        """Load every Record of `dataset`."""

    @abstractmethod
    def lookup(self, key: str) -> Optional[Record]:
        """Return the matching Record, or None (not found)."""

    @abstractmethod
    def __len__(self) -> int:
        ...
