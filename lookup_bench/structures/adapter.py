"""
===============================================================================
STRUCTURE ADAPTER
===============================================================================
Wraps one dataset into every registered lookup representation and exposes
a single `lookup(kind, key)` entry point over them.

All views hold the very same Record objects, so a hit in any of them returns
an equivalent Record. Kinds are kept in registration order, which is also
the order the benchmark measures and reports them in.
===============================================================================
"""

from typing import Dict, Iterator, List, Optional, Type

from lookup_bench.structures.base import LookupStructure
from lookup_bench.structures.dictionary import DictionaryView
from lookup_bench.structures.hashmap import ChainedHashMap
from lookup_bench.structures.linear import LinearScan
from lookup_bench.utils.data_loader import Dataset, Record
from lookup_bench.utils.errors import InvalidConfiguration

DEFAULT_STRUCTURES: List[Type[LookupStructure]] = [LinearScan, ChainedHashMap, DictionaryView]


class StructureSet:
    """Parallel read-only views over the same dataset, keyed by kind."""

    def __init__(self, views: Dict[str, LookupStructure]):
        self.views = views

    @property
    def kinds(self) -> List[str]:
        return list(self.views)

    def view(self, kind: str) -> LookupStructure:
        try:
            return self.views[kind]
        except KeyError:
            raise InvalidConfiguration(f"Unknown structure kind: {kind!r}") from None

    def lookup(self, kind: str, key: str) -> Optional[Record]:
        return self.view(kind).lookup(key)

    def __iter__(self) -> Iterator[LookupStructure]:
        return iter(self.views.values())


class StructureAdapter:
    """Builds a StructureSet from the registered structure classes."""

    def __init__(self, structures: Optional[List[Type[LookupStructure]]] = None):
        self.structures = list(structures or DEFAULT_STRUCTURES)
        kinds = [cls.kind for cls in self.structures]
        if len(set(kinds)) != len(kinds):
            raise InvalidConfiguration(f"Duplicate structure kinds: {kinds}")

    def prepare(self, dataset: Dataset) -> StructureSet:
        views = {}
        for cls in self.structures:
            view = cls()
            view.build(dataset)
            views[cls.kind] = view
        return StructureSet(views)
