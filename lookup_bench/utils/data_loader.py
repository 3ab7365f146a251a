"""
===============================================================================
DATA LOADER MODULE
===============================================================================
This module generates synthetic key-value datasets for the lookup benchmark.

Every dataset is an ordered list of immutable Records whose keys are random
alphanumeric strings, pairwise distinct by construction:
    • KeyGenerator — random keys of length 5..14 drawn from [A-Za-z0-9]
    • DatasetGenerator — rejection-samples unique keys, values "value<i>"

All randomness comes from an injected numpy Generator, so the same seed
always reproduces the same dataset.

Usage:
    import numpy as np
    from lookup_bench.utils.data_loader import DatasetGenerator

    gen = DatasetGenerator(np.random.default_rng(42))
    dataset = gen.build(1000)
    print(dataset[:3])  # Preview data
===============================================================================
"""

import logging
import string
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from lookup_bench.utils.errors import InvalidConfiguration, KeyGenerationExhausted

logger = logging.getLogger(__name__)

ALPHANUMERIC = string.ascii_letters + string.digits


@dataclass(frozen=True)
class Record:
    """Single key-value pair in a dataset."""

    key: str
    value: str


Dataset = List[Record]


class KeyGenerator:
    """Random string keys; uniqueness is the caller's job."""

    def __init__(self, rng: np.random.Generator, min_length: int = 5,
                 max_length: int = 14, alphabet: str = ALPHANUMERIC):
        """
        Args:
            rng: Source of randomness (np.random.default_rng(seed)).
            min_length: Shortest key length, inclusive.
            max_length: Longest key length, inclusive.
            alphabet: Characters keys are drawn from.
        """
        if min_length < 1 or max_length < min_length:
            raise InvalidConfiguration(
                f"Invalid key length range [{min_length}, {max_length}]")
        if not alphabet:
            raise InvalidConfiguration("Key alphabet must not be empty")
        self.rng = rng
        self.min_length = min_length
        self.max_length = max_length
        self.alphabet = alphabet

    def next_key(self) -> str:
        length = int(self.rng.integers(self.min_length, self.max_length + 1))
        picks = self.rng.integers(0, len(self.alphabet), size=length)
        return "".join(self.alphabet[i] for i in picks)

    def key_space_size(self) -> int:
        """Number of distinct keys this generator can ever produce."""
        base = len(self.alphabet)
        return sum(base ** n for n in range(self.min_length, self.max_length + 1))


class DatasetGenerator:
    """Build datasets of uniquely keyed Records."""

    def __init__(self, rng: np.random.Generator,
                 key_generator: Optional[KeyGenerator] = None,
                 max_attempts: Optional[int] = None):
        """
        Args:
            rng: Source of randomness, shared with the default KeyGenerator.
            key_generator: Override the key source (e.g. a tiny key space).
            max_attempts: Consecutive collisions tolerated per record before
                giving up. None means retry forever, which terminates almost
                surely while the key space is much larger than the dataset.
        """
        self.key_generator = key_generator or KeyGenerator(rng)
        self.max_attempts = max_attempts

    # ----------------------------------------------------------------------
    # Build
    # ----------------------------------------------------------------------
    def build(self, size: int) -> Dataset:
        """Generate `size` Records with pairwise distinct keys."""
        if size < 0:
            raise InvalidConfiguration(f"Dataset size must be >= 0, got {size}")

        space = self.key_generator.key_space_size()
        if size > space:
            raise KeyGenerationExhausted(
                f"Cannot draw {size} unique keys from a key space of {space}")

        seen = set()
        records = []
        for i in range(size):
            key = self._unique_key(seen)
            seen.add(key)
            records.append(Record(key=key, value=f"value{i}"))

        logger.debug("Built dataset of %d records", len(records))
        return records

    def _unique_key(self, seen: set) -> str:
        attempts = 0
        while True:
            key = self.key_generator.next_key()
            if key not in seen:
                return key
            attempts += 1
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise KeyGenerationExhausted(
                    f"No unique key after {attempts} attempts "
                    f"({len(seen)} keys already taken)")


# -----------------------------------------------------------------------------
# Quick-run tester
# use in console to run : python -m lookup_bench.utils.data_loader
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    print("Generating datasets\n")

    gen = DatasetGenerator(np.random.default_rng(0))
    for size in [0, 10, 1000]:
        data = gen.build(size)
        unique = len({r.key for r in data})
        print(f"size={size:<5} unique keys={unique:<5} first={data[:2]}")
