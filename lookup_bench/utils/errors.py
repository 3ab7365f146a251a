# Custom exceptions so benchmark failures are clean and readable.

class BenchmarkError(Exception):
    """Base error for benchmark problems."""

class InvalidConfiguration(BenchmarkError):
    """Raised when a size, iteration count or sampling request is invalid."""

class KeyGenerationExhausted(BenchmarkError):
    """Raised when no new unique key can be produced for a dataset."""
