"""wavegraph custom exceptions."""


class WaveGraphError(Exception):
    """Base exception for wavegraph errors."""


class LoadError(WaveGraphError):
    """Error reading an edge-list file."""


class IteratorInvalidatedError(WaveGraphError, RuntimeError):
    """Container was mutated while being iterated."""
