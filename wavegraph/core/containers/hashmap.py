"""Chained hash table keyed by unsigned 64-bit integers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from wavegraph.config import (
    BUCKET_GROWTH_FACTOR,
    DEFAULT_MAX_LOAD_FACTOR,
    INITIAL_BUCKET_COUNT,
    KEY_MASK,
)
from wavegraph.core.exceptions import IteratorInvalidatedError

logger = logging.getLogger(__name__)

V = TypeVar("V")

Releaser = Callable[[V], None]


class _Entry(Generic[V]):
    """A key/value pair stored in a bucket chain."""

    __slots__ = ("key", "value")

    def __init__(self, key: int, value: V) -> None:
        self.key = key
        self.value = value

    def __repr__(self) -> str:
        return f"_Entry({self.key!r}, {self.value!r})"


class HashMap(Generic[V]):
    """Separate-chaining hash table.

    Bucket index is ``key mod bucket_count``. The table grows (doubling, or
    to 16 buckets when empty) before a new key is inserted once
    ``size / bucket_count`` reaches ``max_load_factor``.

    When a ``releaser`` is given the map owns its values: ``destroy()`` calls
    it once on every value still stored. Values handed back by ``put`` or
    ``delete`` are not released.

    Structural mutation (new key, delete, reserve, destroy) invalidates any
    live ``iterate()`` generator.
    """

    __slots__ = ("_buckets", "_size", "_max_load_factor", "_releaser", "_version")

    def __init__(
        self,
        capacity: int = 0,
        releaser: Releaser[V] | None = None,
        max_load_factor: float = DEFAULT_MAX_LOAD_FACTOR,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        if max_load_factor <= 0:
            raise ValueError(f"max_load_factor must be > 0, got {max_load_factor}")
        self._buckets: list[list[_Entry[V]]] = self._new_table(capacity)
        self._size = 0
        self._max_load_factor = max_load_factor
        self._releaser = releaser
        self._version = 0

    def put(self, key: int, value: V) -> V | None:
        """Store value under key. Returns the previous value, if any."""
        key &= KEY_MASK
        entry = self._find(key)
        if entry is not None:
            previous = entry.value
            entry.value = value
            return previous

        self._grow_if_needed()
        self._buckets[key % len(self._buckets)].append(_Entry(key, value))
        self._size += 1
        self._version += 1
        return None

    def get(self, key: int) -> V | None:
        """Get the value stored under key, or None."""
        entry = self._find(key & KEY_MASK)
        return entry.value if entry is not None else None

    def has(self, key: int) -> bool:
        """Check whether key is stored."""
        return self._find(key & KEY_MASK) is not None

    def delete(self, key: int) -> V | None:
        """Detach key and hand its value back. Absent keys return None."""
        if not self._buckets:
            return None
        key &= KEY_MASK
        bucket = self._buckets[key % len(self._buckets)]
        for pos, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[pos]
                self._size -= 1
                self._version += 1
                return entry.value
        return None

    def size(self) -> int:
        """Number of stored entries."""
        return self._size

    def reserve(self, extra: int) -> None:
        """Add ``extra`` buckets and rehash every entry. 0 is a no-op."""
        if extra < 0:
            raise ValueError(f"extra must be >= 0, got {extra}")
        if extra == 0:
            return
        self._rehash(len(self._buckets) + extra)

    def iterate(self) -> Iterator[tuple[int, V]]:
        """Lazily yield (key, value) pairs in bucket order.

        Raises:
            IteratorInvalidatedError: if the map is structurally modified
                while the generator is live.
        """
        version = self._version
        buckets = self._buckets
        for bucket in buckets:
            for entry in bucket:
                yield entry.key, entry.value
                if self._version != version:
                    raise IteratorInvalidatedError("HashMap modified during iteration")

    def keys(self) -> list[int]:
        """Snapshot of the stored keys."""
        return [key for key, _ in self.iterate()]

    def values(self) -> list[V]:
        """Snapshot of the stored values."""
        return [value for _, value in self.iterate()]

    def destroy(self) -> None:
        """Release every remaining value and drop all buckets.

        The map stays usable afterwards, empty and with no buckets.
        """
        buckets = self._buckets
        self._buckets = []
        self._size = 0
        self._version += 1
        if self._releaser is not None:
            for bucket in buckets:
                for entry in bucket:
                    self._releaser(entry.value)

    @property
    def capacity(self) -> int:
        """Current bucket count."""
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        if not self._buckets:
            return 0.0
        return self._size / len(self._buckets)

    def _find(self, key: int) -> _Entry[V] | None:
        if not self._size:
            return None
        for entry in self._buckets[key % len(self._buckets)]:
            if entry.key == key:
                return entry
        return None

    def _grow_if_needed(self) -> None:
        bucket_count = len(self._buckets)
        if bucket_count == 0:
            self._rehash(INITIAL_BUCKET_COUNT)
        elif self.load_factor >= self._max_load_factor:
            self._rehash(bucket_count * BUCKET_GROWTH_FACTOR)

    @staticmethod
    def _new_table(bucket_count: int) -> list[list[_Entry[V]]]:
        return [[] for _ in range(bucket_count)]

    def _rehash(self, bucket_count: int) -> None:
        # Old table stays intact until the new one is complete.
        buckets = self._new_table(bucket_count)
        for bucket in self._buckets:
            for entry in bucket:
                buckets[entry.key % bucket_count].append(entry)

        logger.debug("HashMap rehash: %d -> %d buckets", len(self._buckets), bucket_count)
        self._buckets = buckets
        self._version += 1

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.has(key)

    def __iter__(self) -> Iterator[tuple[int, V]]:
        return self.iterate()

    def __repr__(self) -> str:
        return f"HashMap(size={self._size}, buckets={len(self._buckets)})"
