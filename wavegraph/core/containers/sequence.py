"""Growable ordered sequence of vertex identifiers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


class VertexSequence:
    """An ordered list of vertices used to build paths.

    Tracks a logical capacity: appending at capacity doubles it, and
    ``reserve(extra)`` grows it by ``extra`` when ``len + extra`` would not fit.
    """

    __slots__ = ("_data", "_capacity")

    def __init__(self) -> None:
        self._data: list[int] = []
        self._capacity = 0

    @classmethod
    def from_list(cls, raw: Iterable[int]) -> VertexSequence:
        """Build a sequence holding a copy of raw."""
        seq = cls()
        data = list(raw)
        seq.reserve(len(data))
        seq._data = data
        return seq

    def reserve(self, extra: int) -> None:
        """Make room for ``extra`` more vertices. 0 is a no-op."""
        if extra < 0:
            raise ValueError(f"extra must be >= 0, got {extra}")
        if extra == 0 or self._capacity >= len(self._data) + extra:
            return
        self._capacity += extra

    def append(self, vertex: int) -> None:
        if len(self._data) == self._capacity:
            self.reserve(max(self._capacity, 1))
        self._data.append(vertex)

    def truncate(self, length: int) -> None:
        """Drop every vertex from position ``length`` on."""
        del self._data[length:]

    def clone(self) -> VertexSequence:
        """Independent copy. O(n)."""
        return VertexSequence.from_list(self._data)

    def reverse_in_place(self) -> None:
        """Swap symmetric pairs. O(n/2)."""
        self._data.reverse()

    def destroy(self) -> None:
        self._data = []
        self._capacity = 0

    def to_list(self) -> list[int]:
        return list(self._data)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def first(self) -> int | None:
        return self._data[0] if self._data else None

    @property
    def last(self) -> int | None:
        return self._data[-1] if self._data else None

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VertexSequence):
            return self._data == other._data
        if isinstance(other, Sequence):
            return self._data == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"VertexSequence({self._data!r})"
