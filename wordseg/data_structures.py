from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

__all__ = ["BoundarySet", "Composition", "CompositionWindow"]

class BoundarySet:
    """
    A fixed-capacity set of character offsets, packed into bits.

    Each offset in `[0, capacity)` owns one bit. The bits live in a single
    Python integer, so `copy_from` shares the immutable value instead of
    copying characters and costs the same regardless of how many boundaries
    are recorded.

    Attributes:
        capacity: Number of addressable offsets (the length of the input text).
    """
    __slots__ = ("capacity", "_bits")

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._bits = 0

    def _check(self, offset: int) -> None:
        if not 0 <= offset < self.capacity:
            raise IndexError(f"offset {offset} outside of [0, {self.capacity})")

    def set(self, offset: int) -> None:
        self._check(offset)
        self._bits |= 1 << offset

    def test(self, offset: int) -> bool:
        self._check(offset)
        return bool((self._bits >> offset) & 1)

    def copy_from(self, other: "BoundarySet") -> None:
        if other.capacity != self.capacity:
            raise ValueError(
                f"cannot copy a BoundarySet of capacity {other.capacity} into one of capacity {self.capacity}"
            )
        self._bits = other._bits

    def clear(self) -> None:
        self._bits = 0

    def __iter__(self) -> Iterator[int]:
        """Yields the set offsets in ascending order."""
        bits = self._bits
        while bits:
            lowest = bits & -bits
            yield lowest.bit_length() - 1
            bits ^= lowest

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundarySet):
            return NotImplemented
        return self.capacity == other.capacity and self._bits == other._bits

    def __repr__(self) -> str:
        return f"BoundarySet(capacity={self.capacity}, offsets={list(self)})"


@dataclass
class Composition:
    """
    The best known segmentation of one prefix of the input.

    Attributes:
        score: Sum of log10 word probabilities of the prefix segmentation.
        boundaries: Offsets at which a space precedes a word.
    """
    score: float
    boundaries: BoundarySet

    @classmethod
    def empty(cls, capacity: int) -> "Composition":
        return cls(score=0.0, boundaries=BoundarySet(capacity))

    def copy_from(self, other: "Composition") -> None:
        self.score = other.score
        self.boundaries.copy_from(other.boundaries)

    def extend(self, prefix: "Composition", score: float, boundary: Optional[int]) -> None:
        """Overwrites this cell with `prefix` plus one word starting at `boundary`."""
        self.boundaries.copy_from(prefix.boundaries)
        if boundary is not None:
            self.boundaries.set(boundary)
        self.score = score


@dataclass
class CompositionWindow:
    """
    A ring buffer holding the compositions of the most recent prefixes.

    A candidate word can reach back at most `size` characters, so only the
    last `size` logical positions are ever read again. Position `p` lives in
    slot `p % size`; `slot` is the only place that translation happens.
    """
    size: int
    capacity: int
    _cells: List[Composition] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"window size must be at least 1, got {self.size}")
        self._cells = [Composition.empty(self.capacity) for _ in range(self.size)]

    def slot(self, position: int) -> int:
        return position % self.size

    def __getitem__(self, position: int) -> Composition:
        return self._cells[self.slot(position)]

    def __len__(self) -> int:
        return self.size
