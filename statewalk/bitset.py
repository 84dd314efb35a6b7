"""Fixed-capacity bit sets for compact, hashable rule state."""

from __future__ import annotations

from collections.abc import Iterator


class BitSet:
    """Immutable set of small non-negative integers packed into an int.

    Indices must lie in ``[0, capacity)``; anything else raises
    ``IndexError`` immediately.

    Example:
        >>> keys = BitSet().insert(0).insert(5)
        >>> 5 in keys, len(keys)
        (True, 2)
    """

    __slots__ = ("_bits", "_capacity")

    def __init__(self, bits: int = 0, capacity: int = 64) -> None:
        if bits < 0 or bits >> capacity:
            raise ValueError(f"bits {bits:#x} do not fit in {capacity} bits")
        self._bits = bits
        self._capacity = capacity

    @classmethod
    def of(cls, *indices: int, capacity: int = 64) -> BitSet:
        result = cls(capacity=capacity)
        for idx in indices:
            result = result.insert(idx)
        return result

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def bits(self) -> int:
        return self._bits

    def _check(self, idx: int) -> None:
        if not 0 <= idx < self._capacity:
            raise IndexError(
                f"bit index {idx} out of range for capacity {self._capacity}"
            )

    def insert(self, idx: int) -> BitSet:
        """Return a copy with ``idx`` set."""
        self._check(idx)
        return BitSet(self._bits | (1 << idx), self._capacity)

    def contains(self, idx: int) -> bool:
        self._check(idx)
        return bool(self._bits & (1 << idx))

    def is_empty(self) -> bool:
        return self._bits == 0

    def intersect(self, other: BitSet) -> BitSet:
        return BitSet(self._bits & other._bits, self._capacity)

    def difference(self, other: BitSet) -> BitSet:
        return BitSet(self._bits & ~other._bits, self._capacity)

    def __contains__(self, idx: int) -> bool:
        return self.contains(idx)

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __iter__(self) -> Iterator[int]:
        bits = self._bits
        idx = 0
        while bits:
            if bits & 1:
                yield idx
            bits >>= 1
            idx += 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._bits == other._bits and self._capacity == other._capacity

    def __hash__(self) -> int:
        return hash((self._bits, self._capacity))

    def __repr__(self) -> str:
        return f"BitSet({sorted(self)!r})"
