"""Fixed-capacity ring buffers indexed from the most recent element."""

from __future__ import annotations

from collections.abc import Iterator


def _next_pow2(n: int) -> int:
    return 1 << (n - 1).bit_length()


class RingBuffer:
    """A ring buffer whose capacity is rounded up to a power of two.

    Index 0 is the most recently pushed element; index ``len(buf) - 1`` is
    the oldest.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("ring buffer size must be at least 1")
        capacity = _next_pow2(int(size))
        self._data: list[float] = [0.0] * capacity
        self._mask = capacity - 1
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return (self[i] for i in range(len(self)))

    def push(self, val: float) -> None:
        """Push the latest element, overwriting the oldest."""
        self._pos = (self._pos - 1) & self._mask
        self._data[self._pos] = val

    def front(self) -> float:
        """Return the latest element."""
        return self[0]

    def back(self) -> float:
        """Return the oldest element."""
        return self[len(self) - 1]

    def __getitem__(self, index: int) -> float:
        return self._data[(self._pos + index) & self._mask]

    def __setitem__(self, index: int, val: float) -> None:
        self._data[(self._pos + index) & self._mask] = val

    def clear(self) -> None:
        """Reset every element to zero."""
        self._data[:] = [0.0] * len(self._data)

    def pop_front(self) -> None:
        """Drop the latest element by advancing the read position."""
        self._pos = (self._pos + 1) & self._mask

    def store(self) -> list[float]:
        """Return the underlying storage."""
        return self._data


class FractionalRingBuffer(RingBuffer):
    """A ring buffer that accepts fractional indices via linear interpolation."""

    def __getitem__(self, index: float) -> float:  # type: ignore[override]
        whole = int(index)
        frac = index - whole
        v1 = RingBuffer.__getitem__(self, whole)
        if frac == 0:
            return v1
        v2 = RingBuffer.__getitem__(self, whole + 1)
        return v1 + frac * (v2 - v1)