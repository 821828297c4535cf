"""Discrete differentiators: first difference, central difference and slope."""

from __future__ import annotations

from qdsp.ring_buffer import RingBuffer


class FirstDifference:
    """Signal change between two consecutive samples: ``y(n) = x(n) - x(n-1)``."""

    def __init__(self) -> None:
        self.x = 0.0

    def __call__(self, s: float) -> float:
        val = s - self.x
        self.x = s
        return val


class CentralDifference:
    """Central-difference derivative estimate: ``y(n) = (x(n) - x(n-2)) / 2``.

    Less sensitive to high-frequency noise than :class:`FirstDifference`.
    """

    def __init__(self) -> None:
        self._x1 = 0.0
        self._x2 = 0.0

    def __call__(self, s: float) -> float:
        delayed = self._x2
        self._x2 = self._x1
        self._x1 = s
        return (s - delayed) / 2


class Slope:
    """Steepness of the signal over a window: ``y(n) = x(n) - x(n-m)``.

    ``m`` is the window size in samples; the oldest sample in the window is
    the one pushed ``m - 1`` samples ago.
    """

    def __init__(self, max_size: int) -> None:
        self._buff = RingBuffer(max_size)
        self._size = int(max_size)

    @classmethod
    def from_duration(cls, dt: float, sps: float) -> Slope:
        """Build a slope whose window spans ``dt`` seconds at ``sps`` samples per second."""
        return cls(int(sps * dt))

    def __call__(self, s: float) -> float:
        self._buff.push(s)
        return s - self._buff[self._size - 1]

    def current(self) -> float:
        """Return the slope over the current window without pushing a sample."""
        return self._buff[0] - self._buff[self._size - 1]