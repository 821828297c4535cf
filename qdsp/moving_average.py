"""Moving-average filters: arithmetic, exponential and two-point."""

from __future__ import annotations

from collections import deque


class MovingAverage:
    """Arithmetic mean of the last ``size`` samples (a boxcar FIR filter).

    The window starts filled with zeros. The filter delay is ``(size - 1) / 2``.
    """

    def __init__(self, size: int) -> None:
        size = int(size)
        if size < 1:
            raise ValueError("moving average size must be at least 1")
        self._window: deque[float] = deque([0.0] * size, maxlen=size)
        self._sum = 0.0
        self.size = size

    @classmethod
    def from_duration(cls, d: float, sps: float) -> MovingAverage:
        """Build an average whose window spans ``d`` seconds at ``sps``."""
        return cls(int(sps * d))

    @property
    def sum(self) -> float:
        """Sum of the samples in the window."""
        return self._sum

    @property
    def value(self) -> float:
        """Current average without pushing a sample."""
        return self._sum / self.size

    def __call__(self, s: float) -> float:
        self._sum += s - self._window[0]
        self._window.append(s)
        return self.value


class ExpMovingAverage:
    """Exponential moving average approximating an ``n``-sample arithmetic mean.

    ``b = 2 / (n + 1)``; the output is ``y = b * s + (1 - b) * y``.
    """

    def __init__(self, n: float, y: float = 0.0) -> None:
        self.y = y
        self.b = 2.0 / (n + 1)
        self.b_ = 1.0 - self.b

    @classmethod
    def from_duration(cls, d: float, sps: float, y: float = 0.0) -> ExpMovingAverage:
        """Build an average equivalent to ``d`` seconds of samples at ``sps``."""
        return cls(int(sps * d), y)

    def __call__(self, s: float) -> float:
        self.y = self.b * s + self.b_ * self.y
        return self.y

    def width(self, n: float) -> None:
        """Set the input weight for an ``n``-sample window.

        Only the input weight ``b`` changes; the feedback weight keeps its
        previous value.
        """
        self.b = 2.0 / (n + 1)


class MovingAverage2:
    """Two-point average: ``y = (s + y) / 2``."""

    def __init__(self, y: float = 0.0) -> None:
        self.y = y

    def __call__(self, s: float) -> float:
        self.y = (s + self.y) / 2
        return self.y