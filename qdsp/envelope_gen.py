"""Segmented envelope generators built from ramp generators."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class Ramp(Protocol):
    """A ramp generator: produces a shape over a configurable width.

    A ramp is constructed from a width in seconds and a sample rate.
    """

    def __call__(self) -> float:
        """Return the next value of the ramp."""
        ...

    def reset(self) -> None:
        """Restart the ramp from its beginning."""
        ...

    def config(self, width: float, sps: float) -> None:
        """Set the ramp's width in seconds at ``sps`` samples per second."""
        ...


RampFactory = Callable[[float, float], Ramp]


def _width_in_samples(width: float, sps: float) -> int:
    return math.ceil(width * sps)


class EnvelopeSegment:
    """One segment of an envelope: a ramp moving towards a target level.

    The ramp's output, assumed in the range 0 to 1, is scaled and offset so
    the segment spans the previous level and its own level.
    """

    def __init__(
        self, ramp_factory: RampFactory, width: float, level: float, sps: float
    ) -> None:
        self._ramp = ramp_factory(width, sps)
        self._time = 0
        self._end = _width_in_samples(width, sps)
        self.level = float(level)
        self._offset = 0.0
        self._scale = 0.0

    def __call__(self) -> float:
        self._time += 1
        return self._offset + self._ramp() * self._scale

    def start(self, prev_level: float) -> None:
        """Begin the segment from ``prev_level``."""
        self._offset = min(self.level, prev_level)
        self._scale = abs(self.level - prev_level)

    def reset(self) -> None:
        """Restart the segment's ramp."""
        self._ramp.reset()
        self._time = 0

    def done(self) -> bool:
        """True once the segment has run for its full width."""
        return self._time >= self._end

    def config(self, width: float, sps: float, level: float | None = None) -> None:
        """Set the segment's width, and optionally its level, then restart it."""
        self._ramp.config(width, sps)
        self._end = _width_in_samples(width, sps)
        self.reset()
        if level is not None:
            self.level = float(level)


class EnvelopeGen:
    """An envelope made of segments played in order.

    ``attack`` starts the first segment, ``release`` jumps to the last one.
    When the last segment finishes the envelope is idle and outputs zero.
    """

    def __init__(self, segments: Iterable[EnvelopeSegment]) -> None:
        self._segments: list[EnvelopeSegment] = list(segments)
        self._i = len(self._segments)
        self._y = 0.0
        self.reset()

    def __len__(self) -> int:
        return len(self._segments)

    def __getitem__(self, index: int) -> EnvelopeSegment:
        return self._segments[index]

    def __iter__(self) -> Iterator[EnvelopeSegment]:
        return iter(self._segments)

    def attack(self) -> None:
        """Start the envelope from the first segment if it is idle."""
        if self.in_idle_phase() and self._segments:
            self.reset()
            self._i = 0
            self._segments[0].start(0.0)

    def release(self) -> None:
        """Jump to the last segment, starting from the current output."""
        if not self.in_release_phase():
            self._i = len(self._segments)
            if self._i:
                self._i -= 1
                self._segments[self._i].start(self._y)

    def __call__(self) -> float:
        if self.in_idle_phase():
            return 0.0
        segment = self._segments[self._i]
        self._y = segment()
        if segment.done():
            self._i += 1
            if not self.in_idle_phase():
                self._segments[self._i].start(segment.level)
        return self._y

    def reset(self) -> None:
        """Return to the idle phase and restart every segment."""
        self._i = len(self._segments)
        for segment in self._segments:
            segment.reset()

    @property
    def current(self) -> float:
        """The most recent output value."""
        return self._y

    @property
    def index(self) -> int:
        """Index of the active segment; equals ``len(self)`` when idle."""
        return self._i

    def in_idle_phase(self) -> bool:
        """True when no segment is active."""
        return self._i == len(self._segments)

    def in_attack_phase(self) -> bool:
        """True while the first segment is active."""
        return bool(self._segments) and self._i == 0

    def in_release_phase(self) -> bool:
        """True while the last segment of a multi-segment envelope is active."""
        return len(self._segments) >= 2 and self._i == len(self._segments) - 1