"""Envelope followers: peak, attack/release, fast staircase, averaged and RMS."""

from __future__ import annotations

import math

from qdsp.decibel import Decibel, lin_float, lin_to_db
from qdsp.moving_average import MovingAverage


def _coefficient(width: float, sps: float) -> float:
    return math.exp(-2.0 / (sps * width))


class PeakEnvelopeFollower:
    """Tracks peaks instantly and releases with an exponential decay."""

    def __init__(self, release: float, sps: float) -> None:
        self.y = 0.0
        self._release = _coefficient(release, sps)

    def __call__(self, s: float) -> float:
        if s > self.y:
            self.y = s
        else:
            self.y = s + self._release * (self.y - s)
        return self.y

    def configure_release(self, release: float, sps: float) -> None:
        """Set the release time in seconds."""
        self._release = _coefficient(release, sps)


class ArEnvelopeFollower:
    """Envelope follower with separate exponential attack and release."""

    def __init__(self, attack: float, release: float, sps: float) -> None:
        self.y = 0.0
        self._attack = _coefficient(attack, sps)
        self._release = _coefficient(release, sps)

    def __call__(self, s: float) -> float:
        coeff = self._attack if s > self.y else self._release
        self.y = s + coeff * (self.y - s)
        return self.y

    def config(self, attack: float, release: float, sps: float) -> None:
        """Set both attack and release times in seconds."""
        self._attack = _coefficient(attack, sps)
        self._release = _coefficient(release, sps)

    def configure_attack(self, attack: float, sps: float) -> None:
        """Set the attack time in seconds."""
        self._attack = _coefficient(attack, sps)

    def configure_release(self, release: float, sps: float) -> None:
        """Set the release time in seconds."""
        self._release = _coefficient(release, sps)


class FastEnvelopeFollower:
    """Fast-response, low-ripple peak follower with a staircase output.

    ``div + 1`` peak holders are reset round-robin every ``hold_samples``
    samples; the output is the largest of them.
    """

    def __init__(self, hold_samples: int, div: int = 2) -> None:
        if div < 1:
            raise ValueError("div must be >= 1")
        if hold_samples < 0:
            raise ValueError("hold_samples must not be negative")
        self._y = [0.0] * (div + 1)
        self.peak = 0.0
        self._tick = 0
        self._i = 0
        self._reset = int(hold_samples)

    @classmethod
    def from_duration(cls, hold: float, sps: float, div: int = 2) -> FastEnvelopeFollower:
        """Build a follower whose hold spans ``hold`` seconds at ``sps``."""
        return cls(int(hold * sps), div)

    def __call__(self, s: float) -> float:
        self._y = [max(s, y) for y in self._y]
        if self._tick == self._reset:
            self._tick = 0
            self._y[self._i] = 0.0
            self._i = (self._i + 1) % len(self._y)
        else:
            self._tick += 1
        self.peak = max(self._y)
        return self.peak


class FastAveEnvelopeFollower:
    """A :class:`FastEnvelopeFollower` smoothed by a moving average of the hold length."""

    def __init__(self, hold_samples: int, div: int = 2) -> None:
        self._fenv = FastEnvelopeFollower(hold_samples, div)
        self._ma = MovingAverage(hold_samples)

    @classmethod
    def from_duration(
        cls, hold: float, sps: float, div: int = 2
    ) -> FastAveEnvelopeFollower:
        """Build a follower whose hold spans ``hold`` seconds at ``sps``."""
        return cls(int(hold * sps), div)

    @property
    def value(self) -> float:
        """Current smoothed envelope."""
        return self._ma.value

    def __call__(self, s: float) -> float:
        return self._ma(self._fenv(s))


class FastRmsEnvelopeFollower:
    """RMS envelope: square, fast averaging follower, then square root.

    Squared levels below -120 dB are treated as silence.
    """

    threshold = lin_float(Decibel(-120.0))

    def __init__(self, hold: float, sps: float) -> None:
        self._fenv = FastAveEnvelopeFollower.from_duration(hold, sps)

    def _squared_envelope(self, s: float) -> float:
        e = self._fenv(s * s)
        return 0.0 if e < self.threshold else e

    def __call__(self, s: float) -> float:
        return math.sqrt(self._squared_envelope(s))


class FastRmsEnvelopeFollowerDb(FastRmsEnvelopeFollower):
    """RMS envelope follower that reports its level in decibels.

    The square root is taken in the dB domain as a division by two; silence
    is negative infinity.
    """

    def __call__(self, s: float) -> Decibel:  # type: ignore[override]
        return lin_to_db(self._squared_envelope(s)) / 2.0