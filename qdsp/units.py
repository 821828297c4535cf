"""Constructors for frequencies, durations, decibels and multiples of pi.

Frequencies are plain floats in hertz and durations plain floats in seconds.
"""

from __future__ import annotations

import math

from qdsp.decibel import Decibel


def hz(val: float) -> float:
    """Frequency in hertz."""
    return float(val)


def khz(val: float) -> float:
    """Frequency given in kilohertz, returned in hertz."""
    return float(val * 1e3)


def mhz(val: float) -> float:
    """Frequency given in megahertz, returned in hertz."""
    return float(val * 1e6)


def seconds(val: float) -> float:
    """Duration in seconds."""
    return float(val)


def ms(val: float) -> float:
    """Duration given in milliseconds, returned in seconds."""
    return float(val * 1e-3)


def us(val: float) -> float:
    """Duration given in microseconds, returned in seconds."""
    return float(val * 1e-6)


def db(val: float) -> Decibel:
    """A decibel level taken directly as given."""
    return Decibel(float(val))


def pi_times(val: float) -> float:
    """Return ``val`` multiplied by pi."""
    return val * math.pi