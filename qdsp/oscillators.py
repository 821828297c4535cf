"""Basic periodic oscillators driven by a fixed-point phase.

A phase is an integer in which ``ONE_CYCLE`` (2**32) is one full period.
Values outside ``[0, ONE_CYCLE)`` wrap around, so a phase accumulator can
simply keep adding its step.
"""

from __future__ import annotations

import math
import operator

# One full cycle in fixed-point phase units.
ONE_CYCLE = 1 << 32

_HALF_CYCLE = ONE_CYCLE >> 1
_TRIANGLE_SCALE = 4.0 / ONE_CYCLE
_RADIANS_PER_UNIT = 2.0 * math.pi / ONE_CYCLE


def _wrap(phase: int) -> int:
    """Return ``phase`` reduced to one cycle.

    Raises TypeError if ``phase`` is not an integer.
    """
    return operator.index(phase) % ONE_CYCLE


def _as_signed(phase: int) -> int:
    """Reinterpret a wrapped phase as a signed 32-bit value."""
    return phase - ONE_CYCLE if phase >= _HALF_CYCLE else phase


def sin_osc(phase: int) -> float:
    """Sine wave oscillator: the sine of ``phase`` (one cycle per ``ONE_CYCLE``)."""
    return math.sin(_wrap(phase) * _RADIANS_PER_UNIT)


def basic_triangle(phase: int) -> float:
    """Triangle wave oscillator, not bandwidth limited.

    The wave is -1 at phase zero, rises linearly to +1 at half a cycle and
    falls back to -1 at the end of the cycle.
    """
    return abs(_as_signed(_wrap(phase))) * _TRIANGLE_SCALE - 1.0