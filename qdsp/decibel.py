"""Decibel values and fast conversion between decibels and linear gain."""

from __future__ import annotations

import math
from dataclasses import dataclass

from qdsp.db_table import db2a


@dataclass(frozen=True, order=True)
class Decibel:
    """A level in the logarithmic (decibel) domain.

    Build one directly from a dB value, ``Decibel(-6.0)``, or from a linear
    amplitude with :func:`lin_to_db`.
    """

    rep: float

    def __neg__(self) -> Decibel:
        return Decibel(-self.rep)

    def __add__(self, other: Decibel) -> Decibel:
        if not isinstance(other, Decibel):
            return NotImplemented
        return Decibel(self.rep + other.rep)

    def __sub__(self, other: Decibel) -> Decibel:
        if not isinstance(other, Decibel):
            return NotImplemented
        return Decibel(self.rep - other.rep)

    def __mul__(self, factor: float) -> Decibel:
        if isinstance(factor, Decibel):
            return NotImplemented
        return Decibel(self.rep * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float | Decibel) -> Decibel | float:
        if isinstance(divisor, Decibel):
            return self.rep / divisor.rep
        return Decibel(self.rep / divisor)

    def __float__(self) -> float:
        return float(self.rep)


def lin_double(db: Decibel) -> float:
    """Return the exact linear amplitude of ``db``."""
    return 10.0 ** (db.rep / 20.0)


def lin_float(db: Decibel) -> float:
    """Return the linear amplitude of ``db`` using the lookup table."""
    return db2a(db.rep)


def _log10(val: float) -> float:
    if val < 0:
        raise ValueError(f"cannot take the level of a negative amplitude: {val}")
    if val == 0:
        return -math.inf
    return math.log10(val)


def approx_db(val: float) -> Decibel:
    """Return the decibel level of the linear amplitude ``val`` (approximate use)."""
    return Decibel(20.0 * _log10(val))


def lin_to_db(val: float) -> Decibel:
    """Return the decibel level of the linear amplitude ``val``.

    Zero maps to negative infinity; negative amplitudes raise ValueError.
    """
    return Decibel(20.0 * _log10(val))