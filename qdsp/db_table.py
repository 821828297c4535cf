"""Fast decibel-to-amplitude conversion using a 0.1 dB lookup table."""

from __future__ import annotations

# Amplitudes for 0 dB .. 120 dB in steps of 0.1 dB: 10 ** (db / 20).
INV_DB_TABLE: tuple[float, ...] = tuple(10.0 ** (i / 200.0) for i in range(1201))

_MAX_DB = 120.0
_MAX_AMPLITUDE = 1000000.0


def _linear_interpolate(a: float, b: float, mu: float) -> float:
    return a + mu * (b - a)


def db2a(db: float) -> float:
    """Convert a decibel value to a linear amplitude.

    Negative values are the reciprocal of their positive counterpart; values
    of 120 dB and above saturate at 1,000,000.
    """
    if db < 0:
        return 1.0 / db2a(-db)
    if db < _MAX_DB:
        db_10 = db * 10.0
        index = int(db_10)
        return _linear_interpolate(
            INV_DB_TABLE[index], INV_DB_TABLE[index + 1], db_10 - index
        )
    return _MAX_AMPLITUDE