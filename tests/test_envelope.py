import math

import pytest

from qdsp.decibel import Decibel, lin_to_db
from qdsp.envelope import (
    ArEnvelopeFollower,
    FastAveEnvelopeFollower,
    FastEnvelopeFollower,
    FastRmsEnvelopeFollower,
    FastRmsEnvelopeFollowerDb,
    PeakEnvelopeFollower,
)

SPS = 44100


def test_peak_follower_attack_is_instant():
    env = PeakEnvelopeFollower(0.5, SPS)
    assert env(0.8) == 0.8
    assert env.y == 0.8


def test_peak_follower_decays_monotonically():
    env = PeakEnvelopeFollower(0.01, SPS)
    env(1.0)
    outs = [env(0.0) for _ in range(100)]
    assert all(0.0 < o < 1.0 for o in outs)
    assert outs == sorted(outs, reverse=True)


def test_peak_follower_longer_release_decays_slower():
    fast = PeakEnvelopeFollower(0.01, SPS)
    slow = PeakEnvelopeFollower(1.0, SPS)
    fast(1.0)
    slow(1.0)
    for _ in range(50):
        f = fast(0.0)
        s = slow(0.0)
    assert s > f


def test_peak_follower_configure_release():
    a = PeakEnvelopeFollower(1.0, SPS)
    a.configure_release(0.01, SPS)
    b = PeakEnvelopeFollower(0.01, SPS)
    samples = [1.0] + [0.0] * 20
    assert [a(x) for x in samples] == [b(x) for x in samples]


def test_ar_follower_rises_toward_input():
    env = ArEnvelopeFollower(0.002, 2.0, SPS)
    outs = [env(1.0) for _ in range(2000)]
    assert outs == sorted(outs)
    assert outs[-1] == pytest.approx(1.0, abs=1e-3)
    assert outs[0] < 1.0


def test_ar_follower_attack_faster_than_release():
    env = ArEnvelopeFollower(0.001, 1.0, SPS)
    for _ in range(5):
        up = env(1.0)
    level = env.y
    for _ in range(5):
        down = env(0.0)
    assert (level - down) < up


def test_ar_follower_config_matches_constructor():
    a = ArEnvelopeFollower(1.0, 1.0, SPS)
    a.config(0.002, 0.05, SPS)
    b = ArEnvelopeFollower(0.002, 0.05, SPS)
    samples = [0.5, 0.9, 0.1, 0.0, 0.7]
    assert [a(x) for x in samples] == [b(x) for x in samples]


def test_ar_follower_configure_attack_and_release():
    a = ArEnvelopeFollower(1.0, 1.0, SPS)
    a.configure_attack(0.002, SPS)
    a.configure_release(0.05, SPS)
    b = ArEnvelopeFollower(0.002, 0.05, SPS)
    samples = [0.5, 0.9, 0.1, 0.0, 0.7]
    assert [a(x) for x in samples] == [b(x) for x in samples]


def test_fast_follower_holds_then_drops_to_zero():
    hold = 10
    env = FastEnvelopeFollower(hold)
    assert env(1.0) == 1.0
    held = [env(0.0) for _ in range(hold)]
    assert held == [1.0] * hold
    tail = [env(0.0) for _ in range(10 * hold)]
    assert tail[-1] == 0.0
    assert env.peak == 0.0


def test_fast_follower_never_below_input():
    env = FastEnvelopeFollower(8)
    for n in range(200):
        s = abs(math.sin(n * 0.3))
        assert env(s) >= s


def test_fast_follower_rejects_bad_div():
    with pytest.raises(ValueError):
        FastEnvelopeFollower(10, div=0)


def test_fast_follower_from_duration_matches_samples():
    a = FastEnvelopeFollower.from_duration(0.001, 10000)
    b = FastEnvelopeFollower(10)
    samples = [abs(math.sin(n * 0.7)) for n in range(100)]
    assert [a(s) for s in samples] == [b(s) for s in samples]


def test_fast_ave_follower_constant_input():
    env = FastAveEnvelopeFollower(16)
    out = 0.0
    for _ in range(100):
        out = env(0.6)
    assert out == pytest.approx(0.6)
    assert env.value == out


def test_fast_ave_follower_from_duration_matches_samples():
    a = FastAveEnvelopeFollower.from_duration(0.002, 8000)
    b = FastAveEnvelopeFollower(16)
    samples = [abs(math.sin(n * 0.2)) for n in range(80)]
    assert [a(s) for s in samples] == pytest.approx([b(s) for s in samples])


def test_fast_rms_constant_input():
    env = FastRmsEnvelopeFollower(0.001, SPS)
    out = 0.0
    for _ in range(500):
        out = env(0.5)
    assert out == pytest.approx(0.5)


def test_fast_rms_below_threshold_is_silence():
    env = FastRmsEnvelopeFollower(0.001, SPS)
    outs = [env(1e-4) for _ in range(200)]
    assert outs == [0.0] * 200


def test_fast_rms_db_matches_linear_level():
    env = FastRmsEnvelopeFollowerDb(0.001, SPS)
    out = None
    for _ in range(500):
        out = env(0.5)
    assert out.rep == pytest.approx(lin_to_db(0.5).rep, abs=1e-6)


def test_fast_rms_db_silence_is_negative_infinity():
    env = FastRmsEnvelopeFollowerDb(0.001, SPS)
    out = env(0.0)
    assert out == Decibel(-math.inf)