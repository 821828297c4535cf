import pytest

from qdsp.differentiator import CentralDifference, FirstDifference, Slope


def test_first_difference_first_sample_is_input():
    fd = FirstDifference()
    assert fd(0.75) == 0.75


def test_first_difference_sums_back_to_input():
    fd = FirstDifference()
    samples = [0.1, -0.4, 0.9, 0.3, 0.3, -1.0]
    total = 0.0
    for s in samples:
        total += fd(s)
        assert total == pytest.approx(s)


def test_first_difference_constant_is_zero_after_first():
    fd = FirstDifference()
    fd(0.5)
    assert [fd(0.5) for _ in range(5)] == [0.0] * 5


def test_central_difference_ramp_gives_step():
    cd = CentralDifference()
    step = 0.25
    outputs = [cd(step * n) for n in range(10)]
    for out in outputs[2:]:
        assert out == pytest.approx(step)


def test_central_difference_first_outputs_halve_input():
    cd = CentralDifference()
    assert cd(0.6) == pytest.approx(0.6 / 2)
    assert cd(0.8) == pytest.approx(0.8 / 2)


def test_slope_ramp_power_of_two():
    sl = Slope(4)
    step = 1.5
    out = None
    for n in range(20):
        out = sl(step * n)
    assert out == pytest.approx(step * 3)


def test_slope_ramp_non_power_of_two():
    sl = Slope(3)
    step = 0.5
    out = None
    for n in range(20):
        out = sl(step * n)
    assert out == pytest.approx(step * 2)


def test_slope_current_matches_last_call():
    sl = Slope(8)
    last = None
    for s in [0.1, 0.4, -0.2, 0.7, 0.9, 0.3]:
        last = sl(s)
    assert sl.current() == last


def test_slope_constant_input_is_zero_once_filled():
    sl = Slope(4)
    outs = [sl(0.7) for _ in range(8)]
    assert outs[-1] == 0.0
    assert outs[0] == pytest.approx(0.7)


def test_slope_from_duration_matches_sample_count():
    a = Slope.from_duration(0.001, 4000)
    b = Slope(4)
    samples = [0.2, 0.5, -0.1, 0.8, 0.4, 0.6, -0.3]
    assert [a(s) for s in samples] == [b(s) for s in samples]


def test_slope_rejects_empty_window():
    with pytest.raises(ValueError):
        Slope(0)