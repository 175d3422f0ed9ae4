import numpy as np
import pytest
from logscale.config.scale_config import ScaleConfig
from logscale.scale.log_scale import LogScale

def calculated(low, high, base=10, config=None):
    scale = LogScale(low, high, base, config)
    scale.calculate()
    return scale

def test_positive_scale_ends():
    scale = calculated(5, 500)
    assert scale.pct(scale.get_minimum()) == 0.0
    assert scale.pct(scale.get_maximum()) == 100.0
    assert scale.pct(10) == pytest.approx(100 / 3)

def test_origin_max_is_complement():
    scale = calculated(5, 500)
    for value in (1, 7, 10, 250, 1000):
        assert scale.pct(value, "max") == pytest.approx(100 - scale.pct(value, "min"))

def test_negative_scale_increases_from_min_to_max():
    scale = calculated(-500, -5)
    positions = [scale.pct(v) for v in (-1000, -100, -10, -1)]
    assert positions == pytest.approx([0.0, 100 / 3, 200 / 3, 100.0])

def test_crossing_zero_positions():
    scale = calculated(-50, 200)
    # log_min = 2, log_max = 3: the negative half takes 2/5 of the axis
    assert scale.pct(-100) == pytest.approx(0.0)
    assert scale.pct(-10) == pytest.approx(20.0)
    assert scale.pct(0) == pytest.approx(40.0)
    assert scale.pct(10) == pytest.approx(60.0)
    assert scale.pct(1000) == pytest.approx(100.0)

def test_crossing_zero_unit_powers_meet_at_zero():
    scale = calculated(-50, 200)
    assert scale.pct(-1) == pytest.approx(scale.pct(0))
    assert scale.pct(1) == pytest.approx(scale.pct(0))

def test_crossing_zero_origin_max():
    scale = calculated(-50, 200)
    assert scale.pct(0, "max") == pytest.approx(60.0)
    assert scale.pct(-100, "max") == pytest.approx(100.0)

def test_values_outside_scale_are_extrapolated():
    scale = calculated(5, 500)
    assert scale.pct(10000) == pytest.approx(400 / 3)
    assert scale.pct(0.1) == pytest.approx(-100 / 3)

def test_zero_minimum_scale():
    scale = calculated(0, 50)
    assert scale.pct(0) == 0.0
    assert scale.pct(10) == pytest.approx(50.0)
    assert scale.pct(100) == pytest.approx(100.0)

def test_zero_width_scale_returns_sentinel():
    scale = calculated(10, 10)
    assert scale.pct(10) == 50.0
    assert scale.pct(10, "max") == 50.0

def test_zero_width_sentinel_is_configurable():
    scale = calculated(10, 10, config=ScaleConfig(degenerate_pct=0))
    assert scale.pct(10) == 0.0
    assert scale.pct(10, "max") == 100.0

def test_unit_crossing_scale_returns_sentinel():
    scale = calculated(-1, 1)
    assert scale.crosses_zero()
    assert scale.pct(0) == 50.0

def test_array_input():
    scale = calculated(5, 500)
    result = scale.pct([1, 10, 100, 1000])
    assert isinstance(result, np.ndarray)
    np.testing.assert_allclose(result, [0.0, 100 / 3, 200 / 3, 100.0])

def test_array_input_crossing_zero():
    scale = calculated(-50, 200)
    np.testing.assert_allclose(scale.pct(np.array([-100, 0, 1000]), "max"), [100.0, 60.0, 0.0])

def test_scalar_input_returns_float():
    assert isinstance(calculated(5, 500).pct(10), float)

def test_pct_requires_calculation():
    assert LogScale(5, 500).pct(10) is None

def test_invalid_origin():
    with pytest.raises(ValueError):
        calculated(5, 500).pct(10, "middle")

def test_unit_interval_sits_at_zero_on_crossing_scale():
    scale = calculated(-50, 200)
    assert scale.pct(-0.5) <= scale.pct(0) <= scale.pct(0.5)
    for value in (-0.5, -0.001, 0.001, 0.5):
        assert scale.pct(value) == pytest.approx(40.0)

def test_sub_unit_crossing_scale_collapses_below_inner_power():
    scale = calculated(-0.05, 300)
    # min = -0.1, max = 1000: the negative half spans 0.1 down to 0.01
    assert scale.pct(-0.1) == pytest.approx(0.0)
    assert scale.pct(-0.01) == pytest.approx(25.0)
    assert scale.pct(-0.001) == pytest.approx(25.0)
    assert scale.pct(0) == pytest.approx(25.0)
    assert scale.pct(0.5) == pytest.approx(25.0)

def test_scale_touching_zero_from_above():
    scale = calculated(0, 0.05)
    assert scale.pct(0) == 0.0
    assert scale.pct(0.01) == pytest.approx(0.0)
    assert scale.pct(0.1) == pytest.approx(100.0)

def test_scale_touching_zero_from_below():
    scale = calculated(-50, 0)
    assert scale.pct(-100) == pytest.approx(0.0)
    assert scale.pct(-10) == pytest.approx(50.0)
    assert scale.pct(-0.5) == pytest.approx(100.0)
    assert scale.pct(0) == pytest.approx(100.0)

@pytest.mark.parametrize("low, high, base", [
    (-50, 200, 10),
    (-0.05, 300, 10),
    (-900, 0.4, 10),
    (-0.05, 0.05, 10),
    (-7, 33, 2),
    (-500, -5, 10),
    (-0.3, -0.002, 10),
    (5, 500, 10),
    (0.02, 5, 10),
    (0, 50, 10),
    (0, 0.05, 10),
    (-50, 0, 10),
])
def test_pct_increases_monotonically_inside_scale(low, high, base):
    scale = calculated(low, high, base)
    samples = np.union1d(np.linspace(scale.get_minimum(), scale.get_maximum(), 401), scale.get_ticks())
    positions = scale.pct(samples)
    assert np.all(np.diff(positions) >= -1e-9)
    assert positions[0] == pytest.approx(0.0, abs=1e-9)
    assert positions[-1] == pytest.approx(100.0)
