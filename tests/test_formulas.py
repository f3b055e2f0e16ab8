import math

import pytest

from ambientweather_exporter.formulas import dew_point, heat_index, wind_chill


def test_wind_chill_above_40_is_raw_temperature():
    assert wind_chill(45, 10) == 45


def test_wind_chill_light_wind_is_raw_temperature():
    assert wind_chill(30, 3) == 30


def test_wind_chill_cold_and_windy():
    assert wind_chill(30, 10) == pytest.approx(21.2, abs=0.1)


def test_heat_index_below_80_is_raw_temperature():
    assert heat_index(75, 90) == 75


def test_heat_index_uses_simple_formula_when_below_80():
    # 0.5 * (80 + 61 + 14.4 + 0.94)
    assert heat_index(80, 10) == pytest.approx(78.17)


def test_heat_index_rothfusz_regression():
    assert heat_index(90, 50) == pytest.approx(94.6, abs=0.1)


def test_heat_index_high_humidity_adjustment():
    t, rh = 84, 95
    unadjusted = (
        -42.379 + 2.04901523 * t + 10.14333127 * rh - 0.22475541 * t * rh
        - 0.00683783 * t * t - 0.05481717 * rh * rh + 0.00122874 * t * t * rh
        + 0.00085282 * t * rh * rh - 0.00000199 * t * t * rh * rh
    )
    assert heat_index(t, rh) == pytest.approx(unadjusted + (10 / 10) * (3 / 5))


def test_heat_index_low_humidity_adjustment():
    t, rh = 100, 10
    unadjusted = (
        -42.379 + 2.04901523 * t + 10.14333127 * rh - 0.22475541 * t * rh
        - 0.00683783 * t * t - 0.05481717 * rh * rh + 0.00122874 * t * t * rh
        + 0.00085282 * t * rh * rh - 0.00000199 * t * t * rh * rh
    )
    assert heat_index(t, rh) == pytest.approx(unadjusted - ((13 - 10) / 4) * math.sqrt((17 - 5) / 17))


def test_dew_point():
    assert dew_point(70, 50) == pytest.approx(50.6, abs=0.2)


def test_dew_point_at_saturation_is_temperature():
    assert dew_point(60, 100) == pytest.approx(60)


def test_dew_point_without_humidity_is_nan():
    assert math.isnan(dew_point(70, 0))
