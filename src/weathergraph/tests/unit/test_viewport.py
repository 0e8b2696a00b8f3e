"""
Unit tests for the viewport, the temperature range rule and ViewportResolver.
"""
from datetime import datetime, timedelta

import pytest

from weathergraph.core.viewport import Viewport, ViewportResolver, resolve_temperature_range
from weathergraph.core.weather_data import Sample, WeatherData


def _samples(*temperatures):
    base = datetime(2024, 3, 4)
    return [Sample(base + timedelta(hours=i), float(t)) for i, t in enumerate(temperatures)]


def test_range_rule_pads_extremes_around_mean():
    min_y, max_y = resolve_temperature_range(_samples(10, 25, 30, 12))
    assert min_y == pytest.approx(8.0)
    assert max_y == pytest.approx(32.0)


def test_range_rule_honors_custom_factor():
    min_y, max_y = resolve_temperature_range(_samples(0, 10), factor=2.0)
    assert (min_y, max_y) == pytest.approx((-5.0, 15.0))


def test_flat_window_is_widened():
    min_y, max_y = resolve_temperature_range(_samples(17, 17, 17))
    assert (min_y, max_y) == pytest.approx((16.5, 17.5))


def test_range_rule_rejects_empty_input():
    with pytest.raises(ValueError):
        resolve_temperature_range([])


def test_viewport_rejects_inverted_time_span():
    t = datetime(2024, 3, 4)
    with pytest.raises(ValueError):
        Viewport(t, t, 0.0, 1.0)


def test_resolver_starts_on_full_data_span(weather_data, start_time):
    resolver = ViewportResolver(weather_data)
    vp = resolver.viewport

    assert vp.min_x == start_time
    assert vp.max_x == weather_data.last.time
    assert (vp.min_y, vp.max_y) == pytest.approx((9.0, 21.0))
    assert len(resolver.samples) == len(weather_data.samples)


def test_rescale_rederives_temperature_range(weather_data, start_time):
    resolver = ViewportResolver(weather_data)
    # 03:00 (12) .. 09:00 (20), inside: 06:00 (16)
    vp = resolver.rescale(start_time + timedelta(hours=3), start_time + timedelta(hours=9))

    assert vp.min_x == start_time + timedelta(hours=3)
    assert (vp.min_y, vp.max_y) == pytest.approx((11.2, 20.8))
    assert resolver.viewport is vp


def test_rescale_rejects_empty_window(weather_data, start_time):
    resolver = ViewportResolver(weather_data)
    before = resolver.viewport
    with pytest.raises(ValueError):
        resolver.rescale(start_time + timedelta(hours=5), start_time + timedelta(hours=5))
    assert resolver.viewport is before


def test_focus_day_spans_midnight_to_midnight(weather_data):
    resolver = ViewportResolver(weather_data)
    vp = resolver.focus_day(2)
    assert vp.min_x == datetime(2024, 3, 6)
    assert vp.max_x == datetime(2024, 3, 7)


def test_focus_day_zero_restores_full_span(weather_data, start_time):
    resolver = ViewportResolver(weather_data)
    resolver.focus_day(1)
    vp = resolver.focus_day(0)
    assert (vp.min_x, vp.max_x) == (start_time, weather_data.last.time)


def test_focus_day_out_of_range(weather_data):
    resolver = ViewportResolver(weather_data)
    with pytest.raises(IndexError):
        resolver.focus_day(4)


def test_single_sample_series_gets_a_window():
    t = datetime(2024, 3, 4, 12)
    data = WeatherData([Sample(t, 5.0)], sunrise_time=t.replace(hour=7), sunset_time=t.replace(hour=17))
    vp = ViewportResolver(data).viewport
    assert vp.min_x < t < vp.max_x
    assert vp.min_y < 5.0 < vp.max_y
