"""
Unit tests for viewport windowing of samples.
"""
from datetime import timedelta

import pytest

from weathergraph.core.windowing import window_samples


def test_window_starts_and_ends_on_viewport_edges(weather_data, start_time):
    min_x = start_time + timedelta(hours=4)
    max_x = start_time + timedelta(hours=20)

    window = window_samples(weather_data, min_x, max_x)

    assert window[0].time == min_x
    assert window[-1].time == max_x
    times = [s.time for s in window]
    assert times == sorted(times) and len(set(times)) == len(times)
    # 06:00 .. 18:00 lie strictly inside
    assert len(window) == 5 + 2


def test_boundary_samples_are_resynthesized(weather_data, start_time):
    min_x = start_time + timedelta(hours=3)
    max_x = start_time + timedelta(hours=12)

    window = window_samples(weather_data, min_x, max_x)

    assert [s.time for s in window] == [start_time + timedelta(hours=h) for h in (3, 6, 9, 12)]
    assert window[0].temperature == 12.0
    assert window[-1].temperature == 18.0


def test_window_interpolates_boundaries_between_readings(weather_data, start_time):
    window = window_samples(weather_data, start_time + timedelta(hours=1, minutes=30),
                            start_time + timedelta(hours=4, minutes=30))
    assert window[0].temperature == pytest.approx(11.0)
    assert window[-1].temperature == pytest.approx(14.0)


def test_window_wider_than_data_holds_edges(weather_data, start_time):
    min_x = start_time - timedelta(hours=6)
    max_x = weather_data.last.time + timedelta(hours=6)

    window = window_samples(weather_data, min_x, max_x)

    assert window[0].time == min_x
    assert window[0].temperature == weather_data.first.temperature
    assert window[-1].time == max_x
    assert window[-1].temperature == weather_data.last.temperature
    assert len(window) == len(weather_data.samples) + 2


def test_window_without_inner_samples_still_has_both_edges(weather_data, start_time):
    window = window_samples(weather_data, start_time + timedelta(hours=1), start_time + timedelta(hours=2))
    assert len(window) == 2
    assert window[0].temperature < window[1].temperature
