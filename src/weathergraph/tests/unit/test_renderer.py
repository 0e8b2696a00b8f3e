"""
Unit tests for GraphRenderer draw order and output, using a recording canvas.
"""
from datetime import timedelta

import pytest

from weathergraph import constants
from weathergraph.core.viewport import ViewportResolver
from weathergraph.utils.config import GraphStyle
from weathergraph.views.graph.geometry import GraphGeometry, PixelBounds
from weathergraph.views.graph.renderer import GraphRenderer


@pytest.fixture
def rendered(weather_data, recording_canvas):
    resolver = ViewportResolver(weather_data)
    bounds = PixelBounds(400, 200)
    GraphRenderer().render(recording_canvas, weather_data, resolver.viewport, bounds, resolver.samples)
    return recording_canvas, resolver, bounds


def test_background_is_drawn_first(rendered):
    canvas, _, bounds = rendered
    first_stroke = next(i for i, (name, _) in enumerate(canvas.calls) if name == "stroke")
    background = [args for name, args in canvas.calls[:first_stroke] if name == "fill_rect"]

    assert len(background) == 7
    assert all(rect[3] == pytest.approx(bounds.plot_height) for rect in background)
    assert {rect[4] for rect in background} == {constants.color.DAY_COLOR, constants.color.NIGHT_COLOR}
    total_width = sum(rect[2] for rect in background)
    assert total_width == pytest.approx(bounds.plot_width)


def test_axes_are_labelled(rendered):
    canvas, _, _ = rendered
    labels = [args[0] for args in canvas.of("fill_text")]

    # 9..21 degrees on 167 px -> step 2
    assert labels[:6] == ["10°C", "12°C", "14°C", "16°C", "18°C", "20°C"]
    # 72 hours on 360 px leaves no room for hour lines
    assert labels[6:] == ["Tue", "Wed"]


def test_temperature_labels_are_right_aligned_left_of_plot(rendered):
    canvas, _, bounds = rendered
    text, x, _, align, baseline = canvas.of("fill_text")[0]
    assert text == "10°C"
    assert x == pytest.approx(bounds.margins.left - constants.graph.TEMPERATURE_LABEL_GAP)
    assert (align, baseline) == ("right", "middle")


def test_day_labels_sit_right_of_their_lines_in_top_margin(rendered):
    canvas, resolver, bounds = rendered
    geometry = GraphGeometry(resolver.viewport, bounds)
    day_labels = canvas.of("fill_text")[6:]
    expected_days = [resolver.viewport.min_x + timedelta(days=n) for n in (1, 2)]

    assert [args[0] for args in day_labels] == ["Tue", "Wed"]
    for (_, x, y, align, baseline), day in zip(day_labels, expected_days):
        assert x == pytest.approx(geometry.map_time(day) + constants.graph.DAY_LABEL_OFFSET_X)
        assert y == pytest.approx(geometry.plot_top + constants.graph.TIME_LABEL_OFFSET_Y)
        assert (align, baseline) == ("left", "bottom")


def test_day_lines_reach_into_top_margin(rendered):
    canvas, _, bounds = rendered
    tops = [args[1] for args in canvas.of("line_to")]
    assert min(tops) == pytest.approx(bounds.margins.top - constants.graph.DAY_LINE_EXTENSION)


def test_curve_segments_and_markers(rendered):
    canvas, resolver, _ = rendered
    n = len(resolver.samples)
    size = constants.graph.MARKER_SIZE

    assert len(canvas.of("bezier_curve_to")) == n - 1
    markers = [r for r in canvas.of("fill_rect") if r[2] == size and r[3] == size]
    assert len(markers) == n

    last_text = max(i for i, (name, _) in enumerate(canvas.calls) if name == "fill_text")
    first_curve = min(i for i, (name, _) in enumerate(canvas.calls) if name == "bezier_curve_to")
    assert last_text < first_curve


def test_curve_starts_and_ends_on_plot_edges(rendered):
    canvas, _, bounds = rendered
    curves = canvas.of("bezier_curve_to")
    assert curves[-1][4] == pytest.approx(bounds.width - bounds.margins.right)
    first_move = [args for name, args in canvas.calls if name == "move_to"][-len(curves)]
    assert first_move[0] == pytest.approx(bounds.margins.left)


def test_hour_lines_appear_when_zoomed(weather_data, recording_canvas, start_time):
    resolver = ViewportResolver(weather_data)
    resolver.rescale(start_time + timedelta(hours=6), start_time + timedelta(hours=18))
    GraphRenderer().render(recording_canvas, weather_data, resolver.viewport, PixelBounds(400, 200))

    hour_labels = [args for args in recording_canvas.of("fill_text") if args[0].endswith(":00")]
    assert [args[0] for args in hour_labels] == ["08:00", "10:00", "12:00", "14:00", "16:00"]
    assert all(args[3:] == ("center", "top") for args in hour_labels)


def test_style_colors_are_used(weather_data, recording_canvas):
    style = GraphStyle.from_dict({"graph_line_color": "#FF0000", "graph_line_width": 3})
    resolver = ViewportResolver(weather_data)
    GraphRenderer(style).render(recording_canvas, weather_data, resolver.viewport, PixelBounds(400, 200))

    assert recording_canvas.of("stroke")[-1] == ("#FF0000", 3.0)


def test_two_sample_window_draws_one_segment(weather_data, recording_canvas, start_time):
    resolver = ViewportResolver(weather_data)
    resolver.rescale(start_time + timedelta(hours=1), start_time + timedelta(hours=2))
    GraphRenderer().render(recording_canvas, weather_data, resolver.viewport, PixelBounds(400, 200),
                           resolver.samples)
    assert len(recording_canvas.of("bezier_curve_to")) == 1
