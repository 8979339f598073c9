import pytest
from saluschart import (
    ChartMetrics,
    ChartType,
    DataPoint,
    DomainError,
    Size,
    compute_metrics,
    map_to_canvas_points,
    map_value_to_y,
)

SAMPLE = [10, 25, 40, 20, 35, 55, 45]


@pytest.fixture
def canvas():
    return Size(400, 300)


@pytest.fixture
def series():
    return [DataPoint(i, v, f"d{i}") for i, v in enumerate(SAMPLE)]


@pytest.fixture
def metrics(canvas):
    return compute_metrics(canvas, SAMPLE, 5, ChartType.LINE)


def test_points_are_spread_across_plot(series, canvas, metrics):
    pts = map_to_canvas_points(series, canvas, metrics)

    assert len(pts) == len(series)
    assert pts[0].x == 60
    assert pts[-1].x == pytest.approx(400)
    spacing = 340 / 6
    for i, p in enumerate(pts):
        assert p.x == pytest.approx(60 + i * spacing)


def test_y_axis_is_inverted(series, canvas, metrics):
    pts = map_to_canvas_points(series, canvas, metrics)

    # 10 is the axis minimum, 55 the maximum
    assert pts[0].y == pytest.approx(260)
    assert pts[5].y == pytest.approx(0)
    assert pts[2].y == pytest.approx(260 - (30 / 45) * 260)


def test_points_stay_in_plot_bounds(series, canvas, metrics):
    bounds = metrics.plot_bounds
    for p in map_to_canvas_points(series, canvas, metrics):
        assert bounds.contains(p)


def test_layout_ignores_point_x(canvas, metrics):
    a = [DataPoint(0, 10), DataPoint(1, 20)]
    b = [DataPoint(100, 10), DataPoint(-5, 20)]
    assert map_to_canvas_points(a, canvas, metrics) == map_to_canvas_points(
        b, canvas, metrics
    )


def test_single_point_is_centred(canvas, metrics):
    (p,) = map_to_canvas_points([DataPoint(0, 55)], canvas, metrics)
    assert p.x == 60 + 340 / 2
    assert p.y == pytest.approx(0)


def test_empty_series(canvas, metrics):
    assert map_to_canvas_points([], canvas, metrics) == ()


def test_zero_span_raises(canvas):
    flat = ChartMetrics(60, 40, 340, 260, 5, 5, (5,))
    with pytest.raises(DomainError):
        map_to_canvas_points([DataPoint(0, 5), DataPoint(1, 5)], canvas, flat)
    with pytest.raises(DomainError):
        map_value_to_y(5, flat)


def test_map_value_to_y(metrics):
    assert map_value_to_y(metrics.min_y, metrics) == metrics.chart_height
    assert map_value_to_y(metrics.max_y, metrics) == 0


def test_zero_span_message_names_the_domain():
    flat = ChartMetrics(60, 40, 340, 260, 5, 5, (5,))
    with pytest.raises(DomainError, match=r"\[5, 5\]"):
        map_value_to_y(5, flat)
