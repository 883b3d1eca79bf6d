import math

import pytest

from roguekit.geometry import (
    distance2d,
    distance2d_manhattan,
    distance2d_squared,
    distance3d,
    distance3d_manhattan,
    distance3d_squared,
    line_func,
    line_func_3d,
    line_func_3d_cancellable,
    line_func_cancellable,
    project_angle,
)


def test_distance2d_pythagorean():
    assert distance2d(0, 0, 3, 4) == pytest.approx(5.0)


@pytest.mark.parametrize("a,b", [((1, 2), (7, -3)), ((0, 0), (10, 10)), ((-5, 4), (2, 2))])
def test_distance2d_invariants(a, b):
    d = distance2d(*a, *b)
    assert d == pytest.approx(distance2d(*b, *a))
    assert d * d == pytest.approx(distance2d_squared(*a, *b))
    assert distance2d_manhattan(*a, *b) >= d - 1e-9
    assert distance2d(*a, *a) == 0.0


@pytest.mark.parametrize("a,b", [((1, 2, 3), (4, 6, 3)), ((0, 0, 0), (-2, 5, 9))])
def test_distance3d_invariants(a, b):
    d = distance3d(*a, *b)
    assert d == pytest.approx(distance3d(*b, *a))
    assert d * d == pytest.approx(distance3d_squared(*a, *b))
    assert distance3d_manhattan(*a, *b) >= d - 1e-9
    assert distance3d(*a, *a) == 0.0


def test_3d_reduces_to_2d_on_flat_plane():
    assert distance3d(1, 2, 5, 4, 6, 5) == pytest.approx(distance2d(1, 2, 4, 6))
    assert distance3d_manhattan(1, 2, 5, 4, 6, 5) == distance2d_manhattan(1, 2, 4, 6)


def test_project_angle():
    assert project_angle(3, 4, 0.0, 1.234) == (3, 4)
    assert project_angle(0, 0, 10.0, 0.0) == (10, 0)
    px, py = project_angle(0, 0, 10.0, math.pi / 2)
    assert px == 0
    assert py == 10


def test_line_func_horizontal():
    points = []
    line_func(0, 0, 5, 0, lambda x, y: points.append((x, y)))
    assert points[0] == (0, 0)
    assert len(points) == math.floor(distance2d(0, 0, 5, 0)) + 1
    assert all(y == 0 for _, y in points)
    xs = [x for x, _ in points]
    assert xs == sorted(xs)


def test_line_func_same_point_visits_once():
    points = []
    line_func(3, 3, 3, 3, lambda x, y: points.append((x, y)))
    assert points == [(3, 3)]


def test_line_func_diagonal_stays_near_line():
    points = []
    line_func(0, 0, 8, 8, lambda x, y: points.append((x, y)))
    assert len(points) == math.floor(distance2d(0, 0, 8, 8)) + 1
    assert points[0] == (0, 0)
    assert all(abs(x - y) <= 1 for x, y in points)


def test_line_func_cancellable_stops():
    calls = []

    def visit(x, y):
        calls.append((x, y))
        return len(calls) < 3

    line_func_cancellable(0, 0, 10, 0, visit)
    full = []
    line_func(0, 0, 10, 0, lambda x, y: full.append((x, y)))
    assert len(full) > 3
    assert calls == full[:3]
    assert calls == [(0, 0), (1, 0), (2, 0)]


def test_line_func_cancellable_runs_full_when_true():
    full = []
    line_func(0, 0, 6, 2, lambda x, y: full.append((x, y)))
    cancellable = []
    line_func_cancellable(0, 0, 6, 2, lambda x, y: cancellable.append((x, y)) or True)
    assert cancellable == full


def test_line_func_3d_step_count():
    points = []
    line_func_3d(0, 0, 0, 3, 4, 12, lambda x, y, z: points.append((x, y, z)))
    assert len(points) == math.floor(distance3d(0, 0, 0, 3, 4, 12))


def test_line_func_3d_zero_length():
    points = []
    line_func_3d(2, 2, 2, 2, 2, 2, lambda x, y, z: points.append((x, y, z)))
    assert points == []


def test_line_func_3d_cancellable_stops():
    calls = []
    line_func_3d_cancellable(0, 0, 0, 10, 0, 0, lambda x, y, z: calls.append((x, y, z)) and False)
    assert len(calls) == 1


def test_line_func_3d_cancellable_matches_full():
    full = []
    line_func_3d(1, 2, 3, 7, 9, 4, lambda *p: full.append(p))
    partial = []
    line_func_3d_cancellable(1, 2, 3, 7, 9, 4, lambda *p: partial.append(p) or True)
    assert partial == full