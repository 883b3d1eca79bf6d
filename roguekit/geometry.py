"""Distances, angle projection and line walking on a grid."""

from __future__ import annotations

import math
from typing import Callable, Iterator, Tuple


def project_angle(x: int, y: int, radius: float, degrees_radians: float) -> Tuple[int, int]:
    """Project from (x, y) by radius units at an angle given in radians."""
    return (
        int(x + radius * math.cos(degrees_radians)),
        int(y + radius * math.sin(degrees_radians)),
    )


def distance2d(x1: int, y1: int, x2: int, y2: int) -> float:
    """Euclidean distance between two 2D points."""
    return math.sqrt(distance2d_squared(x1, y1, x2, y2))


def distance2d_squared(x1: int, y1: int, x2: int, y2: int) -> float:
    """Squared Euclidean distance between two 2D points."""
    dx = float(x1) - float(x2)
    dy = float(y1) - float(y2)
    return dx * dx + dy * dy


def distance2d_manhattan(x1: int, y1: int, x2: int, y2: int) -> float:
    """Manhattan distance between two 2D points."""
    return abs(float(x1) - float(x2)) + abs(float(y1) - float(y2))


def distance3d(x1: int, y1: int, z1: int, x2: int, y2: int, z2: int) -> float:
    """Euclidean distance between two 3D points."""
    return math.sqrt(distance3d_squared(x1, y1, z1, x2, y2, z2))


def distance3d_squared(x1: int, y1: int, z1: int, x2: int, y2: int, z2: int) -> float:
    """Squared Euclidean distance between two 3D points."""
    dx = float(x1) - float(x2)
    dy = float(y1) - float(y2)
    dz = float(z1) - float(z2)
    return dx * dx + dy * dy + dz * dz


def distance3d_manhattan(x1: int, y1: int, z1: int, x2: int, y2: int, z2: int) -> float:
    """Manhattan distance between two 3D points."""
    return abs(float(x1) - float(x2)) + abs(float(y1) - float(y2)) + abs(float(z1) - float(z2))


def _line_2d(x1: int, y1: int, x2: int, y2: int) -> Iterator[Tuple[int, int]]:
    x = float(x1) + 0.5
    y = float(y1) + 0.5
    n_steps = distance2d(x1, y1, x2, y2)
    steps = int(math.floor(n_steps) + 1)
    if n_steps == 0:
        yield int(x), int(y)
        return
    slope_x = (float(x2) - x) / n_steps
    slope_y = (float(y2) - y) / n_steps
    for _ in range(steps):
        yield int(x), int(y)
        x += slope_x
        y += slope_y


def _line_3d(x1: int, y1: int, z1: int, x2: int, y2: int, z2: int) -> Iterator[Tuple[int, int, int]]:
    x = float(x1) + 0.5
    y = float(y1) + 0.5
    z = float(z1) + 0.5
    length = distance3d(x1, y1, z1, x2, y2, z2)
    steps = int(math.floor(length))
    if steps == 0:
        return
    x_step = (x - x2) / length
    y_step = (y - y2) / length
    z_step = (z - z2) / length
    for _ in range(steps):
        x += x_step
        y += y_step
        z += z_step
        yield math.floor(x), math.floor(y), math.floor(z)


def line_func(x1: int, y1: int, x2: int, y2: int, func: Callable[[int, int], object]) -> None:
    """Call func(x, y) for every cell on the line from (x1, y1) to (x2, y2)."""
    for x, y in _line_2d(x1, y1, x2, y2):
        func(x, y)


def line_func_3d(
    x1: int, y1: int, z1: int, x2: int, y2: int, z2: int, func: Callable[[int, int, int], object]
) -> None:
    """Call func(x, y, z) for each step of a 3D line walk."""
    for x, y, z in _line_3d(x1, y1, z1, x2, y2, z2):
        func(x, y, z)


def line_func_cancellable(
    x1: int, y1: int, x2: int, y2: int, func: Callable[[int, int], bool]
) -> None:
    """Like line_func, but stops as soon as func returns a false value."""
    for x, y in _line_2d(x1, y1, x2, y2):
        if not func(x, y):
            return


def line_func_3d_cancellable(
    x1: int, y1: int, z1: int, x2: int, y2: int, z2: int, func: Callable[[int, int, int], bool]
) -> None:
    """Like line_func_3d, but stops as soon as func returns a false value."""
    for x, y, z in _line_3d(x1, y1, z1, x2, y2, z2):
        if not func(x, y, z):
            return