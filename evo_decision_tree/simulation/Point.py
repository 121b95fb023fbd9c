from math import sqrt
from typing import Any, Iterator

import numpy as np

from ..decision_tree.errors import InvalidArgumentError


def norm(coordinate: float) -> float:
    "Wrap a coordinate onto the unit torus, ``[0, 1)``."
    coordinate %= 1.0
    return 0.0 if coordinate >= 1.0 else coordinate


def wrapped_delta(a: float, b: float) -> float:
    d = norm(b - a)
    return min(d, 1.0 - d)


def toroidal_distances(x: float, y: float, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    dx = np.abs(xs - x) % 1.0
    dy = np.abs(ys - y) % 1.0
    dx = np.minimum(dx, 1.0 - dx)
    dy = np.minimum(dy, 1.0 - dy)
    return np.sqrt(dx * dx + dy * dy)


class Point:
    def __init__(self, x: float, y: float) -> None:
        self._x = norm(x)
        self._y = norm(y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def shifted(self, dx: float, dy: float) -> "Point":
        return self + Point(dx, dy)

    def distance_to(self, other: "Point") -> float:
        return Point.distance_between(self, other)

    @staticmethod
    def distance_between(point1: "Point", point2: "Point") -> float:
        if point1 is None or point2 is None:
            raise InvalidArgumentError("points must not be None")
        dx = wrapped_delta(point1._x, point2._x)
        dy = wrapped_delta(point1._y, point2._y)
        return sqrt(dx * dx + dy * dy)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self._x + other._x, self._y + other._y)

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Point) and self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"Point({self._x:.4f}, {self._y:.4f})"

    __slots__ = ["_x", "_y"]
