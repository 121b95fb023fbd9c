import itertools
from math import cos, pi, sin
from typing import Optional
from weakref import proxy

from ..decision_tree.errors import InvalidArgumentError
from .Point import Point

_ID_COUNTER = itertools.count(1)
TAU = 2 * pi


class Entity:
    """Circle moving on the unit torus.

    ``update`` integrates angle, speed and position with a forward Euler step of ``dt``.
    """

    def __init__(self, position: Point, radius: float, simulation: Optional["Simulation"] = None) -> None:
        if position is None:
            raise InvalidArgumentError("initial position must not be None")
        self.id = next(_ID_COUNTER)
        self.position = Point(position.x, position.y)
        self.radius = radius
        self._angle = 0.0
        self.speed = 0.0
        self.acceleration = 0.0
        self.angular_speed = 0.0
        self.alive = True
        self.simulation = simulation

    @property
    def simulation(self) -> Optional["Simulation"]:
        return self._simulation

    @simulation.setter
    def simulation(self, simulation: Optional["Simulation"]) -> None:
        self._simulation = None if simulation is None else proxy(simulation)

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def angle(self) -> float:
        return self._angle

    @angle.setter
    def angle(self, angle_rad: float) -> None:
        self._angle = angle_rad % TAU
        if self._angle >= TAU:
            self._angle = 0.0

    def shift(self, dx: float, dy: float) -> None:
        self.position = self.position.shifted(dx, dy)

    def kill(self) -> None:
        self.alive = False

    def update(self, dt: float) -> None:
        self.angle = self._angle + self.angular_speed * dt
        self.speed += self.acceleration * dt
        self.shift(self.speed * cos(self._angle) * dt, self.speed * sin(self._angle) * dt)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, {self.position!r})"
