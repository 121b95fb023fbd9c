from abc import abstractmethod
from typing import Optional

from ..brain.Brain import Brain
from ..decision_tree.bindings import Answerer, Question, Status
from ..decision_tree.errors import InvalidArgumentError
from .Entity import Entity
from .Point import Point


class Agent(Entity, Answerer):
    """Entity steered by a :class:`Brain`.

    Every ``brain_update_time`` seconds the agent asks its brain for a new status, paying
    ``brain_energy_cost``. Moving and turning cost energy per second; the agent dies when its
    energy runs out.
    """

    def __init__(
        self,
        position: Point,
        radius: float,
        brain_update_time: float,
        brain: Brain,
        simulation: Optional["Simulation"] = None,
        brain_energy_cost: float = 0.0,
        speed_energy_cost: float = 0.0,
        angular_speed_energy_cost: float = 0.0,
        eat_food_energy_cost: float = 0.0,
    ) -> None:
        if brain is None:
            raise InvalidArgumentError("brain must not be None")
        if brain_update_time <= 0:
            raise InvalidArgumentError(f"brain update time must be positive, got {brain_update_time}")
        super().__init__(position, radius, simulation)
        self.brain = brain
        self.local_status: Optional[Status] = None
        self.brain_update_time = brain_update_time
        self.brain_timer = 0.0
        self.energy = 1.0
        self.age = 0.0
        self.brain_energy_cost = brain_energy_cost
        self.speed_energy_cost = speed_energy_cost
        self.angular_speed_energy_cost = angular_speed_energy_cost
        self.eat_food_energy_cost = eat_food_energy_cost

    @abstractmethod
    def answer(self, question: Question) -> bool: ...

    @abstractmethod
    def status_activity(self, dt: float) -> None: ...

    def use_brain(self) -> None:
        self.local_status = self.brain.decide(self)
        self.energy -= self.brain_energy_cost

    def update(self, dt: float) -> None:
        super().update(dt)
        self.age += dt
        self.energy -= (self.speed_energy_cost * abs(self.speed) + self.angular_speed_energy_cost * abs(self.angular_speed)) * dt
        self.brain_timer += dt
        if self.brain_timer >= self.brain_update_time:
            self.brain_timer = 0.0
            self.use_brain()
        if self.local_status is not None:
            self.status_activity(dt)
        if self.energy <= 0:
            self.kill()
