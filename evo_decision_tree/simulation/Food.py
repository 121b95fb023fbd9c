from typing import Optional

from .Entity import Entity
from .Point import Point


class Food(Entity):
    def __init__(self, position: Point, radius: float, time_health_cost: float, energy_value: float, simulation: Optional["Simulation"] = None) -> None:
        super().__init__(position, radius, simulation)
        self.health = 1.0
        self.time_health_cost = time_health_cost
        self.energy_value = energy_value

    def update(self, dt: float) -> None:
        self.health -= self.time_health_cost * dt
        if self.health <= 0:
            self.kill()

    def be_eaten_by(self, agent: "Agent") -> bool:
        if not self.alive:
            return False
        agent.energy = min(1.0, agent.energy + self.energy_value - agent.eat_food_energy_cost)
        self.kill()
        return True
