from typing import Optional

from ..Config import MEAT_ENERGY_VALUE, MEAT_RADIUS, MEAT_TIME_HEALTH_COST
from ..simulation.Food import Food
from ..simulation.Point import Point


class Meat(Food):
    def __init__(self, position: Point, simulation: Optional["Simulation"] = None, radius: float = MEAT_RADIUS) -> None:
        super().__init__(position, radius, MEAT_TIME_HEALTH_COST, MEAT_ENERGY_VALUE, simulation)
