from dataclasses import dataclass

from ....Config import FOOD_DISTANCE_THRESHOLDS, NEARBY_RADIUS
from ....simulation.Agent import Agent
from ..ResponsibleQuestion import QuestionKind, ResponsibleQuestion


@dataclass(frozen=True)
class DistanceToTheNearestFoodQuestion(ResponsibleQuestion):
    threshold: float

    def apply(self, agent: Agent) -> bool:
        if agent.simulation is None:
            return False
        nearest = agent.simulation.nearest_food(agent.position, max(self.threshold, NEARBY_RADIUS))
        return nearest is not None and nearest[1] < self.threshold

    def __str__(self) -> str:
        return f"food<{self.threshold:g}"


kind = QuestionKind("distance to the nearest food", DistanceToTheNearestFoodQuestion, FOOD_DISTANCE_THRESHOLDS)
