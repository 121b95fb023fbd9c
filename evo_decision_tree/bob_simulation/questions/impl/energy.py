from dataclasses import dataclass

from ....Config import ENERGY_THRESHOLDS
from ....simulation.Agent import Agent
from ..ResponsibleQuestion import QuestionKind, ResponsibleQuestion


@dataclass(frozen=True)
class EnergyQuestion(ResponsibleQuestion):
    threshold: float

    def apply(self, agent: Agent) -> bool:
        return agent.energy > self.threshold

    def __str__(self) -> str:
        return f"energy>{self.threshold:g}"


kind = QuestionKind("energy", EnergyQuestion, ENERGY_THRESHOLDS)
