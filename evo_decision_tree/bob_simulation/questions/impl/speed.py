from dataclasses import dataclass

from ....Config import SPEED_THRESHOLDS
from ....simulation.Agent import Agent
from ..ResponsibleQuestion import QuestionKind, ResponsibleQuestion


@dataclass(frozen=True)
class SpeedQuestion(ResponsibleQuestion):
    threshold: float

    def apply(self, agent: Agent) -> bool:
        return agent.speed > self.threshold

    def __str__(self) -> str:
        return f"speed>{self.threshold:g}"


kind = QuestionKind("speed", SpeedQuestion, SPEED_THRESHOLDS)
