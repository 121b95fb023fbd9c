from abc import abstractmethod
from collections.abc import Sequence
from typing import NamedTuple

from ...decision_tree.bindings import Question
from ...simulation.Agent import Agent


class ResponsibleQuestion(Question):
    "Question that knows how to evaluate itself against an agent."

    @abstractmethod
    def apply(self, agent: Agent) -> bool: ...


class QuestionKind(NamedTuple):
    name: str
    question: type[ResponsibleQuestion]
    thresholds: Sequence[float]

    def palette(self) -> list[ResponsibleQuestion]:
        return [self.question(threshold) for threshold in self.thresholds]
