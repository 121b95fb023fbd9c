from abc import ABC, abstractmethod

from ..decision_tree.bindings import Answerer, Status


class Brain(ABC):
    "What an agent consults to choose its next status."

    @abstractmethod
    def decide(self, context: Answerer) -> Status: ...
