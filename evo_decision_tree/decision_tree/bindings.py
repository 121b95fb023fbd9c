"""Values and oracles a decision tree is parameterized with.

The tree never inspects questions or statuses: it stores them, compares them in tests
and hands questions to an :class:`Answerer`. Any hashable value works, these bases only
document the contract for the simulation's own kinds.
"""

from abc import ABC, abstractmethod
from typing import Any


class Question(ABC):
    @abstractmethod
    def __eq__(self, other: Any) -> bool: ...

    @abstractmethod
    def __hash__(self) -> int: ...


class Status(ABC):
    pass


class Answerer(ABC):
    @abstractmethod
    def answer(self, question: Question) -> bool:
        """Return the yes/no reply to ``question``; may be asked several questions per decision."""
