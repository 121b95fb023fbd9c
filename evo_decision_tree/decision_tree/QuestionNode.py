from typing import Optional

from .bindings import Answerer, Question
from .errors import InvalidArgumentError, InvalidStateError
from .Node import Node


class QuestionNode(Node):
    def __init__(self, left_son: Optional[Node] = None, right_son: Optional[Node] = None, question: Optional[Question] = None) -> None:
        super().__init__(left_son, right_son)
        self._question: Optional[Question] = None
        if question is not None:
            self.question = question

    @property
    def question(self) -> Optional[Question]:
        return self._question

    @question.setter
    def question(self, question: Question) -> None:
        if question is None:
            raise InvalidArgumentError("question must not be None")
        self._question = question

    def next(self, answerer: Answerer) -> Optional[Node]:
        """Ask the question: a negative answer leads to the left son, a positive one to the right son."""
        if self._question is None:
            raise InvalidStateError("question node has no question")
        if answerer is None:
            raise InvalidArgumentError("answerer must not be None")
        return self.traverse(not answerer.answer(self._question))

    def is_initialized(self) -> bool:
        return super().is_initialized() and self._question is not None

    def _copy_value(self) -> "QuestionNode":
        clone = type(self)()
        clone._question = self._question
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._question!r})"

    __slots__ = ["_question"]


class RootQuestionNode(QuestionNode):
    "Top of a decision tree: complete without a father and never attachable as a son."

    can_have_father = False

    def is_initialized(self) -> bool:
        return self._left_son is not None and self._right_son is not None and self._question is not None

    __slots__ = []
