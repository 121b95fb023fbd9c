"""Shared pytest fixtures for decision tree, brain and simulation tests."""

from dataclasses import dataclass

import pytest

from evo_decision_tree.decision_tree.bindings import Answerer, Question, Status
from evo_decision_tree.decision_tree.OutcomeNode import OutcomeNode


@dataclass(frozen=True)
class LessThan(Question):
    number: int


@dataclass(frozen=True)
class Label(Status):
    name: str


class NumberAnswerer(Answerer):
    "Answers ``LessThan(n)`` with ``number < n``."

    def __init__(self, number: int) -> None:
        self.number = number
        self.asked = []

    def answer(self, question: Question) -> bool:
        self.asked.append(question)
        return self.number < question.number


class ScriptedAnswerer(Answerer):
    def __init__(self, *answers: bool) -> None:
        self.answers = list(answers)

    def answer(self, question: Question) -> bool:
        return self.answers.pop(0)


def fill(tree, question_at=lambda i: LessThan(i), status_at=lambda i: Label(f"s{i}")):
    for i, _, node in tree.iter_nodes():
        if isinstance(node, OutcomeNode):
            if status_at is not None:
                node.status = status_at(i)
        else:
            node.question = question_at(i)
    return tree


@pytest.fixture
def less_than():
    return LessThan


@pytest.fixture
def label():
    return Label


@pytest.fixture
def number_answerer():
    return NumberAnswerer


@pytest.fixture
def scripted_answerer():
    return ScriptedAnswerer


@pytest.fixture
def filled():
    """Return a function filling every question with ``LessThan(position)`` and every status with ``Label("s<position>")``."""
    return fill


@pytest.fixture
def questions():
    return [LessThan(n) for n in (1, 5, 10, 50)]


@pytest.fixture
def statuses():
    return [Label(name) for name in ("rest", "run", "turn", "eat")]
