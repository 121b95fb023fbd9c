"""Question and outcome node behaviour."""

import pytest

from evo_decision_tree.decision_tree.errors import InvalidArgumentError, InvalidStateError
from evo_decision_tree.decision_tree.OutcomeNode import OutcomeNode
from evo_decision_tree.decision_tree.QuestionNode import QuestionNode, RootQuestionNode


@pytest.fixture
def fork(less_than, label):
    return QuestionNode(OutcomeNode(label("no")), OutcomeNode(label("yes")), question=less_than(5))


def test_negative_answer_goes_left(fork, number_answerer):
    assert fork.next(number_answerer(7)) is fork.left_son


def test_positive_answer_goes_right(fork, number_answerer):
    assert fork.next(number_answerer(3)) is fork.right_son


def test_answerer_is_asked_the_stored_question(fork, number_answerer, less_than):
    answerer = number_answerer(3)
    fork.next(answerer)
    assert answerer.asked == [less_than(5)]


def test_next_without_question():
    with pytest.raises(InvalidStateError):
        QuestionNode(OutcomeNode(), OutcomeNode()).next(None)


def test_next_without_answerer(fork):
    with pytest.raises(InvalidArgumentError):
        fork.next(None)


def test_question_must_not_be_none():
    with pytest.raises(InvalidArgumentError):
        QuestionNode().question = None


def test_status_must_not_be_none():
    with pytest.raises(InvalidArgumentError):
        OutcomeNode().status = None


def test_outcome_is_terminal(label, number_answerer):
    outcome = OutcomeNode(label("x"))
    assert outcome.next(number_answerer(0)) is None
    assert outcome.next() is None


def test_question_node_needs_father_sons_and_question(less_than):
    father = QuestionNode()
    node = QuestionNode(OutcomeNode(), OutcomeNode())
    assert not node.is_initialized()
    father.left_son = node
    assert not node.is_initialized()
    node.question = less_than(1)
    assert node.is_initialized()
    node.right_son = None
    assert not node.is_initialized()


def test_root_is_initialized_without_father(less_than):
    root = RootQuestionNode(OutcomeNode(), OutcomeNode())
    assert not root.is_initialized()
    root.question = less_than(1)
    assert root.is_initialized()


def test_outcome_needs_father_and_status(label):
    outcome = OutcomeNode(label("x"))
    assert not outcome.is_initialized()
    father = QuestionNode(left_son=outcome)
    assert outcome.is_initialized()
    assert father.left_son is outcome
