"""Link bookkeeping of tree nodes."""

import pytest

from evo_decision_tree.decision_tree.DecisionTree import DecisionTree
from evo_decision_tree.decision_tree.errors import InvalidArgumentError
from evo_decision_tree.decision_tree.Node import Node
from evo_decision_tree.decision_tree.OutcomeNode import OutcomeNode
from evo_decision_tree.decision_tree.QuestionNode import QuestionNode, RootQuestionNode


def test_sons_link_back_to_father():
    left, right = Node(), Node()
    father = Node(left, right)
    assert father.left_son is left
    assert father.right_son is right
    assert left.father is father
    assert right.father is father
    assert father.father is None


def test_son_moved_to_another_father_is_detached_from_the_first():
    first, second, son = Node(), Node(), Node()
    first.left_son = son
    second.right_son = son
    assert first.left_son is None
    assert second.right_son is son
    assert son.father is second


def test_replaced_son_loses_its_father():
    father, old, new = Node(), Node(), Node()
    father.left_son = old
    father.left_son = new
    assert old.father is None
    assert new.father is father


def test_clearing_a_son():
    son = Node()
    father = Node(right_son=son)
    father.right_son = None
    assert father.right_son is None
    assert son.father is None


def test_node_cannot_be_its_own_son():
    node = Node()
    with pytest.raises(InvalidArgumentError):
        node.left_son = node


def test_ancestor_cannot_become_a_son():
    top, middle, bottom = Node(), Node(), Node()
    top.left_son = middle
    middle.right_son = bottom
    with pytest.raises(InvalidArgumentError):
        bottom.left_son = top
    assert top.father is None
    assert bottom.left_son is None


def test_root_question_node_cannot_be_a_son():
    father = QuestionNode()
    with pytest.raises(InvalidArgumentError):
        father.left_son = RootQuestionNode()
    assert father.left_son is None


def test_outcome_node_cannot_have_sons():
    outcome = OutcomeNode()
    with pytest.raises(InvalidArgumentError):
        outcome.right_son = OutcomeNode()
    outcome.left_son = None
    assert outcome.left_son is None


def test_top_and_ancestry():
    top, middle, bottom = Node(), Node(), Node()
    top.left_son = middle
    middle.left_son = bottom
    assert bottom.top() is top
    assert top.is_ancestor_of(bottom)
    assert middle.is_ancestor_of(bottom)
    assert not bottom.is_ancestor_of(top)
    assert not top.is_ancestor_of(top)


def test_revision_changes_with_links():
    """Every link change bumps the revision of the affected components."""
    first, second, son = Node(), Node(), Node()
    before = first.revision
    first.left_son = son
    assert first.revision > before
    assert son.revision == first.revision

    before = first.revision
    second.left_son = son
    assert first.revision > before


def test_copy_is_deep_and_detached(less_than, label):
    father = QuestionNode()
    node = QuestionNode(OutcomeNode(label("no")), OutcomeNode(label("yes")), question=less_than(3))
    father.left_son = node

    clone = node.copy()
    assert type(clone) is QuestionNode
    assert clone is not node
    assert clone.father is None
    assert clone.question == less_than(3)
    assert clone.left_son is not node.left_son
    assert clone.left_son.father is clone
    assert clone.left_son.status == label("no")
    assert clone.right_son.status == label("yes")
    assert node.father is father
    assert node.left_son.father is node


def test_copy_keeps_root_type(less_than):
    root = RootQuestionNode(OutcomeNode(), OutcomeNode(), question=less_than(1))
    assert type(root.copy()) is RootQuestionNode


def test_assigning_the_same_son_again_changes_nothing():
    tree = DecisionTree(3)
    tree.rebuild_index()
    son = tree.root.left_son
    revision = tree.root.revision
    tree.root.left_son = son
    assert tree.root.left_son is son
    assert son.father is tree.root
    assert tree.root.revision == revision
    assert tree.is_index_valid


def test_son_moved_to_the_other_slot_of_the_same_father():
    father, son = Node(), Node()
    father.left_son = son
    father.right_son = father.left_son
    assert father.left_son is None
    assert father.right_son is son
    assert son.father is father
