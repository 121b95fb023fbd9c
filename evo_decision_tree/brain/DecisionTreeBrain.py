import logging
import random
from collections.abc import Sequence
from random import Random
from types import ModuleType
from typing import Optional, Union

from ..decision_tree.bindings import Answerer, Question, Status
from ..decision_tree.DecisionTree import DecisionTree
from ..decision_tree.errors import InvalidArgumentError, StructuralCorruptionError
from ..decision_tree.OutcomeNode import OutcomeNode
from ..decision_tree.QuestionNode import QuestionNode
from .Brain import Brain

logger = logging.getLogger(__name__)


def _rng(rng: Optional[Random]) -> Union[Random, ModuleType]:
    return random if rng is None else rng


def _check_palette(questions: Sequence[Question], statuses: Sequence[Status]) -> None:
    if not questions:
        raise InvalidArgumentError("questions must not be None or empty")
    if not statuses:
        raise InvalidArgumentError("statuses must not be None or empty")


class DecisionTreeBrain(DecisionTree, Brain):
    def decide(self, context: Answerer) -> Status:
        return self.apply(context)

    @classmethod
    def create_random(cls, depth: int, questions: Sequence[Question], statuses: Sequence[Status], rng: Optional[Random] = None) -> "DecisionTreeBrain":
        """Build a tree of ``depth`` whose questions and statuses are drawn uniformly from the palettes.

        The returned brain keeps a valid index.
        """
        if isinstance(depth, bool) or not isinstance(depth, int) or depth <= 0:
            raise InvalidArgumentError(f"depth must be a positive integer, got {depth!r}")
        _check_palette(questions, statuses)
        brain = cls(depth)
        brain.rebuild_index()
        brain._fill(questions, statuses, 1.0, _rng(rng))
        return brain

    @classmethod
    def cross(cls, tree1: DecisionTree, tree2: DecisionTree, rng: Optional[Random] = None) -> "DecisionTreeBrain":
        """Graft a random subtree of ``tree2`` into a copy of ``tree1``.

        A cut level ``L`` in ``[1, depth]`` is chosen, both trees are descended ``L - 1`` random
        steps, and a copy of one son of the ``tree2`` node replaces one son of the offspring's
        node. Both sons sit at level ``L`` so the offspring keeps the parents' depth. Neither
        parent is modified.
        """
        if tree1 is None or tree2 is None:
            raise InvalidArgumentError("trees to cross must not be None")
        if tree1.depth != tree2.depth:
            raise InvalidArgumentError(f"trees must have the same depth for crossover, got {tree1.depth} and {tree2.depth}")
        r = _rng(rng)
        depth = tree1.depth
        brain = cls._wrap(depth, tree1.root.copy())
        brain.rebuild_index()

        level = r.randint(1, depth)
        current_brain = brain.root
        current_tree2 = tree2.root
        for i in range(1, level):
            current_brain = current_brain.traverse(r.random() < 0.5)
            current_tree2 = current_tree2.traverse(r.random() < 0.5)
            if current_brain is None or current_tree2 is None:
                raise StructuralCorruptionError(f"tree is incomplete at level {i}")

        donor = current_tree2.traverse(r.random() < 0.5)
        if donor is None:
            raise StructuralCorruptionError(f"tree is incomplete at level {level}")
        if r.random() < 0.5:
            current_brain.left_son = donor.copy()
        else:
            current_brain.right_son = donor.copy()
        logger.debug("crossed two depth %d trees at level %d", depth, level)

        brain.rebuild_index()
        return brain

    def mutate(self, questions: Sequence[Question], statuses: Sequence[Status], rate: float, rng: Optional[Random] = None) -> "DecisionTreeBrain":
        "Return a copy where every question and status is redrawn with probability ``rate``."
        if not 0.0 <= rate <= 1.0:
            raise InvalidArgumentError(f"mutation rate must lie in [0, 1], got {rate}")
        _check_palette(questions, statuses)
        brain = type(self)._wrap(self.depth, self.root.copy())
        brain.rebuild_index()
        brain._fill(questions, statuses, rate, _rng(rng))
        return brain

    def _fill(self, questions: Sequence[Question], statuses: Sequence[Status], rate: float, r: Union[Random, ModuleType]) -> None:
        node_number = self.node_number
        first_leaf = node_number - self.status_number + 1
        for i in range(1, node_number + 1):
            node = self.get_node_by_index(i)
            if i >= first_leaf:
                if not isinstance(node, OutcomeNode):
                    raise StructuralCorruptionError(f"expected an outcome node at index {i}, got {node!r}")
                if rate >= 1.0 or r.random() < rate:
                    node.status = r.choice(statuses)
            else:
                if not isinstance(node, QuestionNode):
                    raise StructuralCorruptionError(f"expected a question node at index {i}, got {node!r}")
                if rate >= 1.0 or r.random() < rate:
                    node.question = r.choice(questions)
