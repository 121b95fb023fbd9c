import logging
from collections import deque
from collections.abc import Iterator
from typing import Optional
from weakref import ref

from .bindings import Answerer, Status
from .errors import InvalidArgumentError, InvalidStateError, StructuralCorruptionError
from .Node import Node
from .OutcomeNode import OutcomeNode
from .QuestionNode import QuestionNode, RootQuestionNode

logger = logging.getLogger(__name__)


class DecisionTree:
    """Full binary tree of question nodes ending in outcome nodes at a uniform depth.

    Nodes can be looked up in O(1) by their 1-based level-order position (sons of ``i`` are
    ``2i`` and ``2i + 1``) once :meth:`rebuild_index` has been called. Any link change made
    after that invalidates the index, and lookups raise until it is rebuilt.

    Trees are not thread-safe; callers sharing one across threads must serialize access.
    """

    def __init__(self, depth: int, root: Optional[RootQuestionNode] = None) -> None:
        if isinstance(depth, bool) or not isinstance(depth, int) or depth <= 0:
            raise InvalidArgumentError(f"depth must be a positive integer, got {depth!r}")
        if root is None:
            root = self.generate(depth)
        else:
            self._check_root(root, depth)
        self._setup(depth, root)

    def _setup(self, depth: int, root: RootQuestionNode) -> None:
        self._depth = depth
        self._root = root
        self._index: list[Optional[ref[Node]]] = []
        self._index_valid = False
        self._index_revision = -1

    @classmethod
    def _wrap(cls, depth: int, root: RootQuestionNode) -> "DecisionTree":
        "Wrap a root of the right shape whose questions and statuses may still be unset."
        cls._check_root(root, depth, require_initialized=False)
        tree = cls.__new__(cls)
        tree._setup(depth, root)
        return tree

    @staticmethod
    def generate(depth: int) -> RootQuestionNode:
        def next_node_generation(level: int) -> Node:
            if level == depth:
                return OutcomeNode()
            return QuestionNode(next_node_generation(level + 1), next_node_generation(level + 1))

        return RootQuestionNode(next_node_generation(1), next_node_generation(1))

    @staticmethod
    def _check_root(root: RootQuestionNode, depth: int, require_initialized: bool = True) -> None:
        if not isinstance(root, RootQuestionNode):
            raise InvalidArgumentError(f"root must be a RootQuestionNode, got {type(root).__name__}")
        Q: deque[tuple[Node, int]] = deque([(root, 0)])
        while Q:
            node, level = Q.popleft()
            if level == depth:
                if not isinstance(node, OutcomeNode):
                    raise InvalidArgumentError(f"expected an outcome node at level {level}, got {node!r}")
            elif not isinstance(node, QuestionNode) or node.left_son is None or node.right_son is None:
                raise InvalidArgumentError(f"expected a question node with two sons at level {level}, got {node!r}")
            else:
                Q.append((node.left_son, level + 1))
                Q.append((node.right_son, level + 1))
            if require_initialized and not node.is_initialized():
                raise InvalidArgumentError(f"{node!r} at level {level} is not initialized")

    @property
    def root(self) -> RootQuestionNode:
        return self._root

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def node_number(self) -> int:
        return (1 << (self._depth + 1)) - 1

    @property
    def status_number(self) -> int:
        return 1 << self._depth

    @property
    def is_index_valid(self) -> bool:
        return self._index_valid and self._index_revision == self._root.revision

    def rebuild_index(self) -> None:
        index: list[Optional[ref[Node]]] = [None] * (self.node_number + 1)
        Q: deque[tuple[int, Node]] = deque([(1, self._root)])
        while Q:
            i, node = Q.popleft()
            if i >= len(index):
                raise StructuralCorruptionError(f"{node!r} lies below depth {self._depth}")
            index[i] = ref(node)
            for j, son in ((i << 1, node.left_son), ((i << 1) + 1, node.right_son)):
                if son is not None:
                    Q.append((j, son))
        self._index = index
        self._index_valid = True
        self._index_revision = self._root.revision
        logger.debug("indexed %d positions of a depth %d tree", len(index) - 1, self._depth)

    def get_node_by_index(self, i: int) -> Optional[Node]:
        if i < 1:
            raise InvalidArgumentError(f"node index must be at least 1, got {i}")
        if not self.is_index_valid:
            raise InvalidStateError("the node index is missing or stale, call rebuild_index() first")
        if i >= len(self._index):
            return None
        entry = self._index[i]
        return None if entry is None else entry()

    def is_initialized(self) -> bool:
        if not self.is_index_valid:
            raise InvalidStateError("the node index is missing or stale, call rebuild_index() first")
        for i in range(1, self.node_number + 1):
            node = self.get_node_by_index(i)
            if node is None or not node.is_initialized():
                return False
        return True

    def iter_nodes(self) -> Iterator[tuple[int, int, Node]]:
        "Yield ``(position, level, node)`` in level order, without requiring the index."
        Q: deque[tuple[int, Node]] = deque([(1, self._root)])
        while Q:
            i, node = Q.popleft()
            yield i, i.bit_length() - 1, node
            for j, son in ((i << 1, node.left_son), ((i << 1) + 1, node.right_son)):
                if son is not None:
                    Q.append((j, son))

    def apply(self, answerer: Answerer) -> Status:
        """Walk from the root to an outcome, letting ``answerer`` pick the branch at every question."""
        if answerer is None:
            raise InvalidArgumentError("answerer must not be None")
        node: Node = self._root
        steps = 0
        while not isinstance(node, OutcomeNode):
            if not isinstance(node, QuestionNode):
                raise StructuralCorruptionError(f"{node!r} is neither a question nor an outcome")
            if steps == self._depth:
                raise StructuralCorruptionError(f"no outcome within {self._depth} steps")
            son = node.next(answerer)
            if son is None:
                raise StructuralCorruptionError(f"{node!r} at level {steps} is missing a son")
            node = son
            steps += 1
        if node.status is None:
            raise InvalidStateError(f"outcome at level {steps} has no status")
        return node.status

    def __repr__(self) -> str:
        return f"{type(self).__name__}(depth={self._depth})"

    __slots__ = ["_depth", "_root", "_index", "_index_valid", "_index_revision"]
