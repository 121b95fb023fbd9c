from typing import Optional
from weakref import ref

from .errors import InvalidArgumentError


class Node:
    """Vertex of a binary tree that owns its two sons and weakly refers to its father.

    Links are always kept in both directions: assigning a son updates the son's father, and
    a son that already had a father elsewhere is detached from it first.
    """

    can_have_father = True
    can_have_sons = True

    def __init__(self, left_son: Optional["Node"] = None, right_son: Optional["Node"] = None) -> None:
        self._father: Optional[ref[Node]] = None
        self._left_son: Optional[Node] = None
        self._right_son: Optional[Node] = None
        self._revision = 0
        self.left_son = left_son
        self.right_son = right_son

    @property
    def father(self) -> Optional["Node"]:
        return None if self._father is None else self._father()

    @property
    def left_son(self) -> Optional["Node"]:
        return self._left_son

    @left_son.setter
    def left_son(self, son: Optional["Node"]) -> None:
        self._set_son(True, son)

    @property
    def right_son(self) -> Optional["Node"]:
        return self._right_son

    @right_son.setter
    def right_son(self, son: Optional["Node"]) -> None:
        self._set_son(False, son)

    @property
    def revision(self) -> int:
        "Topology revision of the component this node belongs to."
        return self.top()._revision

    def top(self) -> "Node":
        node = self
        while (father := node.father) is not None:
            node = father
        return node

    def is_ancestor_of(self, node: "Node") -> bool:
        while (node := node.father) is not None:
            if node is self:
                return True
        return False

    def traverse(self, go_left: bool) -> Optional["Node"]:
        return self._left_son if go_left else self._right_son

    def is_initialized(self) -> bool:
        return self.father is not None and self._left_son is not None and self._right_son is not None

    def copy(self) -> "Node":
        """Deep copy of the subtree rooted here; the copy has no father."""
        clone = self._copy_value()
        if self._left_son is not None:
            clone.left_son = self._left_son.copy()
        if self._right_son is not None:
            clone.right_son = self._right_son.copy()
        return clone

    def _copy_value(self) -> "Node":
        return type(self)()

    def _set_son(self, is_left: bool, son: Optional["Node"]) -> None:
        old = self._left_son if is_left else self._right_son
        if old is son:
            return
        if son is not None:
            if not self.can_have_sons:
                raise InvalidArgumentError(f"{type(self).__name__} cannot have sons")
            if not son.can_have_father:
                raise InvalidArgumentError(f"{type(son).__name__} cannot be a son")
            if son is self or son.is_ancestor_of(self):
                raise InvalidArgumentError("a node cannot become a son of its own subtree")
            if (father := son.father) is not None:
                if father._left_son is son:
                    father._left_son = None
                else:
                    father._right_son = None
                father.top()._revision += 1
            son._father = ref(self)
        if old is not None:
            old._father = None
        if is_left:
            self._left_son = son
        else:
            self._right_son = son
        self.top()._revision += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    __slots__ = ["_father", "_left_son", "_right_son", "_revision", "__weakref__"]
