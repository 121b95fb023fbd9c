import base64
import zlib
from collections import deque
from typing import Optional

import numpy as np
import sortednp as snp

from .Config import *
from .decision_tree.DecisionTree import DecisionTree
from .decision_tree.Node import Node
from .decision_tree.OutcomeNode import OutcomeNode
from .decision_tree.QuestionNode import QuestionNode


def node_label(node: Node) -> str:
    if isinstance(node, QuestionNode):
        return "?" if node.question is None else str(node.question)
    if isinstance(node, OutcomeNode):
        return "-" if node.status is None else str(node.status)
    return type(node).__name__


def crop_label(full_label: str) -> str:
    if len(full_label) <= LABEL_CROP_LENGTH:
        return full_label
    return full_label[: LABEL_CROP_LENGTH - 3] + "..."


class TreeView:
    """Which positions of a decision tree are shown in the viewer.

    The visibility state is a sorted array of level-order positions; it round-trips through the
    browser as a compressed string so the server stays stateless per user.
    """

    def __init__(self, tree: DecisionTree, visiblity_state: Optional[str] = None) -> None:
        self.tree = tree
        if not tree.is_index_valid:
            tree.rebuild_index()
        if visiblity_state is not None:
            state = self.decode_visiblity(visiblity_state)
            self.visiblity_state = state[state >= 1]
        else:
            self.visiblity_state = np.array([1], dtype=np.int32)
            self.expand_children(1)

    def get_visiblity_state(self) -> str:
        return self.encode_visiblity(self.visiblity_state)

    @staticmethod
    def encode_visiblity(visiblity: np.ndarray) -> str:
        return base64.b85encode(zlib.compress(visiblity.astype(np.int32, copy=False).tobytes())).decode()

    @staticmethod
    def decode_visiblity(visiblity: str) -> np.ndarray:
        return np.frombuffer(zlib.decompress(base64.b85decode(visiblity)), dtype=np.int32).copy()

    def node(self, position: int) -> Optional[Node]:
        return self.tree.get_node_by_index(position)

    def sons(self, position: int) -> list[int]:
        node = self.node(position)
        if node is None:
            return []
        return [j for j, son in ((position << 1, node.left_son), ((position << 1) + 1, node.right_son)) if son is not None]

    def node_visiblity(self, position: int) -> bool:
        i = self.visiblity_state.searchsorted(position)
        return i < len(self.visiblity_state) and self.visiblity_state[i] == position

    def node_has_hidden_child(self, position: int) -> bool:
        return any(not self.node_visiblity(son) for son in self.sons(position))

    def node_is_leaf(self, position: int) -> bool:
        return not self.sons(position)

    def expand_children(self, position: int) -> None:
        update: list[int] = []
        Q = deque([position])
        depth = 1
        while Q:
            for _ in range(len(Q)):
                for son in self.sons(Q.popleft()):
                    update.append(son)
                    if depth < DISPLAY_DEPTH:
                        Q.append(son)
            depth += 1
        update = np.array(update, dtype=np.int32)
        update.sort()
        self.visiblity_state = snp.merge(self.visiblity_state, update, duplicates=snp.DROP)

    def hide_children(self, position: int) -> None:
        deletes: list[int] = []
        Q = deque([position])
        while Q:
            for son in self.sons(Q.popleft()):
                i = self.visiblity_state.searchsorted(son)
                if i < len(self.visiblity_state) and self.visiblity_state[i] == son:
                    deletes.append(i)
                    Q.append(son)
        self.visiblity_state = np.delete(self.visiblity_state, deletes)

    def on_tap_node(self, position: int) -> None:
        if self.node_is_leaf(position):
            return
        if self.node_has_hidden_child(position):
            self.expand_children(position)
        else:
            self.hide_children(position)

    def expand_all(self) -> bool:
        elem: list[int] = []
        Q = deque([1])
        tot = 1
        while Q and tot < MAX_ELEMENTS:
            position = Q.popleft()
            elem.append(position)
            for son in self.sons(position):
                if tot < MAX_ELEMENTS:
                    tot += 1
                    Q.append(son)
        elem.extend(Q)
        self.visiblity_state = np.array(sorted(elem), dtype=np.int32)
        return tot < MAX_ELEMENTS

    def visible_elements(self, show_full_labels: bool) -> list[dict]:
        ret = []
        for position in map(int, self.visiblity_state):
            node = self.node(position)
            if node is None:
                continue
            full_label = node_label(node)
            classes = "is_leaf" if self.node_is_leaf(position) else "has_hidden_child" if self.node_has_hidden_child(position) else ""
            ret.append({"data": {"id": str(position), "pos": position, "label": full_label if show_full_labels else crop_label(full_label)}, "classes": classes})
            if position > 1:
                # a negative answer leads left (even position), a positive one right
                ret.append({"data": {"source": str(position >> 1), "target": str(position), "answer": "no" if position % 2 == 0 else "yes"}})
        return ret
