from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import accumulate
from typing import Optional

from .Config import *
from .heaps import iter_nodes
from .HeapNode import EMPTY, HeapNode, push


@dataclass
class ElementNode:
    label: str
    full_label: str
    pos: int
    parent_pos: int = 0
    side: str = ""
    shared: bool = False
    is_leaf: bool = False

    def node_data(self, show_full_labels: bool) -> dict:
        classes = ["shared" if self.shared else "rebuilt"]
        if self.is_leaf:
            classes.append("is_leaf")
        return {
            "data": {"id": str(self.pos), "label": self.full_label if show_full_labels else ElementNode.crop_label(self.label), "pos": self.pos},
            "classes": " ".join(classes),
        }

    def edge_data(self) -> dict:
        return {"data": {"source": str(self.parent_pos), "target": str(self.pos), "label": self.side}}

    @staticmethod
    def crop_label(full_label: str) -> str:
        if len(full_label) <= LABEL_CROP_LENGTH:
            return full_label
        return full_label[: LABEL_CROP_LENGTH - 3] + "..."


def versions(values: Iterable) -> list[HeapNode]:
    return list(accumulate(values, push, initial=EMPTY))


def element_nodes(heap: HeapNode, previous: Optional[HeapNode] = None, max_elements: Optional[int] = None) -> list[ElementNode]:
    "Breadth-first, `pos` is the 1-based array index of the node"
    shared = set() if previous is None else {id(node) for node in iter_nodes(previous)}
    res: list[ElementNode] = []
    if heap.size == 0:
        return res
    Q: deque[tuple[HeapNode, int]] = deque([(heap, 1)])
    while Q and (max_elements is None or len(res) < max_elements):
        node, pos = Q.popleft()
        res.append(ElementNode(str(node.value), f"{node.value} (n={node.size}, h={node.height})", pos, pos >> 1, "LR"[pos & 1] if pos > 1 else "", id(node) in shared, node.is_leaf))
        for i, child in enumerate((node.left, node.right)):
            if child is not None:
                Q.append((child, (pos << 1) + i))
    return res


def heap_elements(heap: HeapNode, previous: Optional[HeapNode] = None, show_full_labels: bool = SHOW_FULL_LABELS, max_elements: int = MAX_ELEMENTS) -> tuple[list[dict], bool]:
    """Cytoscape elements of `heap`, nodes shared with `previous` carry the `shared` class.

    The second item tells whether every node fit into `max_elements`.
    """
    nodes = element_nodes(heap, previous, max_elements)
    ret = []
    for node in nodes:
        ret.append(node.node_data(show_full_labels))
        if node.parent_pos:
            ret.append(node.edge_data())
    return ret, len(nodes) == heap.size
