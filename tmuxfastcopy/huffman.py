"""N-ary Huffman coding that produces prefix-free labels for a set of items."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class _Node:
    freq: int
    # Index of the item for leaf nodes; -1 for branch nodes.
    index: int = -1
    children: list[_Node] = field(default_factory=list)


class _NodeHeap:
    """Array-backed binary min-heap ordered by frequency.

    The sift order is fixed so that ties between equal frequencies are
    always broken the same way, which keeps the generated labels stable.
    """

    def __init__(self, nodes: Iterable[_Node]) -> None:
        self._items = list(nodes)
        size = len(self._items)
        for i in reversed(range(size // 2)):
            self._down(i, size)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, node: _Node) -> None:
        self._items.append(node)
        self._up(len(self._items) - 1)

    def pop(self) -> _Node:
        last = len(self._items) - 1
        self._swap(0, last)
        self._down(0, last)
        return self._items.pop()

    def _less(self, i: int, j: int) -> bool:
        return self._items[i].freq < self._items[j].freq

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _up(self, j: int) -> None:
        while j > 0:
            parent = (j - 1) // 2
            if not self._less(j, parent):
                break
            self._swap(parent, j)
            j = parent

    def _down(self, i: int, size: int) -> None:
        while True:
            child = 2 * i + 1
            if child >= size:
                break
            right = child + 1
            if right < size and self._less(right, child):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child


def label(alphabet_size: int, freqs: Sequence[int]) -> list[list[int]]:
    """Generate unique prefix-free labels for items with the given frequencies.

    Each label is a list of indexes into an alphabet of ``alphabet_size``
    letters. Items with higher frequencies get shorter labels.
    """
    if alphabet_size < 2:
        raise ValueError("alphabet must have at least two elements")

    freqs = list(freqs)
    if not freqs:
        return []
    if len(freqs) == 1:
        return [[0]]

    heap = _NodeHeap(_Node(freq=f, index=i) for i, f in enumerate(freqs))
    while len(heap) > 1:
        children = [heap.pop() for _ in range(min(alphabet_size, len(heap)))]
        heap.push(
            _Node(freq=sum(child.freq for child in children), children=children)
        )

    labels: list[list[int]] = [[] for _ in freqs]
    stack: list[tuple[_Node, list[int]]] = [(heap.pop(), [])]
    while stack:
        node, prefix = stack.pop()
        if node.index >= 0:
            labels[node.index] = prefix
            continue
        stack.extend(
            (child, [*prefix, letter]) for letter, child in enumerate(node.children)
        )
    return labels