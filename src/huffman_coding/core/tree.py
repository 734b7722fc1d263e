"""Huffman tree: nodes + greedy min-weight construction.

Nodes are a small tagged union:
  - HuffmanLeaf(symbol, weight)
  - HuffmanInternal(left, right, weight)

Ogni nodo interno ha SEMPRE due figli: il costruttore lo verifica.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Union

from huffman_coding.errors import InsufficientAlphabet, InternalConsistency

MIN_SYMBOLS = 3


@dataclass(frozen=True)
class HuffmanLeaf:
    symbol: int  # 0-255
    weight: int


@dataclass(frozen=True)
class HuffmanInternal:
    left: TreeNode
    right: TreeNode
    weight: int

    def __post_init__(self) -> None:
        if not isinstance(self.left, (HuffmanLeaf, HuffmanInternal)) or not isinstance(
            self.right, (HuffmanLeaf, HuffmanInternal)
        ):
            raise InternalConsistency("internal node without two children")


TreeNode = Union[HuffmanLeaf, HuffmanInternal]


def merge(left: TreeNode, right: TreeNode) -> HuffmanInternal:
    """Join two subtrees under a new internal node (weight = sum)."""
    return HuffmanInternal(left=left, right=right, weight=left.weight + right.weight)


def build_huffman_tree(counts: Mapping[int, int]) -> TreeNode:
    """Greedy Huffman construction over a byte -> count mapping.

    Raises InsufficientAlphabet for 0, 1 or 2 distinct symbols: with so few
    symbols there is nothing worth coding, and we do not fall back to 1-bit codes.

    Ties between equal weights are broken by insertion order (leaves are
    seeded in ascending symbol order, merged nodes get later sequence numbers).
    """
    if len(counts) < MIN_SYMBOLS:
        raise InsufficientAlphabet(
            f"It makes no sense to use Huffman coding for less than three symbols "
            f"(got {len(counts)})"
        )

    heap: list[tuple[int, int, TreeNode]] = []
    counter = itertools.count()

    for sym in sorted(counts):
        leaf = HuffmanLeaf(symbol=int(sym), weight=int(counts[sym]))
        heapq.heappush(heap, (leaf.weight, next(counter), leaf))

    # n foglie -> esattamente n-1 fusioni
    while len(heap) > 1:
        _, _, n1 = heapq.heappop(heap)
        _, _, n2 = heapq.heappop(heap)
        parent = merge(n1, n2)
        heapq.heappush(heap, (parent.weight, next(counter), parent))

    return heap[0][2]


def iter_nodes(root: TreeNode) -> Iterator[TreeNode]:
    """Pre-order walk (explicit stack, no recursion limit)."""
    stack: list[TreeNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, HuffmanInternal):
            stack.append(node.right)
            stack.append(node.left)


def count_leaves(root: TreeNode) -> int:
    return sum(1 for n in iter_nodes(root) if isinstance(n, HuffmanLeaf))


def count_internal(root: TreeNode) -> int:
    return sum(1 for n in iter_nodes(root) if isinstance(n, HuffmanInternal))
