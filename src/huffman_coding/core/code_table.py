from __future__ import annotations

from collections.abc import Mapping

from huffman_coding.core.tree import HuffmanInternal, HuffmanLeaf, TreeNode
from huffman_coding.errors import InternalConsistency


def build_code_table(root: TreeNode) -> dict[int, str]:
    """Assign each leaf the path from the root: '0' = left, '1' = right.

    The root must be an internal node (the builder guarantees >= 3 leaves).
    """
    if not isinstance(root, HuffmanInternal):
        raise InternalConsistency("code table requested for a tree without internal root")

    codes: dict[int, str] = {}

    def dfs(node: TreeNode, prefix: str) -> None:
        if isinstance(node, HuffmanLeaf):
            codes[node.symbol] = prefix
            return
        if isinstance(node, HuffmanInternal):
            dfs(node.left, prefix + "0")
            dfs(node.right, prefix + "1")
            return
        raise InternalConsistency(f"unexpected tree node: {node!r}")

    dfs(root, "")
    return codes


def is_prefix_free(codes: Mapping[int, str]) -> bool:
    """True when no codeword is a prefix of another one."""
    words = sorted(codes.values())
    # dopo l'ordinamento un prefisso precede subito le sue estensioni
    for a, b in zip(words, words[1:]):
        if b.startswith(a):
            return False
    return True
