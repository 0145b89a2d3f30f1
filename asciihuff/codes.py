# asciihuff/codes.py
from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Tuple

from asciihuff.frequency import ALPHABET_SIZE
from asciihuff.tree import TreeNode

__all__ = ["iter_encodings", "make_encodings", "code_lengths"]


def iter_encodings(root: TreeNode) -> Iterator[Tuple[int, str]]:
    """
    深度优先遍历 Huffman 树，逐个产出 (symbol, code)。
    左边记 '0'，右边记 '1'；左子树先于右子树访问。
    生成器只能消费一次。
    """
    stack: List[Tuple[TreeNode, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            yield node.data.symbol, path
            continue
        if node.right is not None:
            stack.append((node.right, path + "1"))
        if node.left is not None:
            stack.append((node.left, path + "0"))


def make_encodings(root: TreeNode) -> List[Optional[str]]:
    """
    构建 128 槽编码表：下标为符号值，值为 '0'/'1' 比特串；
    树中未出现的符号保持 None。
    """
    encodings: List[Optional[str]] = [None] * ALPHABET_SIZE
    for symbol, code in iter_encodings(root):
        encodings[symbol] = code
    return encodings


def code_lengths(encodings: List[Optional[str]]) -> Dict[int, int]:
    return {s: len(c) for s, c in enumerate(encodings) if c is not None}
