# asciihuff/tree.py
# 双队列 Huffman 建树：source（叶子，按排序顺序）+ merged（合并得到的内部节点）
from __future__ import annotations
import logging
from collections import deque
from typing import Deque, Iterator, List, Optional

from asciihuff.frequency import FrequencyEntry

__all__ = ["TreeNode", "make_tree", "iter_leaves", "count_leaves"]

logger = logging.getLogger(__name__)


class TreeNode:
    def __init__(self, data: FrequencyEntry, left: Optional[TreeNode] = None,
                 right: Optional[TreeNode] = None):
        self.data = data
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.data.symbol is not None

    @property
    def probability(self) -> float:
        return self.data.probability

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"TreeNode(symbol={self.data.symbol}, p={self.probability:.6g})"
        return f"TreeNode(p={self.probability:.6g})"


def _merge(first: TreeNode, second: TreeNode) -> TreeNode:
    data = FrequencyEntry(None, first.probability + second.probability)
    return TreeNode(data, first, second)


def _pop_lowest(source: Deque[TreeNode], merged: Deque[TreeNode]) -> TreeNode:
    # 概率相等时优先取 source
    if source and (not merged or source[0].probability <= merged[0].probability):
        return source.popleft()
    return merged.popleft()


def make_tree(sorted_list: List[FrequencyEntry]) -> TreeNode:
    """
    由已排序的频率表构建 Huffman 树。

    参数:
    - sorted_list: make_sorted_list() 的输出，至少 2 项

    返回:
    - 树根。每次合并时先取出的节点作为左孩子，后取出的作为右孩子。
    """
    if len(sorted_list) < 2:
        raise ValueError(f"need at least 2 entries to build a tree, got {len(sorted_list)}")

    source: Deque[TreeNode] = deque(TreeNode(entry) for entry in sorted_list)
    merged: Deque[TreeNode] = deque()

    first = source.popleft()
    second = source.popleft()
    merged.append(_merge(first, second))

    while source or len(merged) > 1:
        first = _pop_lowest(source, merged)
        second = _pop_lowest(source, merged)
        merged.append(_merge(first, second))

    root = merged[0]
    logger.debug("tree built: %d leaves, root p=%.6g", len(sorted_list), root.probability)
    return root


def iter_leaves(root: TreeNode) -> Iterator[TreeNode]:
    """按从左到右的顺序遍历叶子。"""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            yield node
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def count_leaves(root: TreeNode) -> int:
    return sum(1 for _ in iter_leaves(root))
