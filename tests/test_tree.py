import heapq
import random
from collections import Counter

import pytest

from asciihuff.codes import make_encodings
from asciihuff.entropy import average_code_length
from asciihuff.frequency import FrequencyEntry, make_sorted_list
from asciihuff.tree import count_leaves, iter_leaves, make_tree


def _optimal_cost(text):
    # Huffman 码长总和 = 所有合并节点的权重之和
    heap = list(Counter(text).values())
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        a = heapq.heappop(heap)
        b = heapq.heappop(heap)
        cost += a + b
        heapq.heappush(heap, a + b)
    return cost


def _check_sums(node):
    if node.is_leaf:
        assert node.left is None and node.right is None
        return
    assert node.probability == pytest.approx(node.left.probability + node.right.probability)
    _check_sums(node.left)
    _check_sums(node.right)


class TestMakeTree:

    def test_needs_two_entries(self):
        with pytest.raises(ValueError):
            make_tree([FrequencyEntry(97, 1.0)])
        with pytest.raises(ValueError):
            make_tree([])

    def test_two_leaves(self):
        root = make_tree(make_sorted_list("aaab"))
        assert not root.is_leaf
        assert root.left.data.symbol == ord("b")
        assert root.right.data.symbol == ord("a")
        assert root.probability == pytest.approx(1.0)

    def test_low_pair_merged_first(self):
        root = make_tree(make_sorted_list("aabbc"))
        # c(0.2)+a(0.4) 先合并为 0.6，之后 b(0.4) 与之合并
        assert root.left.is_leaf
        assert root.left.data.symbol == ord("b")
        inner = root.right
        assert not inner.is_leaf
        assert inner.probability == pytest.approx(0.6)
        assert inner.left.data.symbol == ord("c")
        assert inner.right.data.symbol == ord("a")

    def test_source_preferred_on_tie(self):
        entries = [FrequencyEntry(1, 0.25), FrequencyEntry(2, 0.25), FrequencyEntry(3, 0.5)]
        root = make_tree(entries)
        assert root.left.is_leaf
        assert root.left.data.symbol == 3
        assert root.right.left.data.symbol == 1
        assert root.right.right.data.symbol == 2

    def test_internal_probability_is_sum(self):
        _check_sums(make_tree(make_sorted_list("she sells sea shells by the sea shore")))

    def test_leaf_count(self):
        text = "pack my box with five dozen liquor jugs"
        root = make_tree(make_sorted_list(text))
        assert count_leaves(root) == len(set(text))

    def test_singleton_leaf_count(self):
        root = make_tree(make_sorted_list("qqqqqq"))
        assert count_leaves(root) == 2
        assert sorted(leaf.data.symbol for leaf in iter_leaves(root)) == [ord("q"), ord("r")]

    def test_real_leaves_probability_conserved(self):
        root = make_tree(make_sorted_list("probability conservation"))
        assert sum(leaf.probability for leaf in iter_leaves(root)) == pytest.approx(1.0)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_expected_length_is_optimal(self, seed):
        rng = random.Random(seed)
        alphabet = [chr(c) for c in range(32, 127)]
        weights = [rng.random() ** 3 for _ in alphabet]
        text = "".join(rng.choices(alphabet, weights=weights, k=2000))
        entries = make_sorted_list(text)
        encodings = make_encodings(make_tree(entries))
        total_bits = average_code_length(entries, encodings) * len(text)
        assert total_bits == pytest.approx(_optimal_cost(text))

    def test_iter_leaves_left_to_right(self):
        root = make_tree(make_sorted_list("aabbc"))
        assert [leaf.data.symbol for leaf in iter_leaves(root)] == [ord("b"), ord("c"), ord("a")]
