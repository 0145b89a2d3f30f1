import math

import pytest

from asciihuff.codes import make_encodings
from asciihuff.entropy import (
    average_code_length,
    coding_efficiency,
    compression_report,
    shannon_entropy,
)
from asciihuff.frequency import make_sorted_list
from asciihuff.tree import make_tree


def _model(text):
    entries = make_sorted_list(text)
    return entries, make_encodings(make_tree(entries))


class TestEntropy:

    def test_two_symbols(self):
        entries, encodings = _model("aaab")
        expected = -(0.75 * math.log2(0.75) + 0.25 * math.log2(0.25))
        assert shannon_entropy(entries) == pytest.approx(expected)
        assert average_code_length(entries, encodings) == pytest.approx(1.0)
        assert coding_efficiency(entries, encodings) == pytest.approx(expected)

    def test_uniform_is_fully_efficient(self):
        entries, encodings = _model("abcd")
        assert shannon_entropy(entries) == pytest.approx(2.0)
        assert average_code_length(entries, encodings) == pytest.approx(2.0)
        assert coding_efficiency(entries, encodings) == pytest.approx(1.0)

    def test_singleton_ignores_placeholder(self):
        entries, encodings = _model("kkkk")
        assert shannon_entropy(entries) == 0.0
        assert average_code_length(entries, encodings) == pytest.approx(1.0)
        assert coding_efficiency(entries, encodings) == 0.0

    def test_entropy_bounds_average_length(self):
        entries, encodings = _model("a man, a plan, a canal: panama")
        H = shannon_entropy(entries)
        L = average_code_length(entries, encodings)
        assert H <= L < H + 1

    def test_missing_code(self):
        entries, _ = _model("ab")
        with pytest.raises(ValueError):
            average_code_length(entries, [None] * 128)


class TestCompressionReport:

    def test_fields(self):
        r = compression_report([97] * 16, b"\x00\x01")
        assert r == {"raw_bytes": 16, "encoded_bytes": 2, "ratio": 8.0, "bits_per_symbol": 1.0}

    def test_empty(self):
        r = compression_report([], b"")
        assert r["ratio"] == 0.0
        assert r["bits_per_symbol"] == 0.0
