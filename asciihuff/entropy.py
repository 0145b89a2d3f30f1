# asciihuff/entropy.py
from __future__ import annotations
import numpy as np
from typing import Dict, List, Optional, Sequence

from asciihuff.frequency import FrequencyEntry

__all__ = [
    "shannon_entropy",
    "average_code_length",
    "coding_efficiency",
    "compression_report",
]


def _probabilities(entries: Sequence[FrequencyEntry]) -> np.ndarray:
    return np.array([e.probability for e in entries], dtype=np.float64)


def shannon_entropy(entries: Sequence[FrequencyEntry]) -> float:
    """
    频率表的 Shannon entropy（bits per symbol）。
    """
    p = _probabilities(entries)
    # 仅对 p>0 的项求和，避免 log2(0)
    m = p > 0
    H = -np.sum(p[m] * np.log2(p[m]))
    return float(H)


def average_code_length(entries: Sequence[FrequencyEntry], encodings: List[Optional[str]]) -> float:
    """
    平均码长 Σ p(s)·len(code(s))；只统计 p>0 的符号（占位符号不计）。
    """
    total = 0.0
    for e in entries:
        if e.probability <= 0:
            continue
        code = encodings[e.symbol]
        if code is None:
            raise ValueError(f"symbol {e.symbol} has no code in the table")
        total += e.probability * len(code)
    return total


def coding_efficiency(entries: Sequence[FrequencyEntry], encodings: List[Optional[str]]) -> float:
    """
    编码效率 = entropy / 平均码长，落在 [0, 1]；单一符号时 entropy 为 0。
    """
    L = average_code_length(entries, encodings)
    if L <= 0:
        return 0.0
    return shannon_entropy(entries) / L


def compression_report(symbols: Sequence[int], encoded: bytes) -> Dict[str, float]:
    """
    对比原始符号数与编码后字节数，返回 {raw_bytes, encoded_bytes, ratio, bits_per_symbol}。
    - ratio = raw_bytes / encoded_bytes（越大越好）
    """
    raw = len(symbols)
    enc = len(encoded)
    return {
        "raw_bytes": raw,
        "encoded_bytes": enc,
        "ratio": raw / enc if enc else 0.0,
        "bits_per_symbol": 8.0 * enc / raw if raw else 0.0,
    }
