# asciihuff/frequency.py
# 频率统计：符号序列 -> 概率表（按 概率↑, 符号值↑ 排序），含单一符号的退化处理
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

__all__ = [
    "ALPHABET_SIZE",
    "FrequencyEntry",
    "to_symbols",
    "count_symbols",
    "make_sorted_list",
]

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 128

SymbolSource = Union[str, bytes, bytearray, Iterable[int]]


@dataclass(frozen=True)
class FrequencyEntry:
    """
    单个符号的出现概率。
    - symbol: 0..127；内部节点为 None
    - probability: float64
    """
    symbol: Optional[int]
    probability: float

    def sort_key(self) -> Tuple[float, int]:
        # 概率相同按符号值升序
        if self.symbol is None:
            raise ValueError("internal entries have no sort order")
        return (self.probability, self.symbol)


def to_symbols(data: SymbolSource) -> List[int]:
    """str / bytes / 整数序列 -> List[int]（不做范围检查）。"""
    if isinstance(data, str):
        return [ord(ch) for ch in data]
    if isinstance(data, (bytes, bytearray)):
        return list(data)
    try:
        return [int(s) for s in data]
    except TypeError:
        raise TypeError(f"unsupported symbol source: {type(data).__name__}") from None


def count_symbols(symbols: List[int]) -> np.ndarray:
    """
    对符号计数，返回长度 128 的直方图（int64）。
    出现 0..127 以外的值时抛 ValueError。
    """
    arr = np.asarray(symbols, dtype=np.int64)
    if arr.size and (arr.min() < 0 or arr.max() >= ALPHABET_SIZE):
        bad = int(arr[(arr < 0) | (arr >= ALPHABET_SIZE)][0])
        raise ValueError(f"symbol {bad} outside 7-bit range 0..127")
    return np.bincount(arr, minlength=ALPHABET_SIZE)


def make_sorted_list(data: SymbolSource) -> List[FrequencyEntry]:
    """
    统计输入中每个符号的经验概率，返回按 (probability, symbol) 升序的列表。

    参数:
    - data: 文本 / 字节 / 0..127 的整数序列

    返回:
    - List[FrequencyEntry]，只包含出现过的符号；
      若只有一个不同符号，额外插入一个概率为 0 的占位符号（值 +1，127 回绕到 0），
      保证后续建树至少有两个叶子。
    """
    symbols = to_symbols(data)
    if not symbols:
        raise ValueError("cannot build a frequency table from empty input")

    hist = count_symbols(symbols)
    total = len(symbols)
    observed = np.nonzero(hist)[0]

    entries = [FrequencyEntry(int(s), float(hist[s]) / total) for s in observed]

    if len(entries) == 1:
        real = entries[0].symbol
        placeholder = (real + 1) % ALPHABET_SIZE
        entries.insert(1, FrequencyEntry(placeholder, 0.0))
        logger.debug("single distinct symbol %d, placeholder %d added", real, placeholder)

    entries.sort(key=FrequencyEntry.sort_key)
    logger.debug("frequency table: %d entries over %d symbols", len(entries), total)
    return entries
