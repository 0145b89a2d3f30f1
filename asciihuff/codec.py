# asciihuff/codec.py
# 编码：符号 -> 编码表 -> 比特串 -> pack_bits
# 解码：unpack_bits -> 沿树逐位行走 -> 符号
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from asciihuff.bitstream import pack_bits, read_bit_string, unpack_bits, write_bit_string
from asciihuff.codes import make_encodings
from asciihuff.entropy import compression_report
from asciihuff.frequency import ALPHABET_SIZE, FrequencyEntry, SymbolSource, make_sorted_list, to_symbols
from asciihuff.textio import read_symbols, write_symbols
from asciihuff.tree import TreeNode, make_tree

__all__ = [
    "encode_symbols",
    "encode",
    "decode_bits",
    "decode",
    "encode_from_array",
    "decode_file",
    "HuffmanCodec",
]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def encode_symbols(data: SymbolSource, encodings: List[Optional[str]]) -> str:
    """
    按编码表把符号序列拼接成 '0'/'1' 比特串。

    参数:
    - data: 待编码的符号序列
    - encodings: make_encodings() 得到的 128 槽编码表

    返回:
    - 比特串；符号越界或在编码表中没有编码时抛 ValueError
    """
    parts: List[str] = []
    for s in to_symbols(data):
        if not 0 <= s < ALPHABET_SIZE:
            raise ValueError(f"symbol {s} outside 7-bit range 0..127")
        code = encodings[s]
        if code is None:
            raise ValueError(f"symbol {s} has no code in the table")
        parts.append(code)
    return "".join(parts)


def encode(data: SymbolSource, encodings: List[Optional[str]]) -> bytes:
    return pack_bits(encode_symbols(data, encodings))


def decode_bits(bits: str, root: TreeNode) -> List[int]:
    """
    沿 Huffman 树逐位解码。
    - 当前节点是叶子：输出符号并回到根，不消耗比特；
    - 否则消耗一位，'0' 走左，'1' 走右；
    - 最后一位恰好落在叶子上时，该符号同样输出。
    比特用完时停在内部节点（码字被截断）视为损坏的流，抛 ValueError。
    """
    if root.is_leaf:
        raise ValueError("tree must have at least 2 leaves")

    out: List[int] = []
    node = root
    i, n = 0, len(bits)
    while i < n:
        if node.is_leaf:
            out.append(node.data.symbol)
            node = root
            continue
        bit = bits[i]
        i += 1
        if bit == "0":
            child = node.left
        elif bit == "1":
            child = node.right
        else:
            raise ValueError(f"invalid bit {bit!r} at position {i - 1}")
        if child is None:
            raise ValueError(f"bit at position {i - 1} leads outside the tree")
        node = child

    if node.is_leaf:
        out.append(node.data.symbol)
    elif node is not root:
        raise ValueError(f"bitstream ends inside a code after {n} bits")
    return out


def decode(data: bytes, root: TreeNode) -> List[int]:
    return decode_bits(unpack_bits(data), root)


def encode_from_array(encodings: List[Optional[str]], text_path: PathLike,
                      encoded_path: PathLike) -> int:
    """读取文本文件，按编码表编码并按位写入 encoded_path，返回写入字节数（失败为 0）。"""
    symbols = read_symbols(text_path)
    bits = encode_symbols(symbols, encodings)
    logger.info("encode %s: %d symbols -> %d bits", text_path, len(symbols), len(bits))
    return write_bit_string(encoded_path, bits)


def decode_file(encoded_path: PathLike, root: TreeNode, decoded_path: PathLike) -> List[int]:
    """
    读取编码文件，用同一棵树解码，写出到 decoded_path，返回解码得到的符号。
    读取失败（或文件中没有任何码字）时返回 []，decoded_path 保持不动。
    """
    bits = read_bit_string(encoded_path)
    if not bits:
        # 合法的编码流至少含一个码字
        logger.error("no payload bits in %s, %s left untouched", encoded_path, decoded_path)
        return []
    symbols = decode_bits(bits, root)
    write_symbols(decoded_path, symbols)
    logger.info("decode %s: %d bits -> %d symbols -> %s", encoded_path, len(bits), len(symbols), decoded_path)
    return symbols


class HuffmanCodec:
    """
    一次建好的 频率表 / 树 / 编码表。编码文件里不带树，
    解码必须使用同一个实例（或由同一份源文本重新构建）。
    """

    def __init__(self, entries: List[FrequencyEntry]):
        self.entries = entries
        self.root = make_tree(entries)
        self.encodings = make_encodings(self.root)

    @classmethod
    def from_symbols(cls, data: SymbolSource) -> HuffmanCodec:
        return cls(make_sorted_list(data))

    @classmethod
    def from_file(cls, path: PathLike) -> HuffmanCodec:
        return cls.from_symbols(read_symbols(path))

    def compress(self, data: SymbolSource) -> bytes:
        return encode(data, self.encodings)

    def decompress(self, blob: bytes) -> List[int]:
        return decode(blob, self.root)

    def decompress_text(self, blob: bytes) -> str:
        return "".join(chr(s) for s in self.decompress(blob))

    def encode_file(self, text_path: PathLike, encoded_path: PathLike) -> int:
        return encode_from_array(self.encodings, text_path, encoded_path)

    def decode_file(self, encoded_path: PathLike, decoded_path: PathLike) -> List[int]:
        return decode_file(encoded_path, self.root, decoded_path)

    def report(self, data: SymbolSource, blob: bytes) -> Dict[str, float]:
        return compression_report(to_symbols(data), blob)
