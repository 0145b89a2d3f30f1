# asciihuff/bitstream.py  (padding marker: 0...01, no header)
from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

import numpy as np

from asciihuff.textio import ensure_dir

__all__ = [
    "bytes_to_bits",
    "bits_to_bytes",
    "pack_bits",
    "unpack_bits",
    "write_bit_string",
    "read_bit_string",
]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_ZERO = ord("0")


# ---------- 基础工具 ----------
def _check_bits(bits: str) -> None:
    invalid = set(bits) - {"0", "1"}
    if invalid:
        raise ValueError(f"invalid characters in bitstring: {sorted(invalid)!r}")


def bytes_to_bits(b: bytes) -> str:
    """bytes -> '0'/'1' 比特串（高位在前）。"""
    arr = np.unpackbits(np.frombuffer(bytes(b), dtype=np.uint8))
    return (arr + _ZERO).astype(np.uint8).tobytes().decode("ascii")


def bits_to_bytes(bits: str) -> bytes:
    """'0'/'1' 比特串 -> bytes。长度必须是 8 的倍数。"""
    _check_bits(bits)
    if len(bits) % 8 != 0:
        raise ValueError("bitstream length must be a multiple of 8")
    arr = np.frombuffer(bits.encode("ascii"), dtype=np.uint8) - _ZERO
    return np.packbits(arr).tobytes()


# ---------- 核心 API ----------
def pack_bits(bits: str) -> bytes:
    """
    任意长度比特串 -> 补齐到 8 的倍数后的字节。
    在最前面补 padding-1 个 '0' 和一个 '1'，padding = 8 - len % 8，
    因此 padding 取 1..8，长度恰为 8 的倍数时也会补一整个字节。
    """
    _check_bits(bits)
    padding = 8 - (len(bits) % 8)
    padded = "0" * (padding - 1) + "1" + bits
    logger.debug("pack %d bits with %d padding bits", len(bits), padding)
    return bits_to_bytes(padded)


def unpack_bits(data: bytes) -> str:
    """
    pack_bits 的逆过程：展开为比特串，在前 8 位中找到第一个 '1'，
    连同它之前的 padding 一起去掉。前 8 位没有 '1'（padding 损坏）时直接去掉 8 位。
    """
    bits = bytes_to_bits(data)
    marker = bits.find("1", 0, 8)
    start = marker + 1 if marker >= 0 else 8
    return bits[start:]


# ---------- 文件读写 ----------
def write_bit_string(path: PathLike, bits: str) -> int:
    """
    把比特串按位（不是按字符）写入文件。
    父目录不存在时先创建。
    返回写入的字节数；写文件失败时记录错误并返回 0。
    比特串含非法字符时直接抛 ValueError。
    """
    data = pack_bits(bits)
    p = Path(path)
    try:
        ensure_dir(p)
        with p.open("wb") as f:
            f.write(data)
    except OSError as e:
        logger.error("error when writing %s: %s", path, e)
        return 0
    logger.info("wrote %d bytes (%d payload bits) -> %s", len(data), len(bits), path)
    return len(data)


def read_bit_string(path: PathLike) -> str:
    """
    读取编码文件并返回去掉 padding 的比特串。
    读文件失败时记录错误并返回 ''。
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.error("error while reading %s: %s", path, e)
        return ""
    return unpack_bits(data)
