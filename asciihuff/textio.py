# asciihuff/textio.py
# 源文本读取 / 解码结果写出（按字节，不做编码转换）
from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Union

__all__ = ["read_symbols", "write_symbols"]

PathLike = Union[str, Path]


def ensure_dir(p: Path) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)


def read_symbols(path: PathLike) -> List[int]:
    """读取整个文件，返回符号值列表（范围检查由调用方负责）。"""
    with open(path, "rb") as f:
        return list(f.read())


def write_symbols(path: PathLike, symbols: Iterable[int]) -> int:
    """按输出顺序写出符号，返回写入的字节数。"""
    p = Path(path)
    ensure_dir(p)
    data = bytes(symbols)
    with p.open("wb") as f:
        f.write(data)
    return len(data)
