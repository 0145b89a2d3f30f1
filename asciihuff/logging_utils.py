# asciihuff/logging_utils.py
# 日志：asciihuff.* 模块各自 getLogger(__name__)，这里统一配置 handler 与级别
from __future__ import annotations
import logging
import os
from datetime import datetime
from typing import Optional, Union

from asciihuff.config import CodecConfig

__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "resolve_level", "setup_logging", "setup_logging_from_config"]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
PACKAGE_LOGGER = "asciihuff"


def resolve_level(level: Union[int, str]) -> int:
    """'debug' / 'INFO' / 20 -> logging 数值级别；未知名称抛 ValueError。"""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level}")
    return value


def setup_logging(log_dir: Optional[str] = "logs", level: Union[int, str] = "INFO",
                  name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    配置编解码日志：
    - asciihuff 包 logger 设为 level（库内 debug 信息是否输出由它决定）；
    - root 尚无 handler 时装上控制台 handler，log_dir 不为 None 时再加
      logs/asciihuff_<时间戳>.log 文件 handler；已配置过（如 pytest）则不重复安装。
    返回名为 name 的 logger。
    """
    lvl = resolve_level(level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(lvl)
    if not logging.getLogger().handlers:
        handlers = [logging.StreamHandler()]
        if log_dir is not None:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            handlers.append(logging.FileHandler(os.path.join(log_dir, f"asciihuff_{timestamp}.log")))
        logging.basicConfig(level=lvl, format=LOG_FORMAT, handlers=handlers)
    return logging.getLogger(name)


def setup_logging_from_config(cfg: CodecConfig, name: str = PACKAGE_LOGGER) -> logging.Logger:
    return setup_logging(log_dir=cfg.log_dir, level=cfg.log_level, name=name)
