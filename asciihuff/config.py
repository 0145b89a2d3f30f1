# asciihuff/config.py
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict


@dataclass
class CodecConfig:
    text_path: str
    encoded_path: str
    decoded_path: str
    log_dir: str = "logs"
    log_level: str = "INFO"

    def paths(self) -> Dict[str, Path]:
        return {
            "text": Path(self.text_path),
            "encoded": Path(self.encoded_path),
            "decoded": Path(self.decoded_path),
        }


class ConfigLoader:
    @staticmethod
    def load_config(p: str) -> Dict[str, Any]:
        with open(p, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def load_codec_config(p: str) -> CodecConfig:
        d = ConfigLoader.load_config(p)
        return CodecConfig(
            text_path=d["text_path"],
            encoded_path=d["encoded_path"],
            decoded_path=d["decoded_path"],
            log_dir=d.get("log_dir", "logs"),
            log_level=d.get("log_level", "INFO"),
        )
