from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from textsplit.chunking import DEFAULT_CHUNK_SIZE


@dataclass
class Config:
    chunk_size: int = DEFAULT_CHUNK_SIZE
    copy_reset_seconds: float = 2.0  # how long a chunk stays flagged as copied
    log_dir: Path = Path("./logs")
    log_level: str = "WARNING"

    @staticmethod
    def load(config_file: Path | str = "config.yaml") -> "Config":
        path = Path(config_file)
        cfg = Config()
        if path.exists():
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

            # Map YAML keys to dataclass fields if present
            if "chunk_size" in data:
                cfg.chunk_size = int(data["chunk_size"])
            if "copy_reset_seconds" in data:
                cfg.copy_reset_seconds = float(data["copy_reset_seconds"])
            if "log_dir" in data and data["log_dir"]:
                cfg.log_dir = Path(data["log_dir"]).expanduser().resolve()
            if "log_level" in data and data["log_level"]:
                cfg.log_level = str(data["log_level"]).upper()

        return cfg
