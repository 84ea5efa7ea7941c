"""Simple configuration loader for famtree_py.

Behavior:
- Load defaults.
- If environment variable `FAMTREE_CONFIG` is set, load that JSON file and merge.
- Environment variables override file values (variables: FAMTREE_OUTPUT_FORMAT,
  FAMTREE_LOG_LEVEL, FAMTREE_ENCODING, FAMTREE_HOST, FAMTREE_PORT).
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
import os
import json
from typing import Optional


@dataclass
class Config:
    output_format: str = "text"
    log_level: str = "WARNING"
    encoding: str = "utf-8"
    host: str = "127.0.0.1"
    port: int = 8000


_ENV_VARS = {
    "output_format": "FAMTREE_OUTPUT_FORMAT",
    "log_level": "FAMTREE_LOG_LEVEL",
    "encoding": "FAMTREE_ENCODING",
    "host": "FAMTREE_HOST",
    "port": "FAMTREE_PORT",
}


def _load_json_file(path: Path) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        return None


def _set(cfg: Config, name: str, value) -> None:
    if value in (None, ""):
        return
    if name == "port":
        # a non-numeric port keeps the current value
        try:
            value = int(value)
        except (TypeError, ValueError):
            return
    setattr(cfg, name, value)


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from (1) defaults, (2) JSON file, (3) env vars.

    :param config_path: optional path to a JSON config file. If not provided
                        will use environment variable `FAMTREE_CONFIG` if set.
    """
    cfg = Config()

    # 1) config file
    cp = config_path or os.environ.get("FAMTREE_CONFIG")
    if cp:
        data = _load_json_file(Path(cp))
        if isinstance(data, dict):
            for f in fields(Config):
                if f.name in data:
                    _set(cfg, f.name, data[f.name])

    # 2) environment variables override only if no explicit config_path was
    # provided; an explicit file is authoritative.
    if config_path is None:
        for name, var in _ENV_VARS.items():
            _set(cfg, name, os.environ.get(var))

    return cfg
