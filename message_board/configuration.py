from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_DATA_DIR = Path("/app/data")
DEFAULT_DATA_FILE = "messages.txt"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(slots=True)
class AppConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    data_dir: Path = DEFAULT_DATA_DIR
    data_file_name: str = DEFAULT_DATA_FILE
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def data_file(self) -> Path:
        return self.data_dir / self.data_file_name


def _get_int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return int(default)
    try:
        return int(value)
    except ValueError:
        return int(default)


def load_config(env_path: Optional[Path] = None) -> AppConfig:
    """Load configuration from environment variables (and an optional .env file)."""
    if env_path is not None and env_path.exists():
        load_dotenv(env_path)
    else:
        load_dotenv()

    host = os.getenv("MESSAGE_BOARD_HOST", DEFAULT_HOST)
    port = _get_int_env("MESSAGE_BOARD_PORT", DEFAULT_PORT)
    data_dir = Path(os.getenv("MESSAGE_BOARD_DATA_DIR", str(DEFAULT_DATA_DIR)))
    data_file_name = os.getenv("MESSAGE_BOARD_DATA_FILE", DEFAULT_DATA_FILE) or DEFAULT_DATA_FILE
    log_level = os.getenv("MESSAGE_BOARD_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    return AppConfig(
        host=host,
        port=port,
        data_dir=data_dir,
        data_file_name=data_file_name,
        log_level=log_level,
    )


__all__ = ["AppConfig", "load_config"]
