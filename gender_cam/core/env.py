from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_dotenv_if_present(path: str | Path = ".env") -> None:
    """Load environment variables from a .env file if it exists."""
    dotenv_path = Path(path)
    if dotenv_path.exists():
        load_dotenv(dotenv_path=dotenv_path, override=False)


def configure_logging(default_level: str = "INFO") -> None:
    """Configure root logging level from LOG_LEVEL env (default INFO)."""
    level_name = os.getenv("LOG_LEVEL", default_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


def env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw
