"""Настройки из окружения (и необязательного `.env`)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Fields:
        log_level: Уровень логирования для `setup_logging`.
        vectorized: Читать Pillow-изображения через numpy, а не попиксельно.
    """
    log_level: str = "WARNING"
    vectorized: bool = True


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name}: ожидается булево значение, получено {raw!r}")


def load_settings(env_file: Optional[str | Path] = None) -> Settings:
    """Читает `PIXELBRIDGE_*` переменные окружения.

    Значения, уже заданные в окружении, имеют приоритет над `.env`.
    """
    load_dotenv(env_file)  # take environment variables from .env
    defaults = Settings()
    log_level = os.getenv("PIXELBRIDGE_LOG_LEVEL", defaults.log_level).strip().upper()
    raw_vectorized = os.getenv("PIXELBRIDGE_VECTORIZED")
    vectorized = defaults.vectorized if raw_vectorized is None else _parse_bool("PIXELBRIDGE_VECTORIZED", raw_vectorized)
    return Settings(log_level=log_level, vectorized=vectorized)
