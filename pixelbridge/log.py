"""Настройка логирования пакета.

Модули пишут в `logging.getLogger(__name__)` только на уровне DEBUG;
обработчики подключает приложение через `setup_logging`.
"""
import logging
from typing import Optional

from pixelbridge.config import load_settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
HANDLER_NAME = "pixelbridge"


def setup_logging(level: Optional[int | str] = None) -> logging.Logger:
    """Настраивает вывод логов пакета в stderr.

    Повторный вызов меняет только уровень, второй обработчик не добавляется.
    """
    if level is None:
        level = load_settings().log_level
    logger = logging.getLogger("pixelbridge")
    logger.setLevel(level)
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
