"""Ошибки предметной области."""
from __future__ import annotations

from typing import Optional


class InvalidImageError(ValueError):
    """Нарушены предусловия операции над изображением.

    Поднимается, если размеры не положительны или число пикселей не равно
    `width * height`. Атрибуты могут быть `None`, если значение неизвестно.
    """

    def __init__(
        self,
        message: str,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        pixel_count: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.width = width
        self.height = height
        self.pixel_count = pixel_count
