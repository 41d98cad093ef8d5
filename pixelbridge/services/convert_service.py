"""Мост между внешними изображениями и `PackedImage`.

Принципы:
- SRP: только перенос пикселей, без изменения их значений и ориентации.
- OCP: новые внешние типы подключаются через `PixelHandle` или фабрику дескрипторов.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Union

import numpy as np
from PIL import Image

from pixelbridge.errors import InvalidImageError
from pixelbridge.models.argb import normalize_argb
from pixelbridge.models.handle import PilImageHandle, PixelHandle
from pixelbridge.models.image_model import PackedImage, validate_image

logger = logging.getLogger(__name__)

HandleFactory = Callable[[int, int], PixelHandle]
ImageSource = Union[Image.Image, PixelHandle]


class ConvertService:
    def __init__(self, vectorized: bool = True) -> None:
        self._vectorized = vectorized

    def to_packed(self, src: ImageSource) -> PackedImage:
        """Читает внешнее изображение в новый `PackedImage`.

        Args:
            src: `PIL.Image.Image` (любой режим, приводится к RGBA) или `PixelHandle`.

        Returns:
            `PackedImage`, где `pixels[y*width + x]` — ARGB источника в (x, y).

        Raises:
            InvalidImageError: если источник сообщает неположительные размеры.
        """
        if isinstance(src, PilImageHandle):
            src = src.image
        width, height = self._source_size(src)
        if width <= 0 or height <= 0:
            raise InvalidImageError(
                f"Размеры источника должны быть положительными: {width}x{height}",
                width=width,
                height=height,
            )
        logger.debug("converting %s %sx%s to packed ARGB", type(src).__name__, width, height)

        if isinstance(src, Image.Image):
            if self._vectorized:
                rgba = src if src.mode == "RGBA" else src.convert("RGBA")
                return PackedImage.from_rgba_array(np.asarray(rgba, dtype=np.uint8))
            src = PilImageHandle(src)
        return self._read_handle(src, width, height)

    def from_packed(self, src: PackedImage, handle_factory: Optional[HandleFactory] = None) -> Union[Image.Image, PixelHandle]:
        """Записывает `PackedImage` в новое внешнее изображение тех же размеров.

        Без фабрики возвращается `PIL.Image.Image` в режиме RGBA, собранный
        целиком за один вызов. С фабрикой — дескриптор, в который записаны
        все пиксели.
        """
        validate_image(src)
        logger.debug("converting packed ARGB %sx%s to external image", src.width, src.height)
        if handle_factory is None:
            return Image.fromarray(src.to_rgba_array())

        handle = handle_factory(src.width, src.height)
        if (handle.width, handle.height) != (src.width, src.height):
            raise InvalidImageError(
                f"Фабрика вернула {handle.width}x{handle.height}, ожидалось {src.width}x{src.height}",
                width=handle.width,
                height=handle.height,
            )
        words = src.pixels.tolist()
        w = src.width
        for y in range(src.height):
            row = y * w
            for x in range(w):
                handle.set_argb(x, y, words[row + x])
        return handle

    # ---------- Вспомогательные функции ----------
    @staticmethod
    def _source_size(src: ImageSource) -> tuple[int, int]:
        if isinstance(src, Image.Image):
            return src.size
        if not isinstance(src, PixelHandle):
            raise TypeError(f"Неподдерживаемый источник: {type(src).__name__}")
        return int(src.width), int(src.height)

    @staticmethod
    def _read_handle(src: PixelHandle, width: int, height: int) -> PackedImage:
        words = np.empty(width * height, dtype=np.uint32)
        for y in range(height):
            row = y * width
            for x in range(width):
                words[row + x] = _read_word(src, x, y)
        return PackedImage.adopt(width, height, words)


def _read_word(src: PixelHandle, x: int, y: int) -> int:
    value = src.get_argb(x, y)
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidImageError(f"Пиксель ({x}, {y}) не целое число: {value!r}")
    try:
        return normalize_argb(int(value))
    except ValueError as exc:
        raise InvalidImageError(f"Пиксель ({x}, {y}) не помещается в 32 бита: {value}") from exc
