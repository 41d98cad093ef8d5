"""Модель упакованного ARGB-изображения.

Принципы:
- SRP: только структура данных и проверка её инвариантов, без логики поворотов.
- Чистый код: неизменяемость (`frozen=True`, буфер только для чтения).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

import numpy as np

from pixelbridge.errors import InvalidImageError
from pixelbridge.models.argb import ARGB_MASK, argb_to_rgba_array, normalize_argb, rgba_array_to_argb

logger = logging.getLogger(__name__)

_INT32_MIN = -(1 << 31)


@dataclass(frozen=True, eq=False)
class PackedImage:
    """Неизменяемое растровое изображение в упакованном ARGB.

    Fields:
        width: Ширина, px (> 0).
        height: Высота, px (> 0).
        pixels: Плоский uint32 массив длины `width * height`, построчно,
            начало координат в левом верхнем углу, y растёт вниз.

    Конструктор всегда копирует входную последовательность, поэтому
    изображение не разделяет память с буфером вызывающего кода.
    """
    width: int
    height: int
    pixels: np.ndarray

    def __post_init__(self) -> None:
        _check_dims(self.width, self.height)
        object.__setattr__(self, "pixels", _copy_pixels(self.pixels, self.width, self.height))

    # ---- Фабрики ----
    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: Sequence[int] | np.ndarray) -> "PackedImage":
        """Создаёт изображение из плоской последовательности ARGB-слов (копия)."""
        return cls(width, height, pixels)

    @classmethod
    def solid(cls, width: int, height: int, argb: int) -> "PackedImage":
        """Изображение, залитое одним цветом."""
        _check_dims(width, height)
        word = normalize_argb(argb)
        return cls.adopt(width, height, np.full(width * height, word, dtype=np.uint32))

    @classmethod
    def from_rgba_array(cls, arr: np.ndarray) -> "PackedImage":
        """Создаёт изображение из массива (H, W, 4) uint8 в порядке R,G,B,A."""
        arr = np.asarray(arr)
        if arr.ndim != 3 or arr.shape[2] != 4 or arr.dtype != np.uint8:
            raise InvalidImageError(f"Ожидается uint8 массив (H, W, 4), получено {arr.dtype} {arr.shape}")
        height, width = int(arr.shape[0]), int(arr.shape[1])
        _check_dims(width, height)
        return cls.adopt(width, height, rgba_array_to_argb(arr))

    @classmethod
    def adopt(cls, width: int, height: int, words: np.ndarray) -> "PackedImage":
        """Оборачивает готовый буфер без копирования.

        Для сервисов, которые сами только что выделили результат: `words` —
        плоский uint32 массив длины `width * height`, на который больше никто
        не ссылается. Массив переводится в режим только для чтения.

        Raises:
            InvalidImageError: если размеры, тип или длина буфера не подходят.
        """
        _check_dims(width, height)
        if not isinstance(words, np.ndarray) or words.ndim != 1 or words.dtype != np.uint32:
            raise InvalidImageError("Ожидается одномерный uint32 массив", width=width, height=height)
        _check_count(width, height, int(words.size))
        image = object.__new__(cls)
        words.setflags(write=False)
        object.__setattr__(image, "width", width)
        object.__setattr__(image, "height", height)
        object.__setattr__(image, "pixels", words)
        return image

    # ---- Доступ ----
    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def pixel_at(self, x: int, y: int) -> int:
        """ARGB в точке (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Точка ({x}, {y}) вне изображения {self.width}x{self.height}")
        return int(self.pixels[y * self.width + x])

    def to_list(self) -> List[int]:
        return self.pixels.tolist()

    def to_rgba_array(self) -> np.ndarray:
        """Массив (H, W, 4) uint8, пригодный для `PIL.Image.fromarray(..., "RGBA")`."""
        return argb_to_rgba_array(self.pixels, self.width, self.height)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackedImage):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.pixels, other.pixels)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PackedImage(width={self.width}, height={self.height}, pixels=<{self.pixels.size} argb>)"


def validate_image(image: Any) -> PackedImage:
    """Проверяет инварианты изображения перед операцией.

    Ловит и экземпляры, собранные в обход конструктора.

    Raises:
        InvalidImageError: если размеры не положительны или длина буфера не совпадает.
    """
    if not isinstance(image, PackedImage):
        raise InvalidImageError(f"Ожидается PackedImage, получено {type(image).__name__}")
    _check_dims(image.width, image.height)
    pixels = image.pixels
    if not isinstance(pixels, np.ndarray) or pixels.ndim != 1:
        raise InvalidImageError(
            "Буфер пикселей должен быть одномерным массивом",
            width=image.width,
            height=image.height,
        )
    _check_count(image.width, image.height, int(pixels.size))
    return image


def _check_dims(width: Any, height: Any) -> None:
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidImageError(f"Размеры должны быть целыми: {width!r}x{height!r}")
    if width <= 0 or height <= 0:
        logger.debug("rejecting image with non-positive size %sx%s", width, height)
        raise InvalidImageError(
            f"Размеры должны быть положительными: {width}x{height}",
            width=int(width),
            height=int(height),
        )


def _check_count(width: int, height: int, count: int) -> None:
    if count != width * height:
        logger.debug("rejecting image %sx%s with %s pixels", width, height, count)
        raise InvalidImageError(
            f"Число пикселей {count} не равно {width}*{height}={width * height}",
            width=width,
            height=height,
            pixel_count=count,
        )


def _copy_pixels(pixels: Any, width: int, height: int) -> np.ndarray:
    """Глубокая копия в read-only uint32; длина проверяется до выделения памяти."""
    if getattr(pixels, "ndim", 1) != 1:
        raise InvalidImageError("Буфер пикселей должен быть одномерным", width=width, height=height)
    try:
        count = len(pixels)
    except TypeError as exc:
        raise InvalidImageError(f"Буфер пикселей не является последовательностью: {type(pixels).__name__}") from exc
    _check_count(width, height, count)

    try:
        raw = np.array(pixels)
    except (OverflowError, TypeError, ValueError) as exc:
        raise InvalidImageError("Пиксели должны быть 32-битными целыми", width=width, height=height) from exc
    # bool, float и object (слишком большие int) не принимаем
    if raw.ndim != 1 or raw.dtype.kind not in "iu":
        raise InvalidImageError(f"Недопустимый тип пикселей: {raw.dtype}", width=width, height=height)
    if int(raw.min()) < _INT32_MIN or int(raw.max()) > ARGB_MASK:
        raise InvalidImageError("Пиксели должны быть 32-битными целыми", width=width, height=height)

    words = (raw.astype(np.int64) & ARGB_MASK).astype(np.uint32)
    words.setflags(write=False)
    return words
