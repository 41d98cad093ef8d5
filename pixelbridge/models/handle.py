"""Внешнее представление изображения: протокол дескриптора и адаптер Pillow.

Принципы:
- ISP: `PixelHandle` узкий — размеры и чтение/запись одного пикселя.
- DIP: ядро зависит от протокола, а не от конкретной библиотеки изображений.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from PIL import Image

from pixelbridge.models.argb import pack_argb, unpack_argb


@runtime_checkable
class PixelHandle(Protocol):
    """Изображение, которым владеет внешний код.

    Координаты экранные: (0, 0) — левый верхний угол, y растёт вниз.
    """
    width: int
    height: int

    def get_argb(self, x: int, y: int) -> int: ...

    def set_argb(self, x: int, y: int, value: int) -> None: ...


class PilImageHandle:
    """`PixelHandle` поверх `PIL.Image.Image` в режиме RGBA."""

    def __init__(self, image: Image.Image) -> None:
        # convert() возвращает копию, исходное изображение вызывающего не трогаем
        self._image = image if image.mode == "RGBA" else image.convert("RGBA")

    @classmethod
    def new(cls, width: int, height: int) -> "PilImageHandle":
        """Новый прозрачный чёрный холст."""
        return cls(Image.new("RGBA", (width, height), (0, 0, 0, 0)))

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def get_argb(self, x: int, y: int) -> int:
        r, g, b, a = self._image.getpixel((x, y))
        return pack_argb(a, r, g, b)

    def set_argb(self, x: int, y: int, value: int) -> None:
        a, r, g, b = unpack_argb(value)
        self._image.putpixel((x, y), (r, g, b, a))
