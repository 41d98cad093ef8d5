"""Свободные функции поверх общего `PixelBufferTransform`.

Пример:
    from pixelbridge.transform import convert_to_packed, rotate90, convert_from_packed

    packed = convert_to_packed(pil_image)
    rotated = convert_from_packed(rotate90(packed, clockwise=True))
"""
from __future__ import annotations

from typing import Optional, Union

from PIL import Image

from pixelbridge.controllers.transform_controller import PixelBufferTransform
from pixelbridge.errors import InvalidImageError
from pixelbridge.models.handle import PilImageHandle, PixelHandle
from pixelbridge.models.image_model import PackedImage
from pixelbridge.services.convert_service import HandleFactory, ImageSource

__all__ = [
    "InvalidImageError",
    "PackedImage",
    "PilImageHandle",
    "PixelHandle",
    "convert_from_packed",
    "convert_to_packed",
    "rotate180",
    "rotate90",
    "rotate_quarter_turns",
]

_default: Optional[PixelBufferTransform] = None


def _transform() -> PixelBufferTransform:
    # настройки по умолчанию; окружение свободные функции не читают
    global _default
    if _default is None:
        _default = PixelBufferTransform()
    return _default


def convert_to_packed(src: ImageSource) -> PackedImage:
    return _transform().convert_to_packed(src)


def convert_from_packed(
    src: PackedImage, handle_factory: Optional[HandleFactory] = None
) -> Union[Image.Image, PixelHandle]:
    return _transform().convert_from_packed(src, handle_factory)


def rotate90(src: PackedImage, clockwise: bool) -> PackedImage:
    return _transform().rotate90(src, clockwise)


def rotate180(src: PackedImage) -> PackedImage:
    return _transform().rotate180(src)


def rotate_quarter_turns(src: PackedImage, turns: int) -> PackedImage:
    return _transform().rotate_quarter_turns(src, turns)
