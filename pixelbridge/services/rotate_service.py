"""Повороты на 90° и 180° перестановкой индексов.

Значения пикселей копируются без изменений: ни интерполяции, ни смешивания.
Направление «по часовой» задано в экранных координатах (y растёт вниз).
"""
from __future__ import annotations

import logging

import numpy as np

from pixelbridge.models.image_model import PackedImage, validate_image

logger = logging.getLogger(__name__)


class RotateService:
    def rotate90(self, src: PackedImage, clockwise: bool) -> PackedImage:
        """Поворот на 90°; ширина и высота меняются местами.

        Для 0 <= i < W и 0 <= j < H (W, H — размеры источника):
        - по часовой:    dst[i*H + j] = src[(H-1-j)*W + i]
        - против часовой: dst[i*H + j] = src[j*W + (W-1-i)]
        """
        validate_image(src)
        w, h = src.width, src.height
        logger.debug("rotating %sx%s by 90 (%s)", w, h, "cw" if clockwise else "ccw")
        # np.rot90 даёт представление без копии; flatten копирует ровно один раз
        grid = src.pixels.reshape(h, w)
        rotated = np.rot90(grid, k=-1 if clockwise else 1)
        return PackedImage.adopt(h, w, rotated.flatten())

    def rotate180(self, src: PackedImage) -> PackedImage:
        """Поворот на 180°: плоский буфер в обратном порядке, размеры прежние."""
        validate_image(src)
        logger.debug("rotating %sx%s by 180", src.width, src.height)
        return PackedImage.adopt(src.width, src.height, src.pixels[::-1].copy())

    def rotate_quarter_turns(self, src: PackedImage, turns: int) -> PackedImage:
        """Поворот на `turns` * 90°; положительные значения — по часовой.

        Raises:
            TypeError: если `turns` не целое число.
        """
        if isinstance(turns, bool) or not isinstance(turns, (int, np.integer)):
            raise TypeError(f"turns должен быть целым, получено {type(turns).__name__}")
        validate_image(src)
        k = int(turns) % 4
        if k == 0:
            return PackedImage.adopt(src.width, src.height, src.pixels.copy())
        if k == 2:
            return self.rotate180(src)
        return self.rotate90(src, clockwise=(k == 1))
