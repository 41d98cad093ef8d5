"""Упаковка и распаковка 32-битных ARGB-слов.

Формат: A в старшем байте, затем R, G, B (`A<<24 | R<<16 | G<<8 | B`).
Отрицательные значения трактуются как знаковые 32-битные слова и маскируются.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np

ARGB_MASK = 0xFFFFFFFF
_INT32_MIN = -(1 << 31)


def pack_argb(a: int, r: int, g: int, b: int) -> int:
    """Собирает ARGB-слово из четырёх каналов 0..255."""
    for name, value in (("a", a), ("r", r), ("g", g), ("b", b)):
        if not 0 <= value <= 255:
            raise ValueError(f"Канал {name} вне диапазона 0..255: {value}")
    return (a << 24) | (r << 16) | (g << 8) | b


def unpack_argb(value: int) -> Tuple[int, int, int, int]:
    """Раскладывает ARGB-слово на (a, r, g, b)."""
    word = normalize_argb(value)
    return (word >> 24) & 0xFF, (word >> 16) & 0xFF, (word >> 8) & 0xFF, word & 0xFF


def normalize_argb(value: int) -> int:
    """Приводит знаковое или беззнаковое 32-битное слово к диапазону 0..0xFFFFFFFF."""
    if not _INT32_MIN <= value <= ARGB_MASK:
        raise ValueError(f"Значение не помещается в 32 бита: {value}")
    return value & ARGB_MASK


def rgba_array_to_argb(arr: np.ndarray) -> np.ndarray:
    """(H, W, 4) uint8 в порядке R,G,B,A -> плоский uint32 массив длины H*W."""
    if arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError(f"Ожидается массив (H, W, 4), получено {arr.shape}")
    a8 = arr.astype(np.uint32, copy=False)
    words = (a8[..., 3] << 24) | (a8[..., 0] << 16) | (a8[..., 1] << 8) | a8[..., 2]
    return words.reshape(-1).astype(np.uint32)


def argb_to_rgba_array(words: np.ndarray, width: int, height: int) -> np.ndarray:
    """Плоский uint32 массив ARGB -> (H, W, 4) uint8 в порядке R,G,B,A."""
    w = np.asarray(words, dtype=np.uint32).reshape(height, width)
    out = np.empty((height, width, 4), dtype=np.uint8)
    out[..., 0] = (w >> 16) & 0xFF
    out[..., 1] = (w >> 8) & 0xFF
    out[..., 2] = w & 0xFF
    out[..., 3] = (w >> 24) & 0xFF
    return out
