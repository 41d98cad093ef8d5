"""Контроллер преобразований буфера пикселей.

SOLID:
- SRP: класс только связывает сервисы конвертации и поворота в единый API.
- DIP: сервисы подставляются извне; по умолчанию создаются из `Settings()`.
  Окружение читается только явно: `PixelBufferTransform(settings=load_settings())`.
Clean Code:
- Методы компактны; вся логика вынесена в сервисы.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from PIL import Image

from pixelbridge.config import Settings
from pixelbridge.models.handle import PixelHandle
from pixelbridge.models.image_model import PackedImage
from pixelbridge.services.convert_service import ConvertService, HandleFactory, ImageSource
from pixelbridge.services.rotate_service import RotateService


@dataclass
class PixelBufferTransform:
    """Чистые преобразования между внешними изображениями и `PackedImage`.

    Ответственности:
    - Конвертация внешнего изображения в `PackedImage` и обратно через `ConvertService`.
    - Повороты на 90°/180° через `RotateService`.

    Состояния между вызовами нет, экземпляр можно разделять между потоками.
    """
    settings: Optional[Settings] = None
    _convert_service: Optional[ConvertService] = None
    _rotate_service: RotateService = field(default_factory=RotateService)

    def __post_init__(self) -> None:
        if self.settings is None:
            self.settings = Settings()
        if self._convert_service is None:
            self._convert_service = ConvertService(vectorized=self.settings.vectorized)

    def convert_to_packed(self, src: ImageSource) -> PackedImage:
        return self._convert_service.to_packed(src)

    def convert_from_packed(
        self, src: PackedImage, handle_factory: Optional[HandleFactory] = None
    ) -> Union[Image.Image, PixelHandle]:
        return self._convert_service.from_packed(src, handle_factory)

    def rotate90(self, src: PackedImage, clockwise: bool) -> PackedImage:
        return self._rotate_service.rotate90(src, clockwise)

    def rotate180(self, src: PackedImage) -> PackedImage:
        return self._rotate_service.rotate180(src)

    def rotate_quarter_turns(self, src: PackedImage, turns: int) -> PackedImage:
        return self._rotate_service.rotate_quarter_turns(src, turns)
