import numpy as np
import pytest

from pixelbridge.config import Settings
from pixelbridge.controllers.transform_controller import PixelBufferTransform
from pixelbridge.models.image_model import PackedImage


@pytest.fixture
def transform():
    # settings passed explicitly so a stray .env cannot change behaviour
    return PixelBufferTransform(settings=Settings())


@pytest.fixture
def rng():
    return np.random.default_rng(1209)


@pytest.fixture(params=[(1, 1), (2, 1), (1, 3), (3, 2), (4, 4), (7, 5)])
def random_image(request, rng):
    width, height = request.param
    pixels = rng.integers(0, 1 << 32, size=width * height, dtype=np.uint64)
    return PackedImage.from_pixels(width, height, pixels)
