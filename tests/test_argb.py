import numpy as np
import pytest

from pixelbridge.models.argb import (
    argb_to_rgba_array,
    normalize_argb,
    pack_argb,
    rgba_array_to_argb,
    unpack_argb,
)


def test_pack_and_unpack():
    assert pack_argb(0xFF, 0xFF, 0, 0) == 0xFFFF0000
    assert pack_argb(0x12, 0x34, 0x56, 0x78) == 0x12345678
    assert unpack_argb(0x12345678) == (0x12, 0x34, 0x56, 0x78)


def test_unpack_signed_word():
    assert unpack_argb(-1) == (255, 255, 255, 255)
    assert unpack_argb(-0x10000) == (255, 255, 0, 0)


@pytest.mark.parametrize("channels", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 0, 300)])
def test_pack_rejects_out_of_range_channel(channels):
    with pytest.raises(ValueError):
        pack_argb(*channels)


@pytest.mark.parametrize("value", [1 << 32, -(1 << 31) - 1])
def test_normalize_rejects_wide_values(value):
    with pytest.raises(ValueError):
        normalize_argb(value)


def test_array_helpers_agree_with_scalar_helpers():
    words = np.array([0xFFFF0000, 0x12345678, 0x00000000, 0x80FFFFFF], dtype=np.uint32)

    rgba = argb_to_rgba_array(words, 2, 2)

    for k, word in enumerate(words.tolist()):
        a, r, g, b = unpack_argb(word)
        assert rgba[k // 2, k % 2].tolist() == [r, g, b, a]
    np.testing.assert_array_equal(rgba_array_to_argb(rgba), words)


def test_rgba_array_to_argb_rejects_wrong_shape():
    with pytest.raises(ValueError):
        rgba_array_to_argb(np.zeros((2, 2, 3), dtype=np.uint8))
