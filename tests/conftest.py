import numpy as np
import pytest

from glyphart.model import PixelBuffer


@pytest.fixture
def white_buffer():
    return PixelBuffer.solid(10, 10, (255, 255, 255))


@pytest.fixture
def split_buffer():
    """4x4 image, black on the left half and white on the right."""
    pixels = np.zeros((4, 4, 3), dtype=np.uint8)
    pixels[:, 2:] = 255
    return PixelBuffer(pixels)


@pytest.fixture
def noise_buffer():
    rng = np.random.default_rng(42)
    return PixelBuffer(rng.integers(0, 256, size=(30, 40, 3), dtype=np.uint8))
