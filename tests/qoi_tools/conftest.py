import logging
from typing import Callable, Iterator

import numpy as np
import pytest

logging.basicConfig(level=logging.DEBUG)


def _make_pixels(pattern: str, width: int, height: int, channels: int) -> bytes:
    rng = np.random.default_rng(0)
    shape = (height, width, channels)
    if pattern == "solid":
        array = np.full(shape, 128, dtype=np.uint8)
    elif pattern == "gradient":
        y, x = np.mgrid[0:height, 0:width]
        array = np.stack(
            [(x * 3 + y * (c + 1)) % 256 for c in range(channels)], axis=2
        ).astype(np.uint8)
    elif pattern == "palette":
        palette = rng.integers(0, 256, size=(5, channels), dtype=np.uint8)
        array = palette[rng.integers(0, 5, size=(height, width))]
    else:
        array = rng.integers(0, 256, size=shape, dtype=np.uint8)
    return array.tobytes()


@pytest.fixture
def make_pixels() -> Iterator[Callable[[str, int, int, int], bytes]]:
    yield _make_pixels


@pytest.fixture(params=["solid", "gradient", "palette", "noise"])
def pattern(request: pytest.FixtureRequest) -> Iterator[str]:
    yield request.param


@pytest.fixture(params=[3, 4])
def channels(request: pytest.FixtureRequest) -> Iterator[int]:
    yield request.param
