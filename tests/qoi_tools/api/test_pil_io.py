import logging

import pytest
from PIL import Image

from qoi_tools.api import pil_io
from qoi_tools.api.qoi_image import QOIImage
from qoi_tools.constants import Colorspace

logger = logging.getLogger(__name__)


@pytest.mark.parametrize("channels, expected", [(3, "RGB"), (4, "RGBA")])
def test_get_pil_mode(channels, expected) -> None:
    assert pil_io.get_pil_mode(channels) == expected


@pytest.mark.parametrize(
    "mode, channels",
    [
        ("1", 3),
        ("L", 3),
        ("LA", 4),
        ("P", 3),
        ("RGB", 3),
        ("RGBA", 4),
        ("CMYK", 3),
    ],
)
def test_frompil(mode, channels) -> None:
    image = Image.new(mode, (4, 3))
    qoi = QOIImage.frompil(image)
    assert qoi.size == (4, 3)
    assert qoi.channels == channels
    assert qoi.colorspace is Colorspace.SRGB
    assert QOIImage.frombytes(qoi.tobytes()) == qoi


def test_frompil_palette_transparency() -> None:
    image = Image.new("P", (2, 2))
    image.putpalette([255, 0, 0, 0, 255, 0])
    image.info["transparency"] = 0
    assert pil_io.has_transparency(image)
    qoi = QOIImage.frompil(image, colorspace="linear")
    assert qoi.channels == 4
    assert qoi.colorspace is Colorspace.LINEAR
    assert qoi.data == b"\xff\x00\x00\x00" * 4


def test_pil_round_trip() -> None:
    image = Image.new("RGBA", (3, 2), (10, 20, 30, 40))
    image.putpixel((1, 1), (200, 0, 0, 255))
    qoi = QOIImage.frombytes(QOIImage.frompil(image).tobytes())
    assert qoi.topil().tobytes() == image.tobytes()
