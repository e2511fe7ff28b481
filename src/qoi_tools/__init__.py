"""
qoi-tools: Python package for encoding and decoding QOI images.

QOI, the "Quite OK Image" format, is a lossless codec for 8-bit RGB and RGBA
pixel buffers. Pixels are encoded in a single pass with runs, a 64-slot color
cache and small deltas to the previous pixel.

Basic usage::

    import qoi_tools

    # Encode raw pixels
    data = qoi_tools.encode(pixels, width=640, height=480, channels=3)

    # Decode back
    image = qoi_tools.decode(data)
    assert image.data == pixels

    # Convert to PIL
    image.topil().save('output.png')

Architecture:

- :py:mod:`qoi_tools.header`: QOI file header structure
- :py:mod:`qoi_tools.codec`: pixel encoder and decoder
- :py:mod:`qoi_tools.api`: :py:class:`QOIImage` and Pillow/NumPy interop
"""

import logging
from typing import Any, Optional

from qoi_tools.api.qoi_image import QOIImage
from qoi_tools.codec import encode_pixels
from qoi_tools.constants import Colorspace
from qoi_tools.exceptions import FormatError, QOIError, ValidationError
from qoi_tools.options import EncodeOptions
from qoi_tools.utils import as_bytes
from qoi_tools.version import __version__

logger = logging.getLogger(__name__)

__all__ = [
    "Colorspace",
    "FormatError",
    "QOIError",
    "QOIImage",
    "ValidationError",
    "__version__",
    "decode",
    "encode",
]


def encode(
    data: Any,
    width: int,
    height: int,
    channels: int = 4,
    colorspace: Any = "srgb",
) -> bytes:
    """
    Encode raw pixels to QOI.

    :param data: ``width * height * channels`` bytes of interleaved pixels,
        any object supporting the buffer protocol.
    :param width: image width.
    :param height: image height.
    :param channels: 3 for RGB or 4 for RGBA, default 4.
    :param colorspace: ``"srgb"`` or ``"linear"``, default ``"srgb"``.
    :return: encoded `bytes`.
    :raise ValidationError: on invalid options or a buffer size mismatch.
    """
    options = EncodeOptions(
        width=width, height=height, channels=channels, colorspace=colorspace
    )
    pixels = as_bytes(data)
    options.check_size(len(pixels))
    return encode_pixels(
        pixels, options.width, options.height, options.channels, options.colorspace
    )


def decode(data: Any, channels: Optional[int] = None) -> QOIImage:
    """
    Decode QOI data.

    :param data: encoded bytes.
    :param channels: output channel count, 3 or 4. `None` keeps the channel
        count of the file.
    :return: :py:class:`~qoi_tools.api.qoi_image.QOIImage`.
    :raise FormatError: on malformed or truncated data.
    """
    return QOIImage.frombytes(data, channels)
