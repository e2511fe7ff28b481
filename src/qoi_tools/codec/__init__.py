"""
QOI codec core.

The functions here trust their arguments: channels, colorspace and buffer
sizes are checked by :py:mod:`qoi_tools.options` before they get here.

Example usage::

    from qoi_tools.codec import encode_pixels, decode_pixels
    from qoi_tools.constants import Colorspace

    data = encode_pixels(b"\\xff\\x00\\x00" * 4, 2, 2, 3, Colorspace.SRGB)
    header, pixels = decode_pixels(data, 4)
"""

import logging
from typing import Optional, Union

from qoi_tools.constants import END_MARKER, HEADER_SIZE, MAX_RUN, Colorspace
from qoi_tools.codec.cache import ColorCache, color_hash, pack_color, unpack_color
from qoi_tools.codec.decoder import PixelDecoder
from qoi_tools.codec.encoder import PixelEncoder, RunState, max_encoded_size
from qoi_tools.exceptions import FormatError
from qoi_tools.header import FileHeader

logger = logging.getLogger(__name__)

__all__ = [
    "ColorCache",
    "PixelDecoder",
    "PixelEncoder",
    "RunState",
    "color_hash",
    "decode_pixels",
    "encode_pixels",
    "max_encoded_size",
    "pack_color",
    "unpack_color",
]


def encode_pixels(
    pixels: Union[bytes, bytearray, memoryview],
    width: int,
    height: int,
    channels: int,
    colorspace: Colorspace,
) -> bytes:
    """
    Encode a raw interleaved pixel buffer into a QOI file.

    :param pixels: ``width * height * channels`` bytes in row-major order.
    :param width: image width.
    :param height: image height.
    :param channels: 3 for RGB or 4 for RGBA pixels.
    :param colorspace: colorspace tag for the header.
    :return: `bytes` of the header, the opcode stream and the end marker.
    """
    header = FileHeader(
        width=width, height=height, channels=channels, colorspace=colorspace
    )
    logger.debug("Encoding %r", header)
    encoder = PixelEncoder(header.tobytes(), header.pixel_count, channels)
    return encoder.encode(pixels)


def decode_pixels(
    data: Union[bytes, bytearray, memoryview], channels: Optional[int] = None
) -> tuple[FileHeader, bytes]:
    """
    Decode a QOI file into a raw interleaved pixel buffer.

    :param data: encoded file content.
    :param channels: number of channels to produce. `None` uses the header.
    :return: a tuple of the parsed :py:class:`~qoi_tools.header.FileHeader`
        and ``width * height * channels`` bytes of pixels.
    """
    header = FileHeader.frombytes(bytes(data[:HEADER_SIZE]))
    if channels is None:
        channels = header.channels
    logger.debug("Decoding %r to %d channels", header, channels)

    # Each opcode yields at most MAX_RUN pixels.
    payload = len(data) - HEADER_SIZE
    required = -(-header.pixel_count // MAX_RUN)
    if payload < required:
        logger.debug(
            "Need at least %d bytes of pixel data, got %d", required, payload
        )
        raise FormatError(
            "Data is too short for a %dx%d image: %d bytes"
            % (header.width, header.height, len(data))
        )

    decoder = PixelDecoder(data, HEADER_SIZE, header.pixel_count, channels)
    pixels = decoder.decode()
    if bytes(data[decoder.offset : decoder.offset + len(END_MARKER)]) != END_MARKER:
        logger.debug("End marker not found at offset %d", decoder.offset)
    return header, pixels
