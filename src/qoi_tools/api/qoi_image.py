"""
QOI image API.
"""

import logging
import os
from typing import Any, BinaryIO, Optional, Union

import numpy as np
from attrs import define, field
from PIL import Image

from qoi_tools.api import numpy_io, pil_io
from qoi_tools.codec import decode_pixels, encode_pixels
from qoi_tools.constants import MAX_DIMENSION, Colorspace
from qoi_tools.exceptions import ValidationError
from qoi_tools.options import DecodeOptions, EncodeOptions, to_channels
from qoi_tools.utils import as_bytes, trimmed_repr
from qoi_tools.validators import in_, range_

logger = logging.getLogger(__name__)


def _to_colorspace(value: Any) -> Colorspace:
    try:
        return Colorspace.parse(value)
    except ValueError:
        raise ValidationError("Invalid colorspace: %r" % (value,)) from None



def _to_bytes(value: Any) -> bytes:
    return bytes(as_bytes(value))

@define(repr=False)
class QOIImage:
    """
    Decoded QOI image: raw interleaved pixels plus the header fields.

    Example::

        from qoi_tools import QOIImage

        qoi = QOIImage.open('example.qoi')
        image = qoi.topil()
        image.save('example.png')

        QOIImage.frompil(image).save('copy.qoi')

    .. py:attribute:: width

        Width of the image in pixels.

    .. py:attribute:: height

        Height of the image in pixels.

    .. py:attribute:: channels

        Number of interleaved channels in :py:attr:`data`, 3 or 4.

    .. py:attribute:: colorspace

        :py:class:`~qoi_tools.constants.Colorspace` of the image.

    .. py:attribute:: data

        Raw pixel bytes in row-major order.
    """

    width: int = field(validator=range_(0, MAX_DIMENSION))
    height: int = field(validator=range_(0, MAX_DIMENSION))
    channels: int = field(converter=to_channels, validator=in_((3, 4)))
    data: bytes = field(converter=_to_bytes)
    colorspace: Colorspace = field(default=Colorspace.SRGB, converter=_to_colorspace)

    @data.validator
    def _validate_data(self, attribute: Any, value: bytes) -> None:
        expected = self.width * self.height * self.channels
        if len(value) != expected:
            raise ValidationError(
                "Invalid data size: %d bytes, expected %d bytes."
                % (len(value), expected)
            )

    @classmethod
    def frombytes(
        cls, data: Union[bytes, bytearray, memoryview], channels: Optional[int] = None
    ) -> "QOIImage":
        """
        Decode a QOI file content.

        :param data: encoded bytes.
        :param channels: output channel count, 3 or 4. `None` keeps the
            channel count of the file.
        :return: A :py:class:`~qoi_tools.api.qoi_image.QOIImage` object.
        """
        options = DecodeOptions(channels=channels)
        header, pixels = decode_pixels(as_bytes(data), options.channels)
        return cls(
            width=header.width,
            height=header.height,
            channels=options.channels or header.channels,
            data=pixels,
            colorspace=header.colorspace,
        )

    def tobytes(self) -> bytes:
        """Encode the image to QOI file content."""
        options = EncodeOptions(
            width=self.width,
            height=self.height,
            channels=self.channels,
            colorspace=self.colorspace,
        )
        return encode_pixels(
            self.data, options.width, options.height, options.channels, options.colorspace
        )

    @classmethod
    def open(
        cls, fp: Union[BinaryIO, str, bytes, os.PathLike], channels: Optional[int] = None
    ) -> "QOIImage":
        """
        Open a QOI file.

        :param fp: filename or file-like object.
        :param channels: output channel count, 3 or 4.
        :return: A :py:class:`~qoi_tools.api.qoi_image.QOIImage` object.
        """
        if isinstance(fp, (str, bytes, os.PathLike)):
            with open(fp, "rb") as f:
                return cls.frombytes(f.read(), channels)
        return cls.frombytes(fp.read(), channels)

    def save(self, fp: Union[BinaryIO, str, bytes, os.PathLike], mode: str = "wb") -> None:
        """
        Save the image as a QOI file.

        :param fp: filename or file-like object.
        :param mode: file open mode, default 'wb'.
        """
        data = self.tobytes()
        if isinstance(fp, (str, bytes, os.PathLike)):
            with open(fp, mode) as f:
                f.write(data)
        else:
            fp.write(data)

    @classmethod
    def frompil(cls, image: Image.Image, colorspace: Any = "srgb") -> "QOIImage":
        """
        Create a new image from PIL Image. Images with transparency become
        4-channel ``RGBA``, others 3-channel ``RGB``.

        :param image: PIL Image object.
        :param colorspace: ``"srgb"`` or ``"linear"``.
        :return: A :py:class:`~qoi_tools.api.qoi_image.QOIImage` object.
        """
        return pil_io.convert_pil_to_qoi(image, colorspace=colorspace)

    @classmethod
    def fromarray(cls, array: Any, colorspace: Any = "srgb") -> "QOIImage":
        """
        Create a new image from a ``(height, width, 3|4)`` uint8 array.

        :param array: :py:class:`numpy.ndarray`-like object.
        :param colorspace: ``"srgb"`` or ``"linear"``.
        :return: A :py:class:`~qoi_tools.api.qoi_image.QOIImage` object.
        """
        return numpy_io.convert_array_to_qoi(array, colorspace=colorspace)

    def topil(self) -> Image.Image:
        """
        Get PIL Image.

        :return: :py:class:`PIL.Image` in ``RGB`` or ``RGBA`` mode.
        """
        return pil_io.convert_qoi_to_pil(self)

    def numpy(self) -> np.ndarray:
        """
        Get NumPy array of the image.

        :return: :py:class:`numpy.ndarray` of shape ``(height, width, channels)``.
        """
        return numpy_io.get_array(self)

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    @property
    def pil_mode(self) -> str:
        return pil_io.get_pil_mode(self.channels)

    def __repr__(self) -> str:
        return "%s(size=%dx%d channels=%d colorspace=%s data=%s)" % (
            self.__class__.__name__,
            self.width,
            self.height,
            self.channels,
            self.colorspace.name.lower(),
            trimmed_repr(self.data),
        )
