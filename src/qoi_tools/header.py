"""
File header structure.
"""

import io
import logging
from typing import Any, BinaryIO, TypeVar

from attrs import astuple, define, field

from qoi_tools.constants import MAGIC, MAX_DIMENSION, Colorspace
from qoi_tools.exceptions import FormatError, ValidationError
from qoi_tools.utils import read_fmt, write_fmt
from qoi_tools.validators import in_, range_

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="FileHeader")


def _to_colorspace(value: Any) -> Any:
    try:
        return Colorspace.parse(value)
    except ValueError:
        # Left as is for the validator to report.
        return value


@define(repr=True)
class FileHeader:
    """
    Header section of the QOI file.

    Example::

        from qoi_tools.header import FileHeader
        from qoi_tools.constants import Colorspace

        header = FileHeader(width=400, height=359, channels=3,
                            colorspace=Colorspace.LINEAR)

    .. py:attribute:: signature

        Signature: always equal to ``0x716F6966``, i.e., ``b'qoif'``.

    .. py:attribute:: width

        The width of the image in pixels.

    .. py:attribute:: height

        The height of the image in pixels.

    .. py:attribute:: channels

        The number of channels of the encoded pixels, 3 or 4.

    .. py:attribute:: colorspace

        The colorspace tag. See :py:class:`~qoi_tools.constants.Colorspace`
    """

    _FORMAT = "IIIBB"

    signature: int = field(default=MAGIC, repr=False)
    width: int = field(default=0, validator=range_(0, MAX_DIMENSION))
    height: int = field(default=0, validator=range_(0, MAX_DIMENSION))
    channels: int = field(default=4, validator=in_((3, 4)))
    colorspace: Colorspace = field(
        default=Colorspace.SRGB,
        converter=_to_colorspace,
        validator=in_(list(Colorspace)),
    )

    @signature.validator
    def _validate_signature(self, attribute: Any, value: int) -> None:
        if value != MAGIC:
            raise FormatError("This is not a QOI file")

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @classmethod
    def read(cls: type[T], fp: BinaryIO, **kwargs: Any) -> T:
        values = read_fmt(cls._FORMAT, fp)
        try:
            return cls(*values)
        except ValidationError as e:
            logger.debug("Invalid header %r: %s", values, e)
            raise FormatError("Invalid QOI header: %s" % e) from e

    def write(self, fp: BinaryIO, **kwargs: Any) -> int:
        return write_fmt(fp, self._FORMAT, *astuple(self))

    @classmethod
    def frombytes(cls: type[T], data: bytes, **kwargs: Any) -> T:
        with io.BytesIO(data) as f:
            return cls.read(f, **kwargs)

    def tobytes(self) -> bytes:
        with io.BytesIO() as f:
            self.write(f)
            return f.getvalue()
