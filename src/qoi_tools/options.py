"""
Keyword options accepted by :py:func:`qoi_tools.encode` and
:py:func:`qoi_tools.decode`.

Caller-supplied values are converted and validated here, so that the codec
core only ever sees well-formed arguments.
"""

import logging
import numbers
from typing import Any, Optional

from attrs import define, field

from qoi_tools.constants import MAX_DIMENSION, Colorspace
from qoi_tools.exceptions import ValidationError
from qoi_tools.validators import in_, range_

logger = logging.getLogger(__name__)


def _to_int(value: Any) -> Any:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("Expected an integer, got %r" % (value,)) from None


def to_channels(value: Any) -> Any:
    """Convert a whole-number channel count to `int`. `None` is kept."""
    if value is None:
        return value
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValidationError(
        "Invalid number of channels: %r, expected 3 or 4." % (value,)
    )


def _to_colorspace(value: Any) -> Colorspace:
    try:
        return Colorspace.parse(value)
    except ValueError:
        raise ValidationError(
            'Invalid colorspace: %r, expected "srgb" or "linear".' % (value,)
        ) from None


@define
class EncodeOptions:
    """
    Options for encoding.

    .. py:attribute:: width

        Image width in pixels, ``0 <= width < 2**32``.

    .. py:attribute:: height

        Image height in pixels, ``0 <= height < 2**32``.

    .. py:attribute:: channels

        Number of interleaved channels in the pixel buffer, 3 or 4.

    .. py:attribute:: colorspace

        :py:class:`~qoi_tools.constants.Colorspace` tag written to the header.
    """

    width: int = field(converter=_to_int, validator=range_(0, MAX_DIMENSION))
    height: int = field(converter=_to_int, validator=range_(0, MAX_DIMENSION))
    channels: int = field(default=4, converter=to_channels, validator=in_((3, 4)))
    colorspace: Colorspace = field(default=Colorspace.SRGB, converter=_to_colorspace)

    @property
    def data_size(self) -> int:
        """Expected size of the pixel buffer in bytes."""
        return self.width * self.height * self.channels

    def check_size(self, size: int) -> None:
        if size != self.data_size:
            raise ValidationError(
                "Invalid data size: %d bytes, expected %d bytes."
                % (size, self.data_size)
            )


@define
class DecodeOptions:
    """
    Options for decoding.

    .. py:attribute:: channels

        Number of channels in the decoded pixel buffer, 3 or 4. `None` uses
        the channel count stored in the header.
    """

    channels: Optional[int] = field(
        default=None, converter=to_channels, validator=in_((None, 3, 4))
    )
