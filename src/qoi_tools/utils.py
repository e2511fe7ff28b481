"""
Binary helpers shared by the header codec and the image API.
"""

import logging
import struct
from typing import Any, BinaryIO, Union

from qoi_tools.exceptions import FormatError, ValidationError

logger = logging.getLogger(__name__)


def read_fmt(fmt: str, fp: BinaryIO) -> tuple[Any, ...]:
    """
    Reads data from ``fp`` according to ``fmt``.
    """
    fmt = str(">" + fmt)
    fmt_size = struct.calcsize(fmt)
    data = fp.read(fmt_size)
    if len(data) != fmt_size:
        raise FormatError(
            "Unexpected end of data: needed %d bytes, got %d" % (fmt_size, len(data))
        )
    return struct.unpack(fmt, data)


def write_fmt(fp: BinaryIO, fmt: str, *args: Any) -> int:
    """
    Writes data to ``fp`` according to ``fmt``.
    """
    fmt = str(">" + fmt)
    fmt_size = struct.calcsize(fmt)
    written = fp.write(struct.pack(fmt, *args))
    assert written == fmt_size, (written, fmt_size)
    return written


def as_bytes(data: Any) -> Union[bytes, bytearray, memoryview]:
    """
    Get a flat byte view of any object supporting the buffer protocol.
    """
    if isinstance(data, (bytes, bytearray)):
        return data
    try:
        view = memoryview(data)
    except TypeError:
        raise ValidationError(
            "Expected a bytes-like object, got %s" % type(data).__name__
        ) from None
    if view.nbytes == 0:
        return b""
    if not view.c_contiguous:
        raise ValidationError("Pixel buffer must be C-contiguous")
    return view.cast("B")


def trimmed_repr(data: Any, trim_length: int = 30) -> str:
    if isinstance(data, bytes):
        if len(data) > trim_length:
            return repr(
                data[:trim_length] + b" ... =" + str(len(data)).encode("ascii")
            )
    return repr(data)
