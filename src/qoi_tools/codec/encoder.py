"""
Pixel encoder.

Walks the pixel buffer once in row-major order and emits, for each pixel or
run of identical pixels, the shortest opcode that reproduces it:

- a pending run is extended while pixels repeat, and flushed as ``RUN`` when
  it reaches 62 pixels, when a different pixel arrives, or at the end;
- ``INDEX`` when the color cache already holds the pixel;
- ``DIFF`` or ``LUMA`` when alpha is unchanged and the deltas to the previous
  pixel are small enough;
- ``RGB`` when alpha is unchanged, ``RGBA`` otherwise.

The cache is updated on a miss only, before the opcode is chosen.
"""

import logging
from typing import Union

from qoi_tools.constants import END_MARKER, HEADER_SIZE, MAX_PIXEL_SIZE, MAX_RUN, OpCode
from qoi_tools.codec.cache import ColorCache, color_hash, pack_color

logger = logging.getLogger(__name__)


def _wrap(delta: int) -> int:
    """Interpret a channel difference as a signed 8-bit value."""
    return ((delta + 128) & 0xFF) - 128


def max_encoded_size(pixel_count: int) -> int:
    """Worst-case size of an encoded image with ``pixel_count`` pixels."""
    return HEADER_SIZE + pixel_count * MAX_PIXEL_SIZE + len(END_MARKER)


class RunState:
    """
    Pending run of pixels identical to the previous one.

    The state is idle when :py:attr:`length` is 0 and accumulating otherwise.
    :py:meth:`extend` reports when the run is full, and :py:meth:`flush`
    turns the run into a ``RUN`` opcode and goes back to idle.
    """

    __slots__ = ("length",)

    def __init__(self) -> None:
        self.length = 0

    def __bool__(self) -> bool:
        return self.length > 0

    def extend(self) -> bool:
        """Count one more repeated pixel. Returns `True` once the run is full."""
        self.length += 1
        return self.length == MAX_RUN

    def flush(self) -> int:
        """Return the ``RUN`` opcode for the pending run and reset."""
        assert 0 < self.length <= MAX_RUN, self.length
        opcode = OpCode.RUN | (self.length - 1)
        self.length = 0
        return opcode


class PixelEncoder:
    """
    Encoder state for a single image.

    :param header: encoded :py:class:`~qoi_tools.header.FileHeader` bytes.
    :param pixel_count: number of pixels in the image.
    :param channels: number of interleaved channels in the pixel buffer.
    """

    def __init__(self, header: bytes, pixel_count: int, channels: int) -> None:
        self.channels = channels
        self.pixel_count = pixel_count
        self.cache = ColorCache()
        self.run = RunState()
        self.buffer = bytearray(max_encoded_size(pixel_count))
        self.offset = 0
        self.write(*header)

    def write(self, *values: int) -> None:
        end = self.offset + len(values)
        self.buffer[self.offset : end] = values
        self.offset = end

    def encode(self, pixels: Union[bytes, bytearray, memoryview]) -> bytes:
        """
        Encode the pixel buffer and return the whole file, header included.
        """
        channels = self.channels
        run = self.run
        pr, pg, pb, pa = 0, 0, 0, 255
        previous = pack_color(pr, pg, pb, pa)

        for i in range(0, self.pixel_count * channels, channels):
            r, g, b = pixels[i], pixels[i + 1], pixels[i + 2]
            a = pixels[i + 3] if channels == 4 else pa
            value = pack_color(r, g, b, a)

            if value == previous:
                if run.extend():
                    self.write(run.flush())
            else:
                if run:
                    self.write(run.flush())
                self._encode_pixel(r, g, b, a, value, pr, pg, pb, pa)
                pr, pg, pb, pa, previous = r, g, b, a, value

        if run:
            self.write(run.flush())
        self.write(*END_MARKER)
        logger.debug(
            "Encoded %d pixels into %d of %d reserved bytes",
            self.pixel_count,
            self.offset,
            len(self.buffer),
        )
        return bytes(self.buffer[: self.offset])

    def _encode_pixel(
        self,
        r: int,
        g: int,
        b: int,
        a: int,
        value: int,
        pr: int,
        pg: int,
        pb: int,
        pa: int,
    ) -> None:
        index = color_hash(r, g, b, a)
        if self.cache[index] == value:
            self.write(OpCode.INDEX | index)
            return
        self.cache[index] = value

        if a != pa:
            self.write(OpCode.RGBA, r, g, b, a)
            return

        dr = _wrap(r - pr)
        dg = _wrap(g - pg)
        db = _wrap(b - pb)
        if -2 <= dr <= 1 and -2 <= dg <= 1 and -2 <= db <= 1:
            self.write(OpCode.DIFF | (dr + 2) << 4 | (dg + 2) << 2 | (db + 2))
            return

        dr_dg = _wrap(dr - dg)
        db_dg = _wrap(db - dg)
        if -32 <= dg <= 31 and -8 <= dr_dg <= 7 and -8 <= db_dg <= 7:
            self.write(OpCode.LUMA | (dg + 32), (dr_dg + 8) << 4 | (db_dg + 8))
            return

        self.write(OpCode.RGB, r, g, b)
