"""
Pixel decoder.

Mirror of :py:mod:`qoi_tools.codec.encoder`. Before each opcode is read, the
previously decoded pixel is stored into the color cache. This is the
encoder's insert-on-miss step delayed by one pixel, and it reproduces the
encoder's cache exactly, collisions included.
"""

import logging
from typing import Union

from qoi_tools.constants import PAYLOAD_MASK, TAG_MASK, OpCode
from qoi_tools.codec.cache import ColorCache, unpack_color
from qoi_tools.exceptions import FormatError

logger = logging.getLogger(__name__)


class PixelDecoder:
    """
    Decoder state for a single image.

    :param data: the whole encoded file.
    :param offset: position of the first opcode, right after the header.
    :param pixel_count: number of pixels declared in the header.
    :param channels: number of channels to produce, 3 or 4.
    """

    def __init__(
        self,
        data: Union[bytes, bytearray, memoryview],
        offset: int,
        pixel_count: int,
        channels: int,
    ) -> None:
        self.data = data
        self.offset = offset
        self.pixel_count = pixel_count
        self.channels = channels
        self.cache = ColorCache()

    def _fail(self, message: str) -> FormatError:
        logger.debug("Decoding failed at offset %d: %s", self.offset, message)
        return FormatError("%s at offset %d" % (message, self.offset))

    def read(self, size: int) -> Union[bytes, bytearray, memoryview]:
        end = self.offset + size
        if end > len(self.data):
            raise self._fail(
                "Unexpected end of data: needed %d bytes, %d available"
                % (size, len(self.data) - self.offset)
            )
        value = self.data[self.offset : end]
        self.offset = end
        return value

    def read_byte(self) -> int:
        if self.offset >= len(self.data):
            raise self._fail("Unexpected end of data")
        value = self.data[self.offset]
        self.offset += 1
        return value

    def decode(self) -> bytes:
        """
        Decode the opcode stream into a raw pixel buffer.
        """
        channels = self.channels
        cache = self.cache
        size = self.pixel_count * channels
        output = bytearray(size)
        position = 0
        r, g, b, a = 0, 0, 0, 255

        while position < size:
            cache.store(r, g, b, a)
            opcode = self.read_byte()
            count = 1

            if opcode == OpCode.RGB:
                r, g, b = self.read(3)
            elif opcode == OpCode.RGBA:
                r, g, b, a = self.read(4)
            else:
                tag = opcode & TAG_MASK
                payload = opcode & PAYLOAD_MASK
                if tag == OpCode.LUMA:
                    dg = payload - 32
                    second = self.read_byte()
                    dr = (second >> 4) - 8 + dg
                    db = (second & 0x0F) - 8 + dg
                    r = (r + dr) & 0xFF
                    g = (g + dg) & 0xFF
                    b = (b + db) & 0xFF
                elif tag == OpCode.INDEX:
                    r, g, b, a = unpack_color(cache[payload])
                elif tag == OpCode.DIFF:
                    r = (r + (payload >> 4) - 2) & 0xFF
                    g = (g + ((payload >> 2) & 0x03) - 2) & 0xFF
                    b = (b + (payload & 0x03) - 2) & 0xFF
                elif tag == OpCode.RUN:
                    count = payload + 1
                else:
                    raise self._fail("Unknown opcode 0x%02x" % opcode)

            pixel = bytes((r, g, b, a)) if channels == 4 else bytes((r, g, b))
            end = min(position + channels * count, size)
            output[position:end] = (pixel * count)[: end - position]
            position = end

        logger.debug(
            "Decoded %d pixels from %d bytes", self.pixel_count, self.offset
        )
        return bytes(output)
