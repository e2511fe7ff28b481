"""
Various constants for qoi_tools
"""

from enum import IntEnum

#: File signature, ``b"qoif"`` as a big-endian 32-bit word.
MAGIC = 0x716F6966

#: Magic, width, height, channels, colorspace.
HEADER_SIZE = 14

#: Seven zero bytes followed by a single one.
END_MARKER = b"\x00\x00\x00\x00\x00\x00\x00\x01"

#: Number of slots in the color cache.
CACHE_SIZE = 64

#: Longest run a single RUN opcode can carry.
MAX_RUN = 62

#: Largest value of a width or height field.
MAX_DIMENSION = 0xFFFFFFFF

#: Largest number of bytes a single pixel may take in the opcode stream.
MAX_PIXEL_SIZE = 5


class Colorspace(IntEnum):
    """
    Colorspace tag stored in the header.

    The tag is informative only and does not change how pixels are encoded.
    """

    SRGB = 0
    LINEAR = 1

    @classmethod
    def parse(cls, value):
        """Convert a name like ``"srgb"``, a tag or a member to `Colorspace`."""
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                raise ValueError("Invalid colorspace: %r" % value) from None
        return cls(value)


class OpCode(IntEnum):
    """
    Opcode tags.

    RGB and RGBA match the whole byte, the rest only the top two bits.
    """

    INDEX = 0b00000000
    DIFF = 0b01000000
    LUMA = 0b10000000
    RUN = 0b11000000
    RGB = 0b11111110
    RGBA = 0b11111111


#: Mask for the two tag bits of INDEX, DIFF, LUMA and RUN.
TAG_MASK = 0b11000000

#: Mask for the six payload bits of INDEX, DIFF, LUMA and RUN.
PAYLOAD_MASK = 0b00111111
