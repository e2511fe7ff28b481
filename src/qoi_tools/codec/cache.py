"""
Color cache shared by the encoder and the decoder.

Both sides rebuild the cache from the same pixel sequence, so it is never
transmitted. Each encode or decode call owns a fresh instance.
"""

from qoi_tools.constants import CACHE_SIZE


def pack_color(r: int, g: int, b: int, a: int) -> int:
    """Pack channel values into a 32-bit ``0xRRGGBBAA`` word."""
    return (r << 24) | (g << 16) | (b << 8) | a


def unpack_color(value: int) -> tuple[int, int, int, int]:
    """Inverse of :py:func:`pack_color`."""
    return (value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def color_hash(r: int, g: int, b: int, a: int) -> int:
    """Cache slot of the given color."""
    return (r * 3 + g * 5 + b * 7 + a * 11) % CACHE_SIZE


class ColorCache:
    """
    Table of the most recently seen packed colors, indexed by
    :py:func:`color_hash`. Collisions overwrite the slot.
    """

    __slots__ = ("_slots",)

    def __init__(self) -> None:
        self._slots = [0] * CACHE_SIZE

    def __len__(self) -> int:
        return CACHE_SIZE

    def __getitem__(self, index: int) -> int:
        return self._slots[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._slots[index] = value

    def store(self, r: int, g: int, b: int, a: int) -> int:
        """Store the color at its slot and return the slot."""
        index = color_hash(r, g, b, a)
        self._slots[index] = pack_color(r, g, b, a)
        return index

    def __repr__(self) -> str:
        used = sum(1 for value in self._slots if value)
        return "%s(used=%d)" % (self.__class__.__name__, used)
