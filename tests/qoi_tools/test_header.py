from typing import Iterator

import pytest

from qoi_tools.constants import Colorspace
from qoi_tools.exceptions import FormatError, ValidationError
from qoi_tools.header import FileHeader


@pytest.fixture
def fixture() -> Iterator[bytes]:
    yield b"qoif\x00\x00\x01\x90\x00\x00\x01\x67\x03\x01"


def test_header_from_to(fixture: bytes) -> None:
    header = FileHeader.frombytes(fixture)
    assert header.width == 400
    assert header.height == 359
    assert header.channels == 3
    assert header.colorspace == Colorspace.LINEAR
    assert header.pixel_count == 400 * 359
    assert header.tobytes() == fixture


def test_header_new() -> None:
    header = FileHeader(width=1, height=2, channels=4, colorspace="srgb")
    assert header.colorspace is Colorspace.SRGB
    assert header.tobytes() == b"qoif\x00\x00\x00\x01\x00\x00\x00\x02\x04\x00"


def test_header_exception(fixture: bytes) -> None:
    with pytest.raises(ValueError):
        FileHeader.frombytes(b" " + fixture)


@pytest.mark.parametrize(
    "data",
    [
        b"qoix\x00\x00\x01\x90\x00\x00\x01\x67\x03\x01",
        b"qoif\x00\x00\x01\x90\x00\x00\x01\x67\x05\x01",
        b"qoif\x00\x00\x01\x90\x00\x00\x01\x67\x03\x02",
        b"qoif\x00\x00\x01\x90",
        b"",
    ],
)
def test_header_malformed(data: bytes) -> None:
    with pytest.raises(FormatError):
        FileHeader.frombytes(data)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(channels=2),
        dict(colorspace=3),
        dict(width=-1),
        dict(height=2**32),
    ],
)
def test_header_invalid_fields(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        FileHeader(**kwargs)
