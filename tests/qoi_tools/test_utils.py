import array
import io

import numpy as np
import pytest

from qoi_tools.exceptions import FormatError, ValidationError
from qoi_tools.utils import as_bytes, read_fmt, trimmed_repr, write_fmt


def test_read_write_fmt() -> None:
    with io.BytesIO() as f:
        assert write_fmt(f, "IB", 0x716F6966, 3) == 5
        assert f.getvalue() == b"qoif\x03"
        f.seek(0)
        assert read_fmt("IB", f) == (0x716F6966, 3)


def test_read_fmt_short() -> None:
    with pytest.raises(FormatError):
        read_fmt("I", io.BytesIO(b"qo"))


@pytest.mark.parametrize(
    "data",
    [
        b"\x01\x02\x03",
        bytearray(b"\x01\x02\x03"),
        memoryview(b"\x01\x02\x03"),
        array.array("B", [1, 2, 3]),
        np.array([[[1, 2, 3]]], dtype=np.uint8),
    ],
)
def test_as_bytes(data: object) -> None:
    assert bytes(as_bytes(data)) == b"\x01\x02\x03"


def test_as_bytes_empty() -> None:
    assert len(as_bytes(np.zeros((0, 0, 3), dtype=np.uint8))) == 0


@pytest.mark.parametrize("data", [None, 123, "abc", [1, 2, 3]])
def test_as_bytes_invalid(data: object) -> None:
    with pytest.raises(ValidationError):
        as_bytes(data)


def test_as_bytes_noncontiguous() -> None:
    data = np.zeros((4, 4, 3), dtype=np.uint8)[:, ::2]
    with pytest.raises(ValidationError):
        as_bytes(data)


def test_trimmed_repr() -> None:
    assert trimmed_repr(b"\x00" * 40).endswith(" ... =40'")
    assert trimmed_repr(b"abc") == repr(b"abc")
