import numpy as np
import pytest

from qoi_tools.api.qoi_image import QOIImage
from qoi_tools.exceptions import ValidationError


@pytest.mark.parametrize("channels", [3, 4])
def test_fromarray(channels) -> None:
    array = np.arange(2 * 5 * channels, dtype=np.uint8).reshape((2, 5, channels))
    qoi = QOIImage.fromarray(array, colorspace=1)
    assert qoi.size == (5, 2)
    assert qoi.channels == channels
    assert qoi.colorspace.name == "LINEAR"
    np.testing.assert_array_equal(qoi.numpy(), array)


def test_fromarray_noncontiguous() -> None:
    array = np.arange(4 * 4 * 3, dtype=np.uint8).reshape((4, 4, 3))[:, ::2]
    qoi = QOIImage.fromarray(array)
    assert qoi.size == (2, 4)
    np.testing.assert_array_equal(qoi.numpy(), array)


def test_numpy_writable() -> None:
    qoi = QOIImage(width=1, height=1, channels=3, data=b"\x01\x02\x03")
    array = qoi.numpy()
    array[0, 0, 0] = 9
    assert qoi.data == b"\x01\x02\x03"


@pytest.mark.parametrize(
    "array",
    [
        np.zeros((2, 2, 3), dtype=np.float32),
        np.zeros((2, 2), dtype=np.uint8),
        np.zeros((2, 2, 2), dtype=np.uint8),
        np.zeros((2, 2, 5), dtype=np.uint8),
    ],
)
def test_fromarray_invalid(array) -> None:
    with pytest.raises(ValidationError):
        QOIImage.fromarray(array)
