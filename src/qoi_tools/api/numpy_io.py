"""
NumPy IO module.
"""

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from qoi_tools.exceptions import ValidationError

if TYPE_CHECKING:
    from qoi_tools.api.qoi_image import QOIImage

logger = logging.getLogger(__name__)


def get_array(qoi: "QOIImage") -> np.ndarray:
    """Get a ``(height, width, channels)`` uint8 array of the pixels."""
    return (
        np.frombuffer(qoi.data, dtype=np.uint8)
        .reshape((qoi.height, qoi.width, qoi.channels))
        .copy()
    )


def convert_array_to_qoi(array: Any, **kwargs: Any) -> "QOIImage":
    """Convert a ``(height, width, 3|4)`` uint8 array to QOIImage."""
    from qoi_tools.api.qoi_image import QOIImage

    array = np.asarray(array)
    if array.dtype != np.uint8:
        raise ValidationError("Expected a uint8 array, got %s" % array.dtype)
    if array.ndim != 3 or array.shape[2] not in (3, 4):
        raise ValidationError(
            "Expected an array of shape (height, width, 3|4), got %r"
            % (array.shape,)
        )
    height, width, channels = array.shape
    return QOIImage(
        width=width,
        height=height,
        channels=channels,
        data=np.ascontiguousarray(array).tobytes(),
        **kwargs,
    )
