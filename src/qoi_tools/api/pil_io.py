"""
PIL IO module.
"""

import logging
from typing import TYPE_CHECKING, Any

from PIL import Image

if TYPE_CHECKING:
    from qoi_tools.api.qoi_image import QOIImage

logger = logging.getLogger(__name__)

#: Modes that carry transparency and are converted to ``RGBA``.
ALPHA_MODES = ("RGBA", "RGBa", "LA", "La", "PA")


def get_pil_mode(channels: int) -> str:
    """Get PIL mode from the number of channels."""
    return {3: "RGB", 4: "RGBA"}[channels]


def has_transparency(image: Image.Image) -> bool:
    if image.mode in ALPHA_MODES:
        return True
    return image.mode == "P" and "transparency" in image.info


def convert_pil_to_rgb(image: Image.Image) -> Image.Image:
    """Convert any PIL image to ``RGB`` or ``RGBA``."""
    if image.mode in ("RGB", "RGBA"):
        return image
    mode = "RGBA" if has_transparency(image) else "RGB"
    logger.debug("Converting PIL image from %s to %s", image.mode, mode)
    return image.convert(mode)


def convert_qoi_to_pil(qoi: "QOIImage") -> Image.Image:
    """Convert QOIImage to PIL Image."""
    return Image.frombytes(qoi.pil_mode, qoi.size, qoi.data)


def convert_pil_to_qoi(image: Image.Image, **kwargs: Any) -> "QOIImage":
    """Convert PIL Image to QOIImage."""
    from qoi_tools.api.qoi_image import QOIImage

    image = convert_pil_to_rgb(image)
    return QOIImage(
        width=image.width,
        height=image.height,
        channels=len(image.mode),
        data=image.tobytes(),
        **kwargs,
    )
