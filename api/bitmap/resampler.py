"""
Scaling of decoded images to the canonical firework grid.
"""

from typing import Tuple

import numpy as np
from PIL import Image

from bitmap.policy import CANONICAL_SIZE


def resample(image: Image.Image, size: Tuple[int, int] = CANONICAL_SIZE) -> np.ndarray:
    """
    Stretch an RGBA image to exactly `size` with bilinear filtering.

    The aspect ratio is not preserved: non-square sources fill the whole
    target. The source is composited over a transparent canvas first, so
    colour channels are alpha-premultiplied and transparent areas read dark.

    Args:
        image: RGBA image of any size >= 1x1
        size: Target size as (width, height)

    Returns:
        uint8 array of shape (height, width, 4), indexed [y, x, channel]
    """
    # RGBa is Pillow's premultiplied mode; only the small output reaches NumPy
    premultiplied = image.convert("RGBA").convert("RGBa")
    resized = premultiplied.resize(size, Image.Resampling.BILINEAR)

    width, height = resized.size
    return np.frombuffer(resized.tobytes(), dtype=np.uint8).reshape(height, width, 4).copy()
