"""
Image decoding for uploaded fireworks.

Turns raw encoded bytes into an 8-bit RGBA Pillow image.
"""

import io
import warnings
from typing import Sequence

import numpy as np
from PIL import Image, UnidentifiedImageError

from errors import DecodeError
from bitmap.policy import SUPPORTED_FORMATS


def decode_image(image_bytes: bytes, formats: Sequence[str] = SUPPORTED_FORMATS) -> Image.Image:
    """
    Decode JPEG or PNG bytes into an RGBA image.

    Args:
        image_bytes: Encoded image data
        formats: Pillow format names accepted

    Returns:
        Fully loaded image in RGBA mode

    Raises:
        DecodeError: If the data is empty, not one of the accepted formats,
            truncated, or has zero dimensions
    """
    if not image_bytes:
        raise DecodeError("Empty image data")

    try:
        with warnings.catch_warnings():
            # Pillow only warns between MAX_IMAGE_PIXELS and twice that
            warnings.simplefilter("error", Image.DecompressionBombWarning)
            image = Image.open(io.BytesIO(image_bytes), formats=list(formats))
            # Force a full decode so truncated files fail here
            image.load()
    except UnidentifiedImageError as e:
        raise DecodeError(f"Unsupported image format (expected one of {', '.join(formats)})") from e
    except (Image.DecompressionBombError, Image.DecompressionBombWarning) as e:
        raise DecodeError(f"Image too large: {e}") from e
    except (OSError, SyntaxError, ValueError, EOFError) as e:
        raise DecodeError(f"Failed to decode image: {e}") from e

    if image.width == 0 or image.height == 0:
        raise DecodeError("Image has zero dimensions")

    return _to_rgba(image)


def _to_rgba(image: Image.Image) -> Image.Image:
    """Normalize any decoded mode to 8-bit RGBA."""
    if image.mode == "RGBA":
        return image

    # 16-bit grayscale PNGs come in as I;16 or I; keep the high byte
    if image.mode.startswith("I"):
        samples = np.asarray(image).astype(np.uint32) >> 8
        image = Image.fromarray(np.clip(samples, 0, 255).astype(np.uint8), mode="L")

    # CMYK / YCbCr JPEGs have no direct RGBA conversion
    if image.mode in ("CMYK", "YCbCr", "LAB", "HSV"):
        image = image.convert("RGB")

    return image.convert("RGBA")
