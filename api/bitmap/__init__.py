"""
Bitmap conversion library for the Fireworks API.

Turns uploaded JPEG/PNG images into 54x54 one-bit pixel matrices and
converts them to and from their stored byte layout.
"""

from .policy import (
    CANONICAL_WIDTH,
    CANONICAL_HEIGHT,
    CANONICAL_SIZE,
    THRESHOLD,
    SUPPORTED_FORMATS,
    PIXEL_COUNT
)
from .decoder import decode_image
from .resampler import resample
from .binarizer import binarize
from .packing import pack, unpack
from .pipeline import BitmapPipeline

__all__ = [
    'CANONICAL_WIDTH',
    'CANONICAL_HEIGHT',
    'CANONICAL_SIZE',
    'THRESHOLD',
    'SUPPORTED_FORMATS',
    'PIXEL_COUNT',
    'decode_image',
    'resample',
    'binarize',
    'pack',
    'unpack',
    'BitmapPipeline'
]
