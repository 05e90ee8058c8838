"""
Bitmap conversion pipeline.

Ingest: decode -> resample -> binarize -> pack.
Retrieve: unpack.
"""

from typing import List, Optional, Union

import numpy as np

from bitmap.binarizer import binarize
from bitmap.decoder import decode_image
from bitmap.packing import pack, unpack
from bitmap.resampler import resample
from bitmap.policy import (
    CANONICAL_HEIGHT,
    CANONICAL_WIDTH,
    SUPPORTED_FORMATS,
    THRESHOLD,
)
from utils.logger import get_logger, log_execution_time

logger = get_logger(__name__)


class BitmapPipeline:
    """
    Converts uploaded images into stored firework pixel data and back.

    Stateless; one instance can serve concurrent requests.
    """

    width = CANONICAL_WIDTH
    height = CANONICAL_HEIGHT
    threshold = THRESHOLD
    formats = SUPPORTED_FORMATS

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def to_matrix(self, image_bytes: bytes) -> np.ndarray:
        """
        Decode, resample and binarize an uploaded image.

        Args:
            image_bytes: Encoded JPEG or PNG data

        Returns:
            Flat bool array of `pixel_count` values, row-major

        Raises:
            DecodeError: If the bytes cannot be decoded
        """
        image = decode_image(image_bytes, self.formats)
        logger.debug(f"Decoded {image.width}x{image.height} image")

        grid = resample(image, (self.width, self.height))
        return binarize(grid, self.threshold)

    @log_execution_time(logger)
    def ingest(self, image_bytes: bytes) -> bytes:
        """Run the full write path and return packed pixel data."""
        return pack(self.to_matrix(image_bytes))

    def retrieve(self, pixel_data: Optional[Union[bytes, memoryview]]) -> List[bool]:
        """
        Unpack stored pixel data into a fresh list of booleans.

        Records whose length is not `pixel_count` are returned as stored.
        """
        matrix = unpack(pixel_data)
        if len(matrix) != self.pixel_count:
            logger.warning(f"Stored pixel data has {len(matrix)} values, expected {self.pixel_count}")
        return matrix

