"""
Reduction of a canonical grid to one boolean per pixel.
"""

import numpy as np

from bitmap.policy import THRESHOLD


def binarize(grid: np.ndarray, threshold: int = THRESHOLD) -> np.ndarray:
    """
    Threshold the unweighted RGB mean of each pixel.

    Channels are widened to 16 bits (c * 257), summed, divided by three and
    shifted back to 8 bits. Alpha is ignored. This has to stay bit-exact
    with pixel data already in the database, so no perceptual weighting.

    Args:
        grid: uint8 array of shape (height, width, channels), channels >= 3
        threshold: Gray values strictly above it are light

    Returns:
        Flat bool array, row-major (y outer, x inner); True means light
    """
    if grid.ndim != 3 or grid.shape[2] < 3:
        raise ValueError(f"Expected (height, width, channels>=3) grid, got shape {grid.shape}")

    wide = grid[..., :3].astype(np.uint32) * 257
    gray = (wide.sum(axis=2) // 3) >> 8

    return (gray > threshold).reshape(-1)
