"""
Conversion between boolean pixel matrices and the stored byte layout.

Stored layout is one byte per pixel, 1 for light and 0 for dark. Existing
records depend on it.
"""

from typing import List, Optional, Sequence, Union

import numpy as np


def pack(matrix: Union[Sequence[bool], np.ndarray]) -> bytes:
    """
    Encode booleans as one byte each (1 or 0), preserving order.

    Args:
        matrix: Flat sequence or array of booleans

    Returns:
        Packed bytes of the same length as `matrix`
    """
    return np.asarray(matrix, dtype=bool).astype(np.uint8).tobytes()


def unpack(data: Optional[Union[bytes, bytearray, memoryview]]) -> List[bool]:
    """
    Decode stored bytes into a fresh list of booleans.

    Any non-zero byte is True. Never raises on byte values or length.
    """
    if data is None:
        return []
    return (np.frombuffer(bytes(data), dtype=np.uint8) != 0).tolist()
