"""
Fixed conversion policy for stored fireworks.

Stored pixel data length is derived from these values, so every record in
the database depends on them. They are deliberately not configurable.
"""

CANONICAL_WIDTH = 54
CANONICAL_HEIGHT = 54
CANONICAL_SIZE = (CANONICAL_WIDTH, CANONICAL_HEIGHT)

# Gray values strictly above this are light (True)
THRESHOLD = 128

SUPPORTED_FORMATS = ("JPEG", "PNG")

PIXEL_COUNT = CANONICAL_WIDTH * CANONICAL_HEIGHT
