"""Image-sequence encoder package for countdown artifacts."""

from .gif import GifSequenceEncoder, find_palette_index, parse_color_key
from .stream import ByteStream

__all__ = [
    "ByteStream",
    "GifSequenceEncoder",
    "find_palette_index",
    "parse_color_key",
]
