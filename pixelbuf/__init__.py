from pixelbuf.errors import InvalidDimensions, OutOfBounds, PixelBufError
from pixelbuf.render.frame import PixelBuf
from pixelbuf.utils.colors import BLACK, BLUE, GREEN, RED, WHITE, Rgba, to_rgba

__all__ = [
    "PixelBuf",
    "Rgba",
    "to_rgba",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "PixelBufError",
    "InvalidDimensions",
    "OutOfBounds",
]
