class PixelBufError(Exception):
    """Base class for pixel buffer errors"""


class InvalidDimensions(PixelBufError, ValueError):
    """Buffer size or scale factor is not a positive integer"""

    def __init__(self, width, height, scale=None):
        self.width = width
        self.height = height
        self.scale = scale
        if scale is None:
            message = f"Buffer size must be positive, got {width}x{height}"
        else:
            message = f"Scale must be a positive integer, got {scale!r} for {width}x{height}"
        super().__init__(message)


class OutOfBounds(PixelBufError, IndexError):
    """Pixel coordinate lies outside the buffer"""

    def __init__(self, x: int, y: int, size: tuple[int, int]):
        self.x = x
        self.y = y
        self.size = size
        super().__init__(f"Pixel {(x, y)} out of bounds {size}")
