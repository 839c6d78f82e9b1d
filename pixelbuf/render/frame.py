import logging
import operator
from typing import Callable, Sequence, Union

import numpy as np

from pixelbuf.errors import InvalidDimensions, OutOfBounds
from pixelbuf.utils.colors import BLACK, BLUE, GREEN, RED, Rgba, to_rgba

logger = logging.getLogger(__name__)

Color = Union[Rgba, Sequence[int]]

# (x + y) % 4 -> цвет диагональной полосы
_TEST_PATTERN = (BLACK, RED, GREEN, BLUE)


def _positive_int(value):
    """Returns value as int if it is a positive integer (numpy ints included), else None"""
    if isinstance(value, bool):
        return None
    try:
        value = operator.index(value)
    except TypeError:
        return None
    return value if value >= 1 else None


class PixelBuf:
    """
    Буфер пикселей RGBA фиксированного размера.
    Хранится как numpy массив (height, width, 4), то есть построчно: index = y * width + x.
    Внутренней синхронизации нет, при работе из нескольких потоков блокировка на вызывающей стороне.
    """

    def __init__(self, width: int, height: int):
        w, h = _positive_int(width), _positive_int(height)
        if w is None or h is None:
            raise InvalidDimensions(width, height)

        self.width = w
        self.height = h
        self._pixels = np.empty((h, w, 4), dtype=np.uint8)
        self._pixels[:, :] = BLACK.as_tuple()
        logger.debug(f"PixelBuf allocated: {w}x{h}")

    @classmethod
    def from_fn(cls, width: int, height: int, f: Callable[[int, int], Color]) -> "PixelBuf":
        """Заполняет буфер вызовом f(x, y) для каждого пикселя, строка за строкой"""
        buf = cls(width, height)
        for y in range(buf.height):
            for x in range(buf.width):
                buf._pixels[y, x] = to_rgba(f(x, y)).as_tuple()
        return buf

    @classmethod
    def test_image(cls, width: int, height: int) -> "PixelBuf":
        """Diagonal stripes with period 4: black, red, green, blue"""
        return cls.from_fn(width, height, lambda x, y: _TEST_PATTERN[(x + y) % 4])

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        # отрицательные индексы numpy считает с конца, поэтому проверяем сами
        if not self.is_in_bounds(x, y):
            raise OutOfBounds(x, y, self.get_size())

    def get_pixel(self, x: int, y: int) -> Rgba:
        self._check_bounds(x, y)
        return Rgba.from_bytes(self._pixels[y, x])

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Устанавливает цвет пикселя в координатах (x, y)"""
        self._check_bounds(x, y)
        self._pixels[y, x] = to_rgba(color).as_tuple()

    def get_size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def get_scaled_size(self, scale: Union[int, float]) -> tuple:
        """
        Size after magnification by scale.
        Fractional scales are only reported here: get_scaled_buf accepts integers only.
        """
        return (self.width * scale, self.height * scale)

    def clear(self, color: Color) -> None:
        self._pixels[:, :] = to_rgba(color).as_tuple()

    def get_buf(self) -> bytes:
        """Возвращает байты кадра: RGBA на пиксель, построчно"""
        return self._pixels.tobytes()

    def get_scaled_buf(self, scale: int) -> bytes:
        """
        Nearest-neighbor upscale: destination pixel (X, Y) copies source (X // scale, Y // scale).
        Returns (width * scale) * (height * scale) * 4 bytes in the same layout as get_buf.
        """
        factor = _positive_int(scale)
        if factor is None:
            raise InvalidDimensions(self.width, self.height, scale=scale)

        if factor == 1:
            return self.get_buf()

        # повторяем каждую строку, затем каждый пиксель в строке
        scaled = np.repeat(np.repeat(self._pixels, factor, axis=0), factor, axis=1)
        return scaled.tobytes()

    def copy(self) -> "PixelBuf":
        buf = PixelBuf(self.width, self.height)
        buf._pixels[:, :] = self._pixels
        return buf

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelBuf):
            return NotImplemented
        return self.get_size() == other.get_size() and np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuf({self.width}x{self.height})"
