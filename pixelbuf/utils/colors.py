import operator
from dataclasses import dataclass
from typing import Iterator, Sequence, Union


@dataclass(frozen=True)
class Rgba:
    """Цвет RGBA, 4 канала по 8 бит. По умолчанию непрозрачный чёрный."""
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            # numpy целые тоже принимаем, float и строки нет
            try:
                if isinstance(value, bool):
                    raise TypeError
                value = operator.index(value)
            except TypeError:
                raise ValueError(f"Channel {name} must be int, got {type(value).__name__}") from None
            if value < 0 or value > 255:
                raise ValueError(f"Channel {name} out of range 0..255: {value}")
            object.__setattr__(self, name, value)

    @classmethod
    def default(cls) -> "Rgba":
        return BLACK

    @classmethod
    def from_bytes(cls, data: Sequence[int]) -> "Rgba":
        """Builds a color from 4 values ordered [r, g, b, a]"""
        if len(data) != 4:
            raise ValueError(f"Expected 4 channel values, got {len(data)}")
        r, g, b, a = data
        return cls(r, g, b, a)

    @classmethod
    def from_hex(cls, hex_color: str) -> "Rgba":
        """Преобразует цвет из формата HEX (#RRGGBB или #RRGGBBAA) в Rgba."""
        hex_color = hex_color.lstrip('#')
        length = len(hex_color)
        if length == 6:
            r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
            a = 255
        elif length == 8:
            r, g, b, a = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16), int(hex_color[6:8], 16)
        else:
            raise ValueError("Invalid HEX color format")
        return cls(r, g, b, a)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())

    def __bytes__(self) -> bytes:
        return bytes(self.as_tuple())


BLACK = Rgba(0, 0, 0, 255)
WHITE = Rgba(255, 255, 255, 255)

# цвета тестового паттерна
RED = Rgba(255, 0, 0, 255)
GREEN = Rgba(0, 255, 0, 255)
BLUE = Rgba(0, 0, 255, 255)


def to_rgba(color: Union[Rgba, Sequence[int]]) -> Rgba:
    """Приводит Rgba или кортеж (r, g, b, a) к Rgba"""
    if isinstance(color, Rgba):
        return color
    return Rgba.from_bytes(color)
