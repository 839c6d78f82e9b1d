# модели для config.yaml

from pydantic import BaseModel, Field, field_validator

from pixelbuf.render.frame import PixelBuf
from pixelbuf.utils.colors import Rgba


class BufferConfig(BaseModel):
    width: int = Field(default=64, gt=0)
    height: int = Field(default=32, gt=0)
    scale: int = Field(default=1, gt=0)
    clear_color: str = "#000000FF"

    @field_validator("clear_color")
    @classmethod
    def _check_clear_color(cls, value: str) -> str:
        Rgba.from_hex(value)
        return value

    def make_buffer(self) -> PixelBuf:
        buf = PixelBuf(self.width, self.height)
        buf.clear(Rgba.from_hex(self.clear_color))
        return buf

    def make_test_image(self) -> PixelBuf:
        return PixelBuf.test_image(self.width, self.height)


class ViewerConfig(BaseModel):
    fps: int = Field(default=30, gt=0)
    caption: str = "PixelBuf Viewer"
