import logging

import yaml
from pydantic import BaseModel, Field

from pixelbuf.models.config import BufferConfig, ViewerConfig

logger = logging.getLogger(__name__)


class GlobalConfig(BaseModel):
    buffer: BufferConfig = Field(default_factory=BufferConfig)
    viewer: ViewerConfig = Field(default_factory=ViewerConfig)


class Config:
    def __init__(self, path: str = "config.yaml"):
        self.path = path
        self.model = None

    def load(self) -> GlobalConfig:
        with open(self.path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        # пустой файл = все значения по умолчанию
        self.model = GlobalConfig(**(data or {}))
        logger.info(f"Config loaded from {self.path}")
        return self.model

    def get(self) -> GlobalConfig:
        if self.model is None:
            return self.load()
        return self.model
