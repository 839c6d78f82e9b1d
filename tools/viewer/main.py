#!/usr/bin/env python3

import sys
import logging

import pygame

from pixelbuf.config import Config
from pixelbuf.render.frame import PixelBuf

logger = logging.getLogger(__name__)


class Viewer:
    """Shows a PixelBuf in a window, upscaled by an integer factor"""

    def __init__(self, buf: PixelBuf, scale: int = 1, fps: int = 30, caption: str = "PixelBuf Viewer"):
        self.buf = buf
        self.scale = scale
        self.fps = fps
        self.running = False

        pygame.init()
        self.size = self.buf.get_scaled_size(self.scale)
        self.screen = pygame.display.set_mode(self.size)
        pygame.display.set_caption(caption)

        # Clock for FPS
        self.clock = pygame.time.Clock()

    def _draw(self):
        """Blits the scaled RGBA bytes onto the window"""
        surface = pygame.image.frombuffer(self.buf.get_scaled_buf(self.scale), self.size, "RGBA")
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def start(self):
        """Starts the viewer loop"""
        self.running = True
        logger.info(f"Viewer started: {self.buf!r} x{self.scale}")

        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False

            self._draw()
            self.clock.tick(self.fps)

        pygame.quit()
        logger.info("Viewer stopped")


def main():
    logging.basicConfig(level=logging.INFO)

    path = "config.example.yaml"
    if len(sys.argv) > 1:
        path = sys.argv[1]

    cfg = Config(path).get()
    viewer = Viewer(
        cfg.buffer.make_test_image(),
        scale=cfg.buffer.scale,
        fps=cfg.viewer.fps,
        caption=cfg.viewer.caption,
    )
    viewer.start()


if __name__ == "__main__":
    main()
