# canvas.py

"""Transparent drawing surface the animation renders into, backed by pygame."""

import logging

import numpy as np
import pygame

from constants import LOGGER_NAME, WHITE

logger = logging.getLogger(LOGGER_NAME)

# Type alias for RGB tuples
Color = tuple[int, int, int]


class Canvas:
    """
    RGBA pixel surface with the handful of primitives the animation needs.

    Data Contract:
    - width, height (int): Current size in pixels. May change between frames
      through resize(); the contents are discarded when it does.
    - The surface carries per-pixel alpha, so a cleared canvas is fully
      transparent and read_alpha() reports exactly what was drawn.
    - Side Effects: Initializes pygame's font module on first text render.
    """

    def __init__(self, width: int, height: int):
        self.surface = pygame.Surface((width, height), pygame.SRCALPHA)
        self._fonts = {}
        # Pre-rendered circles keyed by (radius, rgba). Particles only ever use
        # a few radii and 256 alpha levels, so this stays small.
        self._stamps = {}

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def resize(self, width: int, height: int) -> None:
        """Replace the backing surface with an empty one of the new size."""
        self.surface = pygame.Surface((width, height), pygame.SRCALPHA)
        logger.debug(f"Canvas resized to {width}x{height}.")

    def clear(self) -> None:
        """Make every pixel fully transparent."""
        self.surface.fill((0, 0, 0, 0))

    def fill_circle(self, x: float, y: float, radius: float, color: Color, opacity: float) -> None:
        """
        Alpha-blends a filled circle centered at (x, y).

        Opacity is clamped to [0, 1]; fully transparent circles are skipped.
        Radii below one pixel are drawn as one-pixel dots.
        """
        opacity = min(1.0, opacity)
        if opacity <= 0.0:
            return

        r = max(1, int(round(radius)))
        rgba = (color[0], color[1], color[2], int(opacity * 255))
        stamp = self._stamps.get((r, rgba))
        if stamp is None:
            stamp = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
            pygame.draw.circle(stamp, rgba, (r, r), r)
            self._stamps[(r, rgba)] = stamp

        self.surface.blit(stamp, (int(round(x)) - r, int(round(y)) - r))

    def render_text(self, content: str, font_size: int, center: tuple, font_name: str = 'arial',
                    color: Color = WHITE) -> None:
        """Draws bold, anti-aliased text centered horizontally and vertically on `center`."""
        font = self._get_font(font_name, font_size)
        text_surface = font.render(content, True, color)
        self.surface.blit(text_surface, text_surface.get_rect(center=(int(center[0]), int(center[1]))))

    def read_alpha(self) -> np.ndarray:
        """Returns a copy of the alpha channel as a (height, width) uint8 array."""
        # surfarray indexes pixels as [x, y]; transpose to row-major [y, x].
        return np.ascontiguousarray(pygame.surfarray.array_alpha(self.surface).T)

    def blit_to(self, target: pygame.Surface) -> None:
        target.blit(self.surface, (0, 0))

    def _get_font(self, font_name: str, font_size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        key = (font_name, font_size)
        font = self._fonts.get(key)
        if font is None:
            # SysFont falls back to pygame's bundled font when the name is unknown.
            font = pygame.font.SysFont(font_name, font_size, bold=True)
            self._fonts[key] = font
        return font
