# silhouette.py

import logging

import numba
import numpy as np

from canvas import Canvas
from constants import ALPHA_THRESHOLD, LOGGER_NAME, SAMPLING_STRIDE
from vector import Vector

logger = logging.getLogger(LOGGER_NAME)


@numba.jit(nopython=True)
def _scan_alpha_jit(alpha, stride, threshold):
    """
    Numba-accelerated strided scan of an alpha buffer.
    Returns an (n, 2) array of (x, y) pixel coordinates, in row-major order,
    whose alpha is strictly greater than the threshold.
    """
    height, width = alpha.shape

    count = 0
    for y in range(0, height, stride):
        for x in range(0, width, stride):
            if alpha[y, x] > threshold:
                count += 1

    hits = np.empty((count, 2), dtype=np.int64)
    i = 0
    for y in range(0, height, stride):
        for x in range(0, width, stride):
            if alpha[y, x] > threshold:
                hits[i, 0] = x
                hits[i, 1] = y
                i += 1
    return hits


class SilhouetteSampler:
    """
    Turns rendered text into a sparse set of particle emission sites.

    Data Contract:
    - Inputs: canvas (Canvas) - The drawing surface used as a scratch buffer.
      It is left cleared after sampling.
    - Outputs: sample() returns points relative to the text anchor, i.e. the
      point (surface_width / 2, surface_height / 2 + y_offset).
    - Invariants: Empty text yields an empty list and leaves the canvas untouched.
    """
    def __init__(self, canvas: Canvas, font_name: str = 'arial',
                 stride: int = SAMPLING_STRIDE, threshold: int = ALPHA_THRESHOLD):
        self.canvas = canvas
        self.font_name = font_name
        self.stride = stride
        self.threshold = threshold

    def sample(self, text: str, font_size: int, surface_width: int, surface_height: int,
               y_offset: float) -> list:
        if not text:
            logger.info("No text content configured; text emission disabled.")
            return []

        anchor_x = surface_width / 2
        anchor_y = surface_height / 2 + y_offset

        # Anything already on the canvas would be mistaken for glyph pixels.
        self.canvas.clear()
        self.canvas.render_text(text, font_size, (anchor_x, anchor_y), font_name=self.font_name)
        alpha = self.canvas.read_alpha()
        # The render was only needed for its pixels.
        self.canvas.clear()

        hits = _scan_alpha_jit(alpha, self.stride, self.threshold)
        points = [Vector(float(x) - anchor_x, float(y) - anchor_y) for x, y in hits]

        logger.info(f"Sampled {len(points)} emission points from text {text!r} at {font_size}px.")
        return points
