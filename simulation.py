# simulation.py

import logging
import math

import numpy as np

import constants
from canvas import Canvas
from heart_curve import point_on_heart
from particle_pool import ParticlePool
from settings import AnimationSettings
from silhouette import SilhouetteSampler

logger = logging.getLogger(constants.LOGGER_NAME)


class Simulation:
    """
    Drives one heart animation: emits particles from the heart outline and
    the text silhouette, ages them, and draws them onto the canvas.

    The simulation does not schedule itself. An external driver calls tick()
    once per frame with the elapsed time and decides when to stop.

    Data Contract:
    - Inputs:
        - settings (AnimationSettings): Resolved configuration, treated as immutable.
        - canvas (Canvas): The surface particles are drawn onto.
        - rng (np.random.Generator, optional): Source of emission randomness.
          Defaults to an unseeded generator.
    - Outputs: None. tick() draws onto the canvas.
    - Side Effects: Clears and redraws the canvas every tick. Samples the text
      silhouette through the same canvas at construction.
    - Invariants:
        - The pool is never reallocated by a resize.
        - An empty silhouette set means no text particles are ever emitted.
    """
    def __init__(self, settings: AnimationSettings, canvas: Canvas, rng: np.random.Generator = None):
        self._settings = settings
        self.canvas = canvas
        self.rng = rng if rng is not None else np.random.default_rng()
        self.pool = ParticlePool(settings.capacity, settings.duration, settings.effect)

        self.frame = 0
        # Fractional emission left over from previous frames, per source.
        self.heart_budget = 0.0
        self.text_budget = 0.0

        self._update_geometry()
        self.text_points = self._sample_text()

    @property
    def settings(self) -> AnimationSettings:
        return self._settings

    @property
    def emit_rate(self) -> float:
        """Particles per second that refresh the whole pool once per lifetime."""
        return self._settings.capacity / self._settings.duration

    def replace_settings(self, settings: AnimationSettings):
        """
        Swaps in a new configuration.
        Live particles survive unless the capacity changes; the text is
        re-sampled only when one of the text fields changed.
        """
        old = self._settings
        self._settings = settings

        if settings.capacity != old.capacity:
            self.pool = ParticlePool(settings.capacity, settings.duration, settings.effect)
            self.heart_budget = 0.0
            self.text_budget = 0.0
        else:
            self.pool.duration = settings.duration
            self.pool.effect = settings.effect

        self._update_geometry()
        text_fields = ('text_content', 'text_size', 'text_font', 'text_y_offset_ratio')
        if any(getattr(old, name) != getattr(settings, name) for name in text_fields):
            self.text_points = self._sample_text()

        logger.info(f"Settings replaced: {settings}")

    def resize(self, width: int, height: int):
        """
        Follows a change of the drawing surface size.
        Only derived geometry is recomputed; particles keep flying.
        """
        self.canvas.resize(width, height)
        self._update_geometry()
        logger.info(f"Resized to {width}x{height}. Text y-offset is now {self.text_y_offset:.1f}px.")

    def tick(self, dt: float):
        """
        Runs one frame: emit, advance, draw.

        - Inputs: dt (float) - Seconds since the previous frame (0 on the first frame).
        """
        heart_count = self._emit_heart(dt)
        text_count = self._emit_text(dt)

        self.canvas.clear()
        self.pool.update(dt)
        self.pool.draw(self.canvas, self._settings.color, self._settings.size)

        if self.frame % constants.LOG_EVERY_N_FRAMES == 0:
            logger.debug(
                f"Frame={self.frame}, "
                f"dt={dt:.4f}, "
                f"Live={len(self.pool)}, "
                f"HeartEmitted={heart_count}, "
                f"TextEmitted={text_count}"
            )
        self.frame += 1

    def _update_geometry(self):
        self.center_x = self.canvas.width / 2
        self.center_y = self.canvas.height / 2
        self.text_y_offset = self.canvas.height * self._settings.text_y_offset_ratio

    def _sample_text(self) -> list:
        sampler = SilhouetteSampler(self.canvas, font_name=self._settings.text_font)
        return sampler.sample(
            self._settings.text_content,
            self._settings.text_size,
            self.canvas.width,
            self.canvas.height,
            self.text_y_offset
        )

    def _take_whole(self, budget: float) -> tuple:
        """
        Splits an emission budget into the whole particles to emit now and the
        fraction to carry over. More than one pool's worth is never emitted in
        a single frame, since the excess would overwrite itself.
        """
        count = int(budget)
        remainder = budget - count
        return min(count, self.pool.capacity), remainder

    def _emit_heart(self, dt: float) -> int:
        self.heart_budget += self.emit_rate * dt * constants.HEART_EMISSION_SHARE
        count, self.heart_budget = self._take_whole(self.heart_budget)

        velocity = self._settings.velocity
        for t in self.rng.uniform(-math.pi, math.pi, count):
            pos = point_on_heart(t)
            # The heart curve never passes through the origin, so normalize is safe.
            direction = pos.clone().normalize().scale(velocity)
            # Curve space is y-up, screen space is y-down.
            self.pool.add(
                self.center_x + pos.x,
                self.center_y - pos.y,
                direction.x,
                -direction.y
            )
        return count

    def _emit_text(self, dt: float) -> int:
        if not self.text_points:
            return 0

        self.text_budget += self.emit_rate * dt * constants.TEXT_EMISSION_SHARE
        count, self.text_budget = self._take_whole(self.text_budget)

        spread = self._settings.velocity * constants.TEXT_JITTER_SCALE
        indices = self.rng.integers(0, len(self.text_points), count)
        jitter = (self.rng.random((count, 2)) - 0.5) * spread
        for index, (dx, dy) in zip(indices, jitter):
            pos = self.text_points[index]
            self.pool.add(
                self.center_x + pos.x,
                self.center_y + pos.y,
                float(dx),
                float(dy)
            )
        return count
