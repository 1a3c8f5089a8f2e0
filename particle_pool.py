# particle_pool.py

import logging

from constants import LOGGER_NAME
from particle import Particle

logger = logging.getLogger(LOGGER_NAME)


class ParticlePool:
    """
    Fixed-capacity ring buffer of recycled particles.

    All Particle instances are allocated here, once. The live particles are
    the slots in the circular half-open range [first_active, first_free);
    everything else is dead and gets overwritten by the next add().

    Data Contract:
    - Inputs:
        - capacity (int): Number of slots. One slot always stays free so a full
          pool can be told apart from an empty one, so at most capacity - 1
          particles are live.
        - duration (float): Particle lifetime in seconds.
        - effect (float): Acceleration coefficient handed to Particle.initialize.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: draw() renders onto the given canvas.
    - Invariants:
        - 0 <= first_active, first_free < capacity.
        - The slot list never grows or shrinks after construction.
        - Live particles are ordered oldest first, so expiry is FIFO.
        - Nothing here raises: overflow silently drops the oldest particle.
    """
    def __init__(self, capacity: int, duration: float, effect: float):
        self.particles = [Particle() for _ in range(capacity)]
        self.duration = duration
        self.effect = effect
        self.first_active = 0
        self.first_free = 0

        logger.info(f"ParticlePool created with {capacity} slots, lifetime {duration}s.")

    @property
    def capacity(self) -> int:
        return len(self.particles)

    def __len__(self):
        """Number of live particles."""
        return (self.first_free - self.first_active) % self.capacity

    def __iter__(self):
        """Yields live particles, oldest first."""
        i = self.first_active
        while i != self.first_free:
            yield self.particles[i]
            i = (i + 1) % self.capacity

    def is_empty(self) -> bool:
        return self.first_active == self.first_free

    def add(self, x: float, y: float, dx: float, dy: float):
        """
        Emits a particle into the next free slot.
        When the pool is already full the oldest live particle is retired to
        make room; memory use stays constant.
        """
        self.particles[self.first_free].initialize(x, y, dx, dy, self.effect)
        self.first_free = (self.first_free + 1) % self.capacity

        if self.first_active == self.first_free:
            self.first_active = (self.first_active + 1) % self.capacity

    def update(self, dt: float):
        """
        Ages every live particle by dt, then retires expired particles from the
        front of the live range.
        """
        for particle in self:
            particle.update(dt)

        # Particles are emitted in order and age at the same rate, so the
        # oldest ones are always at the front.
        while (self.first_active != self.first_free and
               self.particles[self.first_active].age >= self.duration):
            self.first_active = (self.first_active + 1) % self.capacity

    def draw(self, canvas, color, base_size: float):
        """
        Draws all live particles on the canvas. Does not change pool state.
        """
        for particle in self:
            particle.draw(canvas, color, base_size, self.duration)
