# particle.py

from vector import Vector


def ease_out_cubic(t: float) -> float:
    """Fast start, gentle finish: 0 at t=0, 1 at t=1."""
    t -= 1
    return t * t * t + 1


class Particle:
    """
    Represents a single particle in the animation.

    Particles are allocated once by the ParticlePool and recycled: a new
    emission re-initializes an existing instance instead of creating one.

    Data Contract:
    - position, velocity, acceleration (Vector): Kinematic state in screen pixels.
    - age (float): Seconds since the last initialize(). Never decreases between
      initializations.
    - Invariants: A particle is dead once age >= duration; the pool decides
      what duration is.
    """
    __slots__ = ('position', 'velocity', 'acceleration', 'age')

    def __init__(self):
        self.position = Vector()
        self.velocity = Vector()
        self.acceleration = Vector()
        self.age = 0.0

    def initialize(self, x: float, y: float, dx: float, dy: float, effect: float):
        """
        Restarts this particle at (x, y) moving with (dx, dy).
        The acceleration points along the initial velocity, scaled by `effect`;
        a negative effect makes the particle decelerate along its path.
        """
        self.position.x = x
        self.position.y = y
        self.velocity.x = dx
        self.velocity.y = dy
        self.acceleration.x = dx * effect
        self.acceleration.y = dy * effect
        self.age = 0.0

    def update(self, dt: float):
        """
        Advances the particle by dt seconds.
        p_new = p_old + v_old * dt
        v_new = v_old + a * dt
        The position must use the velocity from before this step.
        """
        self.position.x += self.velocity.x * dt
        self.position.y += self.velocity.y * dt
        self.velocity.x += self.acceleration.x * dt
        self.velocity.y += self.acceleration.y * dt
        self.age += dt

    def size(self, base_size: float, duration: float) -> float:
        """Diameter in pixels: grows from 0 to base_size over the lifetime."""
        return base_size * ease_out_cubic(self.age / duration)

    def alpha(self, duration: float) -> float:
        """Opacity: fades linearly from 1 to 0. Negative past end-of-life."""
        return 1 - self.age / duration

    def draw(self, canvas, color, base_size: float, duration: float):
        """
        Draws the particle on the canvas.
        """
        canvas.fill_circle(
            self.position.x,
            self.position.y,
            self.size(base_size, duration) / 2,
            color,
            self.alpha(duration)
        )
