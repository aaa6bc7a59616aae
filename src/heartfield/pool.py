import logging
import math

from heartfield.constants import (
    ALPHA_RANGE,
    AMBIENT_LIFETIME_RANGE,
    AMBIENT_SIZE_RANGE,
    ANGULAR_VELOCITY_RANGE,
    BURST_FALL_FACTOR,
    BURST_JITTER,
    BURST_LIFETIME_RANGE,
    BURST_RADIAL_SPEED,
    BURST_SIZE_RANGE,
    DEPTH_RANGE,
    DRIFT_RANGE,
    FALL_SPEED_RANGE,
    MAX_PARTICLES,
    PALETTE,
    ROTATION_RANGE,
    SPAWN_BAND,
    SWAY_RANGE,
)
from heartfield.particle import AMBIENT, BURST, Particle
from heartfield.spawn_governor import burst_count

logger = logging.getLogger(__name__)


class ParticlePool:
    """
    Bounded collection of live hearts, oldest first.

    Inserting past capacity evicts the oldest surplus straight away, so the
    per-frame cost of the update and draw passes stays bounded.
    """

    def __init__(self, rng, capacity=MAX_PARTICLES, dpr=1.0):
        self.rng = rng
        self.capacity = capacity
        self.dpr = dpr
        self.particles = []
        self.evicted = 0

    def __len__(self):
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def clear(self):
        self.particles = []

    def _uniform(self, bounds):
        return float(self.rng.uniform(bounds[0], bounds[1]))

    def spawn(self, mode, width, height, position=None):
        """Create one heart; ambient hearts start in a band above the top edge."""
        burst = mode == BURST
        dpr = self.dpr
        depth = self._uniform(DEPTH_RANGE)

        if position is None:
            x = self._uniform((0, width))
            y = self._uniform((-SPAWN_BAND * height, 0))
        else:
            x, y = position

        size = self._uniform(BURST_SIZE_RANGE if burst else AMBIENT_SIZE_RANGE) * dpr * depth
        vy = self._uniform(FALL_SPEED_RANGE) * dpr * depth * (BURST_FALL_FACTOR if burst else 1)
        vx = self._uniform(DRIFT_RANGE) * dpr
        if burst:
            vx += self._uniform((-BURST_RADIAL_SPEED, BURST_RADIAL_SPEED)) * dpr

        color, color_alpha = PALETTE[int(self.rng.integers(len(PALETTE)))]
        particle = Particle(
            x=x,
            y=y,
            vx=vx,
            vy=vy,
            size=size,
            rotation=self._uniform(ROTATION_RANGE),
            angular_velocity=self._uniform(ANGULAR_VELOCITY_RANGE),
            wobble=self._uniform((0, 2 * math.pi)),
            sway=self._uniform(SWAY_RANGE),
            depth=depth,
            alpha=self._uniform(ALPHA_RANGE) * (0.55 + 0.45 * depth),
            color=color,
            color_alpha=color_alpha,
            lifetime=self._uniform(BURST_LIFETIME_RANGE if burst else AMBIENT_LIFETIME_RANGE),
            mode=mode,
        )
        self._insert(particle)
        return particle

    def _insert(self, particle):
        self.particles.append(particle)
        surplus = len(self.particles) - self.capacity
        if surplus > 0:
            del self.particles[:surplus]
            self.evicted += surplus

    def spawn_ambient(self, count, width, height):
        for _ in range(count):
            self.spawn(AMBIENT, width, height)

    def burst(self, x, y, strength, width, height):
        """Scatter a cluster of short-lived hearts around (x, y)."""
        count = burst_count(strength)
        jitter = BURST_JITTER * self.dpr
        for _ in range(count):
            position = (
                x + self._uniform((-jitter, jitter)),
                y + self._uniform((-jitter, jitter)),
            )
            self.spawn(BURST, width, height, position=position)
        logger.debug(f"[+] Burst of {count} hearts at ({x:.0f}, {y:.0f})")
        return count

    def advance(self, step, dt, height):
        """
        Run `step(particle, dt)` over every heart and drop the expired ones.

        A heart leaves the pool on the first tick its age passes its lifetime
        or it falls below the floor margin.
        """
        survivors = []
        for particle in self.particles:
            step(particle, dt)
            if not particle.is_expired(height):
                survivors.append(particle)
        removed = len(self.particles) - len(survivors)
        self.particles = survivors
        return removed
