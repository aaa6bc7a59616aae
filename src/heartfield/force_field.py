"""
Pointer-driven forces acting on the hearts.

Exactly one regime applies to a heart on a given tick:

- hug: the pointer is being held; hearts are drawn in strongly and damped so
  they gather around it instead of overshooting.
- spiral: the pointer moved within the last SPIRAL_WINDOW seconds; hearts
  orbit it briefly with a light pull. The window ends with a hard cutoff.
- idle: a weak pull toward the pointer only.

The hug side of the choice is smooth because the hug intensity is eased.
"""

import enum
import math

from heartfield.constants import (
    DIST_EPSILON,
    HUG_DAMPING,
    HUG_MAX_SPEED,
    HUG_PULL,
    HUG_RADIUS,
    HUG_THRESHOLD,
    IDLE_PULL,
    IDLE_PULL_Y,
    IDLE_RADIUS,
    SPIRAL_ORBIT,
    SPIRAL_ORBIT_Y,
    SPIRAL_PULL,
    SPIRAL_PULL_Y,
    SPIRAL_RADIUS,
)


class Regime(enum.Enum):
    HUG = "hug"
    SPIRAL = "spiral"
    IDLE = "idle"


def select_regime(hug, now, pointer):
    if hug > HUG_THRESHOLD:
        return Regime.HUG
    if pointer.spiral_active(now):
        return Regime.SPIRAL
    return Regime.IDLE


def influence(dist, radius):
    """Linear falloff: 1 at the pointer, 0 at `radius` and beyond."""
    return min(1.0, max(0.0, 1 - dist / radius))


def _clamp(value, limit):
    return min(limit, max(-limit, value))


class ForceField:
    """Applies the active regime to particle velocities."""

    def __init__(self, dpr=1.0, enabled=True):
        self.dpr = dpr
        self.enabled = enabled

    def apply(self, particle, regime, pointer, hug, dt):
        """Update `particle` velocity in place; no-op without an active pointer."""
        if not self.enabled or not pointer.active:
            return

        dpr = self.dpr
        dx = pointer.x - particle.x
        dy = pointer.y - particle.y
        dist = math.hypot(dx, dy) + DIST_EPSILON
        ux = dx / dist
        uy = dy / dist

        if regime is Regime.HUG:
            w = influence(dist, HUG_RADIUS * dpr)
            pull = HUG_PULL * dpr * w * hug
            particle.vx += ux * pull * dt
            particle.vy += uy * pull * dt

            damping = 1 - HUG_DAMPING * w * hug * dt
            particle.vx *= damping
            particle.vy *= damping

            max_v = HUG_MAX_SPEED * dpr * (0.35 + 0.65 * w)
            particle.vx = _clamp(particle.vx, max_v)
            particle.vy = _clamp(particle.vy, max_v)

        elif regime is Regime.SPIRAL:
            w = influence(dist, SPIRAL_RADIUS * dpr)
            orbit = SPIRAL_ORBIT * dpr * w
            particle.vx += -uy * orbit * dt
            particle.vy += ux * orbit * SPIRAL_ORBIT_Y * dt

            pull = SPIRAL_PULL * dpr * w
            particle.vx += ux * pull * dt
            particle.vy += uy * pull * SPIRAL_PULL_Y * dt

        else:
            w = influence(dist, IDLE_RADIUS * dpr)
            pull = IDLE_PULL * dpr * w
            particle.vx += ux * pull * dt
            particle.vy += uy * pull * IDLE_PULL_Y * dt
