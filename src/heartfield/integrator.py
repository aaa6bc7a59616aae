import math

from heartfield.constants import (
    DAMPING_X,
    DAMPING_Y_AMBIENT,
    DAMPING_Y_BURST,
    WIND_STRENGTH,
    WRAP_MARGIN,
)


class Integrator:
    """
    Semi-implicit Euler step for one heart.

    Forces update the velocity first and the position is advanced with the
    new velocity. Damping runs every tick whatever the force regime.
    """

    def __init__(self, field, dpr=1.0):
        self.field = field
        self.dpr = dpr

    def step(self, particle, dt, width, regime, pointer, hug):
        particle.wobble += dt * particle.sway
        wind = math.sin(particle.wobble) * WIND_STRENGTH * self.dpr

        self.field.apply(particle, regime, pointer, hug, dt)

        particle.x += (particle.vx + wind) * dt
        particle.y += particle.vy * dt
        particle.rotation += particle.angular_velocity * dt

        particle.vx *= DAMPING_X
        particle.vy *= DAMPING_Y_BURST if particle.is_burst else DAMPING_Y_AMBIENT

        # Sideways wrap
        if particle.x < -WRAP_MARGIN * width:
            particle.x = (1 + WRAP_MARGIN) * width
        elif particle.x > (1 + WRAP_MARGIN) * width:
            particle.x = -WRAP_MARGIN * width

        particle.age += dt
