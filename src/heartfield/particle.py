from heartfield.constants import FLOOR_MARGIN

AMBIENT = "ambient"
BURST = "burst"


class Particle:
    """A single falling heart."""

    __slots__ = (
        "x",
        "y",
        "vx",
        "vy",
        "size",
        "rotation",
        "angular_velocity",
        "wobble",
        "sway",
        "depth",
        "alpha",
        "color",
        "color_alpha",
        "age",
        "lifetime",
        "mode",
    )

    def __init__(
        self,
        x,
        y,
        vx,
        vy,
        size,
        rotation,
        angular_velocity,
        wobble,
        sway,
        depth,
        alpha,
        color,
        color_alpha,
        lifetime,
        mode=AMBIENT,
    ):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.size = size
        self.rotation = rotation
        self.angular_velocity = angular_velocity
        self.wobble = wobble
        self.sway = sway
        self.depth = depth
        self.alpha = alpha
        self.color = color
        self.color_alpha = color_alpha
        self.age = 0.0
        self.lifetime = lifetime
        self.mode = mode

    @property
    def is_burst(self):
        return self.mode == BURST

    def speed(self):
        return (self.vx * self.vx + self.vy * self.vy) ** 0.5

    def is_expired(self, height):
        """Check if the particle has outlived its lifetime or fallen off screen."""
        return self.age > self.lifetime or self.y > FLOOR_MARGIN * height

    def get_alpha(self):
        """Get particle opacity, fading linearly over its lifetime."""
        fade = 1 - self.age / self.lifetime
        return self.alpha * (0.35 + 0.65 * fade)

    def __repr__(self):
        return (
            f"Particle(mode={self.mode!r}, x={self.x:.1f}, y={self.y:.1f}, "
            f"age={self.age:.2f}/{self.lifetime:.2f})"
        )
