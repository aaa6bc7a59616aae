import numpy as np
import pytest

from heartfield.particle import AMBIENT, Particle
from heartfield.pointer import GestureTracker


def make_particle(**overrides):
    fields = dict(
        x=50.0,
        y=50.0,
        vx=0.0,
        vy=0.0,
        size=10.0,
        rotation=0.0,
        angular_velocity=0.0,
        wobble=0.0,
        sway=1.0,
        depth=1.0,
        alpha=0.9,
        color=(60, 20, 220),
        color_alpha=0.95,
        lifetime=5.0,
        mode=AMBIENT,
    )
    fields.update(overrides)
    return Particle(**fields)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def tracker():
    return GestureTracker(clock=lambda: 0.0)
