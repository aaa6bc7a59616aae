import math

from heartfield.constants import (
    BASE_SPAWN_RATE,
    BURST_BASE,
    BURST_HUG_GAIN,
    BURST_SCALE,
    BURST_STRENGTH_MAX,
    BURST_STRENGTH_MIN,
    FALLBACK_FPS,
    LOW_FPS_THRESHOLD,
    MIN_SPAWN_RATE,
    SPAWN_DECAY_PER_SEC,
    SPAWN_RECOVER_PER_SEC,
)


class SpawnGovernor:
    """
    Decides how many hearts to create per tick.

    The ambient rate sinks toward MIN_SPAWN_RATE while the measured frame rate
    is below LOW_FPS_THRESHOLD and climbs back to the base rate otherwise. The
    two ramps have different slopes so the rate does not oscillate around the
    threshold.
    """

    def __init__(self, rng, base_rate=BASE_SPAWN_RATE, min_rate=MIN_SPAWN_RATE):
        self.rng = rng
        self.base_rate = base_rate
        self.min_rate = min_rate
        self.spawn_rate = base_rate

    def update(self, dt):
        fps = 1 / dt if dt > 0 else FALLBACK_FPS
        if fps < LOW_FPS_THRESHOLD:
            self.spawn_rate = max(self.min_rate, self.spawn_rate - SPAWN_DECAY_PER_SEC * dt)
        else:
            self.spawn_rate = min(self.base_rate, self.spawn_rate + SPAWN_RECOVER_PER_SEC * dt)
        return self.spawn_rate

    def ambient_count(self, dt):
        """Whole part of rate * dt plus one more with probability of the remainder."""
        to_spawn = self.spawn_rate * dt
        whole = math.floor(to_spawn)
        extra = 1 if self.rng.random() < to_spawn - whole else 0
        return int(whole) + extra


def burst_strength(hug):
    return min(BURST_STRENGTH_MAX, max(BURST_STRENGTH_MIN, BURST_STRENGTH_MIN + BURST_HUG_GAIN * hug))


def burst_count(strength):
    return int(math.floor(BURST_BASE + BURST_SCALE * strength))
