import logging
import time

from heartfield.constants import HUG_EASE_BASE, SPIRAL_WINDOW

logger = logging.getLogger(__name__)


class PointerState:
    """Last known pointer position and the gesture flags staged for the next tick."""

    def __init__(self):
        self.active = False
        self.x = 0.0
        self.y = 0.0
        self.has_position = False
        self.last_move_at = 0.0
        self.spiral_until = 0.0
        self.burst_requested = False

    def spiral_active(self, now):
        return now < self.spiral_until

    def consume_burst(self):
        """Clear the burst flag and report whether it was set."""
        requested = self.burst_requested
        self.burst_requested = False
        return requested


class HoldState:
    """Press-and-hold state with an eased hug intensity in [0, 1]."""

    def __init__(self):
        self.holding = False
        self.hold_start = 0.0
        self.intensity = 0.0

    def ease(self, dt):
        """Move intensity toward its target at a frame-rate independent pace."""
        target = 1.0 if self.holding else 0.0
        self.intensity += (target - self.intensity) * (1 - HUG_EASE_BASE**dt)
        self.intensity = min(1.0, max(0.0, self.intensity))
        return self.intensity


class GestureTracker:
    """
    Normalises input events into PointerState and HoldState.

    Handlers only stage positions, flags and timestamps; all simulation work
    happens in the next tick. Coordinates are device pixels.
    """

    def __init__(self, pointer=None, hold=None, clock=time.perf_counter):
        self.pointer = pointer if pointer is not None else PointerState()
        self.hold = hold if hold is not None else HoldState()
        self.clock = clock

    def _now(self, now):
        return self.clock() if now is None else now

    def move(self, x, y, now=None):
        now = self._now(now)
        p = self.pointer
        p.x = float(x)
        p.y = float(y)
        p.has_position = True
        p.active = True
        p.last_move_at = now
        p.spiral_until = now + SPIRAL_WINDOW

    def down(self, now=None):
        self.hold.holding = True
        self.hold.hold_start = self._now(now)

    def up(self, now=None):
        was_holding = self.hold.holding
        self.hold.holding = False
        if not was_holding:
            return
        # Release of a press (a click or the end of a hug) fires one burst
        self.pointer.burst_requested = True
        held = self._now(now) - self.hold.hold_start
        logger.debug(f"[i] Release after {held:.2f}s hold")

    def leave(self):
        self.pointer.active = False

    def tap(self, x, y, now=None):
        """Touch tap: position, press and release in one go."""
        self.move(x, y, now)
        self.down(now)
        self.up(now)
