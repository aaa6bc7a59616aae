"""
Scripted pointer gestures for rendering without a live pointer.

Positions are fractions of the surface size so the same tour works at any
resolution.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

MOVE = "move"
DOWN = "down"
UP = "up"
LEAVE = "leave"
TAP = "tap"


@dataclass(frozen=True)
class GestureEvent:
    time: float
    kind: str
    u: Optional[float] = None
    v: Optional[float] = None


def default_tour():
    """Drift, a circular stir, a tap, then a long hug released into a burst."""
    events: List[GestureEvent] = []

    # Stir: one lap around the centre between 2.0s and 4.5s
    steps = 75
    for i in range(steps + 1):
        angle = 2 * math.pi * i / steps
        events.append(
            GestureEvent(2.0 + 2.5 * i / steps, MOVE, 0.5 + 0.18 * math.cos(angle), 0.5 + 0.22 * math.sin(angle))
        )

    events.append(GestureEvent(5.2, TAP, 0.3, 0.4))

    events.append(GestureEvent(6.4, MOVE, 0.62, 0.52))
    events.append(GestureEvent(6.5, DOWN))
    events.append(GestureEvent(9.5, UP))

    events.append(GestureEvent(11.0, LEAVE))
    return events


class GestureScript:
    """Replays timed events into a GestureTracker."""

    def __init__(self, events=None):
        self.events = sorted(events if events is not None else default_tour(), key=lambda e: e.time)
        self._cursor = 0

    @property
    def finished(self):
        return self._cursor >= len(self.events)

    def play(self, tracker, now, width, height):
        """Dispatch every event due by `now`; returns how many fired."""
        fired = 0
        while self._cursor < len(self.events) and self.events[self._cursor].time <= now:
            event = self.events[self._cursor]
            self._cursor += 1
            fired += 1

            if event.kind == MOVE:
                tracker.move(event.u * width, event.v * height, now=event.time)
            elif event.kind == TAP:
                tracker.tap(event.u * width, event.v * height, now=event.time)
            elif event.kind == DOWN:
                tracker.down(now=event.time)
            elif event.kind == UP:
                tracker.up(now=event.time)
            elif event.kind == LEAVE:
                tracker.leave()
            else:
                raise ValueError(f"Unknown gesture kind: {event.kind!r}")
        return fired
