import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from heartfield.constants import DEFAULT_BPM, DEFAULT_DPR, MAX_PARTICLES, TRAIL_ALPHA
from heartfield.errors import SurfaceUnavailableError
from heartfield.force_field import ForceField, Regime, select_regime
from heartfield.integrator import Integrator
from heartfield.pointer import GestureTracker
from heartfield.pool import ParticlePool
from heartfield.renderer import HeartRenderer
from heartfield.spawn_governor import SpawnGovernor, burst_strength

logger = logging.getLogger(__name__)


@dataclass
class EngineSettings:
    dpr: float = DEFAULT_DPR
    bpm: float = DEFAULT_BPM
    interactive: bool = True
    trail_alpha: float = TRAIL_ALPHA
    capacity: int = MAX_PARTICLES
    seed: Optional[int] = None


@dataclass
class SimulationState:
    """Everything a tick reads and writes, threaded through by the scheduler."""

    pool: ParticlePool
    governor: SpawnGovernor
    gestures: GestureTracker
    ticks: int = 0
    last_regime: Optional[Regime] = None

    @property
    def pointer(self):
        return self.gestures.pointer

    @property
    def hold(self):
        return self.gestures.hold


class HeartFieldEngine:
    """
    One tick of the falling-hearts simulation.

    Per tick: ease the hug, let the governor react to the frame time, fire a
    pending burst, spawn ambient hearts, move and age every heart, then veil
    the previous frame and draw.
    """

    def __init__(self, surface, settings=None, gestures=None, rng=None):
        if surface is None:
            raise SurfaceUnavailableError("No drawing surface to paint hearts on")
        self.surface = surface
        self.settings = settings if settings is not None else EngineSettings()

        if rng is None:
            rng = np.random.default_rng(self.settings.seed)
        dpr = self.settings.dpr

        self.state = SimulationState(
            pool=ParticlePool(rng, capacity=self.settings.capacity, dpr=dpr),
            governor=SpawnGovernor(rng),
            gestures=gestures if gestures is not None else GestureTracker(),
        )
        self.field = ForceField(dpr=dpr, enabled=self.settings.interactive)
        self.integrator = Integrator(self.field, dpr=dpr)
        self.renderer = HeartRenderer(bpm=self.settings.bpm, trail_alpha=self.settings.trail_alpha)

    @property
    def pool(self):
        return self.state.pool

    def reset(self):
        """Start a fresh session: empty pool and a blank surface."""
        self.state.pool.clear()
        self.state.gestures.pointer.burst_requested = False
        if not self.surface.is_empty:
            self.surface.clear()

    def tick(self, dt, now):
        state = self.state
        hug = state.hold.ease(dt)
        state.governor.update(dt)
        state.ticks += 1

        width = self.surface.width
        height = self.surface.height
        if width == 0 or height == 0:
            logger.debug(f"[i] Zero-area surface, skipping tick {state.ticks}")
            return

        pointer = state.pointer
        if pointer.consume_burst() and self.settings.interactive:
            if pointer.has_position:
                bx, by = pointer.x, pointer.y
            else:
                bx, by = width / 2, height / 2
            state.pool.burst(bx, by, burst_strength(hug), width, height)

        state.pool.spawn_ambient(state.governor.ambient_count(dt), width, height)

        regime = select_regime(hug, now, pointer)
        state.last_regime = regime

        def step(particle, delta):
            self.integrator.step(particle, delta, width, regime, pointer, hug)

        state.pool.advance(step, dt, height)
        self.renderer.fade(self.surface)
        self.renderer.draw(self.surface, state.pool, now)
