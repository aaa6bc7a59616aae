import logging
import time

from heartfield.constants import MAX_DELTA

logger = logging.getLogger(__name__)


class FrameScheduler:
    """
    Drives engine ticks, one per repaint opportunity.

    Works like a browser animation-frame loop: each tick requests the next
    one before it runs, and the host calls `pump()` whenever it can repaint.
    Ticks only run while the scheduler is started and visible.
    """

    def __init__(self, engine, clock=time.perf_counter, max_delta=MAX_DELTA):
        self.engine = engine
        self.clock = clock
        self.max_delta = max_delta
        self.started = False
        self.visible = True
        self._last = None
        self._pending = None
        self._handles = 0

    @property
    def paused(self):
        return not self.visible

    @property
    def pending(self):
        return self._pending is not None

    def _request(self):
        if self._pending is None and self.started and self.visible:
            self._handles += 1
            self._pending = self._handles

    def start(self):
        """Begin a session with an empty pool, or resume a stopped one."""
        if self.started:
            self._request()
            return
        self.started = True
        self.engine.reset()
        self._last = None
        logger.debug("[+] Scheduler started")
        self._request()

    def stop(self):
        """Cancel any pending tick; the next resumed tick reports dt=0."""
        if self._pending is not None:
            logger.debug(f"[i] Cancelled pending tick {self._pending}")
        self._pending = None
        self._last = None

    def deactivate(self):
        """End the session, discarding every live heart."""
        self.stop()
        if self.started:
            self.started = False
            self.engine.pool.clear()
            logger.debug("[i] Scheduler deactivated")

    def set_visible(self, visible):
        # Hiding pauses the session; live hearts are kept for the resume
        if visible == self.visible:
            return
        self.visible = visible
        if visible:
            logger.debug("[i] Resumed")
            self._request()
        else:
            logger.debug("[i] Paused")
            self.stop()

    def pump(self, now=None):
        """
        Run the pending tick, if any, and return its dt.

        Returns None when no tick was pending.
        """
        if self._pending is None:
            return None
        self._pending = None
        if not (self.started and self.visible):
            return None

        now = self.clock() if now is None else now
        if self._last is None:
            dt = 0.0
        else:
            dt = min(self.max_delta, max(0.0, now - self._last))
        self._last = now

        self._request()
        self.engine.tick(dt, now)
        return dt
