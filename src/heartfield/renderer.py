import logging
import math

import cv2
import numpy as np

from heartfield.constants import (
    BG_COLOR,
    DEFAULT_BPM,
    HEART_CURVE_SAMPLES,
    HIGHLIGHT_ALPHA,
    PULSE_AMPLITUDE,
    TRAIL_ALPHA,
)

logger = logging.getLogger(__name__)


def _cubic_bezier(p0, p1, p2, p3, samples):
    t = np.linspace(0.0, 1.0, samples, endpoint=False)[:, None]
    p0, p1, p2, p3 = (np.asarray(p, dtype=np.float64) for p in (p0, p1, p2, p3))
    return (
        (1 - t) ** 3 * p0
        + 3 * (1 - t) ** 2 * t * p1
        + 3 * (1 - t) * t**2 * p2
        + t**3 * p3
    )


def heart_outline(samples=HEART_CURVE_SAMPLES):
    """Unit heart made of two mirrored cubic lobes, tip pointing down (+y)."""
    right = _cubic_bezier((0, -0.35), (0.5, -0.85), (1.15, -0.15), (0, 0.8), samples)
    left = _cubic_bezier((0, 0.8), (-1.15, -0.15), (-0.5, -0.85), (0, -0.35), samples)
    return np.vstack([right, left])


HEART_OUTLINE = heart_outline()


def beat_envelope(t, bpm=DEFAULT_BPM):
    """
    Heartbeat shape in [0, 1] at time `t` (seconds).

    A quick bump early in the beat followed by a smaller second one, the
    "lub-dub" of a heartbeat.
    """
    period = 60.0 / bpm
    x = (t % period) / period
    bump1 = math.exp(-(((x - 0.08) / 0.055) ** 2))
    bump2 = 0.55 * math.exp(-(((x - 0.22) / 0.085) ** 2))
    return min(1.0, max(0.0, bump1 + bump2))


class Surface:
    """A BGR frame the engine paints into, sized in device pixels."""

    def __init__(self, width, height, color=BG_COLOR):
        self.color = color
        self.frame = None
        self.resize(width, height)

    @property
    def width(self):
        return self.frame.shape[1]

    @property
    def height(self):
        return self.frame.shape[0]

    @property
    def is_empty(self):
        return self.frame.size == 0

    def resize(self, width, height):
        width = max(0, int(width))
        height = max(0, int(height))
        if self.frame is not None and self.frame.shape[:2] == (height, width):
            return
        self.frame = np.full((height, width, 3), self.color, dtype=np.uint8)
        logger.debug(f"[i] Surface resized to {width}x{height}")

    def clear(self):
        self.frame[:] = self.color


class HeartRenderer:
    """
    Paints the pool onto a Surface with OpenCV.

    Each frame is veiled with translucent white rather than cleared, which
    leaves short motion trails behind the hearts.
    """

    def __init__(self, bpm=DEFAULT_BPM, trail_alpha=TRAIL_ALPHA):
        self.bpm = bpm
        self.trail_alpha = trail_alpha

    def fade(self, surface):
        if surface.is_empty:
            return
        a = self.trail_alpha
        surface.frame = cv2.addWeighted(surface.frame, 1 - a, surface.frame, 0, 255 * a)

    def pulse(self, t):
        return 1 + PULSE_AMPLITUDE * beat_envelope(t, self.bpm)

    def draw(self, surface, particles, t):
        if surface.is_empty:
            return
        scale = self.pulse(t)
        for particle in particles:
            self._draw_heart(surface.frame, particle, scale)

    def _draw_heart(self, frame, particle, scale):
        s = particle.size * scale
        if s <= 0:
            return
        cos_r = math.cos(particle.rotation)
        sin_r = math.sin(particle.rotation)
        rotation = np.array([[cos_r, sin_r], [-sin_r, cos_r]])
        pts = HEART_OUTLINE * s @ rotation + (particle.x, particle.y)

        h, w = frame.shape[:2]
        x0 = max(0, int(math.floor(pts[:, 0].min())) - 1)
        y0 = max(0, int(math.floor(pts[:, 1].min())) - 1)
        x1 = min(w, int(math.ceil(pts[:, 0].max())) + 2)
        y1 = min(h, int(math.ceil(pts[:, 1].max())) + 2)
        if x0 >= x1 or y0 >= y1:
            return

        roi = frame[y0:y1, x0:x1]
        overlay = roi.copy()
        poly = np.round(pts - (x0, y0)).astype(np.int32)
        cv2.fillPoly(overlay, [poly], particle.color, cv2.LINE_AA)

        # Soft highlight on the upper-left lobe
        axes = (int(round(0.18 * s)), int(round(0.12 * s)))
        if axes[0] >= 1 and axes[1] >= 1:
            hx = -0.15 * s
            hy = -0.22 * s
            center = (
                int(round(particle.x + hx * cos_r - hy * sin_r - x0)),
                int(round(particle.y + hx * sin_r + hy * cos_r - y0)),
            )
            highlight = tuple(
                int(c + (255 - c) * HIGHLIGHT_ALPHA) for c in particle.color
            )
            angle = math.degrees(particle.rotation - 0.5)
            cv2.ellipse(overlay, center, axes, angle, 0, 360, highlight, -1, cv2.LINE_AA)

        alpha = particle.get_alpha() * particle.color_alpha
        frame[y0:y1, x0:x1] = cv2.addWeighted(overlay, alpha, roi, 1 - alpha, 0)
