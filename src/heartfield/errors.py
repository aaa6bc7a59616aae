class HeartFieldError(Exception):
    """Base class for errors raised by the heart field."""


class SurfaceUnavailableError(HeartFieldError):
    """No drawing surface was supplied, so the loop must not start."""


class AudioLoadError(HeartFieldError):
    """The soundtrack could not be loaded or analysed."""
