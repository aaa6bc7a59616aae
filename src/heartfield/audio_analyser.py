import logging

import librosa
import numpy as np

from heartfield.constants import DEFAULT_BPM
from heartfield.errors import AudioLoadError

logger = logging.getLogger(__name__)

# Tempo estimates outside this range fall back to the resting heartbeat
MIN_BPM = 40
MAX_BPM = 180


class AudioAnalyser:
    """
    Loads the soundtrack and estimates the tempo the hearts pulse to.
    """

    def __init__(self, filepath):
        logger.info(f"[+] Loading audio: {filepath}...")
        try:
            # Load audio with original sampling rate
            self.y, self.sr = librosa.load(filepath, sr=None)
            self.duration = librosa.get_duration(y=self.y, sr=self.sr)
        except Exception as e:
            raise AudioLoadError(f"Error loading audio file: {e}") from e

        logger.info("[+] Tracking beats...")
        self.bpm = self._estimate_bpm()

    def _estimate_bpm(self):
        """
        Global tempo from librosa's beat tracker, folded into a heartbeat range.
        """
        tempo, _ = librosa.beat.beat_track(y=self.y, sr=self.sr)
        # Newer librosa returns a one-element array
        bpm = float(np.atleast_1d(tempo)[0])
        return fold_bpm(bpm)


def fold_bpm(bpm):
    """Halve or double a tempo until it sits in [MIN_BPM, MAX_BPM]."""
    if not np.isfinite(bpm) or bpm <= 0:
        return DEFAULT_BPM
    while bpm > MAX_BPM:
        bpm /= 2
    while bpm < MIN_BPM:
        bpm *= 2
    return bpm
