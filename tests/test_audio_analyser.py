import math

import pytest

from heartfield.audio_analyser import AudioAnalyser, fold_bpm
from heartfield.errors import AudioLoadError


@pytest.mark.parametrize(
    "bpm, expected",
    [(60, 60), (120, 120), (240, 120), (400, 100), (30, 60), (15, 60)],
)
def test_fold_bpm(bpm, expected):
    assert fold_bpm(bpm) == expected


@pytest.mark.parametrize("bpm", [0, -5, math.nan, math.inf])
def test_fold_bpm_falls_back(bpm):
    assert fold_bpm(bpm) == 60


def test_missing_file_raises(tmp_path):
    with pytest.raises(AudioLoadError):
        AudioAnalyser(str(tmp_path / "missing.wav"))
