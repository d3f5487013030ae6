import math

import pytest

from pcm_melody.synth.oscillators import (
    NoSound,
    WaveSound,
    get_waveform,
    saw_wave,
    sine_wave,
    square_wave,
)

PHASES = [i / 1000 for i in range(1000)]


# =========================
# Waveforms
# =========================
def test_waveforms_stay_in_range():
    for p in PHASES:
        assert -1.0 <= sine_wave(p) <= 1.0
        assert square_wave(p) in (-1.0, 1.0)
        assert -1.0 <= saw_wave(p) <= 1.0


def test_sine_cardinal_points():
    assert sine_wave(0.0) == 0.0
    assert sine_wave(0.25) == 1.0
    assert sine_wave(0.75) == -1.0
    assert sine_wave(0.5) == pytest.approx(0.0, abs=1e-12)


def test_square_switches_high_at_half():
    assert square_wave(0.0) == -1.0
    assert square_wave(0.4999) == -1.0
    assert square_wave(0.5) == 1.0
    assert square_wave(0.9999) == 1.0


def test_saw_follows_abs_ramp_formula():
    assert saw_wave(0.0) == 1.0
    assert saw_wave(0.25) == 0.0
    assert saw_wave(0.5) == -1.0
    assert saw_wave(0.75) == 0.0
    assert saw_wave(0.1) == pytest.approx(abs(4 * 0.1 - 2) - 1)


@pytest.mark.parametrize("name,fn", [
    ("sine", sine_wave),
    ("square", square_wave),
    ("saw", saw_wave),
    ("sawtooth", saw_wave),
    ("Sine", sine_wave),
])
def test_get_waveform_lookup(name, fn):
    assert get_waveform(name) is fn


def test_get_waveform_unknown_lists_valid_names():
    with pytest.raises(ValueError, match="triangle"):
        get_waveform("triangle")


# =========================
# Sounds
# =========================
def test_no_sound_is_exact_zero():
    s = NoSound()
    for t in (0.0, 0.5, 1e6, -3.0):
        assert s.sample(t) == 0.0


def test_wave_sound_normalizes_time_to_phase():
    s = WaveSound(saw_wave, 2.0)
    assert s.sample(0.0) == 1.0
    assert s.sample(0.125) == 0.0     # phase 0.25
    assert s.sample(0.625) == 0.0     # one period later
    assert s.sample(0.25) == -1.0     # phase 0.5


@pytest.mark.parametrize("wave", [sine_wave, saw_wave])
@pytest.mark.parametrize("freq", [261.63, 440.0, 27.5])
def test_wave_sound_is_periodic(wave, freq):
    s = WaveSound(wave, freq)
    for t in (0.0, 0.0013, 0.25, 1.7):
        assert s.sample(t) == pytest.approx(s.sample(t + 1 / freq), abs=1e-6)


def test_wave_sound_negative_time_uses_truncated_remainder():
    s = WaveSound(sine_wave, 1.0)
    # fmod keeps the dividend's sign: phase -0.25 -> sin(-pi/2)
    assert s.sample(-0.25) == pytest.approx(math.sin(-0.25 * 2 * math.pi))


@pytest.mark.parametrize("freq", [0.0, -440.0])
def test_wave_sound_rejects_non_positive_frequency(freq):
    with pytest.raises(ValueError):
        WaveSound(sine_wave, freq)
