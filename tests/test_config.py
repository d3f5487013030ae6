import dataclasses

import pytest

from pcm_melody.config import FADE_S_DEFAULT, SAMPLE_RATE_DEFAULT, RenderConfig
from pcm_melody.errors import ConfigError
from pcm_melody.synth.oscillators import saw_wave, sine_wave


def test_defaults_are_valid():
    config = RenderConfig()
    assert config.validate() is config
    assert config.sample_rate == SAMPLE_RATE_DEFAULT
    assert config.fade_s == FADE_S_DEFAULT
    assert config.wave() is saw_wave


def test_config_is_frozen():
    config = RenderConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.speed = 2.0  # type: ignore[misc]


def test_wave_resolves_name():
    assert RenderConfig(waveform="sine").wave() is sine_wave


@pytest.mark.parametrize("speed", [0, 0.0, -1.0, float("nan"), float("inf"), "7.3", None, True])
def test_bad_speed(speed):
    with pytest.raises(ConfigError, match="speed"):
        RenderConfig(speed=speed).validate()


@pytest.mark.parametrize("rate", [0, -44_100, 44_100.0, "44100", True])
def test_bad_sample_rate(rate):
    with pytest.raises(ConfigError, match="sample_rate"):
        RenderConfig(sample_rate=rate).validate()


@pytest.mark.parametrize("fade", [0, 0.0, -0.04, float("nan")])
def test_zero_or_negative_fade_is_rejected_not_clamped(fade):
    with pytest.raises(ConfigError, match="fade_s"):
        RenderConfig(fade_s=fade).validate()


@pytest.mark.parametrize("name", ["triangle", "", None])
def test_bad_waveform(name):
    with pytest.raises(ConfigError):
        RenderConfig(waveform=name).validate()


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        RenderConfig(speed=-1).validate()
