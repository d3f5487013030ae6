"""Oscillators -> fade envelope -> sampler."""
