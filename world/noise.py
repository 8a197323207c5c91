# world/noise.py
"""
Deterministic per-cell noise.

A stateless trigonometric hash from integer coordinates to [0, 1). Every piece
of per-tile variation (boundary jitter, river meander, tile shade, decoration
rolls) is drawn from here so a world is reproducible from its coarse random
choices alone.
"""
from __future__ import annotations

import math

# Largest float below 1.0
_UPPER = math.nextafter(1.0, 0.0)

_X_WEIGHT = 127.1
_Z_WEIGHT = 311.7
_SCALE = 43758.5453


def pseudo_random(x: float, z: float) -> float:
    """Return a reproducible value in [0, 1) for the coordinate pair (x, z)."""
    n = math.sin(x * _X_WEIGHT + z * _Z_WEIGHT) * _SCALE
    return min(n - math.floor(n), _UPPER)


def centered_noise(x: float, z: float, spread: float = 1.0) -> float:
    """pseudo_random shifted to [-0.5, 0.5) and scaled by spread."""
    return (pseudo_random(x, z) - 0.5) * spread
