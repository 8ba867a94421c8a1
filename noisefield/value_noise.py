"""
panic_blob module: noisefield/value_noise.py

Coherent noise for organic jitter:
- lattice value noise with smoothstep interpolation (1 to 3 dimensions)
- a few octaves summed with halving amplitude, normalized back into [0, 1)
- fully determined by the seed and the coordinates (no hidden phase)

Anything callable as ``noise(x, y)`` returning a float in [0, 1] satisfies
NoiseSource; tests inject constants instead of ValueNoise.
"""

from __future__ import annotations
import math
import random
from typing import List, Protocol


class NoiseSource(Protocol):
    def __call__(self, x: float, y: float = 0.0, z: float = 0.0) -> float: ...


class RandomSource(Protocol):
    """Uniform source in [0, 1). ``random.Random`` qualifies."""

    def random(self) -> float: ...


_TABLE_SIZE = 256


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _smooth(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


class ValueNoise:
    def __init__(self, seed: int = 0, octaves: int = 4, falloff: float = 0.5):
        if octaves < 1:
            raise ValueError("octaves must be >= 1")
        rng = random.Random(seed)
        perm = list(range(_TABLE_SIZE))
        rng.shuffle(perm)
        # doubled so perm[i + j] never needs a wrap
        self._perm: List[int] = perm + perm
        self._values: List[float] = [rng.random() for _ in range(_TABLE_SIZE)]
        self.octaves = octaves
        self.falloff = falloff

    def _lattice(self, ix: int, iy: int, iz: int) -> float:
        p = self._perm
        h = p[p[p[ix & 255] + (iy & 255)] + (iz & 255)]
        return self._values[h]

    def _single(self, x: float, y: float, z: float) -> float:
        xi = math.floor(x)
        yi = math.floor(y)
        zi = math.floor(z)
        u = _smooth(x - xi)
        v = _smooth(y - yi)
        w = _smooth(z - zi)

        c = self._lattice
        x00 = _lerp(c(xi, yi, zi), c(xi + 1, yi, zi), u)
        x10 = _lerp(c(xi, yi + 1, zi), c(xi + 1, yi + 1, zi), u)
        x01 = _lerp(c(xi, yi, zi + 1), c(xi + 1, yi, zi + 1), u)
        x11 = _lerp(c(xi, yi + 1, zi + 1), c(xi + 1, yi + 1, zi + 1), u)
        return _lerp(_lerp(x00, x10, v), _lerp(x01, x11, v), w)

    def __call__(self, x: float, y: float = 0.0, z: float = 0.0) -> float:
        total = 0.0
        norm = 0.0
        amp = 1.0
        freq = 1.0
        for _ in range(self.octaves):
            total += self._single(x * freq, y * freq, z * freq) * amp
            norm += amp
            amp *= self.falloff
            freq *= 2.0
        return total / norm
