"""
panic_blob module: world/physics.py

Top-down 2D helpers shared by the blob and the props:
- speed clamp that keeps direction
- padded wall bounce (clamp exactly to the pad, reflect with energy loss)
- guarded unit vectors (distance floored so coincident points never divide by zero)
- range sampling on an injected uniform source
"""

from __future__ import annotations
import math
from typing import Tuple

import config
from noisefield.value_noise import RandomSource


def unit_away(fx: float, fy: float, tx: float, ty: float) -> Tuple[float, float, float]:
    """
    Unit vector pointing from (fx, fy) to (tx, ty), plus the raw distance.
    When the points coincide the vector degenerates to (0, 0) instead of NaN.
    """
    dx = tx - fx
    dy = ty - fy
    d = math.hypot(dx, dy)
    safe = max(config.EPS_DIST, d)
    return dx / safe, dy / safe, d


def clamp_speed(vx: float, vy: float, max_speed: float) -> Tuple[float, float]:
    v2 = vx * vx + vy * vy
    if v2 <= max_speed * max_speed:
        return vx, vy
    v = math.sqrt(v2)
    s = max_speed / max(v, 1e-9)
    return vx * s, vy * s


def bounce_axis(pos: float, vel: float, lo: float, hi: float, restitution: float) -> Tuple[float, float]:
    """
    One axis of the padded wall rule: outside [lo, hi] the velocity is
    reversed and scaled by restitution, and the position lands exactly on the pad.
    """
    if pos < lo:
        return lo, -vel * restitution
    if pos > hi:
        return hi, -vel * restitution
    return pos, vel


def bounce_walls(
    x: float,
    y: float,
    vx: float,
    vy: float,
    w: float,
    h: float,
    pad: float,
    restitution: float,
) -> Tuple[float, float, float, float]:
    x, vx = bounce_axis(x, vx, pad, w - pad, restitution)
    y, vy = bounce_axis(y, vy, pad, h - pad, restitution)
    return x, y, vx, vy


def sample_range(rng: RandomSource, lo: float, hi: float) -> float:
    """
    Uniform sample in [lo, hi). An empty range (hi == lo) yields lo;
    an inverted one is a programming error.
    """
    if hi < lo:
        raise ValueError(f"inverted range [{lo}, {hi})")
    if hi == lo:
        return lo
    return lo + (hi - lo) * rng.random()


def sample_int(rng: RandomSource, lo: int, hi: int) -> int:
    """Uniform integer in [lo, hi); same contract as sample_range."""
    if hi < lo:
        raise ValueError(f"inverted range [{lo}, {hi})")
    if hi == lo:
        return lo
    return min(hi - 1, lo + int(rng.random() * (hi - lo)))
