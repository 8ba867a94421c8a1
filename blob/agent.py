"""
panic_blob module: blob/agent.py

The blob: a steerable body with position, velocity and fixed tuning.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

import config


@dataclass(frozen=True)
class AgentTuning:
    """
    Fixed constants for one blob. Use dataclasses.replace to derive variants.

    damping:
      - velocity multiplier applied at the start of every tick, in (0, 1)
    flee_boost:
      - how much fear amplifies the flee acceleration (accel * (1 + flee_boost * fear))
    steal_size:
      - props strictly smaller than this can be stolen
    steal_chance:
      - probability per overlapping tick that an eligible prop is stolen
    """
    radius: float = config.BLOB_RADIUS
    fear_radius: float = config.FEAR_RADIUS
    accel: float = config.BLOB_ACCEL
    max_speed: float = config.BLOB_MAX_SPEED
    damping: float = config.BLOB_DAMPING
    jitter: float = config.BLOB_JITTER
    steal_size: float = config.STEAL_SIZE
    steal_chance: float = config.STEAL_CHANCE
    flee_boost: float = config.FLEE_BOOST
    wall_pad: float = config.BLOB_WALL_PAD
    restitution: float = config.BLOB_RESTITUTION

    def __post_init__(self) -> None:
        if not 0.0 < self.damping < 1.0:
            raise ValueError(f"damping must be in (0, 1), got {self.damping}")
        if self.fear_radius <= 0.0:
            raise ValueError("fear_radius must be positive")
        if self.max_speed < 0.0:
            raise ValueError("max_speed must be non-negative")
        if not 0.0 <= self.steal_chance <= 1.0:
            raise ValueError(f"steal_chance must be in [0, 1], got {self.steal_chance}")


@dataclass
class Agent:
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    tuning: AgentTuning = field(default_factory=AgentTuning)

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def vel(self) -> Tuple[float, float]:
        return (self.vx, self.vy)

    @property
    def speed(self) -> float:
        return (self.vx * self.vx + self.vy * self.vy) ** 0.5
