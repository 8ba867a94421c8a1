"""
panic_blob module: world/props.py

Props are the small map objects the blob bumps into:
- radius is drawn once at creation and never changes
- lifecycle is a tagged state: Free (loose on the floor) or Held (orbiting the blob)
- Held carries its own orbit + countdown, so a Free prop can't hold a stale timer
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union

import config
from noisefield.value_noise import RandomSource
from world.physics import bounce_walls, sample_range


@dataclass(frozen=True)
class Free:
    pass


@dataclass
class Held:
    orbit_angle: float
    orbit_radius: float
    remaining_life: int  # ticks


PropState = Union[Free, Held]

FREE = Free()


@dataclass
class Prop:
    x: float
    y: float
    radius: float
    vx: float = 0.0
    vy: float = 0.0
    state: PropState = field(default=FREE)

    @property
    def held(self) -> bool:
        return isinstance(self.state, Held)


def make_prop(rng: RandomSource, w: float, h: float) -> Prop:
    pad = config.PROP_SPAWN_PAD
    s = config.PROP_START_SPEED
    return Prop(
        x=sample_range(rng, pad, w - pad),
        y=sample_range(rng, pad, h - pad),
        radius=sample_range(rng, *config.PROP_RADIUS_RANGE),
        vx=sample_range(rng, -s, s),
        vy=sample_range(rng, -s, s),
    )


def advance_free(prop: Prop, w: float, h: float) -> None:
    """Integrate, apply friction, bounce off the padded walls."""
    prop.x += prop.vx
    prop.y += prop.vy
    prop.vx *= config.PROP_FRICTION
    prop.vy *= config.PROP_FRICTION
    prop.x, prop.y, prop.vx, prop.vy = bounce_walls(
        prop.x, prop.y, prop.vx, prop.vy, w, h,
        config.PROP_WALL_PAD, config.PROP_RESTITUTION,
    )
