"""
panic_blob module: world/interaction.py

Per-tick pass over every prop:
- Held props orbit the blob and count down; at zero they drop back to Free
- Free props overlapping the blob get bumped, and small ones may be stolen
- every prop that started the pass Free then runs its floor physics
  (including one stolen this same tick, which is then snapped onto its orbit)

Props never interact with each other, so order doesn't matter.
Returns the number of steals so the caller owns the score.
"""

from __future__ import annotations
import logging
import math
from typing import List

import config
from blob.agent import Agent
from noisefield.value_noise import RandomSource
from world.physics import sample_int, sample_range, unit_away
from world.props import FREE, Held, Prop, advance_free

logger = logging.getLogger("panic_blob.interaction")


def overlaps(prop: Prop, agent: Agent) -> bool:
    # generous hitbox: only part of the blob's radius counts
    d = math.hypot(prop.x - agent.x, prop.y - agent.y)
    return d < prop.radius + agent.tuning.radius * config.HITBOX_FRACTION


def bump(prop: Prop, agent: Agent) -> None:
    nx, ny, _ = unit_away(agent.x, agent.y, prop.x, prop.y)
    prop.vx += nx * config.BUMP_PUSH + agent.vx * config.BUMP_MOMENTUM
    prop.vy += ny * config.BUMP_PUSH + agent.vy * config.BUMP_MOMENTUM


def try_steal(prop: Prop, agent: Agent, rng: RandomSource) -> bool:
    """
    Size gate first, then one probability trial.
    Returns True if the prop switched to Held.
    """
    if prop.radius >= agent.tuning.steal_size:
        return False
    if rng.random() >= agent.tuning.steal_chance:
        return False
    prop.state = Held(
        orbit_angle=sample_range(rng, 0.0, math.tau),
        orbit_radius=sample_range(rng, *config.ORBIT_RADIUS_RANGE),
        remaining_life=sample_int(rng, *config.HELD_LIFE_RANGE),
    )
    return True


def place_on_orbit(prop: Prop, held: Held, agent: Agent) -> None:
    prop.x = agent.x + math.cos(held.orbit_angle) * held.orbit_radius
    prop.y = agent.y + math.sin(held.orbit_angle) * held.orbit_radius


def advance_held(prop: Prop, held: Held, agent: Agent, rng: RandomSource) -> bool:
    """
    Orbit + age one tick. Returns True if the prop was released this tick.
    """
    held.orbit_angle += config.ORBIT_SPIN
    place_on_orbit(prop, held, agent)

    held.remaining_life -= 1
    if held.remaining_life > 0:
        return False

    prop.state = FREE
    s = config.RELEASE_SPEED
    prop.vx = sample_range(rng, -s, s)
    prop.vy = sample_range(rng, -s, s)
    return True


def resolve_props(props: List[Prop], agent: Agent, rng: RandomSource, w: float, h: float) -> int:
    stolen = 0
    for i, prop in enumerate(props):
        if isinstance(prop.state, Held):
            if advance_held(prop, prop.state, agent, rng):
                logger.debug("prop %d released at (%.1f, %.1f)", i, prop.x, prop.y)
            continue

        if overlaps(prop, agent):
            bump(prop, agent)
            if try_steal(prop, agent, rng):
                stolen += 1
                logger.debug("prop %d stolen (r=%.1f)", i, prop.radius)

        advance_free(prop, w, h)
        if isinstance(prop.state, Held):
            # floor physics ran on the bump; a fresh catch still starts on its orbit
            place_on_orbit(prop, prop.state, agent)
    return stolen
