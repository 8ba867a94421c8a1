"""
panic_blob module: world/world.py

World state container (blob, props, score, clock) plus the simulation step.

The world is owned by whoever drives the loop: step() mutates it in place and
hands it back. Randomness and noise are injected at creation so a test can
pin every trial and every jitter sample.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random
from typing import Iterator, List, NamedTuple, Optional, Tuple

import config
from blob.agent import Agent, AgentTuning
from blob.fear import fear as fear_of
from blob.steering import steer_agent
from noisefield.value_noise import NoiseSource, RandomSource, ValueNoise
from world.interaction import resolve_props
from world.props import Prop, make_prop

logger = logging.getLogger("panic_blob.world")


class PropView(NamedTuple):
    x: float
    y: float
    radius: float
    held: bool


@dataclass
class World:
    w: float
    h: float
    agent: Agent
    rng: RandomSource
    noise: NoiseSource
    props: List[Prop] = field(default_factory=list)
    prop_count: int = config.PROP_COUNT
    score: int = 0
    clock: float = 0.0    # noise time, advances by t_speed per tick
    elapsed: float = 0.0  # sum of frame dt, display only
    ticks: int = 0
    t_speed: float = config.T_SPEED

    @property
    def agent_pos(self) -> Tuple[float, float]:
        return self.agent.pos

    @property
    def agent_vel(self) -> Tuple[float, float]:
        return self.agent.vel

    def prop_views(self) -> Iterator[PropView]:
        for p in self.props:
            yield PropView(p.x, p.y, p.radius, p.held)

    def held_count(self) -> int:
        return sum(1 for p in self.props if p.held)


class StepResult(NamedTuple):
    world: World
    fear: float
    stolen: int


def _scatter_props(rng: RandomSource, n: int, w: float, h: float) -> List[Prop]:
    return [make_prop(rng, w, h) for _ in range(n)]


def initialize(
    prop_count: int = config.PROP_COUNT,
    w: float = config.SCREEN_W,
    h: float = config.SCREEN_H,
    rng: Optional[RandomSource] = None,
    noise: Optional[NoiseSource] = None,
    tuning: Optional[AgentTuning] = None,
) -> World:
    if prop_count < 0:
        raise ValueError(f"prop_count must be >= 0, got {prop_count}")
    if w < 2 * config.PROP_SPAWN_PAD or h < 2 * config.PROP_SPAWN_PAD:
        raise ValueError(f"bounds {w}x{h} too small for spawn padding {config.PROP_SPAWN_PAD}")

    if rng is None:
        rng = random.Random()
    if noise is None:
        noise = ValueNoise(seed=int(rng.random() * (1 << 30)))

    agent = Agent(x=w / 2, y=h / 2, tuning=tuning or AgentTuning())
    world = World(
        w=w,
        h=h,
        agent=agent,
        rng=rng,
        noise=noise,
        props=_scatter_props(rng, prop_count, w, h),
        prop_count=prop_count,
    )
    logger.info("world %gx%g created with %d props", w, h, prop_count)
    return world


def step(world: World, threat: Tuple[float, float], dt: float = 0.0) -> StepResult:
    """
    Advance one tick. Motion is per-tick, not per-second: dt is only
    accumulated into world.elapsed so frame rate never changes the dynamics.
    """
    world.clock += world.t_speed
    world.elapsed += dt

    agent = world.agent
    f = fear_of(agent.pos, threat, agent.tuning.fear_radius)

    steer_agent(agent, threat, f, world.clock, world.noise, world.w, world.h)
    stolen = resolve_props(world.props, agent, world.rng, world.w, world.h)

    world.score += stolen
    world.ticks += 1
    return StepResult(world=world, fear=f, stolen=stolen)


def reset(world: World) -> World:
    """Score back to zero and a fresh scatter of props; the blob keeps its state."""
    world.score = 0
    world.props = _scatter_props(world.rng, world.prop_count, world.w, world.h)
    logger.debug("world reset at tick %d", world.ticks)
    return world
