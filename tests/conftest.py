from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

import pytest

from blob.agent import Agent, AgentTuning
from world.props import Prop
from world.world import World


class FixedRandom:
    """Uniform source pinned to one value: 0.0 makes every trial succeed."""

    def __init__(self, value: float = 0.0):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class ConstantNoise:
    """Noise pinned to one value; 0.5 means zero jitter."""

    def __init__(self, value: float = 0.5):
        self.value = value

    def __call__(self, x: float, y: float = 0.0, z: float = 0.0) -> float:
        return self.value


def make_world(
    props: Optional[List[Prop]] = None,
    tuning: Optional[AgentTuning] = None,
    rng=None,
    noise=None,
    agent_pos=(240.0, 160.0),
    w: float = 480.0,
    h: float = 320.0,
) -> World:
    props = props or []
    return World(
        w=w,
        h=h,
        agent=Agent(x=agent_pos[0], y=agent_pos[1], tuning=tuning or AgentTuning()),
        rng=rng or FixedRandom(0.0),
        noise=noise or ConstantNoise(0.5),
        props=props,
        prop_count=len(props),
    )


@pytest.fixture
def always_steal() -> AgentTuning:
    return replace(AgentTuning(), steal_chance=1.0)


@pytest.fixture
def never_steal() -> AgentTuning:
    return replace(AgentTuning(), steal_chance=0.0)


FAR_AWAY = (10_000.0, 10_000.0)
