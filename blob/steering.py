"""
panic_blob module: blob/steering.py

Panic motion for one tick:
- damping first, so the same tick's flee impulse is never erased
- flee force straight away from the threat, scaled up by fear
- no idle drift: a calm blob just decays to rest
- speed clamp, integrate, smooth noise jitter, padded wall bounce
"""

from __future__ import annotations
from typing import Tuple

import config
from blob.agent import Agent
from noisefield.value_noise import NoiseSource
from world.physics import bounce_walls, clamp_speed, unit_away


def steer_agent(
    agent: Agent,
    threat: Tuple[float, float],
    fear: float,
    t: float,
    noise: NoiseSource,
    w: float,
    h: float,
) -> None:
    tune = agent.tuning

    agent.vx *= tune.damping
    agent.vy *= tune.damping

    if fear > config.FEAR_EPSILON:
        nx, ny, _ = unit_away(threat[0], threat[1], agent.x, agent.y)
        push = tune.accel * (1.0 + tune.flee_boost * fear)
        agent.vx += nx * push
        agent.vy += ny * push

    agent.vx, agent.vy = clamp_speed(agent.vx, agent.vy, tune.max_speed)

    agent.x += agent.vx
    agent.y += agent.vy

    # continuous noise: successive frames shake smoothly instead of teleporting
    nt = t * config.JITTER_TIME_SCALE
    agent.x += (noise(config.JITTER_SEED_X, nt) - 0.5) * tune.jitter * fear
    agent.y += (noise(config.JITTER_SEED_Y, nt) - 0.5) * tune.jitter * fear

    agent.x, agent.y, agent.vx, agent.vy = bounce_walls(
        agent.x, agent.y, agent.vx, agent.vy, w, h, tune.wall_pad, tune.restitution
    )
