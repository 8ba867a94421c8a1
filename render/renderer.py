"""
panic_blob module: render/renderer.py

Pygame rendering of the world. Reads simulation state and the tick's fear;
never changes either.
"""

from __future__ import annotations
import math
from typing import Iterable, Tuple

import pygame

import config
from noisefield.value_noise import NoiseSource
from render import colors
from world.world import PropView, World


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _ellipse(screen: pygame.Surface, col, cx: float, cy: float, w: float, h: float) -> None:
    pygame.draw.ellipse(screen, col, pygame.Rect(cx - w / 2, cy - h / 2, w, h))


def draw_walls(screen: pygame.Surface, w: int, h: int) -> None:
    band = config.WALL_BAND
    for rect in ((0, 0, w, band), (0, h - band, w, band), (0, 0, band, h), (w - band, 0, band, h)):
        pygame.draw.rect(screen, colors.WALL, rect)


def draw_props(screen: pygame.Surface, props: Iterable[PropView]) -> None:
    for p in props:
        col = colors.PROP_HELD if p.held else colors.PROP_FREE
        pygame.draw.circle(screen, col, (int(p.x), int(p.y)), int(p.radius))


def blob_outline(x: float, y: float, radius: float, fear: float, t: float, noise: NoiseSource) -> list[Tuple[float, float]]:
    """
    Wobbling outline: radius drifts with 3D noise around the ring, and both the
    wobble amplitude and its speed grow with fear. A finer per-point shake kicks
    in only when scared.
    """
    speed_boost = _lerp(1.0, 2.4, fear)
    wobble = config.OUTLINE_WOBBLE * _lerp(1.0, 1.9, fear)
    freq = config.OUTLINE_WOBBLE_FREQ
    n_points = config.OUTLINE_POINTS

    pts = []
    for i in range(n_points):
        a = i / n_points * math.tau
        n = noise(math.cos(a) * freq + 100, math.sin(a) * freq + 100, t * speed_boost)
        r = radius + _lerp(-wobble, wobble, n)
        shake = (noise(i * 0.12, t * 5) - 0.5) * 1.1 * fear
        pts.append((x + math.cos(a) * (r + shake), y + math.sin(a) * (r + shake)))
    return pts


def draw_face(screen: pygame.Surface, x: float, y: float, threat: Tuple[float, float], fear: float, t: float, noise: NoiseSource) -> None:
    dx = x - threat[0]
    dy = y - threat[1]
    d = max(config.EPS_DIST, math.hypot(dx, dy))

    # pupils look away from the threat
    look_x = dx / d * 6 * fear
    look_y = dy / d * 6 * fear

    jx = (noise(1000, t * 10) - 0.5) * 2.5 * fear
    jy = (noise(2000, t * 10) - 0.5) * 2.5 * fear

    eye = _lerp(9, 12, fear)
    for side in (-9, 9):
        _ellipse(screen, colors.EYE, x + side + jx, y - 5 + jy, eye, eye)
        _ellipse(screen, colors.PUPIL, x + side + look_x + jx, y - 5 + look_y + jy, 4, 4)

    _ellipse(screen, colors.PUPIL, x + jx, y + 10 + jy, _lerp(6, 9, fear), _lerp(4, 10, fear))


def draw_blob(screen: pygame.Surface, world: World, threat: Tuple[float, float], fear: float) -> None:
    x, y = world.agent_pos
    pts = blob_outline(x, y, world.agent.tuning.radius, fear, world.clock, world.noise)
    pygame.draw.polygon(screen, colors.BLOB, pts)
    draw_face(screen, x, y, threat, fear, world.clock, world.noise)


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    lines = [
        "Panic Blob - move mouse near to scare it.",
        "Bump dots to push them. Small dots may be stolen.",
        f"Stolen objects: {score}",
    ]

    y = 8
    for line in lines:
        txt = font.render(line, True, colors.TEXT)
        screen.blit(txt, (10, y))
        y += 18


def draw_world(screen: pygame.Surface, font: pygame.font.Font, world: World, threat: Tuple[float, float], fear: float) -> None:
    screen.fill(colors.BG)
    draw_walls(screen, int(world.w), int(world.h))
    draw_props(screen, world.prop_views())
    draw_blob(screen, world, threat, fear)
    draw_hud(screen, font, world.score)
