"""
Panic Blob: a blob that flees the mouse, bumps dots around and steals the small ones.

Click (or press R) to scatter a fresh set of dots and zero the score.
"""

from __future__ import annotations
import logging
import os

import pygame

import config
from render.renderer import draw_world
from world.world import initialize, reset, step


def setup_logging() -> None:
    level = os.environ.get("PANIC_BLOB_LOG_LEVEL", config.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    setup_logging()
    log = logging.getLogger("panic_blob")

    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("Panic Blob")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("sans-serif", 16)

    world = initialize(config.PROP_COUNT, config.SCREEN_W, config.SCREEN_H)
    threat = (float(config.SCREEN_W), float(config.SCREEN_H))

    running = True
    while running:
        dt = clock.tick(config.FPS) / 1000.0

        # inputs are applied between steps only
        want_reset = False
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.MOUSEBUTTONDOWN:
                want_reset = True
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_r:
                want_reset = True
            elif e.type == pygame.MOUSEMOTION:
                threat = (float(e.pos[0]), float(e.pos[1]))

        if want_reset:
            log.info("reset after %d ticks, score was %d", world.ticks, world.score)
            reset(world)

        result = step(world, threat, dt)

        draw_world(screen, font, world, threat, result.fear)
        pygame.display.flip()

    log.info("quit after %.1fs, %d stolen", world.elapsed, world.score)
    pygame.quit()


if __name__ == "__main__":
    main()
