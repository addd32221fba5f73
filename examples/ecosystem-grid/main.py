"""
Ecosystem Grid — foodweb Pygame viewer

Draws a foodweb session on a tile grid and advances it on a fixed tick
interval. The viewer only reads World values and calls Simulation.tick(),
so pausing between ticks never leaves a half-updated world on screen.

Controls:
  Space   Play / Pause
  S       Single step (while paused)
  R       Reset with the same rng
  M       Switch Normal / Inverted (new session)
  Esc     Quit
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

import pygame

from foodweb import RuleMode, Simulation, SimulationConfig, World, WorldStatus
from foodweb.types import Kind

TITLE = "Ecosystem Grid — foodweb"
FPS = 60
TILE = 28
HUD_H = 52
BG_COLOR = (14, 14, 14)
GRID_COLOR = (31, 31, 31)
EMPTY_COLOR = (46, 46, 46)
HUD_COLOR = (200, 200, 220)

KIND_COLORS = {
    Kind.GRASS: (60, 160, 70),
    Kind.PREY: (230, 200, 80),
    Kind.PREDATOR: (210, 60, 60),
}

STATUS_COLORS = {
    WorldStatus.BALANCED: (120, 220, 120),
    WorldStatus.PREY_STARVATION: (230, 180, 60),
    WorldStatus.PREDATOR_STARVATION: (230, 180, 60),
    WorldStatus.PREY_EXTINCTION: (230, 90, 90),
    WorldStatus.PREDATOR_EXTINCTION: (230, 90, 90),
    WorldStatus.EMPTY_WORLD: (150, 150, 150),
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Ecosystem Grid — foodweb visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: 42)")
    p.add_argument("--size", type=int, default=20, help="Grid width/height (8-40, default: 20)")
    p.add_argument("--tps", type=int, default=2, help="Ticks per second (default: 2)")
    p.add_argument("--inverted", action="store_true", help="Start in inverted mode")
    p.add_argument("--random", action="store_true", help="Use a random seed")
    p.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    args = p.parse_args()
    args.size = max(8, min(40, args.size))
    return args


def _draw_world(screen: pygame.Surface, world: World) -> None:
    for row, col in world.cells():
        rect = (col * TILE, HUD_H + row * TILE, TILE, TILE)
        pygame.draw.rect(screen, EMPTY_COLOR, rect)
        pygame.draw.rect(screen, GRID_COLOR, rect, 1)

    for e in world.entities:
        row, col = e.position
        cx = col * TILE + TILE // 2
        cy = HUD_H + row * TILE + TILE // 2
        color = KIND_COLORS[e.kind]
        if e.kind is Kind.GRASS:
            pygame.draw.rect(screen, color, (cx - TILE // 3, cy - TILE // 3, 2 * TILE // 3, 2 * TILE // 3))
        else:
            pygame.draw.circle(screen, color, (cx, cy), TILE // 2 - 3)


def _draw_hud(
    screen: pygame.Surface,
    font: pygame.font.Font,
    sim: Simulation,
) -> None:
    counts = sim.world.counts()
    pause_str = "" if sim.running else "  [PAUSED]"
    line1 = (
        f"Tick: {sim.world.tick}   Grass: {counts[Kind.GRASS]}   "
        f"Prey: {counts[Kind.PREY]}   Predators: {counts[Kind.PREDATOR]}   "
        f"{sim.rules.mode.value}{pause_str}"
    )
    screen.blit(font.render(line1, True, HUD_COLOR), (8, 6))
    status = sim.status
    screen.blit(font.render(status.value.replace("_", " "), True, STATUS_COLORS[status]), (8, 26))


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    config = SimulationConfig(
        rows=args.size,
        cols=args.size,
        mode=RuleMode.INVERTED if args.inverted else RuleMode.NORMAL,
        deterministic=not args.random,
        tps=args.tps,
    )
    sim = Simulation.from_config(config, seed=args.seed)

    pygame.init()
    screen = pygame.display.set_mode((args.size * TILE, HUD_H + args.size * TILE))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    tick_acc = 0.0
    running = True

    while running:
        dt = pg_clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    if sim.running:
                        sim.pause()
                    else:
                        sim.play()
                elif event.key == pygame.K_s and not sim.running:
                    sim.step()
                elif event.key == pygame.K_r:
                    sim.reset()
                    tick_acc = 0.0
                elif event.key == pygame.K_m:
                    mode = RuleMode.INVERTED if config.mode is RuleMode.NORMAL else RuleMode.NORMAL
                    config = dataclasses.replace(config, mode=mode)
                    sim = Simulation.from_config(config, seed=args.seed)
                    tick_acc = 0.0

        # --- Update (tick accumulator) ---
        if sim.running:
            tick_acc += dt
            while tick_acc >= sim.dt:
                sim.tick()
                tick_acc -= sim.dt

        # --- Draw ---
        screen.fill(BG_COLOR)
        _draw_world(screen, sim.world)
        _draw_hud(screen, font, sim)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
