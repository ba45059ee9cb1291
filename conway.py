# conway.py
import sys
import argparse
import os
import tempfile
import time
import pygame

from life_grid import (
    DEFAULT_ALIVE_PROBABILITY,
    DEFAULT_COLUMNS,
    DEFAULT_ROWS,
    ConfigError,
    GridConfig,
    initialize,
    step,
)
from life_render import DebugHUD, GridRenderer

# =============================================================================
# CONFIG
# =============================================================================
FPS_DEFAULT = 10
WINDOW_WIDTH = 500
WINDOW_HEIGHT = 500
WINDOW_TITLE = "Conway's game of life"
LOG_NAME = "conway_life.log"

# =============================================================================
# Logging
# =============================================================================
def log_path() -> str:
    return os.path.join(os.environ.get("TEMP") or tempfile.gettempdir(), LOG_NAME)

def log_to_temp(msg: str):
    stamp = time.strftime("%Y-%m-%d %H:%M:%S")
    try:
        with open(log_path(), "a", encoding="utf-8") as f:
            f.write(f"{stamp} {msg.rstrip()}\n")
    except OSError:
        # logging must never take the window down
        pass

# =============================================================================
# Command line
# =============================================================================
def build_parser():
    parser = argparse.ArgumentParser(description="Conway's Game of Life on a toroidal grid")
    parser.add_argument('--rows', type=int, default=DEFAULT_ROWS, help="Grid rows")
    parser.add_argument('--columns', type=int, default=DEFAULT_COLUMNS, help="Grid columns")
    parser.add_argument('--probability', type=float, default=DEFAULT_ALIVE_PROBABILITY,
                        help="Chance that a cell starts alive")
    parser.add_argument('--seed', type=int, default=None, help="Seed for the starting grid")
    parser.add_argument('--fps', type=int, default=FPS_DEFAULT, help="Generations per second")
    parser.add_argument('--width', type=int, default=WINDOW_WIDTH, help="Window width in pixels")
    parser.add_argument('--height', type=int, default=WINDOW_HEIGHT, help="Window height in pixels")
    parser.add_argument('--generations', type=int, default=0,
                        help="Quit after this many generations, counted across reseeds "
                             "(0 runs until closed)")
    parser.add_argument('--debug', action='store_true', help="Show the debug HUD")
    return parser

def config_from_args(args) -> GridConfig:
    return GridConfig(
        rows=args.rows,
        columns=args.columns,
        alive_probability=args.probability,
        seed=args.seed,
    ).validate()

# =============================================================================
# MAIN
# =============================================================================
def set_mode_safe(size, flags, want_vsync=True):
    try:
        return pygame.display.set_mode(size, flags, vsync=1 if want_vsync else 0)
    except TypeError:
        return pygame.display.set_mode(size, flags)

def run(config: GridConfig, width, height, fps, generations=0, debug=False):
    pygame.init()
    try:
        screen = set_mode_safe((width, height), pygame.DOUBLEBUF)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()

        grid = initialize(config)
        renderer = GridRenderer(screen, grid.rows, grid.columns)
        hud = DebugHUD(width) if debug else None
        log_to_temp(f"start {config!r} window={width}x{height} fps={fps}")

        # steps taken this run; grid.generation restarts on reseed
        steps = 0
        paused = False
        running = True
        while running:
            single = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        paused = not paused
                    elif event.key == pygame.K_n and paused:
                        single = True
                    elif event.key == pygame.K_r:
                        grid = initialize(GridConfig(grid.rows, grid.columns,
                                                     config.alive_probability))
                        log_to_temp(f"reseed steps={steps} population={grid.population}")

            if running and (single or not paused):
                step(grid)
                steps += 1

            renderer.draw(*grid.snapshot())
            if hud is not None:
                hud.draw(screen, clock, grid, paused)
            pygame.display.flip()

            if generations and steps >= generations:
                running = False

            clock.tick(fps)

        log_to_temp(f"stop steps={steps} generation={grid.generation} "
                    f"population={grid.population}")
        return grid
    except Exception as e:
        log_to_temp(f"[CRASH] {e!r}")
        raise
    finally:
        pygame.quit()

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
    except ConfigError as e:
        log_to_temp(f"[CONFIG] {e}")
        parser.error(str(e))
    if args.fps < 1:
        parser.error("--fps must be >= 1")
    if args.width < 1 or args.height < 1:
        parser.error("--width and --height must be >= 1")

    run(config, args.width, args.height, args.fps,
        generations=max(0, args.generations), debug=args.debug)
    return 0

if __name__ == "__main__":
    sys.exit(main())
