from __future__ import annotations

import argparse
from typing import Callable, Dict, Optional

import pygame

from blockfall.game import FallingBlockGame, GameConfig, GameState
from .renderer import Renderer


def build_key_map(game: FallingBlockGame) -> Dict[int, Callable[[], object]]:
    return {
        pygame.K_LEFT: game.move_left,
        pygame.K_RIGHT: game.move_right,
        pygame.K_DOWN: game.move_down,
        pygame.K_UP: game.rotate_piece,
        pygame.K_SPACE: game.rotate_piece,
    }


def dispatch_key(game: FallingBlockGame, key: int, now_ms: int) -> None:
    """Route one key press to the engine.

    Movement keys are only dispatched while a session is running; pause and
    start/restart are always honored.
    """
    if key == pygame.K_p:
        game.toggle_pause()
        return
    if key == pygame.K_RETURN:
        if game.state in (GameState.IDLE, GameState.GAME_OVER):
            game.start_game(now_ms)
        return
    if key == pygame.K_r:
        game.start_game(now_ms)
        return
    if game.state is not GameState.RUNNING:
        return
    handler = build_key_map(game).get(key)
    if handler is not None:
        handler()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell_size", type=int, default=30)
    p.add_argument("--fps", type=int, default=60)
    return p


def run(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlockGame(GameConfig(width=args.width, height=args.height, random_seed=args.seed))
        renderer = Renderer(cell_size=args.cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("blockfall")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        dispatch_key(game, event.key, pygame.time.get_ticks())

            # Gravity; a no-op unless the session is running
            game.tick(pygame.time.get_ticks())

            renderer.draw(screen, game)
            clock.tick(args.fps)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
