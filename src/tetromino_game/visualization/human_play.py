from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional

import pygame

from tetromino_game.game import Action, GameConfig, TetrisManager
from tetromino_game.utils.logging import setup_logger
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_z: Action.ROTATE_CCW,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the falling-block game in a pygame window")
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--gravity-ms", type=int, default=600)
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--log-level", type=str, default="info")
    p.add_argument("--no-rich", action="store_true")
    return p


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        width=int(args.width),
        height=int(args.height),
        random_seed=args.seed,
        gravity_ms=int(args.gravity_ms),
    )


def run(config: GameConfig, cell_size: int = 28) -> None:
    logger = logging.getLogger("tetromino_game")
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = TetrisManager.from_config(config)
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Tetromino Game")
        logger.info("playing on a %dx%d field", game.num_columns(), game.num_rows())

        last_fall = pygame.time.get_ticks()

        running = True
        while running:
            # Input handling
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and game.game_over:
                        logger.info("restarting")
                        game.reset()
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            game.apply(action)

            # Gravity
            now = pygame.time.get_ticks()
            if now - last_fall >= config.gravity_ms:
                game.tick()
                last_fall = now

            renderer.draw(screen, game)

            if game.game_over:
                font = pygame.font.SysFont(None, 28)
                text = font.render("Topped out - R to restart, ESC to quit", True, (255, 255, 255))
                rect = text.get_rect(center=(screen.get_width() // 2, 12))
                screen.blit(text, rect)
                pygame.display.flip()

            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logger(name="tetromino_game", use_rich=(not bool(args.no_rich)), level=str(args.log_level))
    run(config_from_args(args), cell_size=int(args.cell_size))


if __name__ == "__main__":  # pragma: no cover
    main()
