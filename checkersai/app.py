"""Window and event loop for playing checkers."""

from __future__ import annotations

import argparse
import logging

import pygame

from .board import Board
from .display import Display

WINDOW_SIZE = (1024, 768)
BACKGROUND = (100, 0, 0)

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="checkersai", description="Play checkers.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    board = Board()
    display = Display(board)

    pygame.init()
    try:
        window = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Checkers")
        logger.info("Window created")
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    display.record_mouse_click(*event.pos)

            window.fill(BACKGROUND)
            display.draw_board(window)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0