"""A window showing one line of text stretched across the top."""

from __future__ import annotations

import argparse
import logging

import pygame

from pixelyard.tools import create_text as _render_text
from pixelyard.tools import render_texture

log = logging.getLogger(__name__)

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "game"
BASE_FONT = "font.ttf"
TEXT = "telhgxt"
FONT_SIZE = 48
TEXT_COLOR = (255, 255, 0, 255)
BACKGROUND_COLOR = (255, 255, 255)
FRAME_RATE = 60


def banner_height(width, length) -> int:
    """Height of the banner for ``length`` characters across ``width`` pixels."""
    if length <= 0:
        raise ValueError("text length must be positive")
    return width // length * 2


def create_text(text, size, color, font_path=BASE_FONT):
    """Render ``text`` with the font at ``font_path``; None if it cannot be done."""
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        font = pygame.font.Font(font_path, size)
    except (pygame.error, FileNotFoundError, OSError) as exc:
        log.error("Failed to load font: %s", exc)
        return None
    return _render_text(font, text, color)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="pixelyard-text", description="Show a line of text.")
    parser.add_argument("text", nargs="?", default=TEXT, help="text to show")
    parser.add_argument("--font", default=BASE_FONT, help="TrueType font file")
    args = parser.parse_args(argv)
    if not args.text:
        parser.error("text must not be empty")

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        texture = create_text(args.text, FONT_SIZE, TEXT_COLOR, args.font)
        if texture is None:
            return 1
        height = banner_height(WINDOW_WIDTH, len(args.text))

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.fill(BACKGROUND_COLOR)
            render_texture(screen, texture, 0, 0, WINDOW_WIDTH, height)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0