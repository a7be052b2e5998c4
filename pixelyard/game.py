"""The top-down game: window, main loop, player and creatures."""

from __future__ import annotations

import argparse
import logging

import pygame

from pixelyard.entities import create_entities
from pixelyard.player import WINDOW_HEIGHT, WINDOW_WIDTH, Player
from pixelyard.tools import load_texture

log = logging.getLogger(__name__)

WINDOW_TITLE = "game"
FONT_PATH = "assets/fonts/Tiny5.ttf"
FONT_SIZE = 48
DEATH_TEXTURE = "assets/death.png"
BACKGROUND_COLOR = (25, 25, 25)
FRAME_RATE = 120


class Game:
    """Owns the window and the world, and runs one frame at a time."""

    def __init__(self, title=WINDOW_TITLE, width=WINDOW_WIDTH, height=WINDOW_HEIGHT, fullscreen=False) -> None:
        pygame.init()
        pygame.font.init()

        self.font = None
        try:
            self.font = pygame.font.Font(FONT_PATH, FONT_SIZE)
        except (pygame.error, FileNotFoundError, OSError) as exc:
            log.error("Failed to load font: %s", exc)

        flags = pygame.RESIZABLE
        if fullscreen:
            flags |= pygame.FULLSCREEN
        self.screen = pygame.display.set_mode((width, height), flags)
        pygame.display.set_caption(title)

        self.is_running = True
        self.player = Player(pygame.time.get_ticks, self.font)
        self.player.load()
        self.death_texture = load_texture(DEATH_TEXTURE)
        self.entities = create_entities(pygame.time.get_ticks)

    def handle_events(self) -> None:
        """Process queued input; quit or Escape stops the game."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.is_running = False
            self.player.handle_event(event)

    def update(self, delta) -> None:
        """Advance the player and the creatures by ``delta`` seconds."""
        keys = pygame.key.get_pressed()
        if not self.player.update(delta, keys, self.entities):
            self.is_running = False
        for entity in self.entities:
            entity.update(delta)

    def render(self) -> None:
        """Draw one frame and show it."""
        self.screen.fill(BACKGROUND_COLOR)
        self.player.render(self.screen, self.death_texture)
        for entity in self.entities:
            entity.render(self.screen, self.death_texture)
        pygame.display.flip()

    def cleanup(self) -> None:
        """Release the world and shut pygame down."""
        self.entities.clear()
        self.death_texture = None
        self.font = None
        pygame.font.quit()
        pygame.quit()

    def run(self) -> None:
        """Loop over events, updates and drawing until the game stops."""
        clock = pygame.time.Clock()
        last_tick = pygame.time.get_ticks()
        while self.is_running:
            now = pygame.time.get_ticks()
            delta = (now - last_tick) / 1000.0
            last_tick = now

            self.handle_events()
            self.update(delta)
            self.render()
            clock.tick(FRAME_RATE)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="pixelyard", description="Top-down sprite game.")
    parser.add_argument("--fullscreen", action="store_true", help="start in fullscreen mode")
    args = parser.parse_args(argv)

    game = Game(WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT, args.fullscreen)
    try:
        game.run()
    finally:
        game.cleanup()
    return 0