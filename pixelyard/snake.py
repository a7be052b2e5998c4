"""A grid snake game: eat apples, grow, avoid walls and yourself."""

from __future__ import annotations

import argparse
import random
from enum import Enum

import pygame

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800
CELL_SIZE = 30
TIME_FOR_MOVE = 0.5
WINDOW_TITLE = "Snake Game"
APPLE_COUNT = 5
GRID_WIDTH = WINDOW_WIDTH // CELL_SIZE
GRID_HEIGHT = WINDOW_HEIGHT // CELL_SIZE

HEAD_COLOR = (255, 0, 0)
TAIL_COLOR = (200, 0, 0)
APPLE_COLOR = (0, 255, 0)
BACKGROUND_COLOR = (25, 25, 25)


class Direction(Enum):
    """Unit steps on the grid."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


_KEYS = {
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}


class SnakeGame:
    """Snake state: body cells head first, apples, heading and move timer."""

    def __init__(self, rng=None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.body: list[tuple[int, int]] = [(1, 1)]
        self.direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT
        self.growing = False
        self.timer = 0.0
        self.apples = [self._random_cell() for _ in range(APPLE_COUNT)]

    @property
    def head(self) -> tuple[int, int]:
        return self.body[0]

    def _random_cell(self) -> tuple[int, int]:
        x = self._rng.randrange(GRID_WIDTH)
        y = self._rng.randrange(GRID_HEIGHT)
        return (x, y)

    def turn(self, direction: Direction) -> bool:
        """Queue a new heading unless it reverses the current one."""
        dx, dy = direction.value
        cx, cy = self.direction.value
        if (dx + cx, dy + cy) == (0, 0):
            return False
        self.next_direction = direction
        return True

    def update(self, delta: float) -> bool:
        """Advance the game; return False once the snake has crashed."""
        for i, apple in enumerate(self.apples):
            if apple == self.head:
                self.growing = True
                self.apples[i] = self._random_cell()

        if self.timer >= TIME_FOR_MOVE:
            self.direction = self.next_direction
            dx, dy = self.direction.value
            hx, hy = self.head
            last = self.body[-1]
            self.body = [(hx + dx, hy + dy), *self.body[:-1]]
            if self.growing:
                self.body.append(last)
                self.growing = False
            self.timer = 0.0

        hx, hy = self.head
        if not (0 <= hx < GRID_WIDTH and 0 <= hy < GRID_HEIGHT):
            return False
        if self.head in self.body[1:]:
            return False

        self.timer += delta
        return True

    def render(self, surface) -> None:
        """Draw background, snake and apples."""
        surface.fill(BACKGROUND_COLOR)

        def cell(pos):
            return pygame.Rect(pos[0] * CELL_SIZE, pos[1] * CELL_SIZE, CELL_SIZE, CELL_SIZE)

        surface.fill(HEAD_COLOR, cell(self.head))
        for segment in self.body[1:]:
            surface.fill(TAIL_COLOR, cell(segment))
        for apple in self.apples:
            surface.fill(APPLE_COLOR, cell(apple))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="pixelyard-snake", description=WINDOW_TITLE)
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        game = SnakeGame()
        clock = pygame.time.Clock()
        last_tick = pygame.time.get_ticks()
        running = True
        while running:
            now = pygame.time.get_ticks()
            delta = (now - last_tick) / 1000.0
            last_tick = now

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in _KEYS:
                        game.turn(_KEYS[event.key])
            if not running:
                break

            if not game.update(delta):
                break

            game.render(screen)
            pygame.display.flip()
            clock.tick(120)
    finally:
        pygame.quit()
    return 0