import random

import pygame

from pixelyard.snake import (
    APPLE_COUNT,
    CELL_SIZE,
    GRID_HEIGHT,
    GRID_WIDTH,
    TIME_FOR_MOVE,
    Direction,
    SnakeGame,
)


class SeqRng:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        return next(self._values)


FAR_APPLES = [20, 20, 21, 21, 22, 22, 23, 23, 24, 24]


def _step(game):
    """Let the move timer fill, then take one move."""
    first = game.update(TIME_FOR_MOVE)
    second = game.update(0.0)
    return first, second


def test_apples_spawn_inside_grid():
    game = SnakeGame(random.Random(7))
    assert len(game.apples) == APPLE_COUNT
    assert all(0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT for x, y in game.apples)


def test_starts_moving_right():
    game = SnakeGame(SeqRng(FAR_APPLES))
    start = game.head
    assert _step(game) == (True, True)
    assert game.head == (start[0] + 1, start[1])
    assert len(game.body) == 1


def test_no_move_before_timer():
    game = SnakeGame(SeqRng(FAR_APPLES))
    start = game.head
    game.update(TIME_FOR_MOVE * 0.8)
    game.update(TIME_FOR_MOVE * 0.8)
    assert game.head == start
    game.update(0.0)
    assert game.head != start


def test_reverse_turn_rejected():
    game = SnakeGame(SeqRng(FAR_APPLES))
    assert game.turn(Direction.LEFT) is False
    assert game.next_direction is Direction.RIGHT


def test_turn_checks_current_not_queued_direction():
    game = SnakeGame(SeqRng(FAR_APPLES))
    assert game.turn(Direction.UP) is True
    assert game.turn(Direction.DOWN) is True
    assert game.next_direction is Direction.DOWN


def test_eating_grows_and_respawns():
    game = SnakeGame(SeqRng([2, 1] + FAR_APPLES[2:] + [10, 10]))
    _step(game)
    assert game.head == (2, 1)
    game.update(0.0)
    assert game.growing is True
    assert (10, 10) in game.apples
    _step(game)
    assert len(game.body) == 2
    assert game.body[1] == (2, 1)
    assert game.growing is False


def test_wall_ends_game():
    game = SnakeGame(SeqRng(FAR_APPLES))
    game.turn(Direction.UP)
    assert _step(game) == (True, True)
    assert _step(game) == (True, False)


def test_self_collision_ends_game():
    game = SnakeGame(SeqRng(FAR_APPLES))
    game.body = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
    game.turn(Direction.DOWN)
    assert _step(game) == (True, False)


def test_render_colours():
    game = SnakeGame(SeqRng(FAR_APPLES))
    surface = pygame.Surface((800, 800))
    game.render(surface)
    hx, hy = game.head
    assert surface.get_at((hx * CELL_SIZE + 1, hy * CELL_SIZE + 1)) == (255, 0, 0, 255)
    ax, ay = game.apples[0]
    assert surface.get_at((ax * CELL_SIZE + 1, ay * CELL_SIZE + 1)) == (0, 255, 0, 255)
    assert surface.get_at((799, 799)) == (25, 25, 25, 255)