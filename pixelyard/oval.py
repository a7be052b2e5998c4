"""Ellipse outlines and filled ellipses."""

from __future__ import annotations

import argparse
import math

import pygame

WINDOW_TITLE = "Oval Example"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
BACKGROUND_COLOR = (30, 30, 30)
OVAL_COLOR = (255, 100, 100)
FRAME_RATE = 60


def oval_points(cx, cy, rx, ry, segments):
    """``segments + 1`` points around the ellipse, the last closing the loop."""
    if segments <= 0:
        raise ValueError("segments must be positive")
    step = 2.0 * math.pi / segments
    return [
        (cx + rx * math.cos(i * step), cy + ry * math.sin(i * step))
        for i in range(segments + 1)
    ]


def oval_spans(cx, cy, rx, ry):
    """Horizontal line segments, one per row from ``cy - ry`` to ``cy + ry``."""
    if ry == 0:
        raise ValueError("vertical radius must not be zero")
    spans = []
    for y in range(-ry, ry + 1):
        dx = int(rx * math.sqrt(1.0 - (y * y) / (ry * ry)))
        spans.append(((cx - dx, cy + y), (cx + dx, cy + y)))
    return spans


def draw_oval(surface, color, cx, cy, rx, ry, segments, filled=False) -> None:
    """Draw an ellipse as filled rows or as a polyline of ``segments`` pieces."""
    if filled:
        for start, end in oval_spans(cx, cy, rx, ry):
            pygame.draw.line(surface, color, start, end)
    else:
        pygame.draw.lines(surface, color, False, oval_points(cx, cy, rx, ry, segments))


def _render(surface) -> None:
    surface.fill(BACKGROUND_COLOR)
    draw_oval(surface, OVAL_COLOR, 400, 300, 150, 100, 1, True)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="pixelyard-oval", description=WINDOW_TITLE)
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            _render(screen)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0