"""A spinning, colour-faced cube drawn with a small software 3D projection."""

from __future__ import annotations

import argparse
import math

import pygame

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "3D Cube"

NEAR = 1.0
FAR = 100.0
CAMERA_DISTANCE = 5.0
ROTATION_AXIS = (-0.5, -1.0, -0.5)
TURN_SPEED = 90.0
GROW_SPEED = 1.0
CLEAR_COLOR = (0, 0, 0)
FRAME_RATE = 120

FACES = (
    ((255, 0, 0), ((-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1))),
    ((0, 255, 0), ((-1, -1, -1), (-1, 1, -1), (1, 1, -1), (1, -1, -1))),
    ((0, 0, 255), ((-1, 1, -1), (-1, 1, 1), (1, 1, 1), (1, 1, -1))),
    ((255, 255, 0), ((-1, -1, -1), (1, -1, -1), (1, -1, 1), (-1, -1, 1))),
    ((0, 255, 255), ((1, -1, -1), (1, 1, -1), (1, 1, 1), (1, -1, 1))),
    ((255, 0, 255), ((-1, -1, -1), (-1, -1, 1), (-1, 1, 1), (-1, 1, -1))),
)


def rotation_matrix(angle, axis):
    """3x3 matrix rotating by ``angle`` degrees about ``axis`` (normalised first)."""
    x, y, z = (float(v) for v in axis)
    norm = math.sqrt(x * x + y * y + z * z)
    if norm == 0:
        raise ValueError("rotation axis must not be the zero vector")
    x, y, z = x / norm, y / norm, z / norm
    rad = math.radians(angle)
    c, s = math.cos(rad), math.sin(rad)
    t = 1.0 - c
    return (
        (t * x * x + c, t * x * y - s * z, t * x * z + s * y),
        (t * x * y + s * z, t * y * y + c, t * y * z - s * x),
        (t * x * z - s * y, t * y * z + s * x, t * z * z + c),
    )


def _to_eye(matrix, scale, corner):
    vx, vy, vz = (scale * c for c in corner)
    rx, ry, rz = (row[0] * vx + row[1] * vy + row[2] * vz for row in matrix)
    return rx, ry, rz - CAMERA_DISTANCE


def _to_screen(point, aspect, width, height):
    x, y, z = point
    ndc_x = NEAR * x / -z / aspect
    ndc_y = NEAR * y / -z
    return (ndc_x + 1.0) * width / 2.0, (1.0 - ndc_y) * height / 2.0


def project_cube(angle, scale, width, height):
    """Visible cube faces as ``(color, screen_points)``, farthest first.

    Faces turned away from the viewer are dropped, as are faces that reach
    outside the near or far plane.
    """
    matrix = rotation_matrix(angle, ROTATION_AXIS)
    aspect = width / height
    visible = []
    for color, corners in FACES:
        eye = [_to_eye(matrix, scale, corner) for corner in corners]
        if any(z > -NEAR or z < -FAR for _, _, z in eye):
            continue
        centroid = tuple(sum(axis) / len(eye) for axis in zip(*eye))
        normal = (centroid[0], centroid[1], centroid[2] + CAMERA_DISTANCE)
        if sum(n * c for n, c in zip(normal, centroid)) >= 0:
            continue
        points = tuple(_to_screen(p, aspect, width, height) for p in eye)
        visible.append((centroid[2], color, points))
    visible.sort(key=lambda face: face[0])
    return [(color, points) for _, color, points in visible]


class CubeView:
    """Cube angle and scale, changed by the A and D keys."""

    def __init__(self, width=WINDOW_WIDTH, height=WINDOW_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.angle = 0.0
        self.scale = 1.0

    def update(self, delta, keys) -> None:
        """A turns and grows the cube, D turns it back and shrinks it."""
        if keys[pygame.K_a]:
            self.angle += TURN_SPEED * delta
            self.scale += GROW_SPEED * delta
        if keys[pygame.K_d]:
            self.angle -= TURN_SPEED * delta
            self.scale -= GROW_SPEED * delta

    def render(self, surface) -> None:
        """Clear the surface and draw the visible faces."""
        surface.fill(CLEAR_COLOR)
        for color, points in project_cube(self.angle, self.scale, self.width, self.height):
            pygame.draw.polygon(surface, color, points)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="pixelyard-cube", description=WINDOW_TITLE)
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        view = CubeView(WINDOW_WIDTH, WINDOW_HEIGHT)
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
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            view.update(delta, pygame.key.get_pressed())
            view.render(screen)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0