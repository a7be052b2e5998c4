"""Texture loading, blitting and text rendering helpers."""

from __future__ import annotations

import logging
from enum import Enum

import pygame

from pixelyard.animation import FRect

log = logging.getLogger(__name__)


class Flip(Enum):
    """Mirroring applied when drawing a sprite."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


def load_texture(path) -> pygame.Surface | None:
    """Load an image; log and return None if it cannot be read."""
    try:
        return pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError) as exc:
        log.warning("Unable to load texture %s: %s", path, exc)
        return None


def render_texture(target, texture, x, y, width, height) -> None:
    """Draw the whole texture scaled into the given rectangle."""
    if texture is None:
        log.error("Error: Texture is null!")
        return
    w, h = int(width), int(height)
    if w <= 0 or h <= 0:
        return
    target.blit(pygame.transform.scale(texture, (w, h)), (int(x), int(y)))


def render_texture_rect(target, texture, x, y, width, height, src_rect: FRect | None, flip=Flip.NONE) -> None:
    """Draw part of a texture, optionally mirrored, scaled into the given rectangle."""
    if texture is None:
        return
    x, y, width, height = int(x), int(y), int(width), int(height)
    if width <= 0 or height <= 0:
        return

    bounds = texture.get_rect()
    if src_rect is None:
        wanted = bounds.copy()
    else:
        wanted = pygame.Rect(int(src_rect.x), int(src_rect.y), int(src_rect.w), int(src_rect.h))
    if wanted.width <= 0 or wanted.height <= 0:
        return
    area = wanted.clip(bounds)
    if area.width <= 0 or area.height <= 0:
        return

    sx = width / wanted.width
    sy = height / wanted.height
    piece = texture.subsurface(area)
    if flip is not Flip.NONE:
        piece = pygame.transform.flip(piece, flip is Flip.HORIZONTAL, flip is Flip.VERTICAL)

    out_w = max(1, round(area.width * sx))
    out_h = max(1, round(area.height * sy))
    # Keep the visible part where it would sit had the source not been clipped.
    offset_x = area.x - wanted.x if flip is not Flip.HORIZONTAL else wanted.right - area.right
    offset_y = area.y - wanted.y if flip is not Flip.VERTICAL else wanted.bottom - area.bottom
    target.blit(
        pygame.transform.scale(piece, (out_w, out_h)),
        (x + round(offset_x * sx), y + round(offset_y * sy)),
    )


def create_text(font, text, color) -> pygame.Surface | None:
    """Render text with the given RGBA colour; log and return None on failure."""
    rgba = tuple(color)
    try:
        surface = font.render(text, True, rgba[:3])
    except pygame.error as exc:
        log.error("Failed to render text surface: %s", exc)
        return None
    if len(rgba) == 4 and rgba[3] < 255:
        surface.set_alpha(rgba[3])
    return surface