"""Health bar and health label drawn over the game view."""

from __future__ import annotations

import pygame

from pixelyard.animation import FRect
from pixelyard.tools import create_text, render_texture

BAR_X = 10
BAR_Y = 10
BAR_WIDTH = 300
BAR_HEIGHT = 50
BAR_COLOR = (255, 0, 0)
LABEL_COLOR = (255, 255, 255, 255)
LABEL_CHAR_WIDTH = 50


class PlayerUI:
    """Shows the player's health as a red bar with an "hp/max" label on top."""

    def __init__(self, max_health, font=None) -> None:
        self.max_health = float(max_health)
        self.font = font
        self.bar = FRect(BAR_X, BAR_Y, BAR_WIDTH, BAR_HEIGHT)
        self.label = ""
        self.label_texture: pygame.Surface | None = None

    def update(self, hp) -> None:
        """Resize the bar and re-render the label for the current health."""
        self.bar.w = hp / self.max_health * BAR_WIDTH
        self.label = f"{int(hp)}/{int(self.max_health)}"
        if self.font is not None:
            self.label_texture = create_text(self.font, self.label, LABEL_COLOR)
        else:
            self.label_texture = None

    def render(self, surface) -> None:
        """Draw the bar and, when a font is available, the label."""
        width = int(self.bar.w)
        if width > 0:
            surface.fill(
                BAR_COLOR,
                pygame.Rect(int(self.bar.x), int(self.bar.y), width, int(self.bar.h)),
            )

        if self.label_texture is None:
            return
        text_width = len(self.label) * LABEL_CHAR_WIDTH
        # Centre the label over the full bar, truncating like integer division.
        offset = int((BAR_WIDTH - text_width) / 2)
        render_texture(surface, self.label_texture, BAR_X + offset, BAR_Y, text_width, BAR_HEIGHT)