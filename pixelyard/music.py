"""A music player window: space pauses, arrow keys skip ten seconds."""

from __future__ import annotations

import argparse
import logging

import pygame

log = logging.getLogger(__name__)

WINDOW_TITLE = "music"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
LOOPS = -1
SKIP_SECONDS = 10
BACKGROUND_COLOR = (25, 25, 25)
FRAME_RATE = 60


class MusicPlayer:
    """Play/pause and seek state over a music backend.

    The backend provides ``load(path)``, ``play(loops)``, ``halt()``,
    ``set_position(seconds)`` and ``position()``.
    """

    def __init__(self, backend, path) -> None:
        self._backend = backend
        self.music_time = 0.0
        self.is_playing = True
        backend.load(path)
        backend.play(LOOPS)
        backend.set_position(self.music_time)

    def toggle(self) -> None:
        """Stop if playing, start again if stopped, then restore the position."""
        if self.is_playing:
            self._backend.halt()
        else:
            self._backend.play(0)
        self.is_playing = not self.is_playing
        self._backend.set_position(self.music_time)

    def seek(self, offset) -> None:
        """Move the position by ``offset`` seconds."""
        self.music_time += offset
        self._backend.set_position(self.music_time)

    def update(self, delta) -> None:
        """Take the current position from the backend."""
        self.music_time = self._backend.position()


class _PygameMusic:
    """Music backend on top of pygame's streaming mixer."""

    def __init__(self) -> None:
        self._offset = 0.0

    def load(self, path) -> None:
        pygame.mixer.music.load(str(path))

    def play(self, loops) -> None:
        pygame.mixer.music.play(loops)
        self._offset = 0.0

    def halt(self) -> None:
        pygame.mixer.music.stop()

    def set_position(self, seconds) -> None:
        if not pygame.mixer.music.get_busy():
            return
        target = max(0.0, float(seconds))
        try:
            pygame.mixer.music.set_pos(target)
        except pygame.error as exc:
            log.warning("Cannot set music position: %s", exc)
            return
        self._offset = target - max(0, pygame.mixer.music.get_pos()) / 1000.0

    def position(self) -> float:
        elapsed = pygame.mixer.music.get_pos()
        if elapsed < 0:
            return 0.0
        return self._offset + elapsed / 1000.0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="pixelyard-music", description="Play a music file.")
    parser.add_argument("path", nargs="?", default="music.mp3", help="music file to play")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            pygame.mixer.init(frequency=44100, size=-16, channels=2)
        except pygame.error as exc:
            log.error("Cannot open audio: %s", exc)
            return 1
        try:
            player = MusicPlayer(_PygameMusic(), args.path)
        except (pygame.error, OSError) as exc:
            log.error("Cannot load music: %s", exc)
            return 1

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
                    elif event.key == pygame.K_SPACE:
                        player.toggle()
                    elif event.key == pygame.K_RIGHT:
                        player.seek(SKIP_SECONDS)
                    elif event.key == pygame.K_LEFT:
                        player.seek(-SKIP_SECONDS)

            player.update(delta)
            screen.fill(BACKGROUND_COLOR)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0