"""Small pygame games and demos: a sprite brawler, snake, a cube, an oval, music and text."""

__version__ = "0.1.0"