"""Non-player creatures that idle, take damage and die."""

from __future__ import annotations

import math

from pixelyard.animation import Animation, EntityAnimations, FRect
from pixelyard.tools import Flip, load_texture, render_texture_rect

ENTITY_TEXTURE_WIDTH = 128
ENTITY_TEXTURE_HEIGHT = 128
ATTACK_RANGE = 100
SHEEP_TEXTURE = "assets/sheep.png"


class Entity:
    """A creature with health, a position and a sprite animation."""

    def __init__(self, health, x, y, clock) -> None:
        self.hp = float(health)
        self.x = float(x)
        self.y = float(y)
        self.texture = None
        self.src_rect = FRect(0, 0, ENTITY_TEXTURE_WIDTH, ENTITY_TEXTURE_HEIGHT)
        self.animations = EntityAnimations()
        self.animation = Animation(clock)
        self.play_death_animation = False
        self.is_dead = False

    def distance_to(self, x, y) -> float:
        """Distance from a point to the centre of the sprite, on whole pixels."""
        dx = int(x - (self.x + ENTITY_TEXTURE_WIDTH // 2))
        dy = int(y - (self.y + ENTITY_TEXTURE_HEIGHT // 2))
        return math.sqrt(dx * dx + dy * dy)

    def damage(self, attacker_x, attacker_y, amount) -> bool:
        """Take damage if the attacker is in range; return whether it landed."""
        if self.distance_to(attacker_x, attacker_y) > ATTACK_RANGE:
            return False
        self.hp -= amount
        if self.hp <= 0:
            self.play_death_animation = True
            self.is_dead = True
            self.animation.reset(0)
        return True

    def load(self, loader=load_texture) -> None:
        """Load the sprite sheet and set up the animation rows."""
        self.texture = loader(SHEEP_TEXTURE)
        self.animations = EntityAnimations()

    def update(self, delta) -> None:
        """Advance the idle or death animation."""
        if not self.is_dead:
            self.animation.show(self.animations.idle, self.src_rect, ENTITY_TEXTURE_WIDTH)
        if self.play_death_animation:
            if self.animation.show_once(self.animations.death, self.src_rect, ENTITY_TEXTURE_WIDTH):
                self.play_death_animation = False

    def render(self, surface, death_texture) -> None:
        """Draw the creature, or its death animation while it plays."""
        if not self.is_dead:
            render_texture_rect(
                surface, self.texture, self.x, self.y,
                ENTITY_TEXTURE_WIDTH, ENTITY_TEXTURE_HEIGHT, self.src_rect, Flip.NONE,
            )
        if self.play_death_animation:
            render_texture_rect(
                surface, death_texture, self.x, self.y,
                ENTITY_TEXTURE_WIDTH, ENTITY_TEXTURE_HEIGHT, self.src_rect, Flip.NONE,
            )


def nearest_entity(x, y, entities) -> Entity | None:
    """The closest living entity to a point, or None; the first wins a tie."""
    alive = [entity for entity in entities if not entity.is_dead]
    if not alive:
        return None
    return min(alive, key=lambda entity: entity.distance_to(x, y))


def create_entities(clock) -> list[Entity]:
    """The starting set of creatures, already loaded."""
    entity = Entity(20.0, 100, 100, clock)
    entity.load()
    return [entity]