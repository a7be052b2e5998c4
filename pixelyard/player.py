"""The player character: movement, attacks, health and death."""

from __future__ import annotations

import pygame

from pixelyard.animation import Animation, FRect, PlayerAnimations
from pixelyard.entities import nearest_entity
from pixelyard.player_ui import PlayerUI
from pixelyard.tools import Flip, load_texture, render_texture_rect

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

MAX_HEALTH = 20
FALLING_SPEED = 300
ENTITY_SPEED = 100
PLAYER_TEXTURE_WIDTH = 192
PLAYER_TEXTURE_HEIGHT = 192
DEATH_SPRITE_SIZE = 128
ATTACK_DAMAGE_PER_SECOND = 50.0
SELF_DAMAGE_PER_SECOND = 1.0
PLAYER_TEXTURE = "assets/player.png"

LEFT_BUTTON = 1
RIGHT_BUTTON = 3


class Player:
    """Player state driven by keyboard, mouse and a millisecond clock."""

    def __init__(self, clock, font=None) -> None:
        self._font = font
        self.texture = None
        self.src_rect = FRect(0, 0, PLAYER_TEXTURE_WIDTH, PLAYER_TEXTURE_HEIGHT)
        self.animations = PlayerAnimations()
        self.animation = Animation(clock)
        self.flip = Flip.NONE
        self.hp = float(MAX_HEALTH)
        self.ui = PlayerUI(MAX_HEALTH, font)
        self.x = 0.0
        self.y = 0.0
        self.walking = False
        self.play_death_animation = False
        self.attack_cooldown = 0.0
        self.defending_cooldown = 0.0
        self.defending = False
        self.attacking = False

    def damage(self, amount) -> None:
        """Lose health."""
        self.hp -= amount

    def is_dead(self) -> bool:
        return self.hp <= 0

    def load(self, loader=load_texture) -> None:
        """Load the sprite sheet and place the player at the bottom-left corner."""
        self.texture = loader(PLAYER_TEXTURE)
        self.y = float(WINDOW_HEIGHT - PLAYER_TEXTURE_HEIGHT)
        self.x = 0.0
        self.animations = PlayerAnimations()
        self.ui = PlayerUI(MAX_HEALTH, self._font)

    def handle_event(self, event) -> None:
        """React to mouse buttons: left attacks, right defends."""
        button = getattr(event, "button", None)
        if event.type == pygame.MOUSEBUTTONDOWN:
            if button == LEFT_BUTTON:
                self.attacking = True
                self.defending = False
                self.animation.reset(0)
            elif button == RIGHT_BUTTON:
                self.defending = True
                self.attacking = False
                self.animation.reset(0)
        elif event.type == pygame.MOUSEBUTTONUP:
            if button == LEFT_BUTTON:
                self.attacking = False
            elif button == RIGHT_BUTTON:
                self.defending = False

    def update(self, delta, keys, entities) -> bool:
        """Advance one frame; return False once the death animation has finished."""
        if not self.is_dead():
            self._update_alive(delta, keys, entities)
        else:
            self.walking = False
            self.attacking = False
            self.defending = False

        if self.is_dead() and not self.play_death_animation:
            self.play_death_animation = True
            self.animation.reset(0)
            self.src_rect.w = float(DEATH_SPRITE_SIZE)
            self.src_rect.h = float(DEATH_SPRITE_SIZE)

        if self.play_death_animation:
            if self.animation.show_once(self.animations.death, self.src_rect, DEATH_SPRITE_SIZE):
                self.play_death_animation = False
                return False

        self.ui.update(self.hp)
        return True

    def _update_alive(self, delta, keys, entities) -> None:
        self.walking = False
        if self.attack_cooldown > 0:
            self.attack_cooldown = max(0.0, self.attack_cooldown - delta)
        if self.defending_cooldown > 0:
            self.defending_cooldown = max(0.0, self.defending_cooldown - delta)

        step = ENTITY_SPEED * delta
        if keys[pygame.K_w]:
            self.walking = True
            self.y -= step
        if keys[pygame.K_s]:
            self.walking = True
            self.y += step
        if keys[pygame.K_a]:
            self.flip = Flip.HORIZONTAL
            self.walking = True
            self.x -= step
        if keys[pygame.K_d]:
            self.flip = Flip.NONE
            self.walking = True
            self.x += step
        if keys[pygame.K_h]:
            self.hp -= SELF_DAMAGE_PER_SECOND * delta

        if self.walking:
            self.animation.show(self.animations.walk, self.src_rect, PLAYER_TEXTURE_WIDTH)
        elif self.attacking:
            attack = self.animations.attack_horizontal
            self.animation.show(attack, self.src_rect, PLAYER_TEXTURE_WIDTH)
            if self.animation.current_index == attack.frames - 1:
                self._strike(delta, entities)
        else:
            self.animation.show(self.animations.idle, self.src_rect, PLAYER_TEXTURE_WIDTH)

    def _strike(self, delta, entities) -> None:
        target = nearest_entity(int(self.x), int(self.y), entities)
        if target is None or target.is_dead:
            return
        looking_right = self.flip is Flip.NONE
        facing = (
            (looking_right and self.x < target.x)
            or (not looking_right and self.x > target.x)
            or self.x == target.x
        )
        if facing:
            target.damage(
                int(self.x + PLAYER_TEXTURE_WIDTH // 2),
                int(self.y + PLAYER_TEXTURE_HEIGHT // 2),
                ATTACK_DAMAGE_PER_SECOND * delta,
            )

    def render(self, surface, death_texture) -> None:
        """Draw the player, its death animation while it plays, and the health UI."""
        if not self.is_dead():
            render_texture_rect(
                surface, self.texture, self.x, self.y,
                PLAYER_TEXTURE_WIDTH, PLAYER_TEXTURE_HEIGHT, self.src_rect, self.flip,
            )
        if self.play_death_animation:
            inset = (PLAYER_TEXTURE_WIDTH - DEATH_SPRITE_SIZE) // 2
            render_texture_rect(
                surface, death_texture, self.x + inset, self.y + inset,
                DEATH_SPRITE_SIZE, DEATH_SPRITE_SIZE, self.src_rect, Flip.NONE,
            )
        self.ui.render(surface)