import pygame
import pytest

from pixelyard.entities import (
    ENTITY_TEXTURE_HEIGHT,
    ENTITY_TEXTURE_WIDTH,
    SHEEP_TEXTURE,
    Entity,
    create_entities,
    nearest_entity,
)


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def _centre(entity):
    return (entity.x + ENTITY_TEXTURE_WIDTH // 2, entity.y + ENTITY_TEXTURE_HEIGHT // 2)


def test_distance_zero_at_centre(clock):
    ent = Entity(20, 100, 100, clock)
    assert ent.distance_to(*_centre(ent)) == 0


def test_distance_is_symmetric_around_centre(clock):
    ent = Entity(20, 100, 100, clock)
    cx, cy = _centre(ent)
    assert ent.distance_to(cx + 30, cy) == ent.distance_to(cx - 30, cy)
    assert ent.distance_to(cx, cy + 40) == ent.distance_to(cx + 40, cy)


def test_damage_in_range(clock):
    ent = Entity(20, 100, 100, clock)
    assert ent.damage(*_centre(ent), 5) is True
    assert ent.hp == 20 - 5
    assert ent.is_dead is False


def test_damage_out_of_range(clock):
    ent = Entity(20, 100, 100, clock)
    cx, cy = _centre(ent)
    assert ent.damage(cx + 101, cy, 5) is False
    assert ent.hp == 20


def test_damage_at_range_edge_lands(clock):
    ent = Entity(20, 100, 100, clock)
    cx, cy = _centre(ent)
    assert ent.damage(cx + 100, cy, 1) is True


def test_lethal_damage_starts_death(clock):
    ent = Entity(20, 100, 100, clock)
    ent.damage(*_centre(ent), 20)
    assert ent.is_dead is True
    assert ent.play_death_animation is True
    assert ent.animation.current_index == 0


def test_nearest_skips_dead(clock):
    near = Entity(20, 0, 0, clock)
    far = Entity(20, 500, 500, clock)
    near.is_dead = True
    assert nearest_entity(0, 0, [near, far]) is far


def test_nearest_picks_closest(clock):
    a = Entity(20, 0, 0, clock)
    b = Entity(20, 300, 0, clock)
    assert nearest_entity(*_centre(b), [a, b]) is b
    assert nearest_entity(*_centre(a), [a, b]) is a


def test_nearest_none_when_empty(clock):
    assert nearest_entity(0, 0, []) is None


def test_update_advances_idle_frame(clock):
    ent = Entity(20, 0, 0, clock)
    clock.now = ent.animations.idle.delay
    ent.update(0.0)
    assert ent.src_rect.x == ENTITY_TEXTURE_WIDTH
    assert ent.src_rect.y == 0


def test_death_animation_runs_to_end(clock):
    ent = Entity(20, 0, 0, clock)
    ent.damage(*_centre(ent), 50)
    death = ent.animations.death
    for step in range(1, death.frames + 3):
        clock.now = step * death.delay
        ent.update(0.0)
    assert ent.play_death_animation is False
    assert ent.src_rect.x == (death.frames - 1) * ENTITY_TEXTURE_WIDTH
    assert ent.src_rect.y == death.row * ENTITY_TEXTURE_HEIGHT


def test_load_uses_sheep_texture(clock):
    requested = []
    marker = pygame.Surface((1, 1))

    def loader(path):
        requested.append(path)
        return marker

    ent = Entity(20, 0, 0, clock)
    ent.load(loader)
    assert requested == [SHEEP_TEXTURE]
    assert ent.texture is marker


def test_render_alive_and_dying(clock):
    red, blue = (255, 0, 0, 255), (0, 0, 255, 255)
    ent = Entity(20, 50, 60, clock)
    ent.texture = pygame.Surface((ENTITY_TEXTURE_WIDTH, ENTITY_TEXTURE_HEIGHT))
    ent.texture.fill(red)
    death = pygame.Surface((ENTITY_TEXTURE_WIDTH, ENTITY_TEXTURE_HEIGHT))
    death.fill(blue)

    target = pygame.Surface((400, 400))
    ent.render(target, death)
    assert target.get_at((51, 61)) == red
    assert target.get_at((0, 0)) == (0, 0, 0, 255)

    ent.damage(*_centre(ent), 100)
    target = pygame.Surface((400, 400))
    ent.render(target, death)
    assert target.get_at((51, 61)) == blue


def test_create_entities_starting_set(clock):
    entities = create_entities(clock)
    assert len(entities) == 1
    assert (entities[0].x, entities[0].y, entities[0].hp) == (100, 100, 20)