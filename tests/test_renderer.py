import pygame
import pytest

from grid_invaders.entities import World
from grid_invaders.overlay import Overlay, StartButton
from grid_invaders.renderer import Renderer


@pytest.fixture
def surface():
    pygame.font.init()
    yield pygame.Surface((800, 600))
    pygame.font.quit()


@pytest.fixture
def renderer(surface, config):
    return Renderer(surface, config)


def test_draws_entities(renderer, surface, world):
    world.spawn_projectile()

    renderer.draw(world)

    assert surface.get_at((400, 580)) == pygame.Color("green")
    assert surface.get_at((45, 40)) == pygame.Color("red")
    assert surface.get_at((5, 5)) == pygame.Color("black")


def test_projectile_is_drawn(renderer, surface, world):
    projectile = world.spawn_projectile()
    projectile.y = 300

    renderer.draw(world)

    assert surface.get_at((int(projectile.x) + 1, 305)) == pygame.Color("yellow")


def test_destroyed_enemies_are_not_drawn(renderer, surface, world):
    world.enemy_at(0, 0).alive = False

    renderer.draw(world)

    assert surface.get_at((45, 40)) == pygame.Color("black")


def test_draw_does_not_mutate_world(renderer, world, config):
    renderer.draw(world)

    assert world == World.create(config)


def test_hidden_overlay_draws_nothing(renderer, surface, world):
    renderer.draw(world)
    before = pygame.image.tostring(surface, "RGB")

    renderer.draw_overlay(Overlay(visible=False), StartButton())

    assert pygame.image.tostring(surface, "RGB") == before


def test_visible_overlay_shades_field(renderer, surface, world):
    renderer.draw(world)
    button = StartButton()
    button.center_on(400, 340)

    renderer.draw_overlay(Overlay(visible=True, message="You Win!"), button)

    shaded = surface.get_at((45, 40))
    assert shaded != pygame.Color("red")
    assert shaded.r < 255
