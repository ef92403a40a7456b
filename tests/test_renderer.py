import pygame
import pytest

from brickengine.renderables import Circle, Color, Flip, Line, Rect, Texture
from brickengine.renderer import Renderer

RED = Color(255, 0, 0, 255)
BLUE = Color(0, 0, 255, 255)


@pytest.fixture
def target():
    return pygame.Surface((10, 10), pygame.SRCALPHA)


def _two_tone_image():
    image = pygame.Surface((2, 1), pygame.SRCALPHA)
    image.set_at((0, 0), (255, 0, 0, 255))
    image.set_at((1, 0), (0, 0, 255, 255))
    return image


def test_layers_are_sorted(target):
    renderer = Renderer(target, [3, 1, 2])
    assert renderer.layers == [1, 2, 3]


def test_higher_layer_is_drawn_over_lower(target):
    renderer = Renderer(target, [2, 1])
    renderer.queue_renderable(Circle(5, 5, 3, True, RED, 2))
    renderer.queue_renderable(Circle(5, 5, 3, True, BLUE, 1))
    renderer.draw_screen()
    assert target.get_at((5, 5)) == (255, 0, 0, 255)


def test_unknown_layer_is_not_drawn(target):
    renderer = Renderer(target, [1])
    renderer.queue_renderable(Circle(5, 5, 3, True, RED, 7))
    renderer.draw_screen()
    assert target.get_at((5, 5)) == (0, 0, 0, 0)


def test_clear_screen_empties_queues_and_surface(target):
    renderer = Renderer(target, [1])
    renderer.queue_renderable(Circle(5, 5, 3, True, RED, 1))
    renderer.draw_screen()
    assert target.get_at((5, 5)) == (255, 0, 0, 255)
    renderer.clear_screen()
    assert target.get_at((5, 5)) == (0, 0, 0, 0)
    renderer.draw_screen()
    assert target.get_at((5, 5)) == (0, 0, 0, 0)


def test_outline_circle_leaves_centre_empty(target):
    renderer = Renderer(target, [1])
    renderer.render_circle(Circle(5, 5, 4, False, RED, 1))
    assert target.get_at((5, 5)) == (0, 0, 0, 0)


def test_line_is_drawn(target):
    renderer = Renderer(target, [1])
    renderer.render_line(Line(0, 2, 9, 2, BLUE, 1))
    assert target.get_at((0, 2)) == (0, 0, 255, 255)
    assert target.get_at((9, 2)) == (0, 0, 255, 255)
    assert target.get_at((0, 3)) == (0, 0, 0, 0)


def test_texture_is_scaled_into_destination(target):
    renderer = Renderer(target, [1])
    image = pygame.Surface((2, 2), pygame.SRCALPHA)
    image.fill((0, 255, 0, 255))
    renderer.render_texture(Texture(image, 1, dst=Rect(0, 0, 4, 4)))
    assert target.get_at((3, 3)) == (0, 255, 0, 255)
    assert target.get_at((4, 4)) == (0, 0, 0, 0)


def test_texture_source_rect_crops(target):
    renderer = Renderer(target, [1])
    texture = Texture(_two_tone_image(), 1, dst=Rect(0, 0, 1, 1), src=Rect(1, 0, 1, 1))
    renderer.render_texture(texture)
    assert target.get_at((0, 0)) == (0, 0, 255, 255)


def test_texture_horizontal_flip(target):
    renderer = Renderer(target, [1])
    texture = Texture(_two_tone_image(), 1, dst=Rect(0, 0, 2, 1))
    texture.flip = Flip.HORIZONTAL
    renderer.render_texture(texture)
    assert target.get_at((0, 0)) == (0, 0, 255, 255)
    assert target.get_at((1, 0)) == (255, 0, 0, 255)


def test_transparent_texture_draws_nothing(target):
    renderer = Renderer(target, [1])
    image = pygame.Surface((2, 2), pygame.SRCALPHA)
    image.fill((0, 255, 0, 255))
    renderer.render_texture(Texture(image, 1, dst=Rect(0, 0, 2, 2), alpha=0))
    assert target.get_at((0, 0)) == (0, 0, 0, 0)


def test_texture_without_image_draws_nothing(target):
    renderer = Renderer(target, [1])
    renderer.render_texture(Texture(None, 1, dst=Rect(0, 0, 2, 2)))
    assert target.get_at((0, 0)) == (0, 0, 0, 0)


def test_create_texture_from_surface_copies(target):
    renderer = Renderer(target, [1])
    source = pygame.Surface((3, 2), pygame.SRCALPHA)
    source.fill((1, 2, 3, 255))
    texture = renderer.create_texture_from_surface(source)
    assert texture is not source
    assert texture.get_size() == (3, 2)
    assert texture.get_at((0, 0)) == (1, 2, 3, 255)