"""Construction of renderables from images, fonts and shapes."""

import logging

import pygame

from brickengine.renderables import Circle, Line, Texture

_log = logging.getLogger(__name__)


class RenderableFactory:
    """Creates textures, text, circles and lines ready to be queued."""

    def __init__(self, renderer, resource_manager):
        self._renderer = renderer
        self._resource_manager = resource_manager

    def create_text(self, font_path, text, font_size, color, layer, dst):
        """Render text into a texture; returns None when it cannot be rendered.

        A font_path of None uses the default font.
        """
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            font = pygame.font.Font(font_path, font_size)
            surface = font.render(text, False, (color.r, color.g, color.b, color.a))
        except (pygame.error, OSError) as error:
            _log.error("Failed to load surface %s error : %s", text, error)
            return None
        image = self._renderer.create_texture_from_surface(surface)
        return Texture(image, layer, dst=dst)

    def create_image(self, path, layer, dst, alpha=255, src=None):
        """Create a texture from an image file.

        dst is where the image is drawn; src, if given, is the part drawn.
        """
        image = self._resource_manager.get_texture(path)
        return Texture(image, layer, dst=dst, alpha=alpha, src=src)

    def create_circle(self, x, y, radius, filled, color, layer):
        """Create a circle."""
        return Circle(x, y, radius, filled, color, layer)

    def create_line(self, x1, y1, x2, y2, color, layer):
        """Create a line."""
        return Line(x1, y1, x2, y2, color, layer)