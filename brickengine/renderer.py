"""Layered drawing of renderables onto a pygame surface."""

import logging

import pygame

from brickengine.renderables import Flip

_log = logging.getLogger(__name__)

_CLEAR_COLOR = (0, 0, 0, 0)


def _rgba(color):
    return (color.r, color.g, color.b, color.a)


class Renderer:
    """Collects renderables per layer and draws them in ascending layer order.

    Only the layers given at construction are drawn. A renderable queued on
    an unknown layer is accepted but never drawn.
    """

    def __init__(self, surface, layers):
        self.surface = surface
        self.layers = sorted(layers)
        self._queues = {layer: [] for layer in self.layers}

    def queue_renderable(self, renderable):
        """Queue a renderable for the next draw_screen call."""
        queue = self._queues.get(renderable.layer)
        if queue is None:
            _log.warning(
                "renderable queued on unknown layer %s; it will not be drawn",
                renderable.layer,
            )
            queue = self._queues[renderable.layer] = []
        queue.append(renderable)

    def clear_screen(self):
        """Clear the target surface and empty the queues of the known layers."""
        self.surface.fill(_CLEAR_COLOR)
        for layer in self.layers:
            self._queues[layer].clear()

    def draw_screen(self):
        """Draw every queued renderable, lowest layer first, then present."""
        for layer in self.layers:
            for renderable in self._queues[layer]:
                renderable.render(self)
        if self.surface is pygame.display.get_surface():
            pygame.display.flip()

    def render_texture(self, texture):
        """Draw a texture with its source crop, flip, destination and alpha."""
        image = texture.texture
        if image is None:
            return

        src = texture.src
        if src is not None:
            piece = pygame.Surface((src.w, src.h), pygame.SRCALPHA)
            piece.blit(image, (0, 0), pygame.Rect(src.x, src.y, src.w, src.h))
        else:
            piece = image.copy()

        if texture.flip:
            piece = pygame.transform.flip(
                piece,
                bool(texture.flip & Flip.HORIZONTAL),
                bool(texture.flip & Flip.VERTICAL),
            )

        dst = texture.dst
        if dst is not None:
            position = (dst.x, dst.y)
            size = (max(dst.w, 0), max(dst.h, 0))
        else:
            position = (0, 0)
            size = self.surface.get_size()
        if piece.get_size() != size:
            piece = pygame.transform.scale(piece, size)

        piece.set_alpha(texture.alpha)
        self.surface.blit(piece, position)

    def render_circle(self, circle):
        """Draw a circle outline or a filled disc, blended onto the target."""
        overlay = self._overlay()
        pygame.draw.circle(
            overlay,
            _rgba(circle.color),
            (circle.x, circle.y),
            circle.radius,
            0 if circle.filled else 1,
        )
        self.surface.blit(overlay, (0, 0))

    def render_line(self, line):
        """Draw a line segment, blended onto the target."""
        overlay = self._overlay()
        pygame.draw.line(
            overlay, _rgba(line.color), (line.x1, line.y1), (line.x2, line.y2)
        )
        self.surface.blit(overlay, (0, 0))

    def create_texture_from_surface(self, surface):
        """Return a drawable image made from a loaded surface."""
        return surface.copy()

    def _overlay(self):
        return pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)