"""Things that can be drawn: textures, circles and lines."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import IntFlag


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in 0..255."""

    r: int
    g: int
    b: int
    a: int


@dataclass
class Rect:
    """A mutable integer rectangle."""

    x: int
    y: int
    w: int
    h: int


class Flip(IntFlag):
    """How a texture is mirrored when drawn."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


class Renderable(ABC):
    """Something a renderer can draw on a given layer."""

    def __init__(self, layer, alpha=255):
        self._layer = layer
        self.alpha = alpha

    @property
    def layer(self):
        """The layer this renderable is drawn on."""
        return self._layer

    @abstractmethod
    def render(self, renderer):
        """Draw this renderable with the given renderer."""


class Circle(Renderable):
    """A circle outline or disc."""

    def __init__(self, x, y, radius, filled, color, layer):
        super().__init__(layer)
        self.x = x
        self.y = y
        self.radius = radius
        self.filled = filled
        self.color = color

    def render(self, renderer):
        renderer.render_circle(self)


class Line(Renderable):
    """A straight line segment."""

    def __init__(self, x1, y1, x2, y2, color, layer):
        super().__init__(layer)
        self.x1 = x1
        self.y1 = y1
        self.x2 = x2
        self.y2 = y2
        self.color = color

    def render(self, renderer):
        renderer.render_line(self)


class Texture(Renderable):
    """An image drawn into a destination rectangle, optionally cropped by a source rectangle."""

    def __init__(self, texture, layer, dst=None, alpha=255, src=None):
        super().__init__(layer, alpha)
        self.texture = texture
        self.dst = dst
        self.src = src
        self.flip = Flip.NONE

    def render(self, renderer):
        renderer.render_texture(self)

    def copy(self):
        """Return a copy sharing the image but with its own rectangles.

        The copy keeps the layer and flip; its alpha is fully opaque.
        """
        duplicate = Texture(
            self.texture,
            self.layer,
            dst=replace(self.dst) if self.dst is not None else None,
            src=replace(self.src) if self.src is not None else None,
        )
        duplicate.flip = self.flip
        return duplicate