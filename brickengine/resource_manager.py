"""Shared loading of images, reused for as long as anything holds them."""

import logging
import weakref

import pygame

_log = logging.getLogger(__name__)


class ResourceManager:
    """Loads textures by path and hands out the same texture while it is alive."""

    def __init__(self, renderer, loader=None):
        self._renderer = renderer
        self._loader = loader if loader is not None else pygame.image.load
        self._pool = weakref.WeakValueDictionary()

    def get_texture(self, path):
        """Return the texture for path, loading it if no live copy exists.

        Returns None when the image cannot be loaded.
        """
        texture = self._pool.get(path)
        if texture is not None:
            return texture
        texture = self._create_texture(path)
        if texture is not None:
            self._pool[path] = texture
        return texture

    def _create_texture(self, path):
        try:
            surface = self._loader(path)
        except (pygame.error, OSError) as error:
            _log.error("Failed to load surface %s error : %s", path, error)
            return None
        return self._renderer.create_texture_from_surface(surface)