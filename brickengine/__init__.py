"""Building blocks for 2D games on pygame: entities, scenes, rendering and music."""

__version__ = "0.1.0"