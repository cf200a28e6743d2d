"""Game-loop building blocks: colors, geometry, generational storage, animation, shaders, configuration and input."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "color",
    "conf",
    "generational",
    "geometry",
    "input",
    "mouse_camera",
    "shaders",
    "storage",
]