"""Building blocks for roguelike games: colours, geometry, noise, sprites, GUI controls and an ECS."""

__version__ = "1.0.0"

__all__ = [
    "color",
    "geometry",
    "perlin",
    "rexpaint",
    "input",
    "fonts",
    "controls",
    "layer",
    "gui",
    "ecs",
]