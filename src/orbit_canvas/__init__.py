"""Interactive canvas of draggable circles with orbiting moons."""

__version__ = "1.0.0"
