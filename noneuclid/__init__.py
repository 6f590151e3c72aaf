"""Vector maths, collision, physics, portals and OpenGL helpers for non-Euclidean scenes."""

__version__ = "0.1.0"