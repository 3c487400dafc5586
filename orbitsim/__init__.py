"""Orbital simulator support: velocity, checks, frame timing and key state, and shape geometry."""

__version__ = "0.1.0"

__all__ = ["velocity", "checks", "interact", "geometry", "shapes", "scenery", "gstream"]