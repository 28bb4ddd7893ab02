"""Tolerance-aware 3D geometry: points, vectors, lines, planes and segment intersection."""

__version__ = "0.1.0"
__all__ = ["mathutils", "vector", "line", "plane", "intersection"]