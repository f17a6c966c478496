"""Procedural terrain heightmaps: diamond-square, Voronoi, erosion and evaluation."""

__version__ = "0.1.0"