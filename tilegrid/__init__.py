"""Hexagonal grid coordinates, projections and neighbor queries for tile maps."""

__version__ = "0.16.0"