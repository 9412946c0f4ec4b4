"""Hexagonal IJK coordinates, aperture transforms and icosahedral face projections for H3-style grids."""

__version__ = "0.1.0"

__all__ = ["aperture", "geo", "hexgrid", "ijk"]