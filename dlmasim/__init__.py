"""Diffusion-limited mass aggregation, site percolation and random geometric graphs in periodic boxes."""

__version__ = "0.1.0"