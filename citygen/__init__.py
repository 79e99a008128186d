"""Procedural city road networks from stochastic L-systems, with a pygame viewer."""

__version__ = "0.1.0"