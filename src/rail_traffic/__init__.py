"""Toy rail network model: stations, routes and trains."""

__version__ = "0.1.0"
