"""Flood-fill maze solver with a robot that walks a 5x5 grid to its centre and back."""

__version__ = "0.1.0"