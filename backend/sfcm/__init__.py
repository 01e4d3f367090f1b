"""SFCM symbol engine — deterministic keyword → vector drawing generator."""

__version__ = "0.1.0"
