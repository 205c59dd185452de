"""
Crypto feed cache package.

This package hosts the price-feed cache use case, its persistence store port,
the domain and stored data models, and supporting configuration and logging
utilities.
"""

from .__version__ import __version__

__all__ = ["__version__"]
