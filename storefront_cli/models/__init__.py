"""
Data Models Layer.

This package contains the data structures used throughout the application:
catalog items, checkout receipts and configuration.
"""

from .catalog import CatalogItem, Movie, Song
from .config import StoreConfig
from .receipt import Receipt

__all__ = ["CatalogItem", "Movie", "Receipt", "Song", "StoreConfig"]
