"""
Core storefront engine.

This package contains the primary logic. A `Catalog` indexes content by
title, a `ContentServer` turns wish lists into receipts, and the `Storefront`
routes checkouts to whichever server is currently active.
"""

from .catalog import Catalog
from .server import (
    ContentServer,
    ContentServing,
    MusicServer,
    VideoServer,
    round_half_up,
)
from .storefront import Storefront

__all__ = [
    "Catalog",
    "ContentServer",
    "ContentServing",
    "MusicServer",
    "Storefront",
    "VideoServer",
    "round_half_up",
]
