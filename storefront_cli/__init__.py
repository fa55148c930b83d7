"""
storefront-cli: check out songs and movies from in-memory catalogs.
"""

__version__ = "0.1.0"

from storefront_cli.core import (  # noqa: E402
    Catalog,
    ContentServer,
    ContentServing,
    MusicServer,
    Storefront,
    VideoServer,
)
from storefront_cli.exceptions import (  # noqa: E402
    ConfigurationError,
    DuplicateTitleError,
    InvalidItemError,
    StorefrontError,
)
from storefront_cli.models import CatalogItem, Movie, Receipt, Song  # noqa: E402

__all__ = [
    "Catalog",
    "CatalogItem",
    "ConfigurationError",
    "ContentServer",
    "ContentServing",
    "DuplicateTitleError",
    "InvalidItemError",
    "Movie",
    "MusicServer",
    "Receipt",
    "Song",
    "Storefront",
    "StorefrontError",
    "VideoServer",
]
