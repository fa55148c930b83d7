"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class StorefrontError(Exception):
    """Base exception for all application-specific errors."""


class DuplicateTitleError(StorefrontError):
    """Raised when a catalog is built from items that share a title."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Catalog already contains an item titled '{title}'.")


class InvalidItemError(StorefrontError):
    """Raised when a catalog item is constructed with invalid field values."""


class UnknownServerKindError(StorefrontError):
    """Raised when a content server kind is requested that is not registered."""


class ConfigurationError(StorefrontError):
    """Raised for issues related to configuration loading or validation."""
