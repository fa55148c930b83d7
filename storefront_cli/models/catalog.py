"""
Pydantic models for the purchasable content carried in a catalog.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from storefront_cli.exceptions import InvalidItemError


class CatalogItem(BaseModel):
    """An immutable piece of purchasable content, identified by its title."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = "item"

    title: str = Field(min_length=1)
    size_mb: float = Field(ge=0)
    price: float = Field(ge=0)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Titles are kept verbatim, but must contain something besides spaces."""
        if not v.strip():
            raise ValueError("Title cannot be blank.")
        return v

    def __init__(self, title: str, size_mb: float, price: float) -> None:
        try:
            super().__init__(title=title, size_mb=size_mb, price=price)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()
            )
            raise InvalidItemError(
                f"Invalid {type(self).kind} {title!r}: {problems}"
            ) from e


class Song(CatalogItem):
    """A single music track."""

    kind: ClassVar[str] = "song"


class Movie(CatalogItem):
    """A feature-length video."""

    kind: ClassVar[str] = "movie"
