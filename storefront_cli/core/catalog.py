"""
Title-indexed collection of catalog items.
"""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from storefront_cli.exceptions import DuplicateTitleError
from storefront_cli.models.catalog import CatalogItem

ItemT = TypeVar("ItemT", bound=CatalogItem)


class Catalog(Generic[ItemT]):
    """
    An ordered sequence of items with constant-time lookup by title.

    The title index is built once at construction. Titles must be unique;
    a repeated title raises `DuplicateTitleError` instead of shadowing the
    earlier entry.
    """

    def __init__(self, items: Iterable[ItemT] = ()):
        self._items: tuple[ItemT, ...] = tuple(items)
        self._by_title: dict[str, ItemT] = {}
        for item in self._items:
            if item.title in self._by_title:
                raise DuplicateTitleError(item.title)
            self._by_title[item.title] = item

    def find_by_title(self, title: str) -> ItemT | None:
        """Returns the item with the given title, or None if it is not listed."""
        return self._by_title.get(title)

    @property
    def titles(self) -> list[str]:
        return [item.title for item in self._items]

    def __contains__(self, title: object) -> bool:
        return title in self._by_title

    def __iter__(self) -> Iterator[ItemT]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} items)"
