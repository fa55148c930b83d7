"""
Receipt produced by a content server for a single checkout.
"""

from dataclasses import dataclass

from .catalog import CatalogItem


@dataclass(frozen=True)
class Receipt:
    """
    Snapshot of a resolved wish list.

    Both `items` and `missing` follow the order of the wish list they came
    from. `estimated_seconds` is infinite when the server has no bandwidth.
    """

    items: tuple[CatalogItem, ...] = ()
    total_price: float = 0.0
    estimated_seconds: float = 0.0
    missing: tuple[str, ...] = ()

    @property
    def item_titles(self) -> list[str]:
        return [item.title for item in self.items]

    @property
    def estimated_minutes(self) -> float:
        return self.estimated_seconds / 60.0

    @property
    def total_size_mb(self) -> float:
        return sum(item.size_mb for item in self.items)
