"""
Content servers resolve wish lists against their catalog and price the result.
"""

import logging
import math
from collections.abc import Iterable, Sequence
from typing import Generic, Protocol, runtime_checkable

from storefront_cli.exceptions import ConfigurationError, InvalidItemError
from storefront_cli.models.catalog import CatalogItem, Movie, Song
from storefront_cli.models.receipt import Receipt

from .catalog import Catalog, ItemT

log = logging.getLogger(__name__)


@runtime_checkable
class ContentServing(Protocol):
    """Anything that can turn a wish list into a receipt."""

    def serve(self, wish_list: Sequence[str]) -> Receipt: ...


def round_half_up(value: float, places: int = 2) -> float:
    """
    Rounds to `places` decimals with ties going away from zero.

    The tie is decided on the scaled binary value, so 0.125 becomes 0.13
    while 1.005 (stored as 1.00499...) becomes 1.0.
    """
    scale = 10**places
    scaled = abs(value * scale)
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value) / scale


class ContentServer(Generic[ItemT]):
    """
    Pairs a catalog with a fixed download speed.

    Subclasses narrow `item_type` so a server only accepts its own kind of
    content.
    """

    kind = "generic"
    item_type: type[CatalogItem] = CatalogItem

    def __init__(self, catalog: Iterable[ItemT], speed_mbps: float):
        if speed_mbps < 0:
            raise ConfigurationError(
                f"Download speed cannot be negative, got {speed_mbps} MB/s."
            )
        items = list(catalog)
        for item in items:
            if not isinstance(item, self.item_type):
                raise InvalidItemError(
                    f"{type(self).__name__} only serves {self.item_type.__name__}"
                    f" items, got {type(item).__name__} '{item.title}'."
                )
        self.catalog: Catalog[ItemT] = Catalog(items)
        self.speed_mbps = float(speed_mbps)

    def serve(self, wish_list: Sequence[str]) -> Receipt:
        """
        Resolves each requested title against the catalog.

        Args:
            wish_list: Requested titles. Unknown titles are reported, not rejected.

        Returns:
            A Receipt whose items and missing titles both keep wish-list order.
        """
        found: list[ItemT] = []
        missing: list[str] = []
        for title in wish_list:
            item = self.catalog.find_by_title(title)
            if item is not None:
                found.append(item)
            else:
                missing.append(title)

        total_size = sum(item.size_mb for item in found)
        total_price = sum(item.price for item in found)
        estimated = total_size / self.speed_mbps if self.speed_mbps > 0 else math.inf

        log.debug(
            f"{self.kind} server resolved {len(found)}/{len(wish_list)} titles "
            f"({total_size:.1f} MB at {self.speed_mbps} MB/s)."
        )
        return Receipt(
            items=tuple(found),
            total_price=round_half_up(total_price),
            estimated_seconds=estimated,
            missing=tuple(missing),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(items={len(self.catalog)}, "
            f"speed_mbps={self.speed_mbps})"
        )


class MusicServer(ContentServer[Song]):
    """Serves songs."""

    kind = "music"
    item_type = Song


class VideoServer(ContentServer[Movie]):
    """Serves movies."""

    kind = "video"
    item_type = Movie
