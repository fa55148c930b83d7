"""
The storefront forwards checkouts to whichever content server is active.
"""

import logging
import threading
from collections.abc import Sequence

from storefront_cli.models.receipt import Receipt
from storefront_cli.utils.structured_logger import CheckoutLogger

from .server import ContentServing

log = logging.getLogger(__name__)


class Storefront:
    """
    A single call site for checkouts across differently-typed catalogs.

    The active server can be swapped at any time. Receipts already handed out
    are independent snapshots and are not affected by a swap.
    """

    def __init__(
        self, server: ContentServing, event_logger: CheckoutLogger | None = None
    ):
        self._lock = threading.Lock()
        self._event_logger = event_logger
        self._server = self._ensure_serving(server)

    @staticmethod
    def _ensure_serving(server: ContentServing) -> ContentServing:
        if not isinstance(server, ContentServing):
            raise TypeError(
                f"{type(server).__name__} does not provide serve(wish_list)."
            )
        return server

    @property
    def active_server(self) -> ContentServing:
        with self._lock:
            return self._server

    def set_active_server(self, server: ContentServing) -> None:
        """Replaces the server used by subsequent checkouts."""
        server = self._ensure_serving(server)
        with self._lock:
            self._server = server
        log.debug(f"Active server switched to {server!r}.")
        if self._event_logger:
            self._event_logger.server_switched(type(server).__name__)

    def checkout(self, titles: Sequence[str]) -> Receipt:
        """Serves `titles` from the active server."""
        server = self.active_server
        receipt = server.serve(titles)
        log.info(
            f"Checkout: {len(receipt.items)} found, {len(receipt.missing)} missing, "
            f"total ${receipt.total_price:.2f}."
        )
        if self._event_logger:
            self._event_logger.checkout_completed(type(server).__name__, receipt)
        return receipt
