"""
Event logging for checkouts: `[event] key=value` log lines, plus an optional
JSON-lines file for later analysis.
"""

import json
import logging
import math
import uuid
from datetime import datetime
from pathlib import Path

from storefront_cli.models.receipt import Receipt


class StructuredLogger:
    """
    Emits named events with keyword fields.

    Each logger gets its own session id, stamped on every JSON record. When
    `log_dir` is None no file is opened; when `echo` is False events only go
    to the file.
    """

    def __init__(self, name: str, log_dir: Path | None = None, echo: bool = True):
        self.echo = echo
        self._logger = logging.getLogger(name)
        self.session: dict[str, str] = {"session_id": uuid.uuid4().hex[:12]}

        self.json_log_path: Path | None = None
        self._stream = None
        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.json_log_path = log_dir / f"storefront_cli_{stamp}.jsonl"
            self._stream = open(self.json_log_path, "a", encoding="utf-8")  # noqa: SIM115

    def bind(self, **fields) -> None:
        """Adds fields to every later JSON record."""
        self.session.update(fields)

    def emit(self, level: int, event: str, **fields) -> None:
        if self.echo and self._logger.isEnabledFor(level):
            pairs = " ".join(f"{key}={value}" for key, value in fields.items())
            self._logger.log(level, f"[{event}] {pairs}".rstrip())

        if self._stream is not None and not self._stream.closed:
            record = {
                "timestamp": datetime.now().isoformat(),
                "level": logging.getLevelName(level),
                "event": event,
                **self.session,
                **fields,
            }
            self._stream.write(json.dumps(record) + "\n")
            self._stream.flush()

    def info(self, event: str, **fields) -> None:
        self.emit(logging.INFO, event, **fields)

    def close(self) -> None:
        if self._stream is not None and not self._stream.closed:
            self._stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class CheckoutLogger:
    """Storefront events on top of a StructuredLogger."""

    def __init__(self, logger: StructuredLogger):
        self.logger = logger

    def server_switched(self, server: str):
        self.logger.info("server_switched", server=server)

    def checkout_completed(self, server: str, receipt: Receipt):
        seconds = receipt.estimated_seconds
        self.logger.info(
            "checkout_completed",
            server=server,
            items=receipt.item_titles,
            missing=list(receipt.missing),
            total_price=receipt.total_price,
            # JSON has no infinity; an offline server is recorded as null
            estimated_seconds=None if math.isinf(seconds) else round(seconds, 2),
        )


def create_structured_logger(
    log_dir: Path | None = None, echo: bool = True
) -> tuple[StructuredLogger, CheckoutLogger]:
    """Returns (base_logger, checkout_logger) sharing one session."""
    base = StructuredLogger("storefront_cli", log_dir=log_dir, echo=echo)
    return base, CheckoutLogger(base)
