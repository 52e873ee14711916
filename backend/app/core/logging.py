"""Logging setup with request correlation ids."""

from __future__ import annotations

import logging

from asgi_correlation_id import CorrelationIdFilter

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(correlation_id)s] %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(
        isinstance(flt, CorrelationIdFilter)
        for handler in root.handlers
        for flt in handler.filters
    ):
        return
    handler = logging.StreamHandler()
    handler.addFilter(CorrelationIdFilter(uuid_length=32, default_value="-"))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


__all__ = ["configure_logging"]
