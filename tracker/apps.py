"""App configuration for the tracker Django app."""

from __future__ import annotations

import contextlib
import sys

from django.apps import AppConfig
from django.conf import settings
from loguru import logger

_DEFAULT_HANDLER_ID = 0


def configure_logging(level: str) -> int:
    """Swap loguru's default stderr handler for one at `level`.

    Sinks added elsewhere (host configuration, test capture sinks) are left
    in place.

    Returns:
        The id of the new stderr handler.
    """

    with contextlib.suppress(ValueError):
        logger.remove(_DEFAULT_HANDLER_ID)
    return logger.add(sys.stderr, level=level)


class TrackerConfig(AppConfig):
    """Configuration for the `tracker` app."""

    name = "tracker"

    def ready(self) -> None:
        """Bind loguru's stderr sink to the configured log level."""

        configure_logging(getattr(settings, "TRACKER_LOG_LEVEL", "INFO"))
