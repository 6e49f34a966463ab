"""Logging setup shared by examples and the HTTP app."""

import logging

from storefront.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once; level defaults to settings.LOG_LEVEL."""
    logging.basicConfig(format=LOG_FORMAT, level=level or settings.LOG_LEVEL)
