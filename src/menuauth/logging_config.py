"""Logging setup."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logger once with a stream handler."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("menuauth").setLevel(level.upper())
