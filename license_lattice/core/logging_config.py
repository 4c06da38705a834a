"""
Logging setup for the application.

Modules create their own logger with `logging.getLogger(__name__)`; this
module only configures the root handler once, using LOG_LEVEL from config.
"""

import logging

from license_lattice.core.config import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Installs a stream handler on the root logger unless one is already present.

    Unknown level names fall back to INFO.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=numeric, format=_FORMAT)
    root.setLevel(numeric)
