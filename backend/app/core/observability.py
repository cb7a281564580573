"""
Logging setup for the parcel tracker.

All modules log through one named logger and attach structured context
with ``extra=``.
"""

import logging
from typing import Optional

from backend.app.core.config import settings

# Configure structured logger
logger = logging.getLogger("parcel_tracker")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic stream handler for scripts and local runs."""
    logging.basicConfig(format=LOG_FORMAT)
    logger.setLevel((level or settings.log_level).upper())
