import logging
import sys

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """
    Install the root log handler.

    Called once at application start; uvicorn and pymongo loggers propagate here.
    """
    settings = get_settings()
    logging.basicConfig(
        format=LOG_FORMAT,
        stream=sys.stdout,
        level=settings.log_level.upper(),
        force=True,
    )
    # pymongo logs every heartbeat at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
