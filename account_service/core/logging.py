import logging
import os
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure logging defaults for the account service.

    ``LOG_LEVEL`` is used when no explicit level is passed.
    """
    resolved = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=resolved, format=_FORMAT)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
