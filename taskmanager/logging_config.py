# taskmanager/logging_config.py
"""Root logger setup shared by the app and uvicorn."""

import logging
from typing import Optional

from taskmanager.config import LOG_LEVEL

_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stream handler to the root logger once and set levels.

    Uvicorn's own loggers are aligned to the same level so request logs and
    application logs are filtered consistently.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (level or LOG_LEVEL or "INFO").upper()
    resolved_level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    root.setLevel(resolved_level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(resolved_level)

    _CONFIGURED = True
