"""
Logging setup for the API process.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Reload-safe: uvicorn --reload imports the app more than once
    for handler in root.handlers:
        if getattr(handler, "_wellness_handler", False):
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._wellness_handler = True
    root.addHandler(handler)
