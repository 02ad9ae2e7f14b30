from __future__ import annotations

import logging


def configure_app_logging(level: str = "INFO") -> None:
    """
    Set the level of the `app.*` logger tree.

    Uvicorn installs the handlers; we only pick how chatty our own modules are.
    Use `APP_LOG_LEVEL=DEBUG` (or INFO/WARNING/ERROR) to change it.
    """

    normalized = level.upper()
    logging.getLogger("app").setLevel(normalized)
    logging.getLogger("app").propagate = True
