from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process (no-op if handlers exist)."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("gift_certificates").setLevel(level)
