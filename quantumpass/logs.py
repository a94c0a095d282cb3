from __future__ import annotations

import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Root logging setup for the GUI and CLI entry points."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
