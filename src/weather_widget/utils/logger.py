# src/weather_widget/utils/logger.py
from __future__ import annotations
import logging

from weather_widget.core.settings import WEATHER_LOG_LEVEL

FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"

def setup_logging(level: str | None = None) -> None:
    """
    Configure the root logger once for the process.
    ex) setup_logging()          # level from WEATHER_LOG_LEVEL
        setup_logging("DEBUG")
    """
    name = (level or WEATHER_LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=FORMAT)
