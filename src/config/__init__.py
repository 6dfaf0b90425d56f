"""Configuration module initialization."""
import logging
import sys
from typing import Optional

from .settings import settings, AppSettings, CalculatorSettings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


__all__ = ["settings", "setup_logging", "AppSettings", "CalculatorSettings"]
