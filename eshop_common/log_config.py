# eshop_common/log_config.py
import logging
import os
from typing import Optional

from eshop_common.correlation import CorrelationIdFilter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Route every service logger through one handler that prints the correlation id."""
    handler = logging.StreamHandler()
    handler.addFilter(CorrelationIdFilter())
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )
