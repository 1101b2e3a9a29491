# backend/catalog/core/logging.py

import logging
import sys

from catalog.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = None) -> None:
    """catalog 패키지 로거를 한 번만 설정합니다."""
    level = (level or settings.log_level).upper()
    logger = logging.getLogger("catalog")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    logger.propagate = False
