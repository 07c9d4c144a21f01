import sys
import logging

from ergorisk.config import LOG_LEVEL

# --------------------------------------------------------
# Unified logger for all ergorisk modules
# --------------------------------------------------------
LOGGER_NAME = "ergorisk"


def resolve_level(name) -> int:
    """Unknown level names fall back to INFO."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(resolve_level(LOG_LEVEL))

# If no handlers exist, add one (avoid duplicate logs)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

logger.propagate = False


def debug(msg):
    logger.debug(msg)

def info(msg):
    logger.info(msg)

def warn(msg):
    logger.warning(msg)