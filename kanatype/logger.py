import logging
import sys

from kanatype import LOG_LEVEL

logger = logging.getLogger("kanatype")
logger.setLevel(LOG_LEVEL)

if not logger.handlers:
    stdout_handler = logging.StreamHandler(sys.stdout)
    stderr_handler = logging.StreamHandler(sys.stderr)

    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)  # below WARNING only
    stderr_handler.setLevel(logging.WARNING)  # WARNING and above

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
