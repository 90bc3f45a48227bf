import sys

from loguru import logger


def configure_logging(is_logging: bool) -> None:
    logger.remove()
    logger.add(sys.stdout, filter=lambda _: is_logging)

    # Errors still reach stderr when logging is off
    logger.add(sys.stderr, level="ERROR", filter=lambda _: not is_logging)
