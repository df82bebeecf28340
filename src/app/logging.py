import logging
import sys

NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")


def configure_logging(level: str | int = logging.INFO) -> None:
    """Send every record to stdout through a single root handler."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s - %(asctime)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger.

    The logger has no handler of its own; records propagate to the root
    handler installed by configure_logging, so each line is printed once.
    """
    return logging.getLogger(name)
