import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "zipentrytools"


def setup_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )

    return logger
