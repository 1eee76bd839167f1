"""Global logging and error handling utilities"""
import logging
import sys
from typing import NoReturn, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: int = logging.WARNING, verbose: bool = False) -> None:
    """Send package logs to stdout

    Args:
        level: Base log level (default: warnings and errors only)
        verbose: If True, log at DEBUG regardless of level
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def logger_raise(e: Exception, user_message: Optional[str] = None,
                 logger: Optional[logging.Logger] = None) -> NoReturn:
    """Log an exception with its traceback, then raise it

    Args:
        e: The exception to raise
        user_message: Short description of the failed operation (optional)
        logger: Logger to report to (defaults to the package logger)
    """
    logger = logger or logging.getLogger('lottie_builder')
    message = f"{user_message}: {e}" if user_message else str(e)
    # exc_info picks up the active exception when called from an except block
    logger.error(message, exc_info=sys.exc_info()[0] is not None)
    raise e
