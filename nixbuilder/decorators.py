import functools
import click
import sys
from .cli_logger import logger
from .errors import NixBuilderError

def handle_exceptions(func):
    """Log errors raised by a CLI command and exit with status 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.Abort:
            logger.warning("Command aborted by user.")
            sys.exit(1)
        except NixBuilderError as e:
            logger.error(f"{type(e).__name__}: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
        except Exception as e:
            logger.error(f"An unexpected error occurred: {e}")
            logger.info("Please check the log file for more details.")
            logger.exception(*sys.exc_info())
            sys.exit(1)
    return wrapper
