import logging
import os
from functools import wraps

from assembler.config import Config

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_configured = False


def setup_logging(log_file=None, level=None):
    """
    Configure the root logger once: file + console handlers.

    Called by the entry points (preview_server, extract_modules, generate_test_data),
    never at import time, so tests do not write log files.
    """
    global _configured
    if _configured:
        return
    log_file = log_file or Config.LOG_FILE
    os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level or Config.LOG_LEVEL, logging.INFO),
        format=_LOG_FORMAT,
        handlers=[logging.FileHandler(log_file, encoding="utf-8"), logging.StreamHandler()],
    )
    _configured = True


def get_logger(name):
    """Return the logger for the given name."""
    return logging.getLogger(name)


logger = get_logger(__name__)


class AssemblerError(Exception):
    """Error raised by an assembler stage (rendering, storing, extracting)."""

    def __init__(self, message, stage="Unknown", original_exception=None):
        super().__init__(message)
        self.message = message
        self.stage = stage
        self.original_exception = original_exception
        logger.error(
            f"[AssemblerError] Stage: {self.stage}, Message: {self.message}, Original: {self.original_exception!r}"
        )


def handle_errors(stage):
    """
    Decorator that wraps any unexpected exception into AssemblerError,
    so callers only have to handle one exception type per stage.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except AssemblerError:
                raise
            except Exception as e:
                raise AssemblerError(
                    f"'{func.__name__}' failed: {e}",
                    stage=stage,
                    original_exception=e,
                ) from e

        return wrapper

    return decorator
