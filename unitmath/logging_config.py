import logging
import sys

from environs import Env

from .log_filters import TruncatingFilter

PACKAGE_LOGGER = "unitmath"


def setup_logging(env: Env) -> None:
    """Set up logging configuration."""
    if logging.root.handlers:  # Check if logging is already configured
        return

    log_level_str = env.str("LOGGING_LEVEL", "INFO").upper()

    # DEBUG flag overrides log level when set to True
    debug_mode = env.bool("DEBUG", default=False)
    if debug_mode:
        log_level_str = "DEBUG"

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level_str}")

    max_length = env.int("LOG_MAX_LENGTH", 250)

    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stdout,
    )

    # Filters on a logger do not see records of its children, so the
    # truncation goes on the handlers
    for handler in logging.root.handlers:
        handler.addFilter(TruncatingFilter(max_length=max_length))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)

    # Loggers created before setup_logging ran
    for logger_name in list(logging.Logger.manager.loggerDict):
        if not logger_name.startswith(f"{PACKAGE_LOGGER}."):
            continue
        logger = logging.getLogger(logger_name)
        if logger.level == logging.NOTSET:  # Only set if not explicitly set already
            logger.setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
