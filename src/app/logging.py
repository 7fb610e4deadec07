import logging
import sys


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure logging for the application."""
    # Configure root logger to capture all logs
    logging.basicConfig(
        level=level,
        format="%(levelname)s - %(asctime)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,  # Override any existing configuration
    )

    # Set specific log levels for noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger that writes to stdout.

    Records propagate to the root logger once configure_logging() has run;
    before that (scripts, tests importing modules directly) the logger gets
    its own stdout handler.

    Args:
        name: The name of the logger (e.g., __name__)

    Returns:
        A configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logging.getLogger().handlers and not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
