"""
Logging configuration shared by the API process and the local runner.
"""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    root_logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if not root_logger.handlers:
        logging.basicConfig(
            level=numeric_level,
            format=LOG_FORMAT,
            datefmt=DATE_FORMAT,
        )
    root_logger.setLevel(numeric_level)

    for logger_name in ("uvicorn", "uvicorn.error"):
        logging.getLogger(logger_name).setLevel(numeric_level)
    # Requests are logged by RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
