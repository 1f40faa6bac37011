"""Application-wide logging configuration."""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "httpx")


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once, at application startup.

    Args:
        level: "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL"
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Logging initialized with level %s", level.upper())
