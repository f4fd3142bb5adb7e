"""
Logging setup utilities for userledger.
"""
import logging


class ShortNameFormatter(logging.Formatter):
    """Formatter exposing ``short_name``, the last component of the logger name."""

    def format(self, record):
        parts = record.name.split('.')
        record.short_name = parts[-1] if len(parts) > 1 else record.name
        return super().format(record)


def setup_logging(level: str = "WARNING"):
    """Set up logging configuration."""
    handler = logging.StreamHandler()

    # Plain messages at INFO, more detail otherwise
    if level.upper() == "INFO":
        formatter = ShortNameFormatter('%(message)s')
    else:
        formatter = ShortNameFormatter('%(asctime)s - %(short_name)s - %(levelname)s - %(message)s')

    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers = []
    root_logger.addHandler(handler)

    # Server access logs are noisy below WARNING
    if level.upper() in ["INFO", "WARNING"]:
        logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
