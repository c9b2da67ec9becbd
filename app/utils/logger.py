import logging
from app.config import settings


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = None):
    """Configure the root logger once for the application process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
