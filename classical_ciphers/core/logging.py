import logging

from classical_ciphers.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging from application settings."""
    level = "DEBUG" if settings.debug else settings.log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("classical_ciphers").setLevel(level)
