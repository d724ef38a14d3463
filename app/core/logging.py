import logging

from app.constants import LOG_LEVEL, SQL_ECHO

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger once for the API process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if not SQL_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
