import logging
from ..config import settings


logger = logging.getLogger("fileserver")

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    logger.addHandler(_handler)


def set_level(level: str) -> None:
    logger.setLevel(level.upper())


set_level(settings.log_level)
