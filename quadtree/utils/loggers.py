import logging
from logging import Logger
from typing import Optional

from quadtree.config import LOGGER_NAME, LOG_LEVEL


def resolve_level(name: str) -> int:
    """Nivel numérico para un nombre como "DEBUG"; WARNING si no es un nivel."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def get_logger(name: Optional[str] = None) -> Logger:
    """Devuelve el logger del paquete (o un hijo) con un único handler."""
    base = logging.getLogger(LOGGER_NAME)
    if not base.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        base.addHandler(handler)
        base.setLevel(resolve_level(LOG_LEVEL))
        base.propagate = False
    return base if name is None else base.getChild(str(name))
