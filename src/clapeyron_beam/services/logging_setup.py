# path: src/clapeyron_beam/services/logging_setup.py
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "clapeyron_beam"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(
    log_dir: str = "logs",
    log_name: str = "app.log",
    level: int = logging.INFO,
    console: bool = True,
) -> logging.Logger:
    """
    Logger raíz del paquete: archivo rotativo (2 MB x 3) + consola opcional.
    Los módulos del motor usan logging.getLogger(__name__) y cuelgan de este.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # ya configurado: no duplicar handlers
    if logger.handlers:
        return logger

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_name)
    fmt = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = [
        RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8"),
    ]
    if console:
        handlers.append(logging.StreamHandler())

    for h in handlers:
        h.setLevel(level)
        h.setFormatter(fmt)
        logger.addHandler(h)

    logger.info("Logging inicializado (nivel %s). Archivo: %s", logging.getLevelName(level), log_path)
    return logger
