# path: src/simple_beam/services/logging_setup.py
"""
Logging del paquete: archivo rotativo + consola bajo el logger "simple_beam".

Los módulos del motor solo hacen logging.getLogger(__name__); la configuración
queda a cargo del script o servicio que los usa.
"""
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "simple_beam"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_MAX_BYTES = 2_000_000
LOG_BACKUPS = 3


def setup_logging(log_dir: str = "logs", log_name: str = "simple_beam.log", level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Ya configurado: solo se ajusta el nivel, sin duplicar handlers
    if logger.handlers:
        for h in logger.handlers:
            h.setLevel(level)
        return logger

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_name)
    fmt = logging.Formatter(LOG_FORMAT)

    handlers = (
        RotatingFileHandler(log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"),
        logging.StreamHandler(),
    )
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(fmt)
        logger.addHandler(h)

    logger.info("Logging de simple_beam en %s (nivel %s)", log_path, logging.getLevelName(level))
    return logger
