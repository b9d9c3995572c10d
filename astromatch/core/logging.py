"""Configuration de logging basée sur structlog.

Objectif du module
------------------
- Fournir une configuration de logs structurés lisibles en développement.
- Basculer en JSON (une ligne par événement) quand `LOG_JSON` est activé.
"""

import logging
import sys

import structlog


def setup_logging(level: str = "DEBUG", json: bool = False, file=None):
    """Configure structlog pour produire des logs détaillés et filtrables.

    Avec une sortie explicite (`file`), les loggers ne sont pas mis en cache: un appel ultérieur
    à `setup_logging` peut encore les rediriger.
    """
    timestamper = structlog.processors.TimeStamper(fmt="ISO")
    renderer = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    )
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.DEBUG
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            timestamper,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=file or sys.stdout),
        cache_logger_on_first_use=file is None,
    )
