"""
Logging Config - Configuration structlog.

Modes:
------
- Development: Pretty print, couleurs
- Production: JSON, timestamp ISO

Les secrets (sel, verifier, cle de session, jeton de jeu) sont masques
par redact_secrets avant le rendu, meme si un appelant les passe en
contexte de log.
"""

import logging
import sys
from typing import Optional

import structlog


SECRET_KEYS = frozenset({"salt", "verifier", "session_key", "game_token"})
REDACTED = "***"


def redact_secrets(logger, method_name: str, event_dict: dict) -> dict:
    """Processeur structlog: masque les valeurs des cles de SECRET_KEYS."""
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure le logging global.

    Args:
        json_logs: True pour JSON (production), False pour pretty.
        log_level: Niveau minimum (DEBUG, INFO, WARNING, ERROR).
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        redact_secrets,
    ]

    if json_logs:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    # Les traces SQL passent par echo_sql, pas par le niveau global
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Retourne un logger structure.

    Args:
        name: Nom du logger (module name).

    Returns:
        Logger structlog.
    """
    return structlog.get_logger(name)
