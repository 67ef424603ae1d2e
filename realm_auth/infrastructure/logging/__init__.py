"""
Logging Infrastructure - Logging structure avec structlog.

Usage:
------
    from realm_auth.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("account_created", account_id=42)
"""

from realm_auth.infrastructure.logging.config import (
    configure_logging,
    get_logger,
    redact_secrets,
)

__all__ = ["configure_logging", "get_logger", "redact_secrets"]
