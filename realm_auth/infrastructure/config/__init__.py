"""Configuration de la base d'authentification."""

from realm_auth.infrastructure.config.settings import (
    AuthDatabaseSettings,
    get_settings,
    is_sqlite_url,
)

__all__ = ["AuthDatabaseSettings", "get_settings", "is_sqlite_url"]
