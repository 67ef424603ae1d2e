"""
Adapters pour la persistance de la base d'authentification.

Ce module expose la facade AuthDatabase, le DatabaseManager et
le runner de migrations.
"""

from realm_auth.infrastructure.persistence.database import DatabaseManager
from realm_auth.infrastructure.persistence.migrations import (
    MIGRATIONS,
    Migration,
    MigrationRunner,
)
from realm_auth.infrastructure.persistence.auth_database import AuthDatabase

from realm_auth.infrastructure.persistence.models import (
    Base,
    AccountModel,
    AccountCostumeUnlockModel,
    AccountCurrencyModel,
    AccountGenericUnlockModel,
    AccountKeybindingModel,
    AccountEntitlementModel,
    ServerModel,
    ServerMessageModel,
    SchemaMigrationModel,
)

__all__ = [
    # Core
    "AuthDatabase",
    "DatabaseManager",
    "MIGRATIONS",
    "Migration",
    "MigrationRunner",
    # Models
    "Base",
    "AccountModel",
    "AccountCostumeUnlockModel",
    "AccountCurrencyModel",
    "AccountGenericUnlockModel",
    "AccountKeybindingModel",
    "AccountEntitlementModel",
    "ServerModel",
    "ServerMessageModel",
    "SchemaMigrationModel",
]
