"""
Modeles SQLAlchemy - exports centralises.

Organisation par domaine:
- base: Base declarative
- account_models: Comptes et collections associees
- server_models: Serveurs et messages
- migration_models: Historique des migrations appliquees
"""

from realm_auth.infrastructure.persistence.models.base import Base

from realm_auth.infrastructure.persistence.models.account_models import (
    AccountModel,
    AccountCostumeUnlockModel,
    AccountCurrencyModel,
    AccountGenericUnlockModel,
    AccountKeybindingModel,
    AccountEntitlementModel,
)

from realm_auth.infrastructure.persistence.models.server_models import (
    ServerModel,
    ServerMessageModel,
)

from realm_auth.infrastructure.persistence.models.migration_models import (
    SchemaMigrationModel,
)

__all__ = [
    # Base
    "Base",
    # Comptes
    "AccountModel",
    "AccountCostumeUnlockModel",
    "AccountCurrencyModel",
    "AccountGenericUnlockModel",
    "AccountKeybindingModel",
    "AccountEntitlementModel",
    # Serveurs
    "ServerModel",
    "ServerMessageModel",
    # Migrations
    "SchemaMigrationModel",
]
