"""
Migrations du schema de la base d'authentification.

Les migrations sont une liste ordonnee d'etapes nommees. Les identifiants
appliques sont enregistres dans la table schema_migrations: une migration
est "en attente" si son identifiant n'y figure pas.

Chaque etape recoit la connexion de sa transaction et cree les tables
qu'elle introduit (checkfirst, pour accepter une base creee a la main).

Ajouter une migration:
----------------------
    1. Declarer le modele dans models/
    2. Ajouter une Migration a la fin de MIGRATIONS avec un identifiant
       horodate plus recent que le dernier
"""
from dataclasses import dataclass
from typing import Callable, List, Sequence

from sqlalchemy import Connection, Table, inspect

from realm_auth.infrastructure.logging import get_logger
from realm_auth.infrastructure.persistence.database import DatabaseManager
from realm_auth.infrastructure.persistence.models import (
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

logger = get_logger(__name__)


@dataclass(frozen=True)
class Migration:
    """
    Etape de migration.

    Attributes:
        id: Identifiant horodate unique (ordre d'application).
        upgrade: Fonction appliquant l'etape sur une connexion.
    """

    id: str
    upgrade: Callable[[Connection], None]


def _create_tables(*tables: Table) -> Callable[[Connection], None]:
    def upgrade(connection: Connection) -> None:
        for table in tables:
            table.create(connection, checkfirst=True)
    return upgrade


MIGRATIONS: List[Migration] = [
    Migration(
        "20200101000000_initial",
        _create_tables(
            AccountModel.__table__,
            ServerModel.__table__,
            ServerMessageModel.__table__,
        ),
    ),
    Migration(
        "20200405000000_account_unlocks",
        _create_tables(
            AccountCostumeUnlockModel.__table__,
            AccountCurrencyModel.__table__,
            AccountGenericUnlockModel.__table__,
            AccountKeybindingModel.__table__,
        ),
    ),
    Migration(
        "20200812000000_account_entitlements",
        _create_tables(AccountEntitlementModel.__table__),
    ),
]


class MigrationRunner:
    """
    Applique les migrations en attente sur une base.

    Attributes:
        db: DatabaseManager de la base cible.
        migrations: Etapes connues, dans l'ordre d'application.
    """

    def __init__(self, db: DatabaseManager, migrations: Sequence[Migration] = None):
        self._db = db
        self._migrations = list(MIGRATIONS if migrations is None else migrations)

        ids = [m.id for m in self._migrations]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Identifiants de migration dupliques: {ids}")

    def _ensure_history_table(self) -> None:
        SchemaMigrationModel.__table__.create(self._db.engine, checkfirst=True)

    def get_applied_migrations(self) -> List[str]:
        """Retourne les identifiants deja appliques, tries."""
        if not inspect(self._db.engine).has_table(SchemaMigrationModel.__tablename__):
            return []
        with self._db.get_session() as session:
            rows = session.query(SchemaMigrationModel.migration_id).order_by(
                SchemaMigrationModel.migration_id
            ).all()
            return [row.migration_id for row in rows]

    def get_pending_migrations(self) -> List[str]:
        """Retourne les identifiants en attente, dans l'ordre d'application."""
        applied = set(self.get_applied_migrations())
        return [m.id for m in self._migrations if m.id not in applied]

    def migrate(self) -> List[str]:
        """
        Applique toutes les migrations en attente.

        Chaque etape et son enregistrement dans l'historique partagent
        une transaction. Une erreur est propagee telle quelle et laisse
        les etapes suivantes en attente.

        Returns:
            Identifiants des migrations appliquees.
        """
        self._ensure_history_table()
        pending = set(self.get_pending_migrations())

        applied = []
        for migration in self._migrations:
            if migration.id not in pending:
                continue
            with self._db.engine.begin() as connection:
                migration.upgrade(connection)
                connection.execute(
                    SchemaMigrationModel.__table__.insert().values(
                        migration_id=migration.id,
                    )
                )
            logger.info("auth_migration_applied", migration=migration.id)
            applied.append(migration.id)

        return applied
